# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module provides the :class:`RotationMatrix` value type, a pure 3x3 rotation used to move vectors between the
object frame and the inertial frame.
"""

import copy

import numpy as np

from orientation._typing import ARRAY_LIKE, DOUBLE_ARRAY
from orientation.core._helpers import _check_matrix_array_and_shape, _check_vector_array_and_shape
from orientation.core.conversions import euler_to_rotmat, quaternion_to_rotmat
from orientation.core.direction import Direction
from orientation.core.elementals import rot_x, rot_y, rot_z
from orientation.core.tolerances import ToleranceOptions
from orientation.euler_angles import EulerAngles
from orientation.quaternion import Quaternion
from orientation.utilities.mixin_classes import AttributeEqualityComparison, AttributePrinting


class RotationMatrix(AttributePrinting, AttributeEqualityComparison):
    r"""
    A pure rotation (no translation or scale) stored as an orthonormal :math:`3\times 3` matrix.

    Internally the matrix is always stored in the object to inertial form :math:`\mathbf{M}`, so that
    :math:`\mathbf{v}_{inertial}=\mathbf{M}\mathbf{v}_{object}`.  The inertial to object form is its transpose (which is
    also its inverse).  Methods that read or produce a raw matrix take a :class:`.Direction` saying which of the two
    forms is meant.

    The matrix is never modified in place; the constructors below build new instances from the other representations.
    Matrices compose with the ``@`` operator, the right hand operand being applied first::

        >>> from orientation import RotationMatrix, EulerAngles
        >>> world_from_body = RotationMatrix.from_euler_angles(EulerAngles(0.5, 0.1, 0.0))
        >>> body_from_sensor = RotationMatrix.about_z(0.2)
        >>> world_from_sensor = world_from_body @ body_from_sensor
    """

    def __init__(self, data: ARRAY_LIKE | None = None, direction: Direction = Direction.OBJECT_TO_INERTIAL):
        """
        :param data: The 3x3 rotation matrix.  If ``None`` the identity is used
        :param direction: Which direction ``data`` rotates vectors in
        :raises ValueError: If data is not 3x3
        """

        if data is None:
            matrix = np.eye(3)
        else:
            matrix = _check_matrix_array_and_shape(data)

            if direction is Direction.INERTIAL_TO_OBJECT:
                matrix = matrix.T.copy()

        self._matrix: DOUBLE_ARRAY = matrix
        """
        The object to inertial matrix
        """

    @property
    def matrix(self) -> DOUBLE_ARRAY:
        """
        A copy of the object to inertial matrix.

        This property is read only.
        """

        return self._matrix.copy()

    @classmethod
    def identity(cls) -> 'RotationMatrix':
        """
        The matrix representing no rotation.
        """

        return cls()

    @classmethod
    def from_array(cls, data: ARRAY_LIKE, direction: Direction = Direction.OBJECT_TO_INERTIAL) -> 'RotationMatrix':
        """
        Builds a rotation matrix from raw 3x3 data rotating vectors in ``direction``.

        The data is assumed to be orthonormal; use :meth:`is_orthonormal` to check untrusted input.

        :param data: The 3x3 matrix
        :param direction: Which direction ``data`` rotates vectors in
        :return: The rotation matrix
        :raises ValueError: If data is not 3x3
        """

        return cls(data, direction)

    @classmethod
    def about_x(cls, theta: float) -> 'RotationMatrix':
        """
        The rotation of the object by ``theta`` radians about the x (right) axis.
        """

        return cls(rot_x(theta))

    @classmethod
    def about_y(cls, theta: float) -> 'RotationMatrix':
        """
        The rotation of the object by ``theta`` radians about the y (up) axis.
        """

        return cls(rot_y(theta))

    @classmethod
    def about_z(cls, theta: float) -> 'RotationMatrix':
        """
        The rotation of the object by ``theta`` radians about the z (forward) axis.
        """

        return cls(rot_z(theta))

    @classmethod
    def from_euler_angles(cls, angles: EulerAngles) -> 'RotationMatrix':
        """
        Builds the rotation matrix for a heading, pitch, and bank orientation.

        See :func:`.euler_to_rotmat` for the closed form expression.  This is defined for every input.

        :param angles: The orientation
        :return: The rotation matrix
        """

        return cls(euler_to_rotmat(angles.heading, angles.pitch, angles.bank))

    @classmethod
    def from_quaternion(cls, quaternion: Quaternion,
                        direction: Direction = Direction.OBJECT_TO_INERTIAL) -> 'RotationMatrix':
        """
        Builds the rotation matrix for a unit quaternion that rotates vectors in ``direction``.

        The matrices of a quaternion and of its conjugate only differ in the sign of the cross terms, that is they are
        transposes of each other, so an inertial to object quaternion produces the transpose of the matrix that the
        same components would produce as an object to inertial quaternion.  See :func:`.quaternion_to_rotmat`.

        :param quaternion: The unit quaternion
        :param direction: Which direction ``quaternion`` rotates vectors in
        :return: The rotation matrix
        """

        return cls(quaternion_to_rotmat(quaternion.as_array()), direction)

    def as_array(self, direction: Direction = Direction.OBJECT_TO_INERTIAL) -> DOUBLE_ARRAY:
        """
        Returns the raw 3x3 matrix that rotates vectors in ``direction``.

        :param direction: Which direction the returned matrix should rotate vectors in
        :return: A copy of the matrix
        """

        if direction is Direction.INERTIAL_TO_OBJECT:
            return self._matrix.T.copy()

        return self._matrix.copy()

    def to_euler_angles(self, tolerances: ToleranceOptions | None = None) -> EulerAngles:
        """
        Recovers heading, pitch, and bank from this matrix.

        See :func:`.rotmat_to_euler` for the handling of gimbal lock.

        :param tolerances: Overrides for the default thresholds
        :return: The angles
        """

        return EulerAngles.from_rotation_matrix(self, tolerances)

    def to_quaternion(self, direction: Direction = Direction.OBJECT_TO_INERTIAL) -> Quaternion:
        """
        Converts this matrix into the unit quaternion rotating vectors in ``direction``.

        :param direction: Which direction the quaternion should rotate vectors in
        :return: The quaternion, with a non-negative scalar part
        """

        return Quaternion.from_rotation_matrix(self, direction)

    def rotate_vector(self, vector: ARRAY_LIKE,
                      direction: Direction = Direction.OBJECT_TO_INERTIAL) -> DOUBLE_ARRAY:
        """
        Transforms a vector between the object and inertial frames.

        For :attr:`.Direction.OBJECT_TO_INERTIAL` the vector is expressed in the object frame and the result in the
        inertial frame (:math:`\\mathbf{M}\\mathbf{v}`); for :attr:`.Direction.INERTIAL_TO_OBJECT` the reverse
        (:math:`\\mathbf{M}^T\\mathbf{v}`).

        :param vector: The length 3 vector to transform
        :param direction: The direction to transform the vector in
        :return: The transformed vector
        :raises ValueError: If the vector does not have 3 elements
        """

        return self.as_array(direction) @ _check_vector_array_and_shape(vector)

    def transpose(self) -> 'RotationMatrix':
        """
        The inverse rotation.
        """

        return RotationMatrix(self._matrix, Direction.INERTIAL_TO_OBJECT)

    def is_orthonormal(self, tolerance: float = 1e-9) -> bool:
        """
        Checks that :math:`\\mathbf{M}^T\\mathbf{M}` is the identity to within ``tolerance``.

        :param tolerance: The absolute tolerance on each element
        :return: True if the matrix is orthonormal
        """

        return bool(np.allclose(self._matrix.T @ self._matrix, np.eye(3), rtol=0, atol=tolerance))

    def __matmul__(self, other: 'RotationMatrix') -> 'RotationMatrix':

        if isinstance(other, RotationMatrix):
            return RotationMatrix(self._matrix @ other._matrix)

        return NotImplemented

    def copy(self) -> 'RotationMatrix':
        """
        Returns a deep copy of self.

        :return: A deep copy of self breaking all mutability
        """

        return copy.deepcopy(self)
