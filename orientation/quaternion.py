# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module provides the :class:`Quaternion` rotation value type.
"""

from typing import TYPE_CHECKING

import copy

import logging

import numpy as np

from orientation._typing import ARRAY_LIKE, DOUBLE_ARRAY
from orientation.core._helpers import _check_quaternion_array_and_shape, _check_vector_array_and_shape
from orientation.core.conversions import (axis_angle_to_quaternion, euler_to_quaternion, quaternion_to_rotmat,
                                          rotmat_to_quaternion)
from orientation.core.direction import Direction
from orientation.core.quaternion_math import (quaternion_conjugate, quaternion_dot, quaternion_multiplication,
                                              quaternion_normalize, quaternion_pow, nlerp, slerp)
from orientation.core.scalar_math import safe_acos
from orientation.core.tolerances import ToleranceOptions, resolve_tolerances
from orientation.euler_angles import EulerAngles
from orientation.utilities.mixin_classes import AttributeEqualityComparison, AttributePrinting

if TYPE_CHECKING:
    from orientation.rotation_matrix import RotationMatrix


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting status, results, issues, and other information.
"""


class Quaternion(AttributePrinting, AttributeEqualityComparison):
    r"""
    A rotation expressed as a quaternion :math:`w + x\mathbf{i} + y\mathbf{j} + z\mathbf{k}`.

    A quaternion represents a rotation when it has unit length, in which case

    .. math::
        \mathbf{q}=\left[\begin{array}{c}\text{cos}(\frac{\theta}{2}) \\
        \text{sin}(\frac{\theta}{2})\hat{\mathbf{x}}\end{array}\right]

    where :math:`\hat{\mathbf{x}}` is the rotation axis and :math:`\theta` the rotation angle.  A quaternion and its
    negation represent the same rotation.

    Constructors that build a rotation (:meth:`from_axis_angle`, :meth:`from_euler_angles`, ...) always produce unit
    quaternions.  Products of many quaternions drift away from unit length due to round off; keeping them normalized
    with :meth:`normalize` is the caller's responsibility.

    The multiplication operator is the Hamilton product and composes rotations right to left::

        >>> from orientation import Quaternion
        >>> from numpy import pi
        >>> turn = Quaternion.about_y(pi/2)
        >>> tilt = Quaternion.about_x(pi/2)
        >>> both = turn * tilt  # tilt is applied first, then turn
    """

    def __init__(self, w: float = 1.0, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        """
        :param w: The scalar part
        :param x: The i component of the vector part
        :param y: The j component of the vector part
        :param z: The k component of the vector part
        """

        self.w: float = float(w)
        """
        The scalar part of the quaternion
        """

        self.x: float = float(x)
        """
        The i component of the vector part of the quaternion
        """

        self.y: float = float(y)
        """
        The j component of the vector part of the quaternion
        """

        self.z: float = float(z)
        """
        The k component of the vector part of the quaternion
        """

    @classmethod
    def identity(cls) -> 'Quaternion':
        """
        The quaternion representing no rotation, [1, 0, 0, 0].
        """

        return cls()

    @classmethod
    def from_array(cls, data: ARRAY_LIKE) -> 'Quaternion':
        """
        Builds a quaternion from 4 values ordered w, x, y, z.

        :param data: The components, scalar first
        :return: The quaternion
        :raises ValueError: If data does not contain exactly 4 values
        """

        return cls(*_check_quaternion_array_and_shape(data))

    @classmethod
    def about_x(cls, theta: float) -> 'Quaternion':
        """
        The rotation by ``theta`` radians about the x (right) axis.
        """

        return cls(np.cos(theta * 0.5), np.sin(theta * 0.5), 0.0, 0.0)

    @classmethod
    def about_y(cls, theta: float) -> 'Quaternion':
        """
        The rotation by ``theta`` radians about the y (up) axis.
        """

        return cls(np.cos(theta * 0.5), 0.0, np.sin(theta * 0.5), 0.0)

    @classmethod
    def about_z(cls, theta: float) -> 'Quaternion':
        """
        The rotation by ``theta`` radians about the z (forward) axis.
        """

        return cls(np.cos(theta * 0.5), 0.0, 0.0, np.sin(theta * 0.5))

    @classmethod
    def from_axis_angle(cls, axis: ARRAY_LIKE, theta: float,
                        tolerances: ToleranceOptions | None = None) -> 'Quaternion':
        """
        The rotation by ``theta`` radians about ``axis``.

        The axis should be unit length.  See :func:`.axis_angle_to_quaternion` for how other axes are handled.

        :param axis: The unit rotation axis
        :param theta: The rotation angle in radians
        :param tolerances: Overrides for the default thresholds
        :return: The unit quaternion
        :raises ValueError: If the axis does not have 3 elements or has zero length
        """

        return cls.from_array(axis_angle_to_quaternion(axis, theta, tolerances))

    @classmethod
    def from_euler_angles(cls, angles: EulerAngles,
                          direction: Direction = Direction.OBJECT_TO_INERTIAL) -> 'Quaternion':
        """
        Converts heading, pitch, and bank angles into the unit quaternion rotating in ``direction``.

        See :func:`.euler_to_quaternion` for details.

        :param angles: The orientation
        :param direction: Which direction the quaternion should rotate vectors in
        :return: The unit quaternion
        """

        return cls.from_array(euler_to_quaternion(angles.heading, angles.pitch, angles.bank, direction))

    @classmethod
    def from_rotation_matrix(cls, matrix: 'RotationMatrix',
                             direction: Direction = Direction.OBJECT_TO_INERTIAL) -> 'Quaternion':
        """
        Converts a rotation matrix into the unit quaternion rotating in ``direction``.

        The scalar part of the result is non-negative.  See :func:`.rotmat_to_quaternion` for details.

        :param matrix: The rotation matrix
        :param direction: Which direction the quaternion should rotate vectors in
        :return: The unit quaternion
        """

        return cls.from_array(rotmat_to_quaternion(matrix.as_array(direction)))

    def as_array(self) -> DOUBLE_ARRAY:
        """
        Returns the components as a length 4 array ordered w, x, y, z.
        """

        return np.array([self.w, self.x, self.y, self.z])

    @property
    def vector(self) -> DOUBLE_ARRAY:
        """
        The vector part of the quaternion, [x, y, z].

        This property is read only.
        """

        return np.array([self.x, self.y, self.z])

    def to_euler_angles(self, direction: Direction = Direction.OBJECT_TO_INERTIAL,
                        tolerances: ToleranceOptions | None = None) -> EulerAngles:
        """
        Recovers heading, pitch, and bank from this quaternion, which rotates vectors in ``direction``.

        See :func:`.quaternion_to_euler` for details.

        :param direction: Which direction this quaternion rotates vectors in
        :param tolerances: Overrides for the default thresholds
        :return: The angles
        """

        return EulerAngles.from_quaternion(self, direction, tolerances)

    def multiply(self, other: 'Quaternion') -> 'Quaternion':
        """
        The Hamilton product ``self * other``.

        ``self`` is the outer rotation: the product applies ``other`` first and then ``self``.  This may be called as
        ``Quaternion.multiply(a, b)``.

        :param other: The inner (first applied) rotation
        :return: The composed rotation
        """

        return Quaternion.from_array(quaternion_multiplication(self.as_array(), other.as_array()))

    def __mul__(self, other: 'Quaternion') -> 'Quaternion':

        if isinstance(other, Quaternion):
            return self.multiply(other)

        return NotImplemented

    def __neg__(self) -> 'Quaternion':

        return Quaternion(-self.w, -self.x, -self.y, -self.z)

    def __pow__(self, exponent: float) -> 'Quaternion':

        return self.pow(exponent)

    def norm(self) -> float:
        """
        The length of the quaternion as a 4 vector.
        """

        return float(np.linalg.norm(self.as_array()))

    def normalize(self) -> None:
        """
        Rescales this quaternion to unit length in place.

        A quaternion of exactly zero length is left unchanged.
        """

        self.w, self.x, self.y, self.z = (float(v) for v in quaternion_normalize(self.as_array()))

    def normalized(self) -> 'Quaternion':
        """
        Returns a unit length copy of this quaternion, leaving this instance untouched.
        """

        result = self.copy()
        result.normalize()

        return result

    def dot(self, other: 'Quaternion') -> float:
        """
        The 4 dimensional inner product with ``other``.

        For unit quaternions this is the cosine of the angle between them as 4 vectors.  A negative value means that
        ``-other`` is the closer representation of the same rotation.

        :param other: The other quaternion
        :return: The dot product
        """

        return quaternion_dot(self.as_array(), other.as_array())

    def conjugate(self) -> 'Quaternion':
        """
        The conjugate, which negates the vector part.

        For unit quaternions this is the inverse rotation.
        """

        return Quaternion.from_array(quaternion_conjugate(self.as_array()))

    def inverse(self) -> 'Quaternion':
        """
        The multiplicative inverse, the conjugate divided by the squared length.

        For unit quaternions this is the same as :meth:`conjugate`.  A quaternion of exactly zero length has no inverse;
        a copy of it is returned unchanged and a warning is logged.
        """

        norm_squared = self.as_array() @ self.as_array()

        if norm_squared == 0:
            _LOGGER.warning('cannot invert a zero length quaternion.  It has been left unchanged')
            return self.copy()

        return Quaternion.from_array(quaternion_conjugate(self.as_array()) / norm_squared)

    def slerp(self, other: 'Quaternion', t: float, tolerances: ToleranceOptions | None = None) -> 'Quaternion':
        """
        Spherical linear interpolation from this quaternion (``t = 0``) to ``other`` (``t = 1``).

        ``t`` is clamped to :math:`[0, 1]`; at or beyond either end an exact copy of that endpoint is returned.  See
        :func:`.slerp` for the handling of opposite and nearly parallel quaternions.  This may be called as
        ``Quaternion.slerp(a, b, t)``.

        :param other: The end of the interpolation
        :param t: The fraction of the way from self to other
        :param tolerances: Overrides for the default thresholds
        :return: The interpolated quaternion
        """

        return Quaternion.from_array(slerp(self.as_array(), other.as_array(), t, tolerances=tolerances))

    def nlerp(self, other: 'Quaternion', t: float) -> 'Quaternion':
        """
        Normalized linear interpolation from this quaternion (``t = 0``) to ``other`` (``t = 1``).

        This is cheaper than :meth:`slerp` but does not move at a constant angular rate.  See :func:`.nlerp`.

        :param other: The end of the interpolation
        :param t: The fraction of the way from self to other
        :return: The interpolated unit quaternion
        """

        return Quaternion.from_array(nlerp(self.as_array(), other.as_array(), t))

    def pow(self, exponent: float, tolerances: ToleranceOptions | None = None) -> 'Quaternion':
        """
        Raises this rotation to a real power, producing the same rotation axis with the angle scaled by ``exponent``.

        Nearly identity rotations are returned unchanged.  See :func:`.quaternion_pow`.

        :param exponent: The power
        :param tolerances: Overrides for the default thresholds
        :return: The partial (or multiple) rotation
        """

        return Quaternion.from_array(quaternion_pow(self.as_array(), exponent, tolerances))

    def get_rotation_angle(self) -> float:
        """
        The rotation angle in radians, in :math:`[0, 2\\pi]`.
        """

        return 2.0 * safe_acos(self.w)

    def get_rotation_axis(self, tolerances: ToleranceOptions | None = None) -> DOUBLE_ARRAY:
        """
        The unit rotation axis.

        A rotation by (nearly) zero has no well defined axis.  When :math:`\\sin^2(\\theta/2)=1-w^2` is at or below
        :attr:`.ToleranceOptions.identity_axis_tolerance` the axis [1, 0, 0] is returned.

        :param tolerances: Overrides for the default thresholds
        :return: The rotation axis as a length 3 array
        """

        tolerances = resolve_tolerances(tolerances)

        sin_half_theta_sq = 1.0 - self.w * self.w

        if sin_half_theta_sq <= tolerances.identity_axis_tolerance:
            return np.array([1.0, 0.0, 0.0])

        return self.vector / np.sqrt(sin_half_theta_sq)

    def rotate_vector(self, vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
        """
        Rotates ``vector`` by this (unit) quaternion.

        :param vector: The length 3 vector to rotate
        :return: The rotated vector
        """

        return quaternion_to_rotmat(self.as_array()) @ _check_vector_array_and_shape(vector)

    def copy(self) -> 'Quaternion':
        """
        Returns a copy of self.

        :return: A copy of self breaking all mutability
        """

        return copy.copy(self)
