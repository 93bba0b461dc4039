# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module provides the :class:`EulerAngles` heading/pitch/bank triple along with its canonicalization.
"""

from typing import TYPE_CHECKING

import copy

import numpy as np

from orientation._typing import DOUBLE_ARRAY
from orientation.core.conversions import quaternion_to_euler, rotmat_to_euler
from orientation.core.direction import Direction
from orientation.core.scalar_math import PI, HALF_PI, wrap_pi
from orientation.core.tolerances import ToleranceOptions, resolve_tolerances
from orientation.utilities.mixin_classes import AttributeEqualityComparison, AttributePrinting

if TYPE_CHECKING:
    from orientation.quaternion import Quaternion
    from orientation.rotation_matrix import RotationMatrix


class EulerAngles(AttributePrinting, AttributeEqualityComparison):
    """
    An orientation expressed as heading, pitch, and bank angles in radians.

    Heading rotates about the up (y) axis, pitch about the right (x) axis and bank about the forward (z) axis.  The
    rotations are applied bank first, then pitch, then heading (see :mod:`.conversions` for the exact matrix).

    Any triple of real numbers is a valid orientation, but many triples describe the same orientation.
    :meth:`canonize` reduces a triple to the unique canonical representative with pitch in :math:`[-\\pi/2, \\pi/2]`
    and heading and bank in :math:`(-\\pi, \\pi]`, with bank forced to 0 when the orientation is gimbal locked.

    Instances are plain values: the angles are public attributes and the only method that modifies an instance in place
    is :meth:`canonize`.  Use :meth:`copy` (or :meth:`canonical`) when an independent value is required.

        >>> from orientation import EulerAngles
        >>> from numpy import pi
        >>> angles = EulerAngles(0.3, pi/2, 0.7)
        >>> angles.canonize()
        >>> angles
        EulerAngles(heading=1.0, pitch=1.5707963267948966, bank=0.0)
    """

    def __init__(self, heading: float = 0.0, pitch: float = 0.0, bank: float = 0.0):
        """
        :param heading: The rotation about the up axis in radians
        :param pitch: The rotation about the right axis in radians
        :param bank: The rotation about the forward axis in radians
        """

        self.heading: float = float(heading)
        """
        The rotation about the up axis in radians
        """

        self.pitch: float = float(pitch)
        """
        The rotation about the right axis in radians
        """

        self.bank: float = float(bank)
        """
        The rotation about the forward axis in radians
        """

    @classmethod
    def identity(cls) -> 'EulerAngles':
        """
        The orientation with no rotation, (0, 0, 0).
        """

        return cls()

    @classmethod
    def from_quaternion(cls, quaternion: 'Quaternion',
                        direction: Direction = Direction.OBJECT_TO_INERTIAL,
                        tolerances: ToleranceOptions | None = None) -> 'EulerAngles':
        """
        Recovers the angles from a unit quaternion.

        See :func:`.quaternion_to_euler` for details.

        :param quaternion: The rotation quaternion
        :param direction: Which direction ``quaternion`` rotates vectors in
        :param tolerances: Overrides for the default thresholds
        :return: The angles, with heading and bank in :math:`(-\\pi, \\pi]` and pitch in :math:`[-\\pi/2, \\pi/2]`
        """

        return cls(*quaternion_to_euler(quaternion.as_array(), direction, tolerances))

    @classmethod
    def from_rotation_matrix(cls, matrix: 'RotationMatrix',
                             tolerances: ToleranceOptions | None = None) -> 'EulerAngles':
        """
        Recovers the angles from a rotation matrix.

        See :func:`.rotmat_to_euler` for details.

        :param matrix: The rotation matrix
        :param tolerances: Overrides for the default thresholds
        :return: The angles, with heading and bank in :math:`(-\\pi, \\pi]` and pitch in :math:`[-\\pi/2, \\pi/2]`
        """

        return cls(*rotmat_to_euler(matrix.as_array(Direction.OBJECT_TO_INERTIAL),
                                    Direction.OBJECT_TO_INERTIAL, tolerances))

    def to_quaternion(self, direction: Direction = Direction.OBJECT_TO_INERTIAL) -> 'Quaternion':
        """
        Converts these angles into a unit quaternion rotating in ``direction``.

        :param direction: Which direction the quaternion should rotate vectors in
        :return: The quaternion
        """

        from orientation.quaternion import Quaternion

        return Quaternion.from_euler_angles(self, direction)

    def to_rotation_matrix(self) -> 'RotationMatrix':
        """
        Converts these angles into a rotation matrix.

        :return: The rotation matrix
        """

        from orientation.rotation_matrix import RotationMatrix

        return RotationMatrix.from_euler_angles(self)

    def canonize(self, tolerances: ToleranceOptions | None = None) -> None:
        """
        Replaces these angles in place with the canonical triple describing the same orientation.

        The steps are:

        #. Pitch is wrapped into :math:`(-\\pi, \\pi]`.
        #. If pitch lies outside :math:`[-\\pi/2, \\pi/2]` it is reflected across the nearer pole
           (:math:`\\pm\\pi - \\text{pitch}`) and :math:`\\pi` is added to both heading and bank, which is the same
           orientation reached by flying over the pole.
        #. If pitch is within :attr:`.ToleranceOptions.canonical_pitch_tolerance` of a pole the orientation is gimbal
           locked and heading and bank rotate about the same physical axis, so bank is folded into heading and set to
           0.  At the upper pole the two axes point the same way (heading becomes heading + bank); at the lower pole
           they point in opposite ways (heading becomes heading - bank).  Folding with ``heading += bank`` at both
           poles would change the rotation at the lower pole, so the sign follows the pitch instead.
        #. Otherwise bank is wrapped into :math:`(-\\pi, \\pi]`.
        #. Heading is wrapped into :math:`(-\\pi, \\pi]`.

        :param tolerances: Overrides for the default thresholds
        """

        tolerances = resolve_tolerances(tolerances)

        self.pitch = wrap_pi(self.pitch)

        if self.pitch < -HALF_PI:
            self.pitch = -PI - self.pitch
            self.heading += PI
            self.bank += PI

        elif self.pitch > HALF_PI:
            self.pitch = PI - self.pitch
            self.heading += PI
            self.bank += PI

        if abs(self.pitch) > HALF_PI - tolerances.canonical_pitch_tolerance:
            if self.pitch > 0:
                self.heading += self.bank
            else:
                self.heading -= self.bank

            self.bank = 0.0

        else:
            self.bank = wrap_pi(self.bank)

        self.heading = wrap_pi(self.heading)

    def canonical(self, tolerances: ToleranceOptions | None = None) -> 'EulerAngles':
        """
        Returns a canonized copy of these angles, leaving this instance untouched.

        :param tolerances: Overrides for the default thresholds
        :return: The canonical angles
        """

        result = self.copy()
        result.canonize(tolerances)

        return result

    def is_gimbal_locked(self, tolerances: ToleranceOptions | None = None) -> bool:
        """
        Whether this orientation is within :attr:`.ToleranceOptions.canonical_pitch_tolerance` of either pole, where
        heading and bank can no longer be told apart.

        :param tolerances: Overrides for the default thresholds
        :return: True if the orientation is gimbal locked
        """

        tolerances = resolve_tolerances(tolerances)

        return abs(self.canonical(tolerances).pitch) > HALF_PI - tolerances.canonical_pitch_tolerance

    def as_array(self) -> DOUBLE_ARRAY:
        """
        Returns the angles as a length 3 array ordered heading, pitch, bank.
        """

        return np.array([self.heading, self.pitch, self.bank])

    def copy(self) -> 'EulerAngles':
        """
        Returns a copy of self.

        :return: A copy of self breaking all mutability
        """

        return copy.copy(self)
