# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module defines the numeric thresholds that decide which branch of a conversion or interpolation is taken.

Every routine that branches on one of these thresholds accepts an optional ``tolerances`` keyword argument.  When it is
not given, :data:`DEFAULT_TOLERANCES` is used.
"""

from dataclasses import dataclass

from orientation.utilities.options import UserOptions


__all__ = ['ToleranceOptions', 'DEFAULT_TOLERANCES', 'resolve_tolerances']


@dataclass(frozen=True)
class ToleranceOptions(UserOptions):
    """
    The thresholds used by the orientation conversions.

    All values must be positive.  The three thresholds compared against a sine or cosine must also be strictly less than
    1 (otherwise the branch they guard could never be taken).
    """

    gimbal_lock_threshold: float = 0.99999
    """
    When the magnitude of :math:`\\sin(\\text{pitch})` recovered from a matrix or quaternion exceeds this value the
    orientation is treated as gimbal locked: pitch is snapped to :math:`\\pm\\pi/2`, bank is forced to 0 and heading
    absorbs the combined rotation.
    """

    canonical_pitch_tolerance: float = 1e-4
    """
    During canonicalization, a pitch within this many radians of :math:`\\pm\\pi/2` is treated as gimbal locked and bank
    is folded into heading.
    """

    slerp_linear_threshold: float = 0.9999
    """
    When the (short arc) cosine between two quaternions exceeds this value, :func:`.slerp` falls back to a linear blend
    of the components to avoid dividing by a vanishing :math:`\\sin(\\omega)`.
    """

    pow_identity_threshold: float = 0.9999
    """
    When the magnitude of the scalar part of a quaternion exceeds this value, :func:`.quaternion_pow` returns the
    quaternion unchanged.
    """

    axis_unit_tolerance: float = 0.01
    """
    The allowed deviation of an axis length from 1 before it is renormalized (with a warning) when building a
    quaternion from an axis and angle.
    """

    identity_axis_tolerance: float = 1e-12
    """
    When :math:`\\sin^2(\\theta/2)` falls at or below this value the rotation is considered to have no well defined
    axis and the fallback axis :math:`[1, 0, 0]` is reported.
    """

    def override_options(self):
        """
        Checks that the thresholds are usable.

        :raises ValueError: If any tolerance is not positive or a cosine/sine threshold is not below 1
        """

        for name, value in self.options_dict.items():
            if not value > 0:
                raise ValueError(f'{name} must be positive.  You gave {value}')

        for name in ('gimbal_lock_threshold', 'slerp_linear_threshold', 'pow_identity_threshold'):
            if not getattr(self, name) < 1:
                raise ValueError(f'{name} must be less than 1')


DEFAULT_TOLERANCES: ToleranceOptions = ToleranceOptions()
"""
The process wide default tolerances.
"""


def resolve_tolerances(tolerances: ToleranceOptions | None) -> ToleranceOptions:
    """
    Returns ``tolerances`` or :data:`DEFAULT_TOLERANCES` if it is ``None``.

    :param tolerances: The user supplied tolerances, if any
    :return: The tolerances to use
    """

    return DEFAULT_TOLERANCES if tolerances is None else tolerances
