"""
This module contains fundamental mathematical operations and utilities for orientation
calculations. It has no dependencies on the orientation value types to avoid circular imports.
All functions here are pure mathematical operations on floats and numpy arrays that are used
as building blocks by :class:`.EulerAngles`, :class:`.Quaternion` and :class:`.RotationMatrix`.
"""

import orientation.core.conversions
import orientation.core.direction
import orientation.core.elementals
import orientation.core.quaternion_math
import orientation.core.scalar_math
import orientation.core.tolerances

from orientation.core.conversions import (euler_to_rotmat, euler_to_quaternion,
                                          rotmat_to_euler, rotmat_to_quaternion,
                                          quaternion_to_euler, quaternion_to_rotmat,
                                          axis_angle_to_quaternion)

from orientation.core.direction import Direction

from orientation.core.elementals import rot_x, rot_y, rot_z, skew

from orientation.core.quaternion_math import (quaternion_normalize, quaternion_conjugate, quaternion_multiplication,
                                              quaternion_dot, quaternion_pow, nlerp, slerp)

from orientation.core.scalar_math import PI, TWO_PI, HALF_PI, ONE_OVER_PI, ONE_OVER_TWO_PI, wrap_pi, safe_acos

from orientation.core.tolerances import ToleranceOptions, DEFAULT_TOLERANCES

__all__ = ['euler_to_rotmat', 'euler_to_quaternion',
           'rotmat_to_euler', 'rotmat_to_quaternion',
           'quaternion_to_euler', 'quaternion_to_rotmat',
           'axis_angle_to_quaternion',
           'Direction',
           'rot_x', 'rot_y', 'rot_z', 'skew',
           'quaternion_normalize', 'quaternion_conjugate', 'quaternion_multiplication', 'quaternion_dot',
           'quaternion_pow', 'nlerp', 'slerp',
           'PI', 'TWO_PI', 'HALF_PI', 'ONE_OVER_PI', 'ONE_OVER_TWO_PI', 'wrap_pi', 'safe_acos',
           'ToleranceOptions', 'DEFAULT_TOLERANCES']
