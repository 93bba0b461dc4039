# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Safe scalar trigonometry used throughout the orientation conversions.

This module has no dependencies on the other orientation modules so that it can be imported anywhere without creating
circular imports.  It provides the process wide :math:`\\pi` derived constants along with two helpers:

* :func:`wrap_pi` which maps an angle into the half open range :math:`(-\\pi, \\pi]`, and
* :func:`safe_acos` which clamps its argument into the domain of the arccosine before evaluating it.

Both functions accept either a scalar (returning a ``float``) or an array (operating element-wise and returning an
array).
"""

import numpy as np

from orientation._typing import SCALAR_OR_ARRAY, F_SCALAR_OR_ARRAY


__all__ = ['PI', 'TWO_PI', 'HALF_PI', 'ONE_OVER_PI', 'ONE_OVER_TWO_PI', 'wrap_pi', 'safe_acos']


PI: float = float(np.pi)
"""
:math:`\\pi`
"""

TWO_PI: float = 2.0 * PI
"""
:math:`2\\pi`, one full turn
"""

HALF_PI: float = PI / 2.0
"""
:math:`\\pi/2`, the pitch of either pole
"""

ONE_OVER_PI: float = 1.0 / PI
"""
:math:`1/\\pi`
"""

ONE_OVER_TWO_PI: float = 1.0 / TWO_PI
"""
:math:`1/(2\\pi)`, used to count whole turns
"""


def wrap_pi(angle: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    r"""
    Wraps an angle (or angles) in radians into the half open range :math:`(-\pi, \pi]`.

    The number of whole turns to remove is computed directly using a floor, so the result is stable for angles of any
    magnitude:

    .. math::
        \theta' = \theta - 2\pi\left\lfloor\frac{\theta+\pi}{2\pi}\right\rfloor

    The floor form lands on :math:`[-\pi, \pi)`, so a result of exactly :math:`-\pi` is moved to :math:`\pi` to honor
    the half open convention.  Angles that are already in range are returned untouched (no residual round off is
    introduced).

        >>> from orientation.core.scalar_math import wrap_pi, PI
        >>> wrap_pi(3 * PI)
        3.141592653589793
        >>> wrap_pi(-PI)
        3.141592653589793

    :param angle: The angle(s) to wrap in radians
    :return: The wrapped angle(s) in radians
    """

    if np.ndim(angle) == 0:
        angle = float(angle)  # type: ignore

        if -PI < angle <= PI:
            return angle

        wrapped = angle - TWO_PI * np.floor((angle + PI) * ONE_OVER_TWO_PI)

        if wrapped <= -PI:
            wrapped += TWO_PI

        return float(wrapped)

    angles = np.asanyarray(angle, dtype=np.float64)

    in_range = (angles > -PI) & (angles <= PI)

    wrapped = angles - TWO_PI * np.floor((angles + PI) * ONE_OVER_TWO_PI)
    wrapped = np.where(wrapped <= -PI, wrapped + TWO_PI, wrapped)

    return np.where(in_range, angles, wrapped)


def safe_acos(x: SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    Computes the arccosine of x after clamping x into the valid domain :math:`[-1, 1]`.

    Values at or below -1 return exactly :math:`\\pi` and values at or above 1 return exactly 0.  This guards against
    cosines that have been pushed just outside of the domain by floating point round off.

    :param x: The cosine value(s)
    :return: The angle(s) in radians in :math:`[0, \\pi]`
    """

    if np.ndim(x) == 0:
        x = float(x)  # type: ignore

        if x <= -1.0:
            return PI

        if x >= 1.0:
            return 0.0

        return float(np.arccos(x))

    return np.arccos(np.clip(np.asanyarray(x, dtype=np.float64), -1.0, 1.0))
