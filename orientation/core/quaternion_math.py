import logging

import numpy as np

from orientation._typing import ARRAY_LIKE, DOUBLE_ARRAY, DatetimeLike

from orientation.core._helpers import _check_quaternion_array_and_shape
from orientation.core.scalar_math import safe_acos
from orientation.core.tolerances import ToleranceOptions, resolve_tolerances

__all__ = ["quaternion_normalize", "quaternion_conjugate", "quaternion_multiplication", "quaternion_dot",
           "quaternion_pow", "nlerp", "slerp"]


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting status, results, issues, and other information.
"""


def quaternion_normalize(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    Rescales the quaternion to unit length.

    Products of many quaternions slowly drift away from unit length due to round off, so they should be normalized
    periodically.  A quaternion with a length of exactly zero cannot be normalized; it is returned unchanged and a
    warning is logged.

    :param quaternion: the quaternion to normalize, scalar first
    :returns: The normalized quaternion
    """

    work_quaternion = _check_quaternion_array_and_shape(quaternion)

    magnitude = np.linalg.norm(work_quaternion)

    if magnitude > 0:
        work_quaternion /= magnitude
    else:
        _LOGGER.warning('cannot normalize a zero length quaternion.  It has been left unchanged')

    return work_quaternion


def quaternion_conjugate(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function provides the conjugate of a quaternion, which negates the vector portion.

    For unit rotation quaternions the conjugate is the inverse rotation, that is
    :math:`\mathbf{q}\otimes\mathbf{q}^*=\mathbf{q}_I` where :math:`\mathbf{q}_I=[1, 0, 0, 0]` is the identity.

    :param quaternion: The quaternion to conjugate, scalar first
    :return: The conjugate quaternion
    """

    # ensure the value is an array and break mutability
    quaternion = _check_quaternion_array_and_shape(quaternion)

    # negate the vector portion
    quaternion[1:] *= -1

    return quaternion


def quaternion_multiplication(quaternion_1_in: ARRAY_LIKE,
                              quaternion_2_in: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function performs the Hamilton quaternion product.

    The product is defined such that `q_from_A_to_C = quaternion_multiplication(q_from_B_to_C, q_from_A_to_B)`, that
    is the second quaternion is applied first and the first quaternion is the outer rotation.

    Mathematically this is given by:

    .. math::
        \mathbf{q}_1\otimes\mathbf{q}_2=\left[\begin{array}{c}w_1w_2-\mathbf{v}_1^T\mathbf{v}_2 \\
        w_1\mathbf{v}_2 + w_2\mathbf{v}_1 + \mathbf{v}_1\times\mathbf{v}_2\end{array}\right]

    :param quaternion_1_in: The outer (second applied) quaternion
    :param quaternion_2_in: The inner (first applied) quaternion
    :return: The Hamilton product of quaternion_1 and quaternion_2
    """

    quaternion_1 = _check_quaternion_array_and_shape(quaternion_1_in)
    quaternion_2 = _check_quaternion_array_and_shape(quaternion_2_in)

    qs1 = quaternion_1[0]
    qv1 = quaternion_1[1:]

    qs2 = quaternion_2[0]
    qv2 = quaternion_2[1:]

    return np.hstack([qs1 * qs2 - qv1 @ qv2,
                      qs1 * qv2 + qs2 * qv1 + np.cross(qv1, qv2)])


def quaternion_dot(quaternion_1: ARRAY_LIKE, quaternion_2: ARRAY_LIKE) -> float:
    """
    The 4 dimensional inner product of two quaternions.

    For unit quaternions this is the cosine of half the angle between the two rotations (up to sign, since the
    quaternion and its negation represent the same rotation).

    :param quaternion_1: The first quaternion
    :param quaternion_2: The second quaternion
    :return: The dot product
    """

    return float(_check_quaternion_array_and_shape(quaternion_1) @ _check_quaternion_array_and_shape(quaternion_2))


def quaternion_pow(quaternion: ARRAY_LIKE, exponent: float,
                   tolerances: ToleranceOptions | None = None) -> DOUBLE_ARRAY:
    r"""
    Raises a unit rotation quaternion to a real power, scaling its rotation angle by ``exponent``.

    .. math::
        \alpha = \text{cos}^{-1}(w) \\
        \mathbf{q}^t = \left[\begin{array}{c}\text{cos}(t\alpha) \\
        \frac{\text{sin}(t\alpha)}{\text{sin}(\alpha)}\mathbf{v}\end{array}\right]

    When :math:`|w|` exceeds :attr:`.ToleranceOptions.pow_identity_threshold` the rotation is too close to the identity
    for the division to be well conditioned and the quaternion is returned unchanged.

    :param quaternion: The unit quaternion, scalar first
    :param exponent: The power to raise the quaternion to
    :param tolerances: Overrides for the default thresholds
    :return: The quaternion raised to the power
    """

    tolerances = resolve_tolerances(tolerances)

    quaternion = _check_quaternion_array_and_shape(quaternion)

    if abs(quaternion[0]) > tolerances.pow_identity_threshold:
        _LOGGER.debug('quaternion is nearly the identity, skipping the power')
        return quaternion

    alpha = safe_acos(quaternion[0])
    new_alpha = alpha * exponent

    return np.hstack([np.cos(new_alpha), quaternion[1:] * (np.sin(new_alpha) / np.sin(alpha))])


def _interpolation_fraction(time: float | DatetimeLike,
                            time0: float | DatetimeLike, time1: float | DatetimeLike) -> float:
    """
    Computes the fractional percent of the way from time0 to time1 that time is.
    """

    try:
        return float((time - time0) / (time1 - time0))  # type: ignore
    except TypeError:
        raise TypeError('time, time0, and time1 must support subtraction resulting in a type that supports true '
                        'division.  Typically this means they should all be floats or all be DatetimeLike objects')


def nlerp(quaternion0: ARRAY_LIKE, quaternion1: ARRAY_LIKE,
          time: float | DatetimeLike,
          time0: float | DatetimeLike = 0, time1: float | DatetimeLike = 1) -> DOUBLE_ARRAY:
    r"""
    This function performs normalized linear interpolation of rotation quaternions.

    NLERP of quaternions involves first performing a linear interpolation between the two vectors (along the shorter
    arc), and then normalizing the interpolated result to have unit length.  That is:

    .. math::
        \mathbf{q}=\frac{\mathbf{q}_0(1-p)+\mathbf{q}_1p}
        {\left\|\mathbf{q}_0(1-p)+\mathbf{q}_1p\right\|}

    When using this function you can either specify the argument `time` as the fractional percent that you want to
    interpolate at, or specify the keyword arguments `time0` and `time1` to be the times corresponding to the first and
    second quaternion respectively and the function will compute the fractional percent for you.

    .. warning::
        NLERP does not perform a constant angular velocity interpolation.  Use :func:`slerp` for that.

    :param quaternion0: The starting quaternion
    :param quaternion1: The ending quaternion
    :param time: The time to interpolate the quaternions at, as a fractional percent or as the actual time between
                `time0` and `time1`
    :param time0: the time corresponding to the first quaternion
    :param time1: the time corresponding to the second quaternion
    :return: The interpolated quaternion
    """

    dt = _interpolation_fraction(time, time0, time1)

    q0 = _check_quaternion_array_and_shape(quaternion0)
    q1 = _check_quaternion_array_and_shape(quaternion1)

    if q0 @ q1 < 0:
        q1 *= -1

    return quaternion_normalize(q0 * (1 - dt) + q1 * dt)


def slerp(quaternion0: ARRAY_LIKE, quaternion1: ARRAY_LIKE,
          time: float | DatetimeLike,
          time0: float | DatetimeLike = 0, time1: float | DatetimeLike = 1,
          tolerances: ToleranceOptions | None = None) -> DOUBLE_ARRAY:
    r"""
    This function performs spherical linear interpolation of rotation quaternions.

    SLERP blends the two quaternions along the great circle arc that connects them, giving a constant angular velocity:

    .. math::
        \omega = \text{atan2}(\sqrt{1-c^2}, c) \\
        \mathbf{q}=\frac{\text{sin}((1-p)\omega)}{\text{sin}(\omega)}\mathbf{q}_0+
        \frac{\text{sin}(p\omega)}{\text{sin}(\omega)}\mathbf{q}_1

    where :math:`c=\mathbf{q}_0^T\mathbf{q}_1` and :math:`p` is the fractional percent of the way between
    :math:`\mathbf{q}_0` and :math:`\mathbf{q}_1` (:math:`p\in[0, 1]`).

    The edge cases are handled as follows:

    * :math:`p\le 0` returns a copy of quaternion0 and :math:`p\ge 1` returns a copy of quaternion1 exactly (no
      extrapolation).
    * If :math:`c<0` quaternion1 is negated so that the shorter arc is taken.
    * If :math:`c` exceeds :attr:`.ToleranceOptions.slerp_linear_threshold` the components are blended linearly to
      avoid dividing by a vanishing :math:`\text{sin}(\omega)`.  The result is not renormalized in this case.

    As with :func:`nlerp`, `time` can be given as a fractional percent or as a time between `time0` and `time1`.

    :param quaternion0: The starting quaternion
    :param quaternion1: The ending quaternion
    :param time: The time to interpolate the quaternions at, as a fractional percent or as the actual time between
                `time0` and `time1`
    :param time0: the time corresponding to the first quaternion
    :param time1: the time corresponding to the second quaternion
    :param tolerances: Overrides for the default thresholds
    :return: The interpolated quaternion
    """

    tolerances = resolve_tolerances(tolerances)

    dt = _interpolation_fraction(time, time0, time1)

    q0 = _check_quaternion_array_and_shape(quaternion0)
    q1 = _check_quaternion_array_and_shape(quaternion1)

    if dt <= 0:
        return q0

    if dt >= 1:
        return q1

    # get the cosine of the angle between the quaternions
    cos_omega = q0 @ q1

    if cos_omega < 0:
        # negate the second quaternion to ensure the shorter path is taken
        q1 *= -1
        cos_omega *= -1

    if cos_omega > tolerances.slerp_linear_threshold:
        _LOGGER.debug('quaternions are nearly parallel, falling back to a linear blend')
        k0 = 1.0 - dt
        k1 = dt

    else:
        sin_omega = np.sqrt(1.0 - cos_omega * cos_omega)

        omega = np.arctan2(sin_omega, cos_omega)

        one_over_sin_omega = 1.0 / sin_omega

        k0 = np.sin((1.0 - dt) * omega) * one_over_sin_omega
        k1 = np.sin(dt * omega) * one_over_sin_omega

    return k0 * q0 + k1 * q1
