# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

r"""
Core conversion routines for orientation representations

This module contains the closed form conversions between heading/pitch/bank Euler angles, rotation quaternions and
rotation matrices.  All routines work on plain floats and numpy arrays; the value types in :mod:`orientation` wrap them.

The conventions are:

* column vectors, so a matrix :math:`\mathbf{T}` rotates a vector as :math:`\mathbf{T}\mathbf{v}`;
* quaternions are stored scalar first, :math:`[w, x, y, z]`;
* the object to inertial matrix of a heading :math:`h`, pitch :math:`p` and bank :math:`b` is

  .. math::
      \mathbf{M} = \mathbf{R}_y(h)\mathbf{R}_x(-p)\mathbf{R}_z(b)

  so that bank is applied first and heading last.  Writing :math:`c_h=\cos h`, :math:`s_h=\sin h` and so on:

  .. math::
      \mathbf{M} = \left[\begin{array}{ccc}
      c_hc_b - s_hs_ps_b & -c_hs_b - s_hs_pc_b & s_hc_p \\
      s_bc_p & c_bc_p & s_p \\
      -s_hc_b - c_hs_ps_b & s_hs_b - c_hs_pc_b & c_hc_p \end{array}\right]

  The inertial to object matrix is :math:`\mathbf{M}^T`.

Every conversion involving Euler angles takes a :class:`.Direction` describing whether the matrix or quaternion on the
other side represents the object to inertial or the inertial to object rotation.
"""

import logging

import numpy as np

from orientation._typing import ARRAY_LIKE, DOUBLE_ARRAY

from orientation.core._helpers import (_check_matrix_array_and_shape, _check_quaternion_array_and_shape,
                                       _check_vector_array_and_shape)
from orientation.core.direction import Direction
from orientation.core.elementals import skew
from orientation.core.scalar_math import HALF_PI
from orientation.core.tolerances import ToleranceOptions, resolve_tolerances


__all__ = ['euler_to_rotmat', 'euler_to_quaternion',
           'rotmat_to_euler', 'rotmat_to_quaternion',
           'quaternion_to_euler', 'quaternion_to_rotmat',
           'axis_angle_to_quaternion']


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting status, results, issues, and other information.
"""


def euler_to_rotmat(heading: float, pitch: float, bank: float,
                    direction: Direction = Direction.OBJECT_TO_INERTIAL) -> DOUBLE_ARRAY:
    """
    This function converts heading, pitch, and bank angles in radians into a rotation matrix.

    The matrix is built directly from the closed form product given in the module documentation, so no branching is
    required and the result is defined for every input.

    :param heading: The rotation about the up (y) axis in radians
    :param pitch: The pitch angle in radians
    :param bank: The rotation about the forward (z) axis in radians
    :param direction: Which direction the returned matrix should rotate vectors in
    :return: The 3x3 rotation matrix
    """

    ch, sh = np.cos(heading), np.sin(heading)
    cp, sp = np.cos(pitch), np.sin(pitch)
    cb, sb = np.cos(bank), np.sin(bank)

    matrix = np.array([[ch * cb - sh * sp * sb, -ch * sb - sh * sp * cb, sh * cp],
                       [sb * cp, cb * cp, sp],
                       [-sh * cb - ch * sp * sb, sh * sb - ch * sp * cb, ch * cp]])

    if direction is Direction.INERTIAL_TO_OBJECT:
        return matrix.T.copy()

    return matrix


def euler_to_quaternion(heading: float, pitch: float, bank: float,
                        direction: Direction = Direction.OBJECT_TO_INERTIAL) -> DOUBLE_ARRAY:
    r"""
    This function converts heading, pitch, and bank angles in radians into a unit rotation quaternion.

    The object to inertial quaternion is the product :math:`\mathbf{q}_y(h)\otimes\mathbf{q}_x(-p)\otimes
    \mathbf{q}_z(b)` written out in terms of the half angles:

    .. math::
        w = c_hc_pc_b - s_hs_ps_b \\
        x = s_hc_ps_b - c_hs_pc_b \\
        y = s_hc_pc_b + c_hs_ps_b \\
        z = c_hc_ps_b + s_hs_pc_b

    where :math:`c_h=\cos(h/2)`, :math:`s_h=\sin(h/2)` and so on.  The inertial to object quaternion is the conjugate,
    which only flips the sign of the vector part.

    :param heading: The rotation about the up (y) axis in radians
    :param pitch: The pitch angle in radians
    :param bank: The rotation about the forward (z) axis in radians
    :param direction: Which direction the returned quaternion should rotate vectors in
    :return: The quaternion as a length 4 array, scalar first
    """

    ch, sh = np.cos(heading * 0.5), np.sin(heading * 0.5)
    cp, sp = np.cos(pitch * 0.5), np.sin(pitch * 0.5)
    cb, sb = np.cos(bank * 0.5), np.sin(bank * 0.5)

    sign = direction.sign

    return np.array([ch * cp * cb - sh * sp * sb,
                     sign * (sh * cp * sb - ch * sp * cb),
                     sign * (sh * cp * cb + ch * sp * sb),
                     sign * (ch * cp * sb + sh * sp * cb)])


def rotmat_to_euler(matrix: ARRAY_LIKE,
                    direction: Direction = Direction.OBJECT_TO_INERTIAL,
                    tolerances: ToleranceOptions | None = None) -> tuple[float, float, float]:
    """
    This function recovers heading, pitch, and bank from a rotation matrix.

    The sine of the pitch angle sits in a single element of the matrix (:math:`m_{23}` for an object to inertial matrix
    and :math:`m_{32}` for an inertial to object matrix).  When its magnitude exceeds
    :attr:`.ToleranceOptions.gimbal_lock_threshold` the orientation is gimbal locked: heading and bank rotate about the
    same physical axis, so bank is forced to 0, pitch is snapped to :math:`\\pm\\pi/2` and heading is recovered from the
    remaining elements.  Otherwise each angle is recovered independently using ``arcsin`` for pitch and ``arctan2`` for
    heading and bank.

    The returned heading and bank are in :math:`(-\\pi, \\pi]` and pitch is in :math:`[-\\pi/2, \\pi/2]`.

    :param matrix: The 3x3 rotation matrix
    :param direction: Which direction ``matrix`` rotates vectors in
    :param tolerances: Overrides for the default thresholds
    :return: The heading, pitch, and bank angles in radians
    :raises ValueError: If the matrix is not 3x3
    """

    tolerances = resolve_tolerances(tolerances)

    matrix = _check_matrix_array_and_shape(matrix)

    if direction is Direction.OBJECT_TO_INERTIAL:
        sin_pitch = matrix[1, 2]

        if abs(sin_pitch) > tolerances.gimbal_lock_threshold:
            _LOGGER.debug('gimbal lock detected with sin(pitch)=%r', sin_pitch)
            return float(np.arctan2(-matrix[2, 0], matrix[0, 0])), float(np.copysign(HALF_PI, sin_pitch)), 0.0

        heading = np.arctan2(matrix[0, 2], matrix[2, 2])
        bank = np.arctan2(matrix[1, 0], matrix[1, 1])

    else:
        sin_pitch = matrix[2, 1]

        if abs(sin_pitch) > tolerances.gimbal_lock_threshold:
            _LOGGER.debug('gimbal lock detected with sin(pitch)=%r', sin_pitch)
            return float(np.arctan2(-matrix[0, 2], matrix[0, 0])), float(np.copysign(HALF_PI, sin_pitch)), 0.0

        heading = np.arctan2(matrix[2, 0], matrix[2, 2])
        bank = np.arctan2(matrix[0, 1], matrix[1, 1])

    return float(heading), float(np.arcsin(sin_pitch)), float(bank)


def quaternion_to_euler(quaternion: ARRAY_LIKE,
                        direction: Direction = Direction.OBJECT_TO_INERTIAL,
                        tolerances: ToleranceOptions | None = None) -> tuple[float, float, float]:
    r"""
    This function recovers heading, pitch, and bank from a unit rotation quaternion.

    This follows the same two branch structure as :func:`rotmat_to_euler`, evaluating only the matrix elements that are
    needed directly from the quaternion components.  For an object to inertial quaternion

    .. math::
        \sin(p) = 2(yz - wx)

    For an inertial to object quaternion the sign of :math:`w` is flipped before evaluating the same expressions, since
    :math:`(-w, \mathbf{v})` represents the same rotation as the conjugate :math:`(w, -\mathbf{v})`.  As every term is
    a product of two components, a quaternion and its negation give identical angles.

    :param quaternion: The rotation quaternion, scalar first
    :param direction: Which direction ``quaternion`` rotates vectors in
    :param tolerances: Overrides for the default thresholds
    :return: The heading, pitch, and bank angles in radians
    :raises ValueError: If the quaternion does not have 4 elements
    """

    tolerances = resolve_tolerances(tolerances)

    w, x, y, z = _check_quaternion_array_and_shape(quaternion)

    w *= direction.sign

    sin_pitch = 2.0 * (y * z - w * x)

    if abs(sin_pitch) > tolerances.gimbal_lock_threshold:
        _LOGGER.debug('gimbal lock detected with sin(pitch)=%r', sin_pitch)

        heading = np.arctan2(w * y - x * z, 0.5 - y * y - z * z)

        return float(heading), float(np.copysign(HALF_PI, sin_pitch)), 0.0

    heading = np.arctan2(x * z + w * y, 0.5 - x * x - y * y)
    bank = np.arctan2(x * y + w * z, 0.5 - x * x - z * z)

    return float(heading), float(np.arcsin(sin_pitch)), float(bank)


def quaternion_to_rotmat(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function converts a rotation quaternion into the rotation matrix that rotates vectors in the same direction.

    Rotation quaternions are converted to rotation matrices by using:

    .. math::
        \mathbf{T} = (w^2-\mathbf{v}^T\mathbf{v})\mathbf{I}_{3\times 3}+2\mathbf{v}\mathbf{v}^T+2w
        \left[\mathbf{v}\times\right]

    where :math:`\mathbf{v}=[x, y, z]^T` is the vector portion of the quaternion, :math:`w` is the scalar portion,
    :math:`\left[\bullet\times\right]` is the skew symmetric cross product matrix (see :func:`.skew`), and
    :math:`\mathbf{I}_{3\times 3}` is a :math:`3\times 3` identity matrix.  Only the :math:`2w[\mathbf{v}\times]` term
    changes sign between a quaternion and its conjugate, which is why the matrices for the two directions are
    transposes of each other.

    :param quaternion: The rotation quaternion, scalar first
    :return: The 3x3 rotation matrix
    :raises ValueError: If the quaternion does not have 4 elements
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    qs = quaternion[0]
    qv = quaternion[1:]

    return (qs ** 2 - qv @ qv) * np.eye(3) + 2 * np.outer(qv, qv) + 2 * qs * skew(qv)


def rotmat_to_quaternion(matrix: ARRAY_LIKE) -> DOUBLE_ARRAY:
    """
    This function converts a rotation matrix into the unit quaternion that rotates vectors in the same direction.

    Shepperd's method is used: the largest of :math:`4w^2`, :math:`4x^2`, :math:`4y^2` and :math:`4z^2` (all
    recoverable from the trace and the diagonal) is square rooted and the other three components are found from the
    symmetric and skew symmetric parts of the matrix.  This avoids dividing by a small number for any rotation,
    including half turns.  The sign is chosen so that the scalar part is non-negative.

    :param matrix: The 3x3 rotation matrix
    :return: The quaternion as a length 4 array, scalar first
    :raises ValueError: If the matrix is not 3x3
    """

    t = _check_matrix_array_and_shape(matrix)

    trace = np.trace(t)

    if trace > 0:
        s = 0.5 / np.sqrt(trace + 1.0)
        quaternion = np.array([0.25 / s,
                               (t[2, 1] - t[1, 2]) * s,
                               (t[0, 2] - t[2, 0]) * s,
                               (t[1, 0] - t[0, 1]) * s])

    elif t[0, 0] > t[1, 1] and t[0, 0] > t[2, 2]:
        s = 2.0 * np.sqrt(1.0 + t[0, 0] - t[1, 1] - t[2, 2])
        quaternion = np.array([(t[2, 1] - t[1, 2]) / s,
                               0.25 * s,
                               (t[0, 1] + t[1, 0]) / s,
                               (t[0, 2] + t[2, 0]) / s])

    elif t[1, 1] > t[2, 2]:
        s = 2.0 * np.sqrt(1.0 + t[1, 1] - t[0, 0] - t[2, 2])
        quaternion = np.array([(t[0, 2] - t[2, 0]) / s,
                               (t[0, 1] + t[1, 0]) / s,
                               0.25 * s,
                               (t[1, 2] + t[2, 1]) / s])

    else:
        s = 2.0 * np.sqrt(1.0 + t[2, 2] - t[0, 0] - t[1, 1])
        quaternion = np.array([(t[1, 0] - t[0, 1]) / s,
                               (t[0, 2] + t[2, 0]) / s,
                               (t[1, 2] + t[2, 1]) / s,
                               0.25 * s])

    if quaternion[0] < 0:
        quaternion *= -1

    return quaternion


def axis_angle_to_quaternion(axis: ARRAY_LIKE, theta: float,
                             tolerances: ToleranceOptions | None = None) -> DOUBLE_ARRAY:
    r"""
    This function forms the rotation quaternion that rotates by ``theta`` radians about ``axis``.

    .. math::
        \mathbf{q} = \left[\begin{array}{c} \text{cos}(\frac{\theta}{2}) \\
        \text{sin}(\frac{\theta}{2})\hat{\mathbf{x}}\end{array}\right]

    The axis is expected to be of unit length.  If its length differs from 1 by more than
    :attr:`.ToleranceOptions.axis_unit_tolerance` a warning is logged and the axis is normalized before use.

    :param axis: The unit rotation axis
    :param theta: The rotation angle in radians
    :param tolerances: Overrides for the default thresholds
    :return: The quaternion as a length 4 array, scalar first
    :raises ValueError: If the axis does not have 3 elements or has zero length
    """

    tolerances = resolve_tolerances(tolerances)

    axis = _check_vector_array_and_shape(axis)

    length = np.linalg.norm(axis)

    if length == 0:
        raise ValueError('The rotation axis must not have zero length')

    if abs(length - 1.0) > tolerances.axis_unit_tolerance:
        _LOGGER.warning('the rotation axis %s is not unit length (%r).  It has been normalized', axis, length)
        axis = axis / length

    half_theta = theta * 0.5

    return np.hstack([np.cos(half_theta), np.sin(half_theta) * axis])
