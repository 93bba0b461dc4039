# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

r"""
This package defines three interchangeable representations of a 3D orientation along with exact conversions between
them, composition, and interpolation.

The representations are:

.. _orientation-representation-table:

=================  =====================================================================================================
Representation     Description
=================  =====================================================================================================
euler angles       A heading, pitch, and bank triple in radians (:class:`.EulerAngles`).  Heading rotates about the up
                   (y) axis, pitch about the right (x) axis, and bank about the forward (z) axis, applied bank first
                   and heading last.  Many triples describe the same orientation; :meth:`.EulerAngles.canonize` picks
                   the unique one with pitch in :math:`[-\pi/2, \pi/2]` and heading and bank in :math:`(-\pi, \pi]`.
quaternion         A unit quaternion :math:`[w, x, y, z]=[\cos(\frac{\theta}{2}), \sin(\frac{\theta}{2})
                   \hat{\mathbf{x}}]` (:class:`.Quaternion`) where :math:`\hat{\mathbf{x}}` is the rotation axis and
                   :math:`\theta` the angle.  Note that quaternions are not unique in that the rotation represented by
                   :math:`\mathbf{q}` is the same rotation represented by :math:`-\mathbf{q}`.
rotation matrix    A :math:`3\times 3` orthonormal matrix (:class:`.RotationMatrix`) that transforms column vectors
                   between the object frame and the inertial frame.  Rotation matrices uniquely represent a single
                   rotation.
=================  =====================================================================================================

A rotation can take vectors from the object (local) frame to the inertial (parent) frame or the reverse.  The two are
inverses of each other, and conversions that need to know which is meant take a :class:`.Direction`.

The pure numeric routines the value types are built on live in :mod:`orientation.core` and can be used directly on
floats and numpy arrays.
"""

import orientation.core
import orientation.euler_angles
import orientation.quaternion
import orientation.rotation_matrix

from orientation.core import *
from orientation.euler_angles import EulerAngles
from orientation.quaternion import Quaternion
from orientation.rotation_matrix import RotationMatrix

__all__ = ['euler_to_rotmat', 'euler_to_quaternion',
           'rotmat_to_euler', 'rotmat_to_quaternion',
           'quaternion_to_euler', 'quaternion_to_rotmat',
           'axis_angle_to_quaternion',
           'Direction',
           'rot_x', 'rot_y', 'rot_z', 'skew',
           'quaternion_normalize', 'quaternion_conjugate', 'quaternion_multiplication', 'quaternion_dot',
           'quaternion_pow', 'nlerp', 'slerp',
           'PI', 'TWO_PI', 'HALF_PI', 'ONE_OVER_PI', 'ONE_OVER_TWO_PI', 'wrap_pi', 'safe_acos',
           'ToleranceOptions', 'DEFAULT_TOLERANCES',
           'EulerAngles', 'Quaternion', 'RotationMatrix']
