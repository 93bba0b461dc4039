# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module defines the :class:`Direction` flag used to select between the object to inertial and the inertial to
object forms of a conversion.

The two forms of every conversion are transposes (or, for quaternions, conjugates) of each other.  Rather than writing
each formula twice, the conversions thread :attr:`Direction.sign` through the terms whose sign differs between the two
forms.
"""

from enum import Enum


__all__ = ['Direction']


class Direction(Enum):
    """
    The direction a rotation transforms vectors in.
    """

    OBJECT_TO_INERTIAL = 'object_to_inertial'
    """
    Takes vectors expressed in the object (local) frame into the inertial (parent) frame.
    """

    INERTIAL_TO_OBJECT = 'inertial_to_object'
    """
    Takes vectors expressed in the inertial (parent) frame into the object (local) frame.
    """

    @property
    def sign(self) -> float:
        """
        +1 for :attr:`OBJECT_TO_INERTIAL` and -1 for :attr:`INERTIAL_TO_OBJECT`.

        Multiplying the scalar part of a quaternion by this value converts between the two forms, since
        :math:`(-w, \\mathbf{v})` is the same rotation as the conjugate :math:`(w, -\\mathbf{v})`.
        """

        return 1.0 if self is Direction.OBJECT_TO_INERTIAL else -1.0
