import logging

import numpy as np

from typing import Self, Any


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
This is the logging interface for reporting status, results, issues, and other information.
"""


class AttributeEqualityComparison:
    """
    A base class that implements equality comparison based on attributes.

    Two objects compare equal when they are instances of the same class, have the same attribute names, and every
    attribute compares equal.  Numeric array-like attributes are compared with numpy's allclose, everything else with
    ``==``.

    Usage:
        Inherit from this class to add attribute-based equality comparison to the value types.

        For example:

        .. code-block::
            class Pair(AttributeEqualityComparison):
                def __init__(self, first, second):
                    self.first = first
                    self.second = second

            Pair(1.0, [2, 3]) == Pair(1.0, [2, 3])  # True
            Pair(1.0, [2, 3]) == Pair(1.0, [2, 4])  # False
    """

    __hash__ = None  # type: ignore

    def __eq__(self, other: Any) -> bool:
        """
        Compare this object with another for equality by checking equality of all attributes.

        :param other: The object to compare with
        :return: True if the objects are equal, False otherwise
        """

        if not isinstance(other, self.__class__):
            return NotImplemented

        if not set(self.__dict__.keys()) == set(other.__dict__.keys()):
            return False

        comp_dict = self.comparison_dictionary(other)

        if all(comp_dict.values()):
            return True

        _LOGGER.debug('Not equal in some attributes: %s', comp_dict)
        return False

    @staticmethod
    def _value_comparison(val1: Any, val2: Any) -> bool:
        """
        Compare two values, handling array-like objects.

        This can be overriden if need be.

        :param val1: First value to compare
        :param val2: Second value to compare
        :return: True if values are equal, False otherwise
        """
        if isinstance(val1, (np.ndarray, list, tuple)) and isinstance(val2, (np.ndarray, list, tuple)):
            try:
                return bool(np.allclose(val1, val2))
            except TypeError:
                # Fall back to regular equality for non-numeric arrays
                return bool(np.all(val1 == val2))
        return bool(val1 == val2)

    def comparison_dictionary(self, other: Self) -> dict[str, bool]:
        """
        Compares each attribute of self to other and stores the result in a dict mapping the attribute to the
        comparison result.

        This assumes that other and self are the same type and have the same attributes.

        :param other: The other instance to compare with
        :return: A dictionary mapping attribute names to comparison results
        """

        return {
            key: self._value_comparison(getattr(self, key), getattr(other, key))
            for key in self.__dict__.keys()
        }
