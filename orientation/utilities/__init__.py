"""
This package provides general utilities used throughout the orientation package: the :class:`.UserOptions`
configuration base and the mixin classes that give the value types their printing and comparison behavior.
"""

from orientation.utilities.options import UserOptions

__all__ = ['UserOptions']
