"""
This package contains helpful mixin classes to provide basic functionality for the orientation value types.
"""

from orientation.utilities.mixin_classes.attribute_equality_comparison import AttributeEqualityComparison
from orientation.utilities.mixin_classes.attribute_printing import AttributePrinting

__all__ = ["AttributeEqualityComparison", "AttributePrinting"]
