from unittest import TestCase

from dataclasses import dataclass

import numpy as np

from orientation.utilities import UserOptions
from orientation.utilities.mixin_classes import AttributeEqualityComparison, AttributePrinting


class Pair(AttributePrinting, AttributeEqualityComparison):

    def __init__(self, first, second):
        self.first = first
        self._second = second

    @property
    def second(self):
        return self._second


class OtherPair(Pair):
    pass


@dataclass(frozen=True)
class ExampleOptions(UserOptions):

    example_var: float = 0.5

    name: str = 'example'


class TestAttributePrinting(TestCase):

    def test_repr(self):

        self.assertEqual(repr(Pair(1.5, 'a')), "Pair(first=1.5, second='a')")

    def test_str(self):

        self.assertEqual(str(Pair(1.5, 'a')), 'Pair(first=1.5, second=a)')

    def test_arrays_single_line(self):

        representation = repr(Pair(np.zeros((2, 2)), np.arange(3)))

        self.assertNotIn('\n', representation)
        self.assertEqual(representation, 'Pair(first=[[0., 0.], [0., 0.]], second=[0, 1, 2])')


class TestAttributeEqualityComparison(TestCase):

    def test_equal(self):

        self.assertEqual(Pair(1.0, [2, 3]), Pair(1.0, [2, 3]))
        self.assertEqual(Pair(1.0, np.array([2, 3])), Pair(1.0, np.array([2, 3 + 1e-12])))

    def test_not_equal(self):

        self.assertNotEqual(Pair(1.0, [2, 3]), Pair(1.0, [2, 4]))
        self.assertNotEqual(Pair(1.0, [2, 3]), Pair(2.0, [2, 3]))

    def test_other_types(self):

        self.assertNotEqual(Pair(1.0, 2.0), (1.0, 2.0))
        self.assertNotEqual(Pair(1.0, 2.0), OtherPair(1.0, 3.0))

    def test_different_attributes(self):

        extra = Pair(1.0, 2.0)
        extra.third = 3.0

        self.assertNotEqual(Pair(1.0, 2.0), extra)

    def test_comparison_dictionary(self):

        self.assertEqual(Pair(1.0, [2, 3]).comparison_dictionary(Pair(1.0, [2, 4])), {'first': True, '_second': False})

    def test_unhashable(self):

        with self.assertRaises(TypeError):
            hash(Pair(1.0, 2.0))


class TestUserOptions(TestCase):

    def test_options_dict(self):

        self.assertEqual(ExampleOptions().options_dict, {'example_var': 0.5, 'name': 'example'})
        self.assertEqual(ExampleOptions(example_var=2.0).options_dict, {'example_var': 2.0, 'name': 'example'})
