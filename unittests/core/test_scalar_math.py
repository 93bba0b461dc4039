from unittest import TestCase

import numpy as np

from orientation.core import scalar_math as sm


class TestWrapPi(TestCase):

    def test_constants(self):

        self.assertEqual(sm.PI, np.pi)
        self.assertAlmostEqual(sm.TWO_PI, 2 * np.pi)
        self.assertAlmostEqual(sm.HALF_PI, np.pi / 2)
        self.assertAlmostEqual(sm.ONE_OVER_PI * np.pi, 1)
        self.assertAlmostEqual(sm.ONE_OVER_TWO_PI * 2 * np.pi, 1)

    def test_boundaries(self):

        self.assertAlmostEqual(sm.wrap_pi(3 * np.pi), np.pi)
        self.assertAlmostEqual(sm.wrap_pi(-3 * np.pi), np.pi)

        self.assertEqual(sm.wrap_pi(np.pi), np.pi)
        self.assertEqual(sm.wrap_pi(-np.pi), np.pi)

    def test_in_range_is_exact(self):

        for angle in [0.0, 0.1, -0.1, 1.234567, -3.0, 3.14159, np.nextafter(-np.pi, 0)]:
            with self.subTest(angle=angle):
                self.assertEqual(sm.wrap_pi(angle), angle)

    def test_out_of_range(self):

        self.assertAlmostEqual(sm.wrap_pi(4.0), 4.0 - 2 * np.pi)
        self.assertAlmostEqual(sm.wrap_pi(-4.0), -4.0 + 2 * np.pi)
        self.assertAlmostEqual(sm.wrap_pi(2 * np.pi), 0.0)
        self.assertAlmostEqual(sm.wrap_pi(0.25 + 1000 * 2 * np.pi), 0.25, places=9)
        self.assertAlmostEqual(sm.wrap_pi(-0.25 - 123456 * 2 * np.pi), -0.25, places=6)

    def test_result_range(self):

        for angle in np.linspace(-50, 50, 1001):
            wrapped = sm.wrap_pi(angle)
            self.assertGreater(wrapped, -np.pi)
            self.assertLessEqual(wrapped, np.pi)
            self.assertAlmostEqual(np.cos(wrapped), np.cos(angle))
            self.assertAlmostEqual(np.sin(wrapped), np.sin(angle))

    def test_scalar_returns_float(self):

        self.assertIsInstance(sm.wrap_pi(7), float)
        self.assertIsInstance(sm.wrap_pi(0.5), float)

    def test_array(self):

        wrapped = sm.wrap_pi(np.array([3 * np.pi, -np.pi, 0.5, 7.0]))

        np.testing.assert_array_almost_equal(wrapped, [np.pi, np.pi, 0.5, 7.0 - 2 * np.pi])
        self.assertEqual(wrapped[2], 0.5)


class TestSafeAcos(TestCase):

    def test_out_of_domain(self):

        self.assertEqual(sm.safe_acos(1.0000001), 0.0)
        self.assertEqual(sm.safe_acos(-1.0000001), np.pi)
        self.assertEqual(sm.safe_acos(1.0), 0.0)
        self.assertEqual(sm.safe_acos(-1.0), np.pi)
        self.assertEqual(sm.safe_acos(15), 0.0)

    def test_in_domain(self):

        self.assertAlmostEqual(sm.safe_acos(0.5), np.pi / 3)
        self.assertAlmostEqual(sm.safe_acos(0.0), np.pi / 2)
        self.assertAlmostEqual(sm.safe_acos(-0.5), 2 * np.pi / 3)

    def test_array(self):

        np.testing.assert_array_almost_equal(sm.safe_acos([-2, -1, 0, 1, 1.5]),
                                             [np.pi, np.pi, np.pi / 2, 0, 0])
