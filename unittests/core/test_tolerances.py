from unittest import TestCase

from dataclasses import FrozenInstanceError

from orientation.core.tolerances import ToleranceOptions, DEFAULT_TOLERANCES, resolve_tolerances


class TestToleranceOptions(TestCase):

    def test_defaults(self):

        options = ToleranceOptions()

        self.assertEqual(options.gimbal_lock_threshold, 0.99999)
        self.assertEqual(options.canonical_pitch_tolerance, 1e-4)
        self.assertEqual(options.slerp_linear_threshold, 0.9999)
        self.assertEqual(options.pow_identity_threshold, 0.9999)
        self.assertEqual(options.axis_unit_tolerance, 0.01)
        self.assertEqual(options.identity_axis_tolerance, 1e-12)

        self.assertEqual(options, DEFAULT_TOLERANCES)

    def test_options_dict(self):

        options = ToleranceOptions(slerp_linear_threshold=0.5)

        self.assertEqual(options.options_dict, {'gimbal_lock_threshold': 0.99999,
                                                'canonical_pitch_tolerance': 1e-4,
                                                'slerp_linear_threshold': 0.5,
                                                'pow_identity_threshold': 0.9999,
                                                'axis_unit_tolerance': 0.01,
                                                'identity_axis_tolerance': 1e-12})

    def test_frozen(self):

        with self.assertRaises(FrozenInstanceError):
            DEFAULT_TOLERANCES.gimbal_lock_threshold = 0.5

    def test_invalid(self):

        for kwargs in [{'canonical_pitch_tolerance': 0}, {'axis_unit_tolerance': -1},
                       {'gimbal_lock_threshold': 1.0}, {'slerp_linear_threshold': 1.5},
                       {'pow_identity_threshold': float('nan')}]:
            with self.subTest(**kwargs):
                with self.assertRaises(ValueError):
                    ToleranceOptions(**kwargs)

    def test_resolve(self):

        options = ToleranceOptions(gimbal_lock_threshold=0.9)

        self.assertIs(resolve_tolerances(None), DEFAULT_TOLERANCES)
        self.assertIs(resolve_tolerances(options), options)
