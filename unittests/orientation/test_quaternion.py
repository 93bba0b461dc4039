from unittest import TestCase

import numpy as np

from orientation import Quaternion, EulerAngles, RotationMatrix, Direction, ToleranceOptions


class TestQuaternion(TestCase):

    def check_quaternion(self, quaternion, expected, decimal=6):

        self.assertIsInstance(quaternion, Quaternion)
        np.testing.assert_array_almost_equal(quaternion.as_array(), expected, decimal=decimal)

    def test_init(self):

        self.check_quaternion(Quaternion(), [1, 0, 0, 0])
        self.check_quaternion(Quaternion.identity(), [1, 0, 0, 0])
        self.check_quaternion(Quaternion(1, 2, 3, 4), [1, 2, 3, 4])
        self.check_quaternion(Quaternion.from_array([0.5, 0.5, 0.5, 0.5]), [0.5, 0.5, 0.5, 0.5])
        self.check_quaternion(Quaternion.from_array(np.array([[0.5, 0.5], [0.5, 0.5]])), [0.5, 0.5, 0.5, 0.5])

        with self.assertRaises(ValueError):
            Quaternion.from_array([1, 0, 0])

    def test_components(self):

        quaternion = Quaternion(1, 2, 3, 4)

        self.assertEqual(quaternion.w, 1)
        self.assertEqual(quaternion.x, 2)
        self.assertEqual(quaternion.y, 3)
        self.assertEqual(quaternion.z, 4)

        np.testing.assert_array_equal(quaternion.vector, [2, 3, 4])

    def test_repr(self):

        self.assertEqual(repr(Quaternion()), 'Quaternion(w=1.0, x=0.0, y=0.0, z=0.0)')

    def test_equality(self):

        self.assertEqual(Quaternion(1, 2, 3, 4), Quaternion(1, 2, 3, 4))
        self.assertNotEqual(Quaternion(1, 2, 3, 4), Quaternion(1, 2, 3, 5))

    def test_elementals(self):

        self.check_quaternion(Quaternion.about_x(np.pi / 2), [np.sqrt(2) / 2, np.sqrt(2) / 2, 0, 0])
        self.check_quaternion(Quaternion.about_y(np.pi / 2), [np.sqrt(2) / 2, 0, np.sqrt(2) / 2, 0])
        self.check_quaternion(Quaternion.about_z(np.pi / 2), [np.sqrt(2) / 2, 0, 0, np.sqrt(2) / 2])

    def test_rotate_vector(self):

        np.testing.assert_array_almost_equal(Quaternion.about_y(np.pi / 2).rotate_vector([0, 0, 1]), [1, 0, 0])
        np.testing.assert_array_almost_equal(Quaternion.about_x(np.pi / 2).rotate_vector([0, 1, 0]), [0, 0, 1])
        np.testing.assert_array_almost_equal(Quaternion.about_z(np.pi / 2).rotate_vector([1, 0, 0]), [0, 1, 0])

        with self.assertRaises(ValueError):
            Quaternion().rotate_vector([1, 2])

    def test_double_cover(self):

        quaternion = EulerAngles(0.4, -1.1, 2.0).to_quaternion()
        negated = -quaternion

        self.check_quaternion(negated, -quaternion.as_array())

        np.testing.assert_array_almost_equal(quaternion.rotate_vector([1, 2, 3]), negated.rotate_vector([1, 2, 3]))
        np.testing.assert_array_almost_equal(quaternion.to_euler_angles().as_array(),
                                             negated.to_euler_angles().as_array())

    def test_axis_angle(self):

        axis = np.array([1, 2, 2]) / 3

        quaternion = Quaternion.from_axis_angle(axis, 0.8)

        self.check_quaternion(quaternion, np.hstack([np.cos(0.4), np.sin(0.4) * axis]))
        self.assertAlmostEqual(quaternion.norm(), 1)
        self.assertAlmostEqual(quaternion.get_rotation_angle(), 0.8)
        np.testing.assert_array_almost_equal(quaternion.get_rotation_axis(), axis)

        with self.assertRaises(ValueError):
            Quaternion.from_axis_angle([0, 0, 0], 0.8)

    def test_rotation_angle_range(self):

        self.assertEqual(Quaternion().get_rotation_angle(), 0.0)
        self.assertAlmostEqual(Quaternion(-1, 0, 0, 0).get_rotation_angle(), 2 * np.pi)
        self.assertAlmostEqual(Quaternion.about_x(3 * np.pi / 2).get_rotation_angle(), 3 * np.pi / 2)

    def test_identity_axis(self):

        np.testing.assert_array_equal(Quaternion().get_rotation_axis(), [1, 0, 0])
        np.testing.assert_array_equal(Quaternion.about_z(1e-7).get_rotation_axis(), [1, 0, 0])

        np.testing.assert_array_almost_equal(Quaternion.about_z(1e-3).get_rotation_axis(), [0, 0, 1])

        np.testing.assert_array_equal(
            Quaternion.about_z(1e-3).get_rotation_axis(ToleranceOptions(identity_axis_tolerance=1e-3)), [1, 0, 0]
        )

    def test_multiply(self):

        self.check_quaternion(Quaternion.about_y(0.3) * Quaternion.about_y(0.5), Quaternion.about_y(0.8).as_array())

        outer = Quaternion.about_y(np.pi / 2)
        inner = Quaternion.about_x(np.pi / 2)

        product = outer * inner

        self.check_quaternion(Quaternion.multiply(outer, inner), product.as_array())

        # the inner rotation is applied first
        np.testing.assert_array_almost_equal(product.rotate_vector([0, 1, 0]),
                                             outer.rotate_vector(inner.rotate_vector([0, 1, 0])))
        np.testing.assert_array_almost_equal(product.rotate_vector([0, 1, 0]), [1, 0, 0])

        with self.assertRaises(TypeError):
            outer * 2

    def test_euler_composition(self):

        angles = EulerAngles(0.4, 0.3, 1.1)

        composed = Quaternion.about_y(0.4) * Quaternion.about_x(-0.3) * Quaternion.about_z(1.1)

        self.check_quaternion(composed, angles.to_quaternion().as_array())

    def test_conjugate_inverse(self):

        quaternion = EulerAngles(0.4, -1.1, 2.0).to_quaternion()

        self.check_quaternion(quaternion.conjugate(), [quaternion.w, -quaternion.x, -quaternion.y, -quaternion.z])
        self.check_quaternion(quaternion * quaternion.conjugate(), [1, 0, 0, 0])
        self.check_quaternion(quaternion.inverse(), quaternion.conjugate().as_array())

        self.check_quaternion(Quaternion(2, 0, 0, 0).inverse(), [0.5, 0, 0, 0])
        self.check_quaternion(Quaternion(0, 0, 2, 0) * Quaternion(0, 0, 2, 0).inverse(), [1, 0, 0, 0])

    def test_inverse_zero(self):

        zero = Quaternion(0, 0, 0, 0)

        with self.assertLogs('orientation.quaternion', level='WARNING'):
            inverse = zero.inverse()

        self.assertIsNot(inverse, zero)
        np.testing.assert_array_equal(inverse.as_array(), [0, 0, 0, 0])
        self.assertFalse(np.any(np.isnan(inverse.as_array())))

    def test_normalize(self):

        quaternion = Quaternion(2, 0, 0, 0)

        normalized = quaternion.normalized()

        self.check_quaternion(quaternion, [2, 0, 0, 0])
        self.check_quaternion(normalized, [1, 0, 0, 0])

        quaternion.normalize()

        self.check_quaternion(quaternion, [1, 0, 0, 0])

        zero = Quaternion(0, 0, 0, 0)

        with self.assertLogs('orientation.core.quaternion_math', level='WARNING'):
            zero.normalize()

        self.check_quaternion(zero, [0, 0, 0, 0])

    def test_dot(self):

        self.assertEqual(Quaternion(1, 2, 3, 4).dot(Quaternion(4, 3, 2, 1)), 20.0)

        quaternion = Quaternion.about_z(0.4)

        self.assertAlmostEqual(quaternion.dot(-quaternion), -1)

    def test_pow(self):

        quaternion = Quaternion.about_z(1.0)

        self.check_quaternion(quaternion.pow(0.5), Quaternion.about_z(0.5).as_array())
        self.check_quaternion(quaternion ** 2, Quaternion.about_z(2.0).as_array())

        half = quaternion ** 0.5

        self.check_quaternion(half * half, quaternion.as_array())

        self.assertEqual(Quaternion.identity().pow(3), Quaternion.identity())

    def test_slerp(self):

        start = Quaternion.about_z(0.2)
        stop = Quaternion.about_z(1.4)

        self.assertEqual(start.slerp(stop, 0), start)
        self.assertEqual(Quaternion.slerp(start, stop, 1), stop)

        self.check_quaternion(start.slerp(stop, 0.5), Quaternion.about_z(0.8).as_array())
        self.check_quaternion(start.slerp(-stop, 0.25), Quaternion.about_z(0.5).as_array())

        self.assertEqual(start.slerp(stop, 2.0), stop)

    def test_nlerp(self):

        start = Quaternion.about_z(0.2)
        stop = Quaternion.about_z(1.4)

        self.check_quaternion(start.nlerp(stop, 0.5), Quaternion.about_z(0.8).as_array())
        self.assertAlmostEqual(start.nlerp(stop, 0.3).norm(), 1)

    def test_rotation_matrix(self):

        matrix = RotationMatrix.about_z(0.4)

        self.check_quaternion(Quaternion.from_rotation_matrix(matrix), Quaternion.about_z(0.4).as_array())
        self.check_quaternion(Quaternion.from_rotation_matrix(matrix, Direction.INERTIAL_TO_OBJECT),
                              Quaternion.about_z(-0.4).as_array())

        quaternion = EulerAngles(0.4, -1.1, 2.0).to_quaternion()

        recovered = Quaternion.from_rotation_matrix(RotationMatrix.from_quaternion(quaternion))

        self.assertGreaterEqual(recovered.w, 0)
        self.check_quaternion(recovered, quaternion.as_array() * np.sign(quaternion.w))

    def test_euler_round_trip(self):

        for direction in Direction:
            with self.subTest(direction=direction):
                angles = EulerAngles(-0.9, 0.6, 0.25)

                quaternion = Quaternion.from_euler_angles(angles, direction)

                np.testing.assert_array_almost_equal(quaternion.to_euler_angles(direction).as_array(),
                                                     angles.as_array())

    def test_direction(self):

        angles = EulerAngles(-0.9, 0.6, 0.25)

        object_to_inertial = Quaternion.from_euler_angles(angles)
        inertial_to_object = Quaternion.from_euler_angles(angles, Direction.INERTIAL_TO_OBJECT)

        self.check_quaternion(inertial_to_object, object_to_inertial.conjugate().as_array())

        vector = np.array([0.3, -1.0, 2.0])

        np.testing.assert_array_almost_equal(inertial_to_object.rotate_vector(object_to_inertial.rotate_vector(vector)),
                                             vector)
