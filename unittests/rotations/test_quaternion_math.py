from unittest import TestCase

import numpy as np

from eulerkit import rotations as rot


class TestQuaternionNormalize(TestCase):

    def test_quaternion_normalize(self):

        np.testing.assert_array_almost_equal(rot.quaternion_normalize([1, 2, 3, 4]), np.array([1, 2, 3, 4])/np.sqrt(30))
        np.testing.assert_array_almost_equal(rot.quaternion_normalize([1, 2, 3, -4]),
                                             -np.array([1, 2, 3, -4])/np.sqrt(30))
        np.testing.assert_array_almost_equal(rot.quaternion_normalize([1, 2, 3, -4], positive_scalar=False),
                                             np.array([1, 2, 3, -4])/np.sqrt(30))
        np.testing.assert_array_almost_equal(rot.quaternion_normalize([0, 2, 0, 0]), [0, 1, 0, 0])

        quats = rot.quaternion_normalize([[0, 1], [0, 2], [0, 3], [-2, -4]])

        np.testing.assert_array_almost_equal(quats.T, [[0, 0, 0, 1], np.array([-1, -2, -3, 4])/np.sqrt(30)])

    def test_does_not_mutate(self):

        quaternion = np.array([1., 2, 3, -4])

        rot.quaternion_normalize(quaternion)

        np.testing.assert_array_equal(quaternion, [1, 2, 3, -4])

    def test_bad_shape(self):

        with self.assertRaises(ValueError):
            rot.quaternion_normalize([1, 2, 3])


class TestQuaternionInverse(TestCase):

    def test_quaternion_inverse(self):

        qinv = rot.quaternion_inverse([1, 2, 3, 4])

        np.testing.assert_array_equal(qinv, [-1, -2, -3, 4])

        qinv = rot.quaternion_inverse([[1, 2], [2, 3], [3, 4], [4, 5]])

        np.testing.assert_array_equal(qinv.T, [[-1, -2, -3, 4], [-2, -3, -4, 5]])

    def test_inverse_is_transpose(self):

        quaternion = rot.build_quaternion('zxz', [0.3, 1.2, -2.1])

        np.testing.assert_allclose(rot.quaternion_to_matrix(rot.quaternion_inverse(quaternion)),
                                   rot.quaternion_to_matrix(quaternion).T, atol=1e-14)


class TestQuaternionMultiplication(TestCase):

    def test_quaternion_multiplication(self):

        quat_1 = [1, 0, 0, 0]
        quat_2 = [0, 1, 0, 0]

        np.testing.assert_array_equal(rot.quaternion_multiplication(quat_1, quat_2), [0, 0, 1, 0])

        quat_1 = [0, 0, 0, 1]
        quat_2 = [0.5, 0.5, 0.5, 0.5]

        np.testing.assert_array_equal(rot.quaternion_multiplication(quat_1, quat_2), quat_2)

        quat_1 = [[1, 0], [0, 0], [0, 0], [0, 1]]
        quat_2 = [[0, 0], [1, 0], [0, 0], [0, 1]]

        np.testing.assert_array_equal(rot.quaternion_multiplication(quat_1, quat_2).T, [[0, 0, 1, 0], [0, 0, 0, 1]])

    def test_composition_matches_matrices(self):

        q_a2b = rot.build_quaternion('xyz', [0.1, -0.4, 1.3])
        q_b2c = rot.build_quaternion('yxy', [2.0, 0.7, -0.2])

        np.testing.assert_allclose(rot.quaternion_to_matrix(rot.quaternion_multiplication(q_b2c, q_a2b)),
                                   rot.quaternion_to_matrix(q_b2c) @ rot.quaternion_to_matrix(q_a2b), atol=1e-14)

    def test_inverse_product_is_identity(self):

        quaternion = rot.build_quaternion('yzx', [0.5, 0.25, -1.0])

        np.testing.assert_allclose(rot.quaternion_multiplication(quaternion, rot.quaternion_inverse(quaternion)),
                                   [0, 0, 0, 1], atol=1e-14)
