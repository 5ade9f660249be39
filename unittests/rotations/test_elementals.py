from unittest import TestCase

import numpy as np

from scipy.spatial.transform import Rotation as ScipyRotation

from eulerkit import rotations as rot


class TestTransX(TestCase):

    def test_trans_x(self):

        angles = [np.pi/2, np.pi/3, 0, -np.pi/2, [0, np.pi/2, np.pi/3]]

        mats = [[[1, 0, 0], [0, 0, 1], [0, -1, 0]],
                [[1, 0, 0], [0, 0.5, np.sqrt(3)/2], [0, -np.sqrt(3)/2, 0.5]],
                np.eye(3),
                [[1, 0, 0], [0, 0, -1], [0, 1, 0]],
                [np.eye(3),
                 [[1, 0, 0], [0, 0, 1], [0, -1, 0]],
                 [[1, 0, 0], [0, 0.5, np.sqrt(3)/2], [0, -np.sqrt(3)/2, 0.5]]]]

        for angle, solution in zip(angles, mats):

            with self.subTest(angle=angle):

                np.testing.assert_array_almost_equal(rot.trans_x(angle), solution)


class TestTransY(TestCase):

    def test_trans_y(self):

        np.testing.assert_array_almost_equal(rot.trans_y(np.pi/2), [[0, 0, -1], [0, 1, 0], [1, 0, 0]])
        np.testing.assert_array_almost_equal(rot.trans_y(np.pi/3),
                                             [[0.5, 0, -np.sqrt(3)/2], [0, 1, 0], [np.sqrt(3)/2, 0, 0.5]])
        self.assertEqual(rot.trans_y([0, 1, 2]).shape, (3, 3, 3))


class TestTransZ(TestCase):

    def test_trans_z(self):

        np.testing.assert_array_almost_equal(rot.trans_z(np.pi/2), [[0, 1, 0], [-1, 0, 0], [0, 0, 1]])
        np.testing.assert_array_almost_equal(rot.trans_z(np.pi/3),
                                             [[0.5, np.sqrt(3)/2, 0], [-np.sqrt(3)/2, 0.5, 0], [0, 0, 1]])


class TestTransAxis(TestCase):

    def test_dispatch(self):

        for axis, func, name in zip(range(3), [rot.trans_x, rot.trans_y, rot.trans_z], 'xyz'):

            with self.subTest(axis=axis):

                np.testing.assert_array_equal(rot.trans_axis(axis, 0.7), func(0.7))

                # the transformation for a frame rotated by theta is the active rotation by -theta
                np.testing.assert_allclose(rot.trans_axis(axis, 0.7),
                                           ScipyRotation.from_euler(name, -0.7).as_matrix(), atol=1e-14)

    def test_invalid_axis(self):

        with self.assertRaises(ValueError):
            rot.trans_axis(3, 0.1)

        with self.assertRaises(ValueError):
            rot.trans_axis(-1, 0.1)


class TestElementaryQuaternion(TestCase):

    def test_elementary_quaternion(self):

        np.testing.assert_array_almost_equal(rot.elementary_quaternion(0, np.pi/2),
                                             [-np.sqrt(2)/2, 0, 0, np.sqrt(2)/2])
        np.testing.assert_array_almost_equal(rot.elementary_quaternion(2, np.pi), [0, 0, -1, 0])
        np.testing.assert_array_equal(rot.elementary_quaternion(1, 0), [0, 0, 0, 1])

        quats = rot.elementary_quaternion(1, [0, np.pi])

        self.assertEqual(quats.shape, (4, 2))
        np.testing.assert_array_almost_equal(quats.T, [[0, 0, 0, 1], [0, -1, 0, 0]])

    def test_matches_matrix(self):

        for axis in range(3):
            for angle in [-2.5, -0.3, 0, 0.4, 1.9, 3.0]:

                with self.subTest(axis=axis, angle=angle):

                    np.testing.assert_allclose(rot.quaternion_to_matrix(rot.elementary_quaternion(axis, angle)),
                                               rot.trans_axis(axis, angle), atol=1e-14)

    def test_invalid_axis(self):

        with self.assertRaises(ValueError):
            rot.elementary_quaternion(5, 0.1)


class TestSkew(TestCase):

    def test_skew(self):

        skew_mat = rot.skew([1, 2, 3])

        np.testing.assert_array_equal(skew_mat, [[0, -3, 2], [3, 0, -1], [-2, 1, 0]])

        skew_mat = rot.skew([[1, 2], [2, 3], [3, 4]])

        np.testing.assert_array_equal(skew_mat, [[[0, -3, 2], [3, 0, -1], [-2, 1, 0]],
                                                 [[0, -4, 3], [4, 0, -2], [-3, 2, 0]]])

        np.testing.assert_array_almost_equal(rot.skew([1, 2, 3]) @ [4, 5, 6], np.cross([1, 2, 3], [4, 5, 6]))
