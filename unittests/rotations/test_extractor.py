from unittest import TestCase

import numpy as np

from eulerkit import rotations as rot


class TestEulerAngleExtractorOptions(TestCase):

    def test_defaults(self):

        options = rot.EulerAngleExtractorOptions()

        self.assertEqual(options.gimbal_lock_threshold, rot.DEFAULT_GIMBAL_LOCK_THRESHOLD)
        self.assertEqual(options.options_dict, {'gimbal_lock_threshold': 1e-13})

    def test_negative_threshold(self):

        with self.assertRaises(ValueError):
            rot.EulerAngleExtractorOptions(gimbal_lock_threshold=-1e-3).options_dict

        with self.assertRaises(ValueError):
            rot.EulerAngleExtractor(options=rot.EulerAngleExtractorOptions(gimbal_lock_threshold=-1e-3))


class TestEulerAngleExtractor(TestCase):

    def test_default_init(self):

        extractor = rot.EulerAngleExtractor()

        self.assertEqual(extractor.gimbal_lock_threshold, rot.DEFAULT_GIMBAL_LOCK_THRESHOLD)
        self.assertIsInstance(extractor.original_options, rot.EulerAngleExtractorOptions)

    def test_options_init(self):

        options = rot.EulerAngleExtractorOptions(gimbal_lock_threshold=1e-6)

        extractor = rot.EulerAngleExtractor(options=options)

        self.assertEqual(extractor.gimbal_lock_threshold, 1e-6)
        self.assertIs(extractor.original_options, options)

    def test_reset_settings(self):

        extractor = rot.EulerAngleExtractor(options=rot.EulerAngleExtractorOptions(gimbal_lock_threshold=1e-6))

        extractor.gimbal_lock_threshold = 0.5

        extractor.reset_settings()

        self.assertEqual(extractor.gimbal_lock_threshold, 1e-6)

    def test_independent_instances(self):

        first = rot.EulerAngleExtractor()
        second = rot.EulerAngleExtractor()

        first.gimbal_lock_threshold = 0.5

        self.assertEqual(second.gimbal_lock_threshold, rot.DEFAULT_GIMBAL_LOCK_THRESHOLD)

    def test_extract(self):

        extractor = rot.EulerAngleExtractor()

        matrix = rot.build_matrix('yxz', [0.3, -0.2, 1.1])

        result = extractor.extract(matrix, 'yxz')

        self.assertTrue(result.ok)
        np.testing.assert_allclose(result.value, [0.3, -0.2, 1.1], atol=1e-12)

        result = extractor.extract(matrix, 12)

        self.assertFalse(result.ok)
        self.assertIsInstance(result.error, rot.InvalidSequenceError)

    def test_extract_from_quaternion(self):

        extractor = rot.EulerAngleExtractor()

        quaternion = rot.build_quaternion('xzx', [0.3, 2.0, -1.1])

        np.testing.assert_allclose(extractor.extract_from_quaternion(quaternion, 'xzx').unwrap(), [0.3, 2.0, -1.1],
                                   atol=1e-12)

        self.assertFalse(extractor.extract_from_quaternion(quaternion, 'xx').ok)

    def test_threshold_changes_branch(self):

        # cos(theta) is about 1e-3
        matrix = rot.build_matrix('zyx', [0.5, np.pi/2 - 1e-3, 0.25])

        default = rot.EulerAngleExtractor()
        loose = rot.EulerAngleExtractor(options=rot.EulerAngleExtractorOptions(gimbal_lock_threshold=1e-2))

        np.testing.assert_allclose(default.extract(matrix, 'zyx').unwrap(), [0.5, np.pi/2 - 1e-3, 0.25], atol=1e-10)

        locked = loose.extract(matrix, 'zyx').unwrap()

        self.assertEqual(locked[2], 0.0)

        self.assertFalse(default.is_gimbal_locked(matrix, 'zyx'))
        self.assertTrue(loose.is_gimbal_locked(matrix, 'zyx'))

    def test_is_gimbal_locked(self):

        extractor = rot.EulerAngleExtractor()

        self.assertIs(extractor.is_gimbal_locked([[0, 1, 0], [0, 0, 1], [1, 0, 0]], 'xyz'), True)
        self.assertIs(extractor.is_gimbal_locked(np.eye(3), 'xyz'), False)

        # the identity is in gimbal lock for every astronomical sequence
        self.assertIs(extractor.is_gimbal_locked(np.eye(3), 'zxz'), True)

        matrices = rot.build_matrix('zxz', [[0.1, 0.2], [0.0, 1.0], [0.3, 0.4]])

        np.testing.assert_array_equal(extractor.is_gimbal_locked(matrices, 'zxz'), [True, False])

    def test_is_gimbal_locked_invalid_sequence(self):

        with self.assertRaises(rot.InvalidSequenceError):
            rot.EulerAngleExtractor().is_gimbal_locked(np.eye(3), 12)
