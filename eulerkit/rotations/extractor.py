# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
This module provides a configurable class for extracting Euler angles from transformation matrices and quaternions.

The only setting is the gimbal lock threshold.  Each :class:`EulerAngleExtractor` holds its own copy of it, so
extractors with different thresholds can be used side by side (for instance from different threads or tests) without
affecting each other.

Example:

    >>> from eulerkit.rotations import EulerAngleExtractor, EulerAngleExtractorOptions
    >>> extractor = EulerAngleExtractor(options=EulerAngleExtractorOptions(gimbal_lock_threshold=1e-10))
    >>> extractor.extract([[0, 1, 0], [0, 0, 1], [1, 0, 0]], 'xyz').unwrap()
    array([1.57079633, 1.57079633, 0.        ])
"""

from dataclasses import dataclass

import numpy as np

from eulerkit._typing import ARRAY_LIKE, DOUBLE_ARRAY, SEQUENCE_LIKE

from eulerkit.rotations.core.conversions import (DEFAULT_GIMBAL_LOCK_THRESHOLD, matrix_to_euler, quaternion_to_euler,
                                                 _scale_estimate)
from eulerkit.rotations.core.results import ConversionResult
from eulerkit.rotations.core.sequences import descriptor
from eulerkit.rotations.core._helpers import _check_matrix_array_and_shape

from eulerkit.utilities.options import UserOptions
from eulerkit.utilities.mixin_classes.user_option_configured import UserOptionConfigured


__all__ = ['EulerAngleExtractorOptions', 'EulerAngleExtractor']


@dataclass
class EulerAngleExtractorOptions(UserOptions):
    """
    Options for configuring the :class:`EulerAngleExtractor` class.
    """

    gimbal_lock_threshold: float = DEFAULT_GIMBAL_LOCK_THRESHOLD
    """
    The value of the scale estimate of the first/third angle terms at or below which a matrix is treated as being in
    gimbal lock.

    For aerodynamic sequences the scale estimate is approximately :math:`|\\text{cos}\\theta|` and for astronomical
    sequences approximately :math:`|\\text{sin}\\theta|`.  See :func:`.matrix_to_euler` for details.
    """

    def override_options(self):
        if self.gimbal_lock_threshold < 0:
            raise ValueError(f'The gimbal lock threshold must be non-negative.  You entered {self.gimbal_lock_threshold}')


class EulerAngleExtractor(UserOptionConfigured[EulerAngleExtractorOptions], EulerAngleExtractorOptions):
    """
    Extracts Euler angles from transformation matrices and quaternions using a configurable gimbal lock threshold.

    This is a thin wrapper around :func:`.matrix_to_euler` and :func:`.quaternion_to_euler` that supplies the
    threshold held by the instance.  Like those functions the methods here return a :class:`.ConversionResult` rather
    than raising when the sequence is invalid.
    """

    def __init__(self, options: EulerAngleExtractorOptions | None = None):
        """
        :param options: the options to configure the extractor with.  If ``None`` the defaults are used.
        """

        super().__init__(EulerAngleExtractorOptions, options=options)

    def extract(self, matrix: ARRAY_LIKE, sequence: SEQUENCE_LIKE) -> ConversionResult[DOUBLE_ARRAY]:
        """
        Extracts the Euler angles in ``sequence`` from the transformation matrix(ces).

        :param matrix: The transformation matrix(ces) to decompose
        :param sequence: The Euler sequence to extract
        :return: A result holding the angles, or an error if the sequence is invalid
        """

        return matrix_to_euler(matrix, sequence, gimbal_lock_threshold=self.gimbal_lock_threshold)

    def extract_from_quaternion(self, quaternion: ARRAY_LIKE,
                                sequence: SEQUENCE_LIKE) -> ConversionResult[DOUBLE_ARRAY]:
        """
        Extracts the Euler angles in ``sequence`` from the quaternion(s).

        :param quaternion: The quaternion(s) to decompose
        :param sequence: The Euler sequence to extract
        :return: A result holding the angles, or an error if the sequence is invalid
        """

        return quaternion_to_euler(quaternion, sequence, gimbal_lock_threshold=self.gimbal_lock_threshold)

    def is_gimbal_locked(self, matrix: ARRAY_LIKE, sequence: SEQUENCE_LIKE) -> bool | np.ndarray:
        """
        Checks whether the matrix(ces) would be treated as being in gimbal lock for ``sequence``.

        :param matrix: The transformation matrix(ces) to check
        :param sequence: The Euler sequence of interest
        :return: ``True`` where the matrix is in gimbal lock
        :raises InvalidSequenceError: if the sequence is invalid
        """

        info = descriptor(sequence)

        matrix = _check_matrix_array_and_shape(matrix)

        locked = _scale_estimate(matrix, info) <= self.gimbal_lock_threshold

        if np.ndim(locked) == 0:
            return bool(locked)

        return locked
