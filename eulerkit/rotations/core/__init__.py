"""
This package contains the pure mathematical core of the rotation routines: the Euler sequence table, the elementary
transformations, quaternion algebra, and the conversions between representations.  It has no dependencies on the
higher level rotation modules so that they can build on it without circular imports.  Nothing in this package logs.
"""

import eulerkit.rotations.core.conversions
import eulerkit.rotations.core.elementals
import eulerkit.rotations.core.quaternion_math
import eulerkit.rotations.core.results
import eulerkit.rotations.core.sequences

from eulerkit.rotations.core.conversions import (DEFAULT_GIMBAL_LOCK_THRESHOLD,
                                                 euler_to_quaternion, euler_to_matrix, matrix_to_euler,
                                                 quaternion_to_euler, quaternion_to_matrix, matrix_to_quaternion)

from eulerkit.rotations.core.elementals import trans_x, trans_y, trans_z, trans_axis, elementary_quaternion, skew

from eulerkit.rotations.core.quaternion_math import quaternion_normalize, quaternion_inverse, quaternion_multiplication

from eulerkit.rotations.core.results import InvalidSequenceError, ConversionResult

from eulerkit.rotations.core.sequences import (EulerSequence, SequenceDescriptor, SEQUENCE_TABLE, euler_sequence,
                                               descriptor)

__all__ = ['DEFAULT_GIMBAL_LOCK_THRESHOLD',
           'euler_to_quaternion', 'euler_to_matrix', 'matrix_to_euler',
           'quaternion_to_euler', 'quaternion_to_matrix', 'matrix_to_quaternion',
           'trans_x', 'trans_y', 'trans_z', 'trans_axis', 'elementary_quaternion', 'skew',
           'quaternion_normalize', 'quaternion_inverse', 'quaternion_multiplication',
           'InvalidSequenceError', 'ConversionResult',
           'EulerSequence', 'SequenceDescriptor', 'SEQUENCE_TABLE', 'euler_sequence', 'descriptor']
