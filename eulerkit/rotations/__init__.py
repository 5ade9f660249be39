import eulerkit.rotations.core
import eulerkit.rotations.extractor
import eulerkit.rotations.euler_angles
import eulerkit.rotations.orientation

from eulerkit.rotations.core import *
from eulerkit.rotations.extractor import EulerAngleExtractor, EulerAngleExtractorOptions
from eulerkit.rotations.euler_angles import (build_quaternion, build_matrix, extract_angles,
                                             extract_angles_from_quaternion)
from eulerkit.rotations.orientation import Orientation

__all__ = ['DEFAULT_GIMBAL_LOCK_THRESHOLD',
           'euler_to_quaternion', 'euler_to_matrix', 'matrix_to_euler',
           'quaternion_to_euler', 'quaternion_to_matrix', 'matrix_to_quaternion',
           'trans_x', 'trans_y', 'trans_z', 'trans_axis', 'elementary_quaternion', 'skew',
           'quaternion_normalize', 'quaternion_inverse', 'quaternion_multiplication',
           'InvalidSequenceError', 'ConversionResult',
           'EulerSequence', 'SequenceDescriptor', 'SEQUENCE_TABLE', 'euler_sequence', 'descriptor',
           'EulerAngleExtractor', 'EulerAngleExtractorOptions',
           'build_quaternion', 'build_matrix', 'extract_angles', 'extract_angles_from_quaternion',
           'Orientation']


r"""
This package defines routines for converting between Euler angles, quaternions, and transformation matrices, as well
as a class which bundles all three representations of an orientation together.

The representations used in this package are:

.. _rotation-representation-table:

=====================  =================================================================================================
Representation         Description
=====================  =================================================================================================
quaternion             A 4 element quaternion of the form
                       :math:`\mathbf{q}=\left[\begin{array}{c} q_x \\ q_y \\ q_z \\ q_s\end{array}\right]=
                       \left[\begin{array}{c}-\text{sin}(\frac{\theta}{2})\hat{\mathbf{x}}\\
                       \text{cos}(\frac{\theta}{2})\end{array}\right]`
                       where :math:`\hat{\mathbf{x}}` is the unit axis the frame is rotated about and :math:`\theta` is
                       the angle it is rotated by.  :math:`\mathbf{q}` and :math:`-\mathbf{q}` represent the same
                       orientation.
transformation matrix  A :math:`3\times 3` orthonormal matrix :math:`\mathbf{T}` such that :math:`\mathbf{T}\mathbf{y}_A`
                       gives the coordinates in frame :math:`B` of the vector whose coordinates in frame :math:`A` are
                       :math:`\mathbf{y}_A`, where :math:`B` is frame :math:`A` rotated by the orientation.
euler angles           A sequence of 3 angles :math:`(a, b, c)` corresponding to rotations about 3 axes :math:`(i, j, k)`.
                       There are 12 sequences (see :class:`.EulerSequence`).  The angles relate to the transformation
                       matrix as :math:`\mathbf{T}=\mathbf{T}_k(c)\mathbf{T}_j(b)\mathbf{T}_i(a)` where
                       :math:`\mathbf{T}_i(\theta)` is the elementary transformation about axis :math:`i` (see
                       :func:`.trans_x`).
=====================  =================================================================================================

The three main entry points are :func:`.build_quaternion`, :func:`.build_matrix`, and :func:`.extract_angles`.  They
log (rather than raise) when given an invalid Euler sequence and leave any ``out`` argument untouched.  The
:mod:`~eulerkit.rotations.core` functions underneath them return a :class:`.ConversionResult` instead, and the
:class:`.Orientation` class raises an :class:`.InvalidSequenceError`.
"""
