# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
Core conversion routines between Euler angles, quaternions, and transformation matrices

All routines are implemented purely on numpy arrays (or array like objects) and are vectorized in the same way: Euler
angles are given as 3 element arrays (or 3xn arrays with one triple per column), quaternions as 4 element arrays (or
4xn arrays), and transformation matrices as 3x3 arrays (or nx3x3 stacks down the first axis).

The routines that need an Euler sequence never raise when the sequence is invalid.  They return a
:class:`.ConversionResult` which carries either the converted value or an :class:`.InvalidSequenceError`, and they
check the sequence before doing any other work.  Malformed array shapes raise a ``ValueError``.
"""

import numpy as np

from eulerkit._typing import ARRAY_LIKE, DOUBLE_ARRAY, SEQUENCE_LIKE

from eulerkit.rotations.core._helpers import (_check_angles_array_and_shape, _check_matrix_array_and_shape,
                                              _check_quaternion_array_and_shape)
from eulerkit.rotations.core.elementals import trans_axis, elementary_quaternion, skew
from eulerkit.rotations.core.quaternion_math import quaternion_multiplication, quaternion_normalize
from eulerkit.rotations.core.results import ConversionResult, InvalidSequenceError
from eulerkit.rotations.core.sequences import SequenceDescriptor, descriptor


__all__ = ['DEFAULT_GIMBAL_LOCK_THRESHOLD',
           'euler_to_quaternion', 'euler_to_matrix', 'matrix_to_euler', 'quaternion_to_euler',
           'quaternion_to_matrix', 'matrix_to_quaternion']


DEFAULT_GIMBAL_LOCK_THRESHOLD: float = 1e-13
"""
The default threshold for deciding that a matrix is in gimbal lock.

Gimbal lock occurs when sin(theta) (aerodynamic sequences) or cos(theta) (astronomical sequences) is within this
amount of -1 or +1.  See :func:`matrix_to_euler`.
"""


def euler_to_quaternion(sequence: SEQUENCE_LIKE, angles: ARRAY_LIKE) -> ConversionResult[DOUBLE_ARRAY]:
    r"""
    This function converts Euler angles into the equivalent rotation quaternion.

    A quaternion is formed for each of the three rotations using :func:`.elementary_quaternion` and the composite is
    the reverse order product of the three

    .. math::
        \mathbf{q} = \mathbf{q}_3\otimes\mathbf{q}_2\otimes\mathbf{q}_1

    which is then normalized to remove any accumulated round off.  The sign of the scalar term is left as computed.

    :param sequence: The Euler sequence the angles are given in
    :param angles: The Euler angles in radians, in the order of the sequence (3 or 3xn)
    :return: A result holding the quaternion(s) (4 or 4xn), or an error if the sequence is invalid
    """

    try:
        info = descriptor(sequence)
    except InvalidSequenceError as error:
        return ConversionResult.failure(error)

    angles = _check_angles_array_and_shape(angles)

    quaternion = elementary_quaternion(info.axes[0], angles[0])

    # the later rotations multiply on the left
    for axis, angle in zip(info.axes[1:], angles[1:]):
        quaternion = quaternion_multiplication(elementary_quaternion(axis, angle), quaternion)

    return ConversionResult.success(quaternion_normalize(quaternion, positive_scalar=False))


def euler_to_matrix(sequence: SEQUENCE_LIKE, angles: ARRAY_LIKE) -> ConversionResult[DOUBLE_ARRAY]:
    r"""
    This function converts Euler angles into the equivalent transformation matrix.

    For a sequence about axes :math:`(i, j, k)` and angles :math:`(a, b, c)` the matrix is

    .. math::
        \mathbf{T} = \mathbf{T}_k(c)\mathbf{T}_j(b)\mathbf{T}_i(a)

    where :math:`\mathbf{T}_i` is the elementary transformation matrix about axis :math:`i` (see :func:`.trans_x`,
    :func:`.trans_y`, and :func:`.trans_z`).

    :param sequence: The Euler sequence the angles are given in
    :param angles: The Euler angles in radians, in the order of the sequence (3 or 3xn)
    :return: A result holding the transformation matrix(ces) (3x3 or nx3x3), or an error if the sequence is invalid
    """

    try:
        info = descriptor(sequence)
    except InvalidSequenceError as error:
        return ConversionResult.failure(error)

    angles = _check_angles_array_and_shape(angles)

    matrix = trans_axis(info.axes[0], angles[0])

    for axis, angle in zip(info.axes[1:], angles[1:]):
        matrix = trans_axis(axis, angle) @ matrix

    # a 3x1 input still gets a 1x3x3 stack
    if angles.ndim == 2:
        matrix = matrix.reshape(-1, 3, 3)

    return ConversionResult.success(matrix)


def _scale_estimate(matrix: DOUBLE_ARRAY, info: SequenceDescriptor) -> DOUBLE_ARRAY:
    """
    Averages the norms of the (sine, cosine) element pairs of the first and third angles.

    Conceptually this is the cosine (aerodynamic) or sine (astronomical) of the middle angle.
    """

    i0, i1, i2 = info.axes

    alt_theta_val1 = np.hypot(matrix[..., i2, i1], matrix[..., i2, info.alternate_z])
    alt_theta_val2 = np.hypot(matrix[..., i1, i0], matrix[..., info.alternate_x, i0])

    return 0.5 * (alt_theta_val1 + alt_theta_val2)


def _compute_theta(theta_val: DOUBLE_ARRAY, alt_theta_val: DOUBLE_ARRAY, is_aerodynamic: bool) -> DOUBLE_ARRAY:
    """
    Computes the middle angle from the raw signal and the magnitude estimate, picking whichever of the two is farther
    from the flat top of its sine/cosine curve.
    """

    alt_theta = np.arcsin(np.clip(alt_theta_val, -1.0, 1.0))

    use_alternate = alt_theta_val < np.abs(theta_val)

    if is_aerodynamic:
        from_alternate = np.where(theta_val < 0.0, -0.5 * np.pi + alt_theta, 0.5 * np.pi - alt_theta)
        direct = np.arcsin(np.clip(theta_val, -1.0, 1.0))

    else:
        from_alternate = np.where(theta_val < 0.0, np.pi - alt_theta, alt_theta)
        direct = np.arccos(np.clip(theta_val, -1.0, 1.0))

    return np.where(use_alternate, from_alternate, direct)


def _regular_angles(matrix: DOUBLE_ARRAY, info: SequenceDescriptor) -> tuple[DOUBLE_ARRAY, DOUBLE_ARRAY]:
    """
    Computes the first and third angles when the matrix is not in gimbal lock.
    """

    i0, i1, i2 = info.axes

    # each of these is the sine/cosine times a common factor which may carry the wrong sign
    sin_phi = matrix[..., i2, i1]
    cos_phi = matrix[..., i2, info.alternate_z]
    sin_psi = matrix[..., i1, i0]
    cos_psi = matrix[..., info.alternate_x, i0]

    if info.is_aerodynamic:
        # the sines have the wrong sign for even permutations
        if info.is_even_permutation:
            sin_phi = -sin_phi
            sin_psi = -sin_psi

    else:
        # one cosine has the wrong sign: cos_phi for even permutations, cos_psi for odd
        if info.is_even_permutation:
            cos_phi = -cos_phi
        else:
            cos_psi = -cos_psi

    return np.arctan2(sin_phi, cos_phi), np.arctan2(sin_psi, cos_psi)


def _gimbal_lock_angle(matrix: DOUBLE_ARRAY, info: SequenceDescriptor) -> DOUBLE_ARRAY:
    """
    Computes the first angle in gimbal lock, where the third angle is taken to be zero.
    """

    i1 = info.axes[1]

    sin_phi = matrix[..., i1, info.alternate_z]
    cos_phi = matrix[..., i1, i1]

    # the sine has the wrong sign for odd permutations
    if not info.is_even_permutation:
        sin_phi = -sin_phi

    return np.arctan2(sin_phi, cos_phi)


def matrix_to_euler(matrix: ARRAY_LIKE, sequence: SEQUENCE_LIKE,
                    gimbal_lock_threshold: float = DEFAULT_GIMBAL_LOCK_THRESHOLD) -> ConversionResult[DOUBLE_ARRAY]:
    r"""
    This function extracts the Euler angles in the requested sequence from a transformation matrix.

    A transformation matrix built from an XYZ sequence by :func:`euler_to_matrix` has the form

    .. math::
        \mathbf{T} = \left[\begin{array}{ccc}
        \text{cos}\psi\text{cos}\theta & \cdots & \cdots \\
        -\text{sin}\psi\text{cos}\theta & \cdots & \cdots \\
        \text{sin}\theta & -\text{cos}\theta\text{sin}\phi & \text{cos}\theta\text{cos}\phi
        \end{array}\right]

    so the [2, 0] element depends on :math:`\theta` alone, the rest of the first column on :math:`\theta` and
    :math:`\psi`, and the rest of the bottom row on :math:`\theta` and :math:`\phi`.  The same is true of every
    sequence, only the location and signs of the five key elements change.  They are located generically using the
    :class:`.SequenceDescriptor` for the sequence with axes :math:`(i_0, i_1, i_2)`:

    * :math:`T_{i_2 i_0}` is :math:`\text{sin}\theta` (even aerodynamic), :math:`-\text{sin}\theta` (odd aerodynamic),
      or :math:`\text{cos}\theta` (astronomical)
    * :math:`T_{i_2 i_1}` and :math:`T_{i_2 z'}` give :math:`\phi` and :math:`T_{i_1 i_0}` and :math:`T_{x' i_0}`
      give :math:`\psi`, where :math:`x'` and :math:`z'` are the alternate indices of the sequence.  All four are
      scaled by the same factor, the cosine (aerodynamic) or sine (astronomical) of :math:`\theta`.

    The average of the norms of the two pairs is a second estimate of that scale factor.  Near the poles the raw
    element sits on the flat top of its sine/cosine curve, so whichever of the raw element and the scale estimate is
    smaller in magnitude is used to compute :math:`\theta`.

    When the scale estimate is at most ``gimbal_lock_threshold`` the matrix is in gimbal lock and only the sum (or
    difference) of :math:`\phi` and :math:`\psi` can be determined.  In that case :math:`\psi` is set to exactly 0 and
    :math:`\phi` is computed from :math:`T_{i_1 z'}` and :math:`T_{i_1 i_1}`.  For an XYZ sequence with
    :math:`\theta=\pi/2` for instance

    .. math::
        \mathbf{T} = \left[\begin{array}{ccc}
        0 & \text{sin}(\phi+\psi) & -\text{cos}(\phi+\psi) \\
        0 & \text{cos}(\phi+\psi) & \text{sin}(\phi+\psi) \\
        1 & 0 & 0 \end{array}\right]

    The matrix is assumed to be a proper orthonormal transformation matrix.  This is not checked; violating it simply
    degrades the accuracy of the result.  The angles are not normalized to any particular range beyond what the
    formulas produce.

    This function is vectorized, therefore you can input matrix as a nx3x3 stack of transformation matrices and the
    angles will be returned as a 3xn array.

    :param matrix: The transformation matrix(ces) to decompose
    :param sequence: The Euler sequence to extract
    :param gimbal_lock_threshold: The value of the scale estimate at or below which the matrix is treated as being in
                                  gimbal lock
    :return: A result holding the angles (first, theta, third) in radians, or an error if the sequence is invalid
    """

    try:
        info = descriptor(sequence)
    except InvalidSequenceError as error:
        return ConversionResult.failure(error)

    matrix = _check_matrix_array_and_shape(matrix)

    i0, _, i2 = info.axes

    theta_val = matrix[..., i2, i0]

    alt_theta_val = _scale_estimate(matrix, info)

    # theta_val is -sin(theta) for odd aerodynamic sequences
    if info.is_aerodynamic and not info.is_even_permutation:
        theta_val = -theta_val

    theta = _compute_theta(theta_val, alt_theta_val, info.is_aerodynamic)

    phi, psi = _regular_angles(matrix, info)

    gimbal_lock = alt_theta_val <= gimbal_lock_threshold

    if np.any(gimbal_lock):
        phi = np.where(gimbal_lock, _gimbal_lock_angle(matrix, info), phi)
        psi = np.where(gimbal_lock, 0.0, psi)

    return ConversionResult.success(np.stack([phi, theta, psi]).astype(np.float64))


def quaternion_to_matrix(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function converts a quaternion into its equivalent transformation matrix.

    Quaternions are converted to transformation matrices using:

    .. math::
        \mathbf{q}=\left[\begin{array}{c}\mathbf{q}_v \\ q_s\end{array}\right] \\
        \mathbf{T} = (q_s^2-\mathbf{q}_v^T\mathbf{q}_v)\mathbf{I}_{3\times 3}+2\mathbf{q}_v\mathbf{q}_v^T+2q_s
        \left[\mathbf{q}_v\times\right]

    where :math:`\left[\bullet\times\right]` is the skew symmetric cross product matrix (see :func:`.skew`).  This
    is consistent with :func:`euler_to_quaternion` and :func:`euler_to_matrix`: the quaternion built from a set of
    Euler angles converts to the matrix built from the same angles.

    This function is vectorized, meaning that you can specify multiple quaternions to be converted by specifying
    each quaternion as a column.  The resulting matrices are stacked down the first axis.

    :param quaternion: The quaternion(s) to be converted to the transformation matrix(ces)
    :return: a numpy array containing the transformation matrix(ces)
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    # extract the scalar and vector portion of the quaternion(s)
    qs = quaternion[-1].reshape(-1, 1, 1)
    qv = quaternion[:3].reshape(3, -1)

    # form the matrix(ces)
    matrix = ((qs ** 2 - (qv * qv).sum(axis=0).reshape(-1, 1, 1)) * np.eye(3) +
              2 * np.einsum('ij,jk->jik', qv, qv.T) + 2 * qs * skew(qv).reshape(-1, 3, 3))

    # only a single quaternion (not a 4x1 stack) returns a bare 3x3 matrix
    if quaternion.ndim == 1:
        return matrix[0]

    return matrix


def matrix_to_quaternion(matrix: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function converts a transformation matrix into the equivalent quaternion.

    The largest of the trace and the three diagonal elements is used to pick which component of the quaternion to
    compute from the diagonal, with the other three components computed from sums and differences of the off
    diagonal elements.  This avoids dividing by a small number for rotations near 180 degrees.  For the trace case

    .. math::
        \mathbf{q}\propto\left[\begin{array}{c}t_{32}-t_{23} \\ t_{13}-t_{31} \\ t_{21}-t_{12} \\
        1 + \text{Tr}(\mathbf{T})\end{array}\right]

    The result is normalized to unit length with a non-negative scalar term.

    This function is vectorized, so an nx3x3 stack of matrices returns a 4xn array of quaternions.

    :param matrix: The transformation matrix(ces) to convert
    :return: the quaternion(s) corresponding to the matrix(ces)
    """

    matrix = _check_matrix_array_and_shape(matrix)

    stack = matrix.reshape(-1, 3, 3)

    diagonal = np.diagonal(stack, axis1=1, axis2=2)
    trace = diagonal.sum(axis=-1)

    choice = np.argmax(np.column_stack([diagonal, trace]), axis=-1)

    quaternion = np.empty((4, stack.shape[0]), dtype=np.float64)

    for i in range(3):
        j = (i + 1) % 3
        k = (i + 2) % 3

        use = choice == i
        sub = stack[use]

        quaternion[i, use] = 1 - trace[use] + 2 * sub[:, i, i]
        quaternion[j, use] = sub[:, j, i] + sub[:, i, j]
        quaternion[k, use] = sub[:, k, i] + sub[:, i, k]
        quaternion[3, use] = sub[:, k, j] - sub[:, j, k]

    use = choice == 3
    sub = stack[use]

    quaternion[0, use] = sub[:, 2, 1] - sub[:, 1, 2]
    quaternion[1, use] = sub[:, 0, 2] - sub[:, 2, 0]
    quaternion[2, use] = sub[:, 1, 0] - sub[:, 0, 1]
    quaternion[3, use] = 1 + trace[use]

    quaternion = quaternion_normalize(quaternion)

    if matrix.ndim == 2:
        return quaternion[:, 0]

    return quaternion


def quaternion_to_euler(quaternion: ARRAY_LIKE, sequence: SEQUENCE_LIKE,
                        gimbal_lock_threshold: float = DEFAULT_GIMBAL_LOCK_THRESHOLD) -> ConversionResult[DOUBLE_ARRAY]:
    """
    This function converts a quaternion to the Euler angles in the requested sequence.

    This function works by first converting the quaternion to a transformation matrix using
    :func:`quaternion_to_matrix` and then using :func:`matrix_to_euler` to find the angles.

    :param quaternion: The quaternion(s) to be converted to Euler angles
    :param sequence: The Euler sequence to extract
    :param gimbal_lock_threshold: see :func:`matrix_to_euler`
    :return: A result holding the angles, or an error if the sequence is invalid
    """

    try:
        descriptor(sequence)
    except InvalidSequenceError as error:
        return ConversionResult.failure(error)

    matrix = quaternion_to_matrix(quaternion)

    return matrix_to_euler(matrix, sequence, gimbal_lock_threshold=gimbal_lock_threshold)
