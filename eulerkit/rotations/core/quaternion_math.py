import numpy as np

from eulerkit._typing import ARRAY_LIKE, DOUBLE_ARRAY

from eulerkit.rotations.core._helpers import _check_quaternion_array_and_shape

__all__ = ["quaternion_normalize", "quaternion_inverse", "quaternion_multiplication"]


def quaternion_normalize(quaternion: ARRAY_LIKE, positive_scalar: bool = True) -> DOUBLE_ARRAY:
    """
    Normalizes the quaternion(s) such that the length is 1 and, optionally, the scalar term is non-negative.

    Forcing a non-negative scalar picks one of the two quaternions (:math:`\\mathbf{q}` and :math:`-\\mathbf{q}`) that
    represent the same rotation.  Pass ``positive_scalar=False`` to only scale the quaternion(s).

    The input is never modified.

    :param quaternion: the quaternion(s) to normalize
    :param positive_scalar: whether to flip quaternions with a negative scalar term
    :returns: The normalized quaternions
    """

    work_quaternion = _check_quaternion_array_and_shape(quaternion, return_copy=True)

    if positive_scalar:
        signs = np.sign(work_quaternion[-1])

        if np.shape(signs):
            signs[signs == 0] = 1
        else:
            signs = signs if signs != 0 else 1

    else:
        signs = 1

    work_quaternion *= signs / np.linalg.norm(work_quaternion, axis=0, keepdims=True)

    return work_quaternion


def quaternion_inverse(quaternion: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function provides the inverse of a rotation quaternion.

    The inverse of a rotation quaternion is defined such that
    :math:`\mathbf{q}\otimes\mathbf{q}^{-1}=\mathbf{q}_I` where
    :math:`\mathbf{q}_I=\left[\begin{array}{cccc}0&0&0&1\end{array}\right]^T` is the identity quaternion which
    corresponds to the identity matrix (or no rotation) and :math:`\otimes` indicates quaternion multiplication.
    Mathematically this corresponds to negating the vector portion of the quaternion.

    This function is vectorized, meaning that you can specify multiple rotation quaternions to be inverted by
    specifying each quaternion as a column.

    :param quaternion: The rotation quaternion(s) to be inverted
    :return: a numpy array representing the inverse quaternion corresponding to the input quaternion
    """

    # ensure the value is an array and break mutability
    quaternion = _check_quaternion_array_and_shape(quaternion, return_copy=True)

    # negate the vector portion
    quaternion[:3] *= -1

    return quaternion


def quaternion_multiplication(quaternion_1_in: ARRAY_LIKE,
                              quaternion_2_in: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function performs the hamiltonian quaternion multiplication operation.

    The multiplication is defined such that the transformation matrix of the product is the product of the
    transformation matrices, that is
    ``quaternion_to_matrix(quaternion_multiplication(q_b2c, q_a2b)) == quaternion_to_matrix(q_b2c) @
    quaternion_to_matrix(q_a2b)``.

    Mathematically this is given by:

    .. math::
        \mathbf{q}_1\otimes\mathbf{q}_2=\left[\begin{array}{c}q_{s1}\mathbf{q}_{v2} + q_{s2}\mathbf{q}_{v1} +
        \mathbf{q}_{v1}\times\mathbf{q}_{v2}\\
        q_{s1}q_{s2}-\mathbf{q}_{v1}^T\mathbf{q}_{v2}\end{array}\right]

    This function is vectorized, therefore you can input multiple quaternions as a 4xn array where each column is an
    independent quaternion.

    :param quaternion_1_in: The first quaternion to multiply
    :param quaternion_2_in: The second quaternion to multiply
    :return: The hamiltonian product of quaternion_1 and quaternion_2
    """

    quaternion_1 = _check_quaternion_array_and_shape(quaternion_1_in)
    quaternion_2 = _check_quaternion_array_and_shape(quaternion_2_in)

    qs1 = quaternion_1[-1]
    qv1 = quaternion_1[0:3]

    qs2 = quaternion_2[-1]
    qv2 = quaternion_2[0:3]

    return np.concatenate([qs1 * qv2 + qs2 * qv1 + np.cross(qv1, qv2, axis=0),
                           [qs1 * qs2 - (qv1 * qv2).sum(axis=0)]], axis=0)
