import numpy as np

from eulerkit._typing import SCALAR_OR_ARRAY, ARRAY_LIKE, DOUBLE_ARRAY
from eulerkit.rotations.core._helpers import _check_vector_array_and_shape


__all__ = ["trans_x", "trans_y", "trans_z", "trans_axis", "elementary_quaternion", "skew"]


def _angle_terms(theta: SCALAR_OR_ARRAY) -> tuple[DOUBLE_ARRAY, DOUBLE_ARRAY, DOUBLE_ARRAY, DOUBLE_ARRAY]:
    # ensure we have an array of theta(s)
    theta = np.atleast_1d(np.asarray(theta, dtype=np.float64)).flatten()

    return np.ones(theta.shape), np.zeros(theta.shape), np.cos(theta), np.sin(theta)


def trans_x(theta: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    r"""
    This function forms the transformation matrix for a frame rotated about its x axis by angle theta.

    Mathematically this matrix is defined as:

    .. math::
        \mathbf{T}_x(\theta)=\left[\begin{array}{ccc} 1 & 0 & 0 \\
        0 & \text{cos}(\theta) & \text{sin}(\theta) \\
        0 & -\text{sin}(\theta) & \text{cos}(\theta) \end{array}\right]

    which transforms the coordinates of a vector expressed in the original frame into the rotated frame.

    Theta should be in units of radians and can be a scalar or a vector.  If theta is a vector then each theta value
    will have a corresponding matrix down the first axis of the output.  For example::

        >>> from eulerkit.rotations import trans_x
        >>> trans_x([2, 0.5])
        array([[[ 1.        ,  0.        ,  0.        ],
                [ 0.        , -0.41614684,  0.90929743],
                [ 0.        , -0.90929743, -0.41614684]],
               [[ 1.        ,  0.        ,  0.        ],
                [ 0.        ,  0.87758256,  0.47942554],
                [ 0.        , -0.47942554,  0.87758256]]])

    :param theta: The angles to form the transformation matrix(ces) for
    :return: The transformation matrix(ces) corresponding to the rotation angle(s)
    """

    ones, zeros, ctheta, stheta = _angle_terms(theta)

    return np.vstack([ones, zeros, zeros, zeros, ctheta, stheta, zeros, -stheta, ctheta]).T.reshape(-1, 3, 3).squeeze()


def trans_y(theta: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    r"""
    This function forms the transformation matrix for a frame rotated about its y axis by angle theta.

    .. math::
        \mathbf{T}_y(\theta)=\left[\begin{array}{ccc} \text{cos}(\theta) & 0 & -\text{sin}(\theta) \\
        0 & 1 & 0 \\
        \text{sin}(\theta) & 0 & \text{cos}(\theta) \end{array}\right]

    Theta is handled the same way as in :func:`trans_x`.

    :param theta: The angles to form the transformation matrix(ces) for
    :return: The transformation matrix(ces) corresponding to the rotation angle(s)
    """

    ones, zeros, ctheta, stheta = _angle_terms(theta)

    return np.vstack([ctheta, zeros, -stheta, zeros, ones, zeros, stheta, zeros, ctheta]).T.reshape(-1, 3, 3).squeeze()


def trans_z(theta: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    r"""
    This function forms the transformation matrix for a frame rotated about its z axis by angle theta.

    .. math::
        \mathbf{T}_z(\theta)=\left[\begin{array}{ccc} \text{cos}(\theta) & \text{sin}(\theta) & 0 \\
        -\text{sin}(\theta) & \text{cos}(\theta) & 0 \\
        0 & 0 & 1 \end{array}\right]

    Theta is handled the same way as in :func:`trans_x`.

    :param theta: The angles to form the transformation matrix(ces) for
    :return: The transformation matrix(ces) corresponding to the rotation angle(s)
    """

    ones, zeros, ctheta, stheta = _angle_terms(theta)

    return np.vstack([ctheta, stheta, zeros, -stheta, ctheta, zeros, zeros, zeros, ones]).T.reshape(-1, 3, 3).squeeze()


_TRANSFORMS = (trans_x, trans_y, trans_z)


def trans_axis(axis: int, theta: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    """
    Forms the elementary transformation matrix(ces) about axis ``axis`` (X=0, Y=1, Z=2).

    :param axis: the index of the axis to rotate about
    :param theta: The angles to form the transformation matrix(ces) for
    :return: The transformation matrix(ces) corresponding to the rotation angle(s)
    :raises ValueError: if axis is not 0, 1, or 2
    """

    if axis not in (0, 1, 2):
        raise ValueError(f'The axis must be 0, 1, or 2.  You entered {axis}')

    return _TRANSFORMS[axis](theta)


def elementary_quaternion(axis: int, theta: SCALAR_OR_ARRAY) -> DOUBLE_ARRAY:
    r"""
    Forms the quaternion corresponding to :func:`trans_axis` for the same axis and angle.

    The quaternion is

    .. math::
        \mathbf{q}=\left[\begin{array}{c} -\text{sin}(\frac{\theta}{2})\hat{\mathbf{e}}_{axis} \\
        \text{cos}(\frac{\theta}{2})\end{array}\right]

    where :math:`\hat{\mathbf{e}}_{axis}` is the unit vector along the requested axis.  If theta is a vector then the
    quaternions are returned as the columns of a 4xn array.

    :param axis: the index of the axis to rotate about (X=0, Y=1, Z=2)
    :param theta: the rotation angle(s) in radians
    :return: the elementary quaternion(s)
    :raises ValueError: if axis is not 0, 1, or 2
    """

    if axis not in (0, 1, 2):
        raise ValueError(f'The axis must be 0, 1, or 2.  You entered {axis}')

    half_theta = 0.5 * np.asarray(theta, dtype=np.float64)

    quaternion = np.zeros((4,) + half_theta.shape)

    quaternion[axis] = -np.sin(half_theta)
    quaternion[-1] = np.cos(half_theta)

    return quaternion


def skew(vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
    r"""
    This function returns a numpy array with the skew symmetric cross product matrix for vector.

    The skew symmetric cross product matrix is defined such that:

    .. math::
        \mathbf{a}\times\mathbf{b}=\left[\mathbf{a}\times\right]\mathbf{b} \\
        \left[\mathbf{a}\times\right] = \left[\begin{array}{ccc} 0 & -a_3 & a_2 \\
        a_3 & 0 & -a_1 \\
        -a_2 & a_1 & 0 \end{array}\right]

    This function is vectorized, therefore you can input multiple vectors as a 3xn array where each column is an
    independent vector.  The resulting skew matrix output will be nx3x3 where the first axis stores each matrix

    :param vector: The vector to compute a skew symmetric matrix for
    :return: The skew symmetric cross product matrix(ces) corresponding to the vector(s)
    """

    vector = _check_vector_array_and_shape(vector)

    if vector.ndim > 1:
        zeros = np.zeros(vector.shape[-1])

    else:
        zeros = 0

    return np.array([zeros, -vector[2], vector[1],
                     vector[2], zeros, -vector[0],
                     -vector[1], vector[0], zeros]).T.reshape(-1, 3, 3).squeeze()
