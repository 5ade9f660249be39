# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

"""
The user facing entry points for converting between Euler angles, quaternions, and transformation matrices.

Each function here wraps one of the conversions in :mod:`eulerkit.rotations.core.conversions` and follows the same
contract:

* if the conversion succeeds the result is written into ``out`` (when it is supplied, in which case ``out`` is
  returned) or returned as a new array.
* if the Euler sequence is invalid a single error is logged to this module's logger identifying the offending value,
  ``out`` is left exactly as it was, and ``None`` is returned.  Nothing is raised.

For example::

    >>> import numpy as np
    >>> from eulerkit.rotations import build_matrix, extract_angles
    >>> matrix = build_matrix('zyx', [0.1, 0.2, 0.3])
    >>> extract_angles(matrix, 'zyx')
    array([0.1, 0.2, 0.3])
    >>> angles = np.zeros(3)
    >>> extract_angles(matrix, 12, out=angles) is None
    True
    >>> angles
    array([0., 0., 0.])

If you would rather have an exception, use the core functions and call :meth:`.ConversionResult.unwrap`.
"""

import logging

import numpy as np

from eulerkit._typing import ARRAY_LIKE, DOUBLE_ARRAY, SEQUENCE_LIKE

from eulerkit.rotations.core.conversions import (euler_to_quaternion, euler_to_matrix, matrix_to_euler,
                                                 quaternion_to_euler)
from eulerkit.rotations.core.results import ConversionResult
from eulerkit.rotations.extractor import EulerAngleExtractor


__all__ = ['build_quaternion', 'build_matrix', 'extract_angles', 'extract_angles_from_quaternion']


_LOGGER: logging.Logger = logging.getLogger(__name__)
"""
The logger to use to report invalid Euler sequences
"""


def _deliver(result: ConversionResult[DOUBLE_ARRAY], out: np.ndarray | None, action: str) -> DOUBLE_ARRAY | None:
    """
    Reports a failed conversion or hands the converted value back through ``out``.
    """

    if result.error is not None:
        _LOGGER.error(f'Unable to {action}.  {result.error}')
        return None

    value = result.unwrap()

    if out is None:
        return value

    np.copyto(out, value)

    return out


def build_quaternion(sequence: SEQUENCE_LIKE, angles: ARRAY_LIKE,
                     out: np.ndarray | None = None) -> DOUBLE_ARRAY | None:
    """
    Computes the quaternion [q_vx, q_vy, q_vz, q_s] equivalent to the Euler angles.

    See :func:`.euler_to_quaternion` for details.

    :param sequence: The Euler sequence the angles are given in
    :param angles: The Euler angles in radians (3 or 3xn)
    :param out: An optional array to write the quaternion(s) into
    :return: The quaternion(s), or ``None`` if the sequence is invalid
    """

    return _deliver(euler_to_quaternion(sequence, angles), out, 'build the quaternion')


def build_matrix(sequence: SEQUENCE_LIKE, angles: ARRAY_LIKE,
                 out: np.ndarray | None = None) -> DOUBLE_ARRAY | None:
    """
    Computes the transformation matrix equivalent to the Euler angles.

    See :func:`.euler_to_matrix` for details.

    :param sequence: The Euler sequence the angles are given in
    :param angles: The Euler angles in radians (3 or 3xn)
    :param out: An optional array to write the matrix(ces) into
    :return: The transformation matrix(ces), or ``None`` if the sequence is invalid
    """

    return _deliver(euler_to_matrix(sequence, angles), out, 'build the transformation matrix')


def extract_angles(matrix: ARRAY_LIKE, sequence: SEQUENCE_LIKE,
                   out: np.ndarray | None = None,
                   extractor: EulerAngleExtractor | None = None) -> DOUBLE_ARRAY | None:
    """
    Extracts the Euler angles in ``sequence`` from the transformation matrix(ces).

    See :func:`.matrix_to_euler` for details, including the handling of gimbal lock.

    :param matrix: The transformation matrix(ces) to decompose
    :param sequence: The Euler sequence to extract
    :param out: An optional array to write the angles into
    :param extractor: An optional configured extractor.  If ``None`` the default gimbal lock threshold is used.
    :return: The angles (first, theta, third) in radians, or ``None`` if the sequence is invalid
    """

    if extractor is None:
        result = matrix_to_euler(matrix, sequence)
    else:
        result = extractor.extract(matrix, sequence)

    return _deliver(result, out, 'extract the euler angles')


def extract_angles_from_quaternion(quaternion: ARRAY_LIKE, sequence: SEQUENCE_LIKE,
                                   out: np.ndarray | None = None,
                                   extractor: EulerAngleExtractor | None = None) -> DOUBLE_ARRAY | None:
    """
    Extracts the Euler angles in ``sequence`` from the quaternion(s).

    :param quaternion: The quaternion(s) to decompose
    :param sequence: The Euler sequence to extract
    :param out: An optional array to write the angles into
    :param extractor: An optional configured extractor.  If ``None`` the default gimbal lock threshold is used.
    :return: The angles (first, theta, third) in radians, or ``None`` if the sequence is invalid
    """

    if extractor is None:
        result = quaternion_to_euler(quaternion, sequence)
    else:
        result = extractor.extract_from_quaternion(quaternion, sequence)

    return _deliver(result, out, 'extract the euler angles')
