# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

from typing import Self

import copy

import numpy as np

from eulerkit._typing import ARRAY_LIKE, DOUBLE_ARRAY, SEQUENCE_LIKE

from eulerkit.rotations.core.conversions import (euler_to_quaternion, quaternion_to_matrix, matrix_to_quaternion)
from eulerkit.rotations.core.quaternion_math import quaternion_inverse, quaternion_multiplication, quaternion_normalize
from eulerkit.rotations.core.sequences import EulerSequence
from eulerkit.rotations.core.sequences import euler_sequence as to_euler_sequence
from eulerkit.rotations.core._helpers import _check_vector_array_and_shape
from eulerkit.rotations.extractor import EulerAngleExtractor


class Orientation:
    """
    A class to represent an orientation along with the Euler sequence it is expressed in.

    The orientation is available as a quaternion (:attr:`quaternion`), a transformation matrix (:attr:`matrix`), and a
    set of Euler angles in the current sequence (:attr:`euler_angles`).  Each representation is computed on demand and
    cached until the orientation changes.  Setting any of them updates the whole object.  Changing
    :attr:`euler_sequence` keeps the orientation and re-expresses the angles in the new sequence::

        >>> from eulerkit.rotations import Orientation
        >>> orientation = Orientation('xyz', [0.1, 0.2, 0.3])
        >>> orientation.euler_sequence = "zyx"
        >>> orientation.euler_sequence
        <EulerSequence.ZYX: 5>

    The multiplication operator composes orientations the same way their transformation matrices compose, so that
    ``(b2c * a2b).matrix`` is ``b2c.matrix @ a2b.matrix``.

    Unlike the functions in :mod:`.euler_angles`, this class raises an :class:`.InvalidSequenceError` when it is given
    an invalid Euler sequence.
    """

    def __init__(self, euler_sequence: SEQUENCE_LIKE = EulerSequence.XYZ, euler_angles: ARRAY_LIKE | None = None, *,
                 extractor: EulerAngleExtractor | None = None):
        """
        :param euler_sequence: The Euler sequence to express the orientation in
        :param euler_angles: The Euler angles in radians.  If ``None`` the orientation is the identity.
        :param extractor: The extractor to use when computing Euler angles.  If ``None`` a default extractor is used.
        :raises InvalidSequenceError: if the Euler sequence is invalid
        """

        self._euler_sequence = to_euler_sequence(euler_sequence)

        self._extractor = extractor if extractor is not None else EulerAngleExtractor()

        # initialize the attributes
        self._quaternion = np.array([0, 0, 0, 1.0])
        self._matrix: DOUBLE_ARRAY | None = None
        self._euler_angles: DOUBLE_ARRAY | None = None
        self._mupdate = True
        self._eupdate = True

        if euler_angles is not None:
            self.euler_angles = euler_angles

    @classmethod
    def from_matrix(cls, matrix: ARRAY_LIKE, euler_sequence: SEQUENCE_LIKE = EulerSequence.XYZ, *,
                    extractor: EulerAngleExtractor | None = None) -> Self:
        """
        Creates an orientation from a transformation matrix.

        :param matrix: the 3x3 transformation matrix
        :param euler_sequence: The Euler sequence to express the orientation in
        :param extractor: The extractor to use when computing Euler angles
        :return: the new orientation
        """

        orientation = cls(euler_sequence, extractor=extractor)
        orientation.matrix = matrix

        return orientation

    @classmethod
    def from_quaternion(cls, quaternion: ARRAY_LIKE, euler_sequence: SEQUENCE_LIKE = EulerSequence.XYZ, *,
                        extractor: EulerAngleExtractor | None = None) -> Self:
        """
        Creates an orientation from a quaternion.

        :param quaternion: the length 4 quaternion [q_vx, q_vy, q_vz, q_s]
        :param euler_sequence: The Euler sequence to express the orientation in
        :param extractor: The extractor to use when computing Euler angles
        :return: the new orientation
        """

        orientation = cls(euler_sequence, extractor=extractor)
        orientation.quaternion = quaternion

        return orientation

    @property
    def euler_sequence(self) -> EulerSequence:
        """
        The Euler sequence the orientation is expressed in.

        Setting this does not change the orientation, only the sequence :attr:`euler_angles` are expressed in.  It
        accepts anything :func:`.euler_sequence` does and raises :class:`.InvalidSequenceError` for anything else.
        """

        return self._euler_sequence

    @euler_sequence.setter
    def euler_sequence(self, value: SEQUENCE_LIKE):

        new_sequence = to_euler_sequence(value)

        if new_sequence != self._euler_sequence:
            self._euler_sequence = new_sequence
            self._eupdate = True

    @property
    def quaternion(self) -> DOUBLE_ARRAY:
        """
        The quaternion [q_vx, q_vy, q_vz, q_s] representation of the orientation.

        When setting, the input should have a length of 4.  It is normalized to unit length with a non-negative scalar
        before being stored.
        """

        return self._quaternion

    @quaternion.setter
    def quaternion(self, data: ARRAY_LIKE):

        data = np.asanyarray(data, dtype=np.float64).ravel()

        if data.size != 4:
            raise ValueError('The quaternion must be length 4')

        self._quaternion = quaternion_normalize(data)

        self._mupdate = True
        self._eupdate = True

    @property
    def matrix(self) -> DOUBLE_ARRAY:
        """
        The transformation matrix representation of the orientation.

        When setting, the input should be a 3x3 orthonormal matrix.  This is not checked.
        """

        if self._mupdate:
            self._matrix = quaternion_to_matrix(self._quaternion)
            self._mupdate = False

        assert self._matrix is not None, "the matrix attribute is somehow None but _mupdate is set to false"
        return self._matrix

    @matrix.setter
    def matrix(self, val: ARRAY_LIKE):

        if np.shape(val) != (3, 3):
            raise ValueError('The matrix must be 3x3')

        self.quaternion = matrix_to_quaternion(val)

        self._matrix = np.array(val, dtype=np.float64)

        self._mupdate = False

    @property
    def euler_angles(self) -> DOUBLE_ARRAY:
        """
        The Euler angles (in radians) representing the orientation in :attr:`euler_sequence`.

        When the angles are computed from another representation they come from :meth:`.EulerAngleExtractor.extract`,
        so in gimbal lock the third angle is 0.  Angles that are set directly are returned as they were given until the
        orientation or sequence changes.
        """

        if self._eupdate:
            self._euler_angles = self._extractor.extract(self.matrix, self._euler_sequence).unwrap()
            self._eupdate = False

        assert self._euler_angles is not None, "the angles attribute is somehow None but _eupdate is set to false"
        return self._euler_angles

    @euler_angles.setter
    def euler_angles(self, val: ARRAY_LIKE):

        angles = np.asanyarray(val, dtype=np.float64).ravel()

        if angles.size != 3:
            raise ValueError('There must be exactly 3 euler angles')

        self.quaternion = euler_to_quaternion(self._euler_sequence, angles).unwrap()

        self._euler_angles = angles
        self._eupdate = False

    def transform(self, vector: ARRAY_LIKE) -> DOUBLE_ARRAY:
        """
        Transforms the vector(s) (3 or 3xn) using the transformation matrix of this orientation.

        :param vector: the vector(s) to transform
        :return: the transformed vector(s)
        """

        return self.matrix @ _check_vector_array_and_shape(vector)

    def inv(self) -> 'Orientation':
        """
        This method returns the inverse of the current instance as a new ``Orientation`` in the same sequence.

        :return: The inverse orientation
        """

        return Orientation.from_quaternion(quaternion_inverse(self.quaternion), self._euler_sequence,
                                           extractor=self._extractor)

    def copy(self) -> 'Orientation':
        """
        Returns a deep copy of self.

        :return: A deep copy of self breaking all mutability
        """

        return copy.deepcopy(self)

    def __eq__(self, other) -> bool:

        if not isinstance(other, Orientation):
            return NotImplemented

        # compare the matrices since q and -q are the same orientation
        return bool(np.allclose(self.matrix, other.matrix, rtol=0, atol=1e-12))

    def __mul__(self, other: 'Orientation') -> 'Orientation':

        if isinstance(other, Orientation):

            return Orientation.from_quaternion(quaternion_multiplication(self.quaternion, other.quaternion),
                                               self._euler_sequence, extractor=self._extractor)

        else:

            return NotImplemented

    def __repr__(self) -> str:
        return 'Orientation({0!r}, {1!r})'.format(self._euler_sequence.order, self.euler_angles)

    def __str__(self) -> str:
        return '{0}: {1}'.format(self._euler_sequence.name, self.euler_angles)
