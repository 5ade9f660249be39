# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

r"""
The Euler sequences understood by eulerkit and the table of facts about each of them.

There are 12 Euler sequences, split into two families:

* the *aerodynamic* sequences use three distinct axes (``XYZ`` is the familiar roll, pitch, yaw order)
* the *astronomical* sequences rotate about the same axis first and last (``ZXZ`` for instance)

Each :class:`EulerSequence` has an entry in :data:`SEQUENCE_TABLE` describing where the sine and cosine terms of
each angle land in a transformation matrix built from that sequence.  The entries are algebraic facts about the axis
order, not tuning parameters.  See :func:`.matrix_to_euler` for how they are used.
"""

from enum import IntEnum

from typing import NamedTuple

import operator

import numpy as np

from eulerkit._typing import SEQUENCE_LIKE
from eulerkit.rotations.core.results import InvalidSequenceError


__all__ = ['EulerSequence', 'SequenceDescriptor', 'SEQUENCE_TABLE', 'euler_sequence', 'descriptor']


class EulerSequence(IntEnum):
    """
    The 12 supported Euler rotation sequences.

    The ordinal of each member indexes directly into :data:`SEQUENCE_TABLE`.
    """

    XYZ = 0
    XZY = 1
    YZX = 2
    YXZ = 3
    ZXY = 4
    ZYX = 5
    XYX = 6
    XZX = 7
    YZY = 8
    YXY = 9
    ZXZ = 10
    ZYZ = 11

    @property
    def order(self) -> str:
        """
        The lower case axis order string for the sequence (ie ``'xyz'``)
        """

        return self.name.lower()

    @property
    def is_aerodynamic(self) -> bool:
        """
        ``True`` if this sequence rotates about three distinct axes
        """

        return SEQUENCE_TABLE[self].is_aerodynamic


class SequenceDescriptor(NamedTuple):
    """
    Facts about a single Euler sequence used to build and decompose transformation matrices.
    """

    axes: tuple[int, int, int]
    """
    The axes (X=0, Y=1, Z=2) about which the rotations are performed, in the order they are performed.
    """

    alternate_x: int
    """
    The first axis of the sequence for aerodynamic sequences, or the axis the sequence omits for astronomical ones.
    """

    alternate_z: int
    """
    The last axis of the sequence for aerodynamic sequences, or the axis the sequence omits for astronomical ones.
    """

    is_even_permutation: bool
    """
    Whether the sequence formed by replacing the last axis with the axis not named by the first two is an even
    permutation of XYZ.  For aerodynamic sequences that is the sequence itself; ZXZ becomes ZXY, which is even.
    """

    is_aerodynamic: bool
    """
    ``True`` for sequences with three distinct axes, ``False`` for astronomical sequences.
    """

    @property
    def name(self) -> str:
        return ''.join('XYZ'[axis] for axis in self.axes)


SEQUENCE_TABLE: tuple[SequenceDescriptor, ...] = (
    #                  axes    altx altz  even   aero
    SequenceDescriptor((0, 1, 2), 0, 2, True, True),    # XYZ
    SequenceDescriptor((0, 2, 1), 0, 1, False, True),   # XZY
    SequenceDescriptor((1, 2, 0), 1, 0, True, True),    # YZX
    SequenceDescriptor((1, 0, 2), 1, 2, False, True),   # YXZ
    SequenceDescriptor((2, 0, 1), 2, 1, True, True),    # ZXY
    SequenceDescriptor((2, 1, 0), 2, 0, False, True),   # ZYX
    SequenceDescriptor((0, 1, 0), 2, 2, True, False),   # XYX
    SequenceDescriptor((0, 2, 0), 1, 1, False, False),  # XZX
    SequenceDescriptor((1, 2, 1), 0, 0, True, False),   # YZY
    SequenceDescriptor((1, 0, 1), 2, 2, False, False),  # YXY
    SequenceDescriptor((2, 0, 2), 1, 1, True, False),   # ZXZ
    SequenceDescriptor((2, 1, 2), 0, 0, False, False),  # ZYZ
)
"""
One :class:`SequenceDescriptor` per :class:`EulerSequence`, indexed by the ordinal of the sequence.
"""


def euler_sequence(value: SEQUENCE_LIKE) -> EulerSequence:
    """
    Interprets ``value`` as an :class:`EulerSequence`.

    ``value`` may be an :class:`EulerSequence`, the integer ordinal of one, or an axis order string such as
    ``'xyz'`` or ``'ZXZ'`` (case is ignored).

        >>> from eulerkit.rotations import euler_sequence
        >>> euler_sequence('zxz')
        <EulerSequence.ZXZ: 10>
        >>> euler_sequence(3)
        <EulerSequence.YXZ: 3>

    :param value: the value to interpret
    :return: the corresponding sequence
    :raises InvalidSequenceError: if ``value`` does not name one of the 12 sequences
    """

    if isinstance(value, EulerSequence):
        return value

    if isinstance(value, str):
        try:
            return EulerSequence[value.upper()]
        except KeyError:
            raise InvalidSequenceError(value) from None

    # bools are ints but are never a meaningful sequence
    if isinstance(value, (bool, np.bool_)):
        raise InvalidSequenceError(value)

    try:
        # only integral values, so that 3.0 is not taken as YXZ
        return EulerSequence(operator.index(value))
    except (ValueError, TypeError):
        raise InvalidSequenceError(value) from None


def descriptor(sequence: SEQUENCE_LIKE) -> SequenceDescriptor:
    """
    Returns the :class:`SequenceDescriptor` for ``sequence``.

    :param sequence: anything accepted by :func:`euler_sequence`
    :return: the table entry for the sequence
    :raises InvalidSequenceError: if ``sequence`` does not name one of the 12 sequences
    """

    return SEQUENCE_TABLE[euler_sequence(sequence)]
