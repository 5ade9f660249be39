"""
This module provides the error raised or carried when an Euler sequence cannot be interpreted, and the
:class:`ConversionResult` container the conversion core uses to hand either a computed value or that error back to
its caller.
"""

from dataclasses import dataclass

from typing import Generic, TypeVar, Any


__all__ = ['InvalidSequenceError', 'ConversionResult']


T = TypeVar('T')


class InvalidSequenceError(ValueError):
    """
    Indicates that a value does not name one of the 12 supported Euler sequences.

    The offending value is kept in :attr:`value` so that it can be reported by whoever handles the error.
    """

    def __init__(self, value: Any):
        self.value = value
        """
        The value that was supplied as the Euler sequence
        """

        super().__init__(f'The euler sequence has not been set or is invalid; value={value!r}')


@dataclass(frozen=True)
class ConversionResult(Generic[T]):
    """
    The outcome of a conversion: either the computed :attr:`value` or the :attr:`error` that prevented it.

    The conversion routines in :mod:`eulerkit.rotations.core.conversions` never raise for an invalid sequence.
    Instead they return one of these so the caller decides whether to raise (:meth:`unwrap`), log, or ignore it.

        >>> from eulerkit.rotations.core import euler_to_matrix
        >>> euler_to_matrix('xyz', [0, 0, 0]).ok
        True
        >>> euler_to_matrix(42, [0, 0, 0]).error
        InvalidSequenceError('The euler sequence has not been set or is invalid; value=42')
    """

    value: T | None = None
    """
    The result of the conversion.  ``None`` if the conversion failed.
    """

    error: InvalidSequenceError | None = None
    """
    The reason the conversion failed.  ``None`` if the conversion succeeded.
    """

    @property
    def ok(self) -> bool:
        """
        ``True`` if the conversion succeeded
        """

        return self.error is None

    def unwrap(self) -> T:
        """
        Returns the value of a successful conversion.

        :return: the converted value
        :raises InvalidSequenceError: if the conversion failed
        """

        if self.error is not None:
            raise self.error

        assert self.value is not None, "a successful conversion result is somehow missing its value"
        return self.value

    @classmethod
    def success(cls, value: T) -> 'ConversionResult[T]':
        return cls(value=value)

    @classmethod
    def failure(cls, error: InvalidSequenceError) -> 'ConversionResult[T]':
        return cls(error=error)
