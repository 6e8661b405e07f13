"""Error types: dual struct+exception for Result and raise-based code.

``EntropyUnavailableError`` is the odd one out. It is fatal, has no struct
variant and derives from ``BaseException`` so that ``except Exception``
blocks do not absorb it.
"""

from __future__ import annotations

import msgspec

__all__ = [
    'EntropyUnavailableError',
    'InvalidLength',
    'InvalidLengthError',
    'InvalidRange',
    'InvalidRangeError',
]


# --- Input Errors ---


class InvalidLength(msgspec.Struct, frozen=True, gc=False):
    """String length below 1 - struct variant for Result[str, InvalidLength]."""

    length: int

    def to_exception(self) -> InvalidLengthError:
        """Convert to exception for raise-based code."""
        return InvalidLengthError(self.length)


class InvalidLengthError(ValueError):
    """String length below 1 - exception variant."""

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f'Random string length must be greater than 0 (got {length})')

    def to_struct(self) -> InvalidLength:
        """Convert to struct for Result-based code."""
        return InvalidLength(self.length)


class InvalidRange(msgspec.Struct, frozen=True, gc=False):
    """Empty half-open range [lo, hi) - struct variant."""

    lo: int
    hi: int

    def to_exception(self) -> InvalidRangeError:
        """Convert to exception for raise-based code."""
        return InvalidRangeError(self.lo, self.hi)


class InvalidRangeError(ValueError):
    """Empty half-open range [lo, hi) - exception variant."""

    def __init__(self, lo: int, hi: int) -> None:
        self.lo = lo
        self.hi = hi
        super().__init__(f'Empty range [{lo}, {hi}): max must be greater than min')

    def to_struct(self) -> InvalidRange:
        """Convert to struct for Result-based code."""
        return InvalidRange(self.lo, self.hi)


# --- Fatal Errors ---


class EntropyUnavailableError(BaseException):
    """The secure entropy source could not be read.

    Treated as a broken environment, not a transient fault: nothing retries
    it and it should be allowed to terminate the process.
    """

    def __init__(self, cause: BaseException | str) -> None:
        self.cause = cause
        super().__init__(f'Can not read secure entropy source: {cause}')
