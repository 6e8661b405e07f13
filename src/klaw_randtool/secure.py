"""Secure source: fixed-width signed integers straight from OS entropy.

On Linux ``os.urandom`` uses getrandom(2) when available and /dev/urandom
otherwise; on Windows it uses the system CSPRNG. Reads are safe to issue
from many threads at once, so nothing here takes a lock.
"""

from __future__ import annotations

import os
from collections.abc import Callable

from klaw_randtool._internal.sync import Lazy
from klaw_randtool._logging import get_logger
from klaw_randtool.errors import EntropyUnavailableError

__all__ = [
    'SecureSource',
    'gen_int8',
    'gen_int16',
    'gen_int32',
    'gen_int64',
    'get_source',
]

logger = get_logger(__name__)


class SecureSource:
    """Decodes raw entropy bytes as little-endian two's-complement integers.

    Args:
        reader: ``reader(n)`` returns ``n`` bytes of secure entropy.
            Defaults to ``os.urandom``.

    A failed or short read raises ``EntropyUnavailableError``, which is fatal
    by contract. There is no masking and no retry, so each width covers its
    full signed range uniformly.
    """

    __slots__ = ('_reader',)

    def __init__(self, reader: Callable[[int], bytes] = os.urandom) -> None:
        self._reader = reader

    def _read(self, size: int) -> bytes:
        try:
            data = self._reader(size)
        except Exception as exc:
            logger.critical('secure entropy read failed', size=size, error=str(exc))
            raise EntropyUnavailableError(exc) from exc
        if len(data) != size:
            logger.critical('secure entropy read failed', size=size, got=len(data))
            raise EntropyUnavailableError(f'short read: wanted {size} bytes, got {len(data)}')
        return data

    def gen_int(self, size: int) -> int:
        """Read ``size`` bytes and decode them as a signed integer."""
        return int.from_bytes(self._read(size), 'little', signed=True)

    def gen_int64(self) -> int:
        """Return a uniform integer in [-2**63, 2**63)."""
        return self.gen_int(8)

    def gen_int32(self) -> int:
        """Return a uniform integer in [-2**31, 2**31)."""
        return self.gen_int(4)

    def gen_int16(self) -> int:
        return self.gen_int(2)

    def gen_int8(self) -> int:
        return self.gen_int(1)


_default_source: Lazy[SecureSource] = Lazy(SecureSource)


def get_source() -> SecureSource:
    """Return the process-wide secure source."""
    return _default_source.get()


def gen_int64() -> int:
    """Secure random signed 64-bit integer. Raises EntropyUnavailableError on failure."""
    return get_source().gen_int64()


def gen_int32() -> int:
    """Secure random signed 32-bit integer."""
    return get_source().gen_int32()


def gen_int16() -> int:
    """Secure random signed 16-bit integer."""
    return get_source().gen_int16()


def gen_int8() -> int:
    """Secure random signed 8-bit integer."""
    return get_source().gen_int8()
