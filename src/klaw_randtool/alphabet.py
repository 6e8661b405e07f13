"""The 52-letter alphabet and the bit-packing fill used by string generation.

One 63-bit draw holds ``63 // 6 == 10`` six-bit letter indices. Six bits
address 64 values but only 52 letters exist, so indices 52-63 are thrown
away, never folded back in. Roughly 12 in 64 indices are wasted.
"""

from __future__ import annotations

import string
from collections.abc import Callable
from typing import Final

__all__ = [
    'ALPHABET',
    'LETTER_INDEX_BITS',
    'LETTER_INDEX_MASK',
    'LETTER_INDEX_MAX',
    'pack_alpha',
]

ALPHABET: Final = string.ascii_lowercase + string.ascii_uppercase
LETTER_INDEX_BITS: Final = 6
LETTER_INDEX_MASK: Final = (1 << LETTER_INDEX_BITS) - 1
LETTER_INDEX_MAX: Final = 63 // LETTER_INDEX_BITS

_ALPHABET_BYTES: Final = ALPHABET.encode('ascii')


def pack_alpha(n: int, draw: Callable[[], int]) -> str:
    """Build an ``n``-letter string from 63-bit draws, filling right to left.

    Args:
        n: Number of letters, at least 1.
        draw: Returns a fresh non-negative 63-bit integer per call.

    Returns:
        A string of exactly ``n`` characters from ``ALPHABET``.

    Examples:
        >>> pack_alpha(3, lambda: 0 | 1 << 6 | 2 << 12)
        'cba'
    """
    buf = bytearray(n)
    i = n - 1
    cache, remain = draw(), LETTER_INDEX_MAX
    while i >= 0:
        if remain == 0:
            cache, remain = draw(), LETTER_INDEX_MAX
        idx = cache & LETTER_INDEX_MASK
        if idx < len(_ALPHABET_BYTES):
            buf[i] = _ALPHABET_BYTES[idx]
            i -= 1
        cache >>= LETTER_INDEX_BITS
        remain -= 1
    return buf.decode('ascii')
