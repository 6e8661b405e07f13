"""Tests for the alphabet and the bit-packing string fill."""

from __future__ import annotations

import random
import re
from collections.abc import Iterable

from hypothesis import given
from hypothesis import strategies as st

from klaw_randtool import SecureSource, SeededGenerator
from klaw_randtool.alphabet import (
    ALPHABET,
    LETTER_INDEX_BITS,
    LETTER_INDEX_MASK,
    LETTER_INDEX_MAX,
    pack_alpha,
)
from tests.strategies import int63s, lengths, seeds


def pack(indices: Iterable[int]) -> int:
    """Pack 6-bit indices into one draw, first index in the lowest bits."""
    value = 0
    for k, idx in enumerate(indices):
        value |= idx << (LETTER_INDEX_BITS * k)
    return value


class Draws:
    """Replays a fixed list of draws and counts how many were taken."""

    def __init__(self, values: list[int]) -> None:
        self.values = values
        self.taken = 0

    def __call__(self) -> int:
        value = self.values[self.taken]
        self.taken += 1
        return value


class TestConstants:
    def test_alphabet(self) -> None:
        assert len(ALPHABET) == 52
        assert ALPHABET[0] == 'a'
        assert ALPHABET[25] == 'z'
        assert ALPHABET[26] == 'A'
        assert ALPHABET[51] == 'Z'
        assert len(set(ALPHABET)) == 52

    def test_packing_constants(self) -> None:
        assert LETTER_INDEX_BITS == 6
        assert LETTER_INDEX_MASK == 0b111111
        assert LETTER_INDEX_MAX == 10


class TestPackAlpha:
    """Exact behaviour of the right-to-left fill."""

    def test_fills_right_to_left(self) -> None:
        assert pack_alpha(3, Draws([pack([0, 1, 2])])) == 'cba'

    def test_out_of_range_indices_skipped(self) -> None:
        """Indices 52..63 consume bits but produce no letter."""
        draws = Draws([pack([52, 0, 63, 1, 60, 2])])
        assert pack_alpha(3, draws) == 'cba'
        assert draws.taken == 1

    def test_top_index_maps_to_last_letter(self) -> None:
        assert pack_alpha(1, Draws([51])) == 'Z'

    def test_ten_letters_per_draw(self) -> None:
        draws = Draws([0])
        assert pack_alpha(10, draws) == 'a' * 10
        assert draws.taken == 1

    def test_eleventh_letter_needs_second_draw(self) -> None:
        draws = Draws([0, 25])
        assert pack_alpha(11, draws) == 'z' + 'a' * 10
        assert draws.taken == 2

    def test_unused_high_bits_ignored(self) -> None:
        """Bits 60-62 never become a letter; a fresh draw replaces them."""
        high = 0b111 << 60
        draws = Draws([high, 1])
        assert pack_alpha(11, draws) == 'b' + 'a' * 10

    def test_all_discarded_draw_consumed(self) -> None:
        draws = Draws([pack([63] * 10), pack([26])])
        assert pack_alpha(1, draws) == 'A'
        assert draws.taken == 2

    @given(n=lengths, seed=seeds)
    def test_length_and_charset(self, n: int, seed: int) -> None:
        source = SecureSource(lambda size: seed.to_bytes(size, 'little', signed=True))
        gen = SeededGenerator(source=source, clock=lambda: 0)
        gen.ensure_seeded()
        out = pack_alpha(n, gen.draw_int63)
        assert len(out) == n
        assert re.fullmatch(r'[a-zA-Z]+', out)

    @given(value=int63s)
    def test_single_draw_matches_valid_indices(self, value: int) -> None:
        """With enough letters requested, the last letters follow the valid indices in order."""
        valid = [
            (value >> (LETTER_INDEX_BITS * k)) & LETTER_INDEX_MASK
            for k in range(LETTER_INDEX_MAX)
        ]
        valid = [idx for idx in valid if idx < len(ALPHABET)]
        rng = random.Random(0)
        draws = Draws([value])

        def draw() -> int:
            if draws.taken == 0:
                return draws()
            return rng.getrandbits(63)

        out = pack_alpha(len(valid) + 1, draw)
        tail = out[::-1][: len(valid)]
        assert tail == ''.join(ALPHABET[idx] for idx in valid)

    @given(indices=st.lists(st.integers(min_value=0, max_value=51), min_size=1, max_size=10))
    def test_valid_indices_reversed(self, indices: list[int]) -> None:
        out = pack_alpha(len(indices), Draws([pack(indices)]))
        assert out == ''.join(ALPHABET[i] for i in reversed(indices))
