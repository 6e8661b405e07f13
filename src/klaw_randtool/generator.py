"""Seeded fast generator: one shared PRNG, seeded once from secure entropy.

The fast generator is a ``random.Random`` (Mersenne Twister). It is quick
but predictable once its state is known, so it is seeded a single time from
``SecureSource.gen_int64() + time.time_ns()`` and then reused for range
queries and bulk string generation.

Concurrency model:

- Seeding goes through a ``Once`` guard: exactly one caller computes and
  writes the seed, everyone else blocks until that write is done.
- Every individual draw holds the draw lock. String generation does not
  hold it across its whole fill loop, only per 63-bit draw.

Example:
    ```python
    from klaw_randtool import gen_int_range, gen_str

    token = gen_str(10).unwrap()   # e.g. 'qXbTzLmaoE'
    die = gen_int_range(1, 7)
    ```
"""

from __future__ import annotations

import random
import time
from collections.abc import Callable

import aiologic

from klaw_randtool._internal.sync import Lazy, Once
from klaw_randtool._logging import get_logger
from klaw_randtool.alphabet import pack_alpha
from klaw_randtool.errors import InvalidLength, InvalidRangeError
from klaw_randtool.secure import SecureSource, get_source
from klaw_randtool.types.result import Err, Ok, Result

__all__ = [
    'SeededGenerator',
    'ensure_seeded',
    'gen_int_range',
    'gen_str',
    'gen_str_ignore_err',
    'get_generator',
    'wrap_int64',
]

logger = get_logger(__name__)

_INT63_BITS = 63
_UINT64_MASK = (1 << 64) - 1


def wrap_int64(value: int) -> int:
    """Wrap an arbitrary int into the signed 64-bit range, two's-complement style."""
    value &= _UINT64_MASK
    return value - (1 << 64) if value >= 1 << 63 else value


class SeededGenerator:
    """Shared fast PRNG with a draw lock and a one-time seeding guard.

    Args:
        source: Secure source for the seed. Defaults to the process-wide one.
        clock: Nanosecond clock mixed into the seed. Defaults to ``time.time_ns``.

    Until ``ensure_seeded()`` runs, draws come from ``random.Random``'s own
    implicit initial state. Only ``gen_str`` seeds automatically;
    ``gen_int_range`` and ``draw_int63`` rely on the caller having seeded.
    """

    def __init__(
        self,
        source: SecureSource | None = None,
        clock: Callable[[], int] = time.time_ns,
    ) -> None:
        self._source = source
        self._clock = clock
        self._rng = random.Random()
        self._lock = aiologic.Lock()
        self._once = Once()
        self._seed_count = 0

    @property
    def seed_count(self) -> int:
        """Number of seed writes performed. Never exceeds 1."""
        return self._seed_count

    def is_seeded(self) -> bool:
        return self._once.is_done()

    def ensure_seeded(self) -> bool:
        """Seed the generator if nobody has yet.

        Returns:
            True for the one call that actually seeded, False otherwise.
        """
        return self._once.call_once(self._seed)

    def _seed(self) -> None:
        source = self._source if self._source is not None else get_source()
        seed = wrap_int64(source.gen_int64() + self._clock())
        with self._lock:
            # random.Random drops the sign of int seeds; seed with the same
            # 64 bits read as unsigned so s and -s stay distinct.
            self._rng.seed(seed & _UINT64_MASK)
            self._seed_count += 1
        logger.debug('generator seeded', seed_count=self._seed_count)

    def draw_int63(self) -> int:
        """Return one non-negative 63-bit value from the shared generator."""
        with self._lock:
            return self._rng.getrandbits(_INT63_BITS)

    def gen_int_range(self, lo: int, hi: int) -> int:
        """Return a uniform integer in ``[lo, hi)``.

        Raises:
            InvalidRangeError: If ``hi <= lo``.
        """
        if hi <= lo:
            raise InvalidRangeError(lo, hi)
        with self._lock:
            return self._rng.randrange(lo, hi)

    def gen_str(self, n: int) -> Result[str, InvalidLength]:
        """Return ``Ok`` with ``n`` random letters, or ``Err(InvalidLength)`` if ``n < 1``."""
        if n < 1:
            return Err(InvalidLength(n))
        self.ensure_seeded()
        return Ok(pack_alpha(n, self.draw_int63))

    def gen_str_ignore_err(self, n: int) -> str:
        """Like ``gen_str`` but returns ``''`` for an invalid length.

        Meant for callers that already validated ``n``; use with caution.
        """
        return self.gen_str(n).unwrap_or('')


_default_generator: Lazy[SeededGenerator] = Lazy(SeededGenerator)


def get_generator() -> SeededGenerator:
    """Return the process-wide generator, creating it on first use."""
    return _default_generator.get()


def ensure_seeded() -> bool:
    """Seed the process-wide generator once. Safe to call from any thread."""
    return get_generator().ensure_seeded()


def gen_int_range(lo: int, hi: int) -> int:
    """Uniform integer in ``[lo, hi)`` from the shared generator.

    Does not seed. Call ``ensure_seeded()`` (or ``init(eager_seed=True)``)
    first if the draw must come from the secure seed.
    """
    return get_generator().gen_int_range(lo, hi)


def gen_str(n: int) -> Result[str, InvalidLength]:
    """Random ``[a-zA-Z]`` string of length ``n`` from the shared generator."""
    return get_generator().gen_str(n)


def gen_str_ignore_err(n: int) -> str:
    """``gen_str`` with the error dropped; returns ``''`` when ``n < 1``."""
    return get_generator().gen_str_ignore_err(n)
