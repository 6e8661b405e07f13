"""klaw-randtool: thread-safe random integers and alphabetic strings.

Two sources back the API:

- a secure source (OS entropy) for ``gen_int64/32/16/8``, and
- a fast generator, seeded once from the secure source plus the clock,
  for ``gen_int_range`` and ``gen_str``.

The string path is fast, not cryptographically secure.

Flat imports:
    from klaw_randtool import gen_str, gen_int_range, gen_int64
    from klaw_randtool import Ok, Err, Result, InvalidLength
"""

from klaw_randtool._config import RandtoolConfig, get_config, init
from klaw_randtool.alphabet import ALPHABET, pack_alpha
from klaw_randtool.errors import (
    EntropyUnavailableError,
    InvalidLength,
    InvalidLengthError,
    InvalidRange,
    InvalidRangeError,
)
from klaw_randtool.generator import (
    SeededGenerator,
    ensure_seeded,
    gen_int_range,
    gen_str,
    gen_str_ignore_err,
    get_generator,
)
from klaw_randtool.secure import (
    SecureSource,
    gen_int8,
    gen_int16,
    gen_int32,
    gen_int64,
    get_source,
)
from klaw_randtool.types import Err, Ok, Result

__all__ = [
    'ALPHABET',
    'EntropyUnavailableError',
    'Err',
    'InvalidLength',
    'InvalidLengthError',
    'InvalidRange',
    'InvalidRangeError',
    'Ok',
    'RandtoolConfig',
    'Result',
    'SecureSource',
    'SeededGenerator',
    'ensure_seeded',
    'gen_int8',
    'gen_int16',
    'gen_int32',
    'gen_int64',
    'gen_int_range',
    'gen_str',
    'gen_str_ignore_err',
    'get_config',
    'get_generator',
    'get_source',
    'init',
    'pack_alpha',
]
