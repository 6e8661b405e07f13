"""Configuration: RandtoolConfig and initialization."""

from __future__ import annotations

import os
from dataclasses import dataclass

from klaw_randtool._logging import configure_logging, get_logger
from klaw_randtool.generator import ensure_seeded

__all__ = [
    'RandtoolConfig',
    'get_config',
    'init',
]

logger = get_logger(__name__)

_TRUTHY = frozenset({'1', 'true', 'yes', 'on'})
_FALSY = frozenset({'', '0', 'false', 'no', 'off'})


@dataclass(frozen=True)
class RandtoolConfig:
    """Configuration for klaw-randtool.

    Attributes:
        eager_seed: Seed the shared fast generator during ``init()`` instead
            of on the first string request.
        log_level: Logging level (e.g., "DEBUG", "INFO"). None = silent.
    """

    eager_seed: bool = False
    log_level: str | None = None


# Global configuration (set by init())
_config: RandtoolConfig | None = None


def _detect_eager_seed() -> bool:
    """Read KLAW_RANDTOOL_EAGER_SEED; unknown values count as false."""
    raw = os.environ.get('KLAW_RANDTOOL_EAGER_SEED', '').strip().lower()
    if raw in _TRUTHY:
        return True
    if raw not in _FALSY:
        logger.warning('unknown KLAW_RANDTOOL_EAGER_SEED value', value=raw)
    return False


def init(
    eager_seed: bool | None = None,
    log_level: str | None = None,
) -> RandtoolConfig:
    """Initialize klaw-randtool.

    Args:
        eager_seed: Seed the shared generator now. Read from the
            ``KLAW_RANDTOOL_EAGER_SEED`` environment variable if None.
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.

    Returns:
        The RandtoolConfig that was set.

    Example:
        ```python
        from klaw_randtool import init

        init(eager_seed=True, log_level='DEBUG')
        ```
    """
    global _config  # noqa: PLW0603

    if log_level is not None:
        configure_logging(log_level)

    resolved_eager_seed = _detect_eager_seed() if eager_seed is None else eager_seed

    _config = RandtoolConfig(eager_seed=resolved_eager_seed, log_level=log_level)

    if resolved_eager_seed:
        ensure_seeded()

    return _config


def get_config() -> RandtoolConfig:
    """Get the current configuration.

    Raises:
        RuntimeError: If init() has not been called.
    """
    if _config is None:
        msg = 'klaw-randtool not initialized. Call init() first.'
        raise RuntimeError(msg)
    return _config
