"""aiologic-backed one-time initialization primitives.

aiologic locks work from plain threads as well as from event loops, so the
same guard protects callers regardless of how they are scheduled.
"""

from __future__ import annotations

from collections.abc import Callable

import aiologic

__all__ = ['Lazy', 'Once']


class Once:
    """Run a function exactly once across all threads.

    Double-checked locking: the fast path reads a flag without the lock, the
    slow path takes the lock and re-checks. Late callers block on the lock
    until the first call has returned, so its side effects are visible to
    everyone once ``call_once`` returns.

    If the function raises, the guard stays unset and the exception
    propagates; a later ``call_once`` runs it again.

    Examples:
        >>> once = Once()
        >>> once.call_once(lambda: print('ran'))
        ran
        True
        >>> once.call_once(lambda: print('ran'))
        False
    """

    __slots__ = ('_done', '_lock')

    def __init__(self) -> None:
        self._lock = aiologic.Lock()
        self._done = False

    def call_once(self, fn: Callable[[], object]) -> bool:
        """Call ``fn`` unless it already completed.

        Returns:
            True if this call ran ``fn``, False if it was a no-op.
        """
        if self._done:
            return False

        with self._lock:
            if self._done:
                return False
            fn()
            self._done = True
            return True

    def is_done(self) -> bool:
        """Check whether the function has completed."""
        return self._done


class Lazy[T]:
    """A lazily initialized value.

    The initialization function is called at most once, on first access.
    """

    __slots__ = ('_init', '_lock', '_value')

    def __init__(self, init: Callable[[], T]) -> None:
        self._init = init
        self._lock = aiologic.Lock()
        self._value: T | None = None

    def get(self) -> T:
        """Get the value, initializing if necessary."""
        value = self._value
        if value is not None:
            return value

        with self._lock:
            if self._value is None:
                self._value = self._init()
            return self._value

    def is_initialized(self) -> bool:
        """Check if the value has been initialized."""
        return self._value is not None
