"""Pytest configuration and shared fixtures for klaw-randtool tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from klaw_randtool import SecureSource, SeededGenerator
from klaw_randtool._logging import clear_log_hooks


class CountingReader:
    """Deterministic entropy reader that records every request."""

    def __init__(self, data: bytes = bytes(range(1, 9))) -> None:
        self.data = data
        self.calls: list[int] = []

    def __call__(self, size: int) -> bytes:
        self.calls.append(size)
        return (self.data * (size // len(self.data) + 1))[:size]


@pytest.fixture(autouse=True)
def cleanup_hooks() -> None:
    """Clear log hooks before and after each test."""
    clear_log_hooks()
    yield
    clear_log_hooks()


@pytest.fixture
def counting_reader() -> CountingReader:
    return CountingReader()


@pytest.fixture
def make_generator() -> Callable[..., SeededGenerator]:
    """Factory for generators with a fixed entropy reader and clock."""

    def factory(
        reader: Callable[[int], bytes] | None = None,
        clock: Callable[[], int] = lambda: 1_000,
    ) -> SeededGenerator:
        source = SecureSource(reader if reader is not None else CountingReader())
        return SeededGenerator(source=source, clock=clock)

    return factory
