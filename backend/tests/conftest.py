"""Root conftest — shared test configuration and a controllable clock."""

import os

import pytest

# Keep test logs readable and independent of a developer's .env
os.environ.setdefault("LOG_FORMAT", "text")
os.environ.setdefault("CLAIMABLE_CACHE_TTL_MS", "1000")


class FakeClock:
    """Millisecond clock advanced by hand."""

    def __init__(self, now_ms: float = 0):
        self.now_ms = now_ms

    def __call__(self) -> float:
        return self.now_ms

    def advance(self, ms: float) -> None:
        self.now_ms += ms


@pytest.fixture
def clock():
    return FakeClock(now_ms=5_000)
