"""Result Cache — in-memory TTL map for computed claimable values.

Invariants:
    - An entry is returned only while clock_ms() < expires_at_ms
    - Validity is checked against the clock at lookup, not the result's timestamp
    - ttl_ms == 0 disables caching (every lookup misses)
    - Expired entries are evicted lazily (on lookup or prune_expired)
    - For the same key the most recent put wins

Design Decisions:
    - One threading.Lock around the dict: values are a pure function of the
      key, so a miss-then-store race only overwrites with an equal value
    - No LRU/size policy: TTL is the only eviction rule
"""

import threading
import time
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

V = TypeVar("V")

Clock = Callable[[], float]


def wall_clock_ms() -> float:
    """Milliseconds since the epoch from the system clock."""
    return time.time() * 1000


@dataclass(frozen=True)
class CacheEntry(Generic[V]):
    value: V
    expires_at_ms: float


class TTLResultCache(Generic[V]):
    """Thread-safe TTL cache with an injectable millisecond clock."""

    def __init__(self, ttl_ms: int = 1000, clock: Clock | None = None):
        self._ttl_ms = max(0, ttl_ms)
        self._clock = clock or wall_clock_ms
        self._entries: dict[str, CacheEntry[V]] = {}
        self._lock = threading.Lock()

    @property
    def ttl_ms(self) -> int:
        return self._ttl_ms

    def get(self, key: str) -> V | None:
        """Return the live value for `key`, or None on miss/expiry."""
        now_ms = self._clock()
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if entry.expires_at_ms > now_ms:
                return entry.value
            del self._entries[key]
            return None

    def put(self, key: str, value: V) -> None:
        expires_at_ms = self._clock() + self._ttl_ms
        with self._lock:
            self._entries[key] = CacheEntry(value, expires_at_ms)

    def prune_expired(self) -> int:
        """Drop all expired entries. Returns how many were removed."""
        now_ms = self._clock()
        with self._lock:
            expired = [
                key for key, entry in self._entries.items()
                if entry.expires_at_ms <= now_ms
            ]
            for key in expired:
                del self._entries[key]
        return len(expired)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
