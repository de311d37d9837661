"""Claimable Amount Service — memoized entry point for claimable calculations.

Invariants:
    - calculated_at = floor(requested_at) if given, else floor(clock_ms / 1000)
    - Cache key = stream_id : fingerprint : calculated_at
    - A live cache entry is returned with cached=True; a fresh computation with cached=False
    - Only side effect is cache population; AmountParseError propagates unchanged

Design Decisions:
    - Explicit service object with injected TTL and clock instead of a
      process-wide default instance; the app wires one via from_settings()
    - Cached value excludes the `cached` flag; it is attached per response
    - Opportunistic prune on store once the map passes prune_threshold; the
      trigger then moves to twice the surviving size so live entries are not
      rescanned on every miss
"""

import logging
import math

from streampay.config import Settings
from streampay.core.calculate_claimable import calculate_claimable
from streampay.core.domain_types import (
    ClaimableResult, ClaimableValue, FingerprintMode, StreamState,
)
from streampay.core.errors import AmountParseError, InvalidTimestampError
from streampay.core.state_fingerprint import build_cache_key, fingerprint
from streampay.infrastructure.result_cache import Clock, TTLResultCache, wall_clock_ms

logger = logging.getLogger(__name__)


class ClaimableAmountService:
    """Compute claimable amounts, memoizing per (stream, state, second)."""

    def __init__(
        self,
        cache_ttl_ms: int = 1000,
        clock: Clock | None = None,
        fingerprint_mode: FingerprintMode = FingerprintMode.AUTO,
        prune_threshold: int = 10_000,
    ):
        self._clock = clock or wall_clock_ms
        self._cache: TTLResultCache[ClaimableValue] = TTLResultCache(
            cache_ttl_ms, self._clock,
        )
        self._fingerprint_mode = fingerprint_mode
        self._prune_threshold = prune_threshold
        self._prune_at = prune_threshold

    @classmethod
    def from_settings(
        cls, settings: Settings, clock: Clock | None = None,
    ) -> "ClaimableAmountService":
        return cls(
            cache_ttl_ms=settings.claimable_cache_ttl_ms,
            clock=clock,
            fingerprint_mode=settings.claimable_fingerprint_mode,
            prune_threshold=settings.claimable_cache_prune_threshold,
        )

    @property
    def cache_ttl_ms(self) -> int:
        return self._cache.ttl_ms

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    def _prune(self) -> None:
        """Drop expired entries; next prune waits until the live set doubles."""
        removed = self._cache.prune_expired()
        self._prune_at = max(self._prune_threshold, 2 * len(self._cache))
        logger.debug(
            f"Pruned {removed} expired claimable entries",
            extra={"cache_size": len(self._cache)},
        )

    def clear_cache(self) -> None:
        self._cache.clear()
        self._prune_at = self._prune_threshold
        logger.info("Claimable cache cleared")

    def resolve_calculated_at(self, requested_at: float | None = None) -> int:
        """Whole-second query time: requested_at floored, or the clock's now."""
        if requested_at is None:
            return math.floor(self._clock() / 1000)
        if isinstance(requested_at, float) and not math.isfinite(requested_at):
            raise InvalidTimestampError("requestedAt", requested_at)
        return math.floor(requested_at)

    def get_claimable_amount(
        self, state: StreamState, requested_at: float | None = None,
    ) -> ClaimableResult:
        """Return the claimable amount of `state` at `requested_at` (or now)."""
        calculated_at = self.resolve_calculated_at(requested_at)
        cache_key = build_cache_key(
            state.stream_id,
            fingerprint(state, self._fingerprint_mode),
            calculated_at,
        )

        cached_value = self._cache.get(cache_key)
        if cached_value is not None:
            logger.debug(
                "Claimable cache hit",
                extra={"stream_id": state.stream_id, "cache_key": cache_key},
            )
            return cached_value.with_cached_flag(True)

        try:
            value = calculate_claimable(state, calculated_at)
        except AmountParseError as e:
            logger.warning(
                f"Rejected stream record: {e.message}",
                extra={
                    "stream_id": state.stream_id,
                    "error_code": e.code,
                    "field": e.field,
                },
            )
            e.context.stream_id = state.stream_id
            raise

        self._cache.put(cache_key, value)
        if len(self._cache) > self._prune_at:
            self._prune()
        logger.debug(
            "Claimable computed",
            extra={"stream_id": state.stream_id, "cache_key": cache_key},
        )
        return value.with_cached_flag(False)

    def get_claimable_amounts(
        self, states: list[StreamState], requested_at: float | None = None,
    ) -> list[ClaimableResult]:
        """Batch variant: one shared calculated_at for every stream, input order kept."""
        calculated_at = self.resolve_calculated_at(requested_at)
        return [self.get_claimable_amount(s, calculated_at) for s in states]
