"""Domain Types — stream records, claimable results, and 128-bit bounds.

Invariants:
    - Amounts cross every boundary as base-10 strings (may exceed 64 bits)
    - StreamState, ClaimableValue, ClaimableResult are frozen (immutable values)
    - ClaimableValue is what the cache stores; `cached` is added on the way out
    - I128_MIN / I128_MAX match the on-chain contract's i128 type exactly

Design Decisions:
    - Frozen dataclasses over pydantic models in core: pydantic lives at the
      API boundary (schemas/), core stays dependency-free
    - NewType for StreamId: zero runtime cost, full type-checker support
    - str Enum for FingerprintMode: loads straight from env vars
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

StreamId = NewType("StreamId", int)


# ─── Fixed-width Bounds ──────────────────────────────────────────

I128_MAX = (1 << 127) - 1
I128_MIN = -(1 << 127)


# ─── Enums ───────────────────────────────────────────────────────

class FingerprintMode(str, Enum):
    """How a stream's state identity is derived for cache keys."""
    AUTO = "auto"       # updated_at when present, else field concatenation
    FIELDS = "fields"   # always field concatenation


# ─── Records ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class StreamState:
    """On-ledger accounting fields of a stream, as stored by the indexer."""
    stream_id: StreamId
    rate_per_second: str
    deposited_amount: str
    withdrawn_amount: str
    last_update_time: int
    is_active: bool
    updated_at: datetime | None = None


@dataclass(frozen=True)
class ClaimableValue:
    """Computed claimable amount, without the cache annotation."""
    stream_id: StreamId
    claimable_amount: str
    actionable: bool
    calculated_at: int

    def with_cached_flag(self, cached: bool) -> "ClaimableResult":
        return ClaimableResult(
            stream_id=self.stream_id,
            claimable_amount=self.claimable_amount,
            actionable=self.actionable,
            calculated_at=self.calculated_at,
            cached=cached,
        )


@dataclass(frozen=True)
class ClaimableResult:
    """Claimable amount as returned to callers."""
    stream_id: StreamId
    claimable_amount: str
    actionable: bool
    calculated_at: int
    cached: bool

    def to_dict(self) -> dict:
        """JSON wire shape (camelCase, amount as decimal string)."""
        return {
            "streamId": self.stream_id,
            "claimableAmount": self.claimable_amount,
            "actionable": self.actionable,
            "calculatedAt": self.calculated_at,
            "cached": self.cached,
        }
