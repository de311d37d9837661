"""Claimable Schemas — wire models for stream records and claimable results.

Invariants:
    - streamId and lastUpdateTime are native JSON integers; streamId >= 0
    - Amount fields are strings; numeric JSON values are rejected, not coerced
    - Amount content is NOT checked here: parse_i128 owns that rule and reports
      the offending field as INVALID_AMOUNT
    - Batch requests carry 1..MAX_BATCH_SIZE streams

Design Decisions:
    - alias_generator=to_camel + populate_by_name: camelCase on the wire,
      snake_case in Python, both accepted on input
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from streampay.core.domain_types import ClaimableResult, StreamId, StreamState

MAX_BATCH_SIZE = 500


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class StreamStateIn(_CamelModel):
    """Stream record as supplied by the persistence layer."""
    stream_id: int = Field(ge=0)
    rate_per_second: str
    deposited_amount: str
    withdrawn_amount: str
    last_update_time: int
    is_active: bool
    updated_at: datetime | None = None

    def to_domain(self) -> StreamState:
        return StreamState(
            stream_id=StreamId(self.stream_id),
            rate_per_second=self.rate_per_second,
            deposited_amount=self.deposited_amount,
            withdrawn_amount=self.withdrawn_amount,
            last_update_time=self.last_update_time,
            is_active=self.is_active,
            updated_at=self.updated_at,
        )


class ClaimableResultOut(_CamelModel):
    """Claimable amount response."""
    stream_id: int
    claimable_amount: str
    actionable: bool
    calculated_at: int
    cached: bool

    @classmethod
    def from_domain(cls, result: ClaimableResult) -> "ClaimableResultOut":
        return cls(
            stream_id=result.stream_id,
            claimable_amount=result.claimable_amount,
            actionable=result.actionable,
            calculated_at=result.calculated_at,
            cached=result.cached,
        )


class ClaimableBatchIn(_CamelModel):
    """Several stream records evaluated at one shared timestamp."""
    streams: list[StreamStateIn] = Field(min_length=1, max_length=MAX_BATCH_SIZE)


class ClaimableBatchOut(_CamelModel):
    results: list[ClaimableResultOut]
