"""State Fingerprint — stable identity of a stream's mutable fields for cache keys.

Invariants:
    - Same logical state → same fingerprint, regardless of call order
    - Any change to a result-affecting field changes the FIELDS fingerprint
    - AUTO mode uses updated_at (ms since epoch) when present, fields otherwise
    - Naive updated_at values are read as UTC

Design Decisions:
    - updated_at as identity in AUTO mode: indexer writes are the only source
      of mutation, so the write timestamp is a cheaper equivalent
    - FIELDS mode for deployments where unrelated writes can touch updated_at
      without changing the accounting fields (or leave it stale)
"""

from datetime import datetime, timedelta, timezone

from streampay.core.domain_types import FingerprintMode, StreamState

FIELD_SEPARATOR = ":"
_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MILLISECOND = timedelta(milliseconds=1)


def _epoch_millis(moment: datetime) -> int:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return (moment - _EPOCH) // _ONE_MILLISECOND


def fields_fingerprint(state: StreamState) -> str:
    """Delimited concatenation of every field that affects the result."""
    return FIELD_SEPARATOR.join([
        state.rate_per_second,
        state.deposited_amount,
        state.withdrawn_amount,
        str(state.last_update_time),
        "1" if state.is_active else "0",
    ])


def fingerprint(
    state: StreamState, mode: FingerprintMode = FingerprintMode.AUTO,
) -> str:
    """Derive the state fingerprint used in cache keys."""
    if mode is FingerprintMode.AUTO and state.updated_at is not None:
        return str(_epoch_millis(state.updated_at))
    return fields_fingerprint(state)


def build_cache_key(stream_id: int, state_fingerprint: str, calculated_at: int) -> str:
    """Composite key: stream, state identity, and the resolved query second."""
    return f"{stream_id}:{state_fingerprint}:{calculated_at}"
