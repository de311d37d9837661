"""State fingerprint — updated_at vs field concatenation, and cache key shape."""

from dataclasses import replace
from datetime import datetime, timedelta, timezone

import pytest

from streampay.core.domain_types import FingerprintMode, StreamId, StreamState
from streampay.core.state_fingerprint import (
    build_cache_key, fields_fingerprint, fingerprint,
)


@pytest.fixture
def state():
    return StreamState(
        stream_id=StreamId(9),
        rate_per_second="5",
        deposited_amount="500",
        withdrawn_amount="100",
        last_update_time=7,
        is_active=True,
    )


def test_fields_fingerprint_joins_fields_with_colons(state):
    assert fingerprint(state) == "5:500:100:7:1"


def test_inactive_encodes_as_zero(state):
    assert fingerprint(replace(state, is_active=False)) == "5:500:100:7:0"


@pytest.mark.parametrize("change", [
    {"rate_per_second": "6"},
    {"deposited_amount": "501"},
    {"withdrawn_amount": "101"},
    {"last_update_time": 8},
    {"is_active": False},
])
def test_fields_fingerprint_changes_with_every_result_field(state, change):
    assert fingerprint(replace(state, **change)) != fingerprint(state)


def test_stream_id_is_not_part_of_fingerprint(state):
    assert fingerprint(replace(state, stream_id=StreamId(10))) == fingerprint(state)


def test_updated_at_used_as_millisecond_timestamp(state):
    stamped = replace(
        state,
        updated_at=datetime(2024, 1, 1, 0, 0, 0, 123_000, tzinfo=timezone.utc),
    )
    assert fingerprint(stamped) == "1704067200123"


def test_naive_updated_at_read_as_utc(state):
    aware = replace(state, updated_at=datetime(2024, 1, 1, tzinfo=timezone.utc))
    naive = replace(state, updated_at=datetime(2024, 1, 1))
    assert fingerprint(aware) == fingerprint(naive)


def test_updated_at_offset_normalized(state):
    utc = replace(state, updated_at=datetime(2024, 1, 1, 12, tzinfo=timezone.utc))
    plus_two = replace(
        state,
        updated_at=datetime(2024, 1, 1, 14, tzinfo=timezone(timedelta(hours=2))),
    )
    assert fingerprint(utc) == fingerprint(plus_two)


def test_fields_mode_ignores_updated_at(state):
    stamped = replace(state, updated_at=datetime(2024, 1, 1, tzinfo=timezone.utc))
    assert fingerprint(stamped, FingerprintMode.FIELDS) == fields_fingerprint(state)


def test_fingerprint_is_stable_across_calls(state):
    assert fingerprint(state) == fingerprint(state)
    assert fingerprint(replace(state)) == fingerprint(state)


def test_cache_key_combines_stream_fingerprint_and_second():
    assert build_cache_key(5, "7:700:0:0:1", 5) == "5:7:700:0:0:1:5"
