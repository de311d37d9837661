"""Claimable Calculation — pure reproduction of the stream contract's claimable math.

Invariants:
    - elapsed is never negative: a query before last_update_time yields 0
    - streamed = elapsed * rate, remaining = deposited - withdrawn, both saturating
    - claimable = min(streamed, remaining), then zeroed unless active and positive
    - Result amount lies in [0, max(deposited - withdrawn, 0)] clamped to i128
    - Malformed amount strings raise AmountParseError (fatal, not recovered)

Design Decisions:
    - Timestamps floored at 0 before subtraction: mirrors the contract's u64
      ledger time, where negative values cannot exist
    - remaining is not clamped to 0 here: an over-withdrawn record yields a
      negative raw amount, which the actionable step turns into 0
"""

from streampay.core.domain_types import ClaimableValue, StreamState
from streampay.core.saturating_math import (
    parse_i128, saturating_mul, saturating_sub,
)


def elapsed_seconds(last_update_time: int, calculated_at: int) -> int:
    """Seconds accrued since the last on-chain update, never negative."""
    last_update = max(0, last_update_time)
    now = max(0, calculated_at)
    return now - last_update if now > last_update else 0


def calculate_claimable(state: StreamState, calculated_at: int) -> ClaimableValue:
    """Compute the actionable claimable amount of `state` at `calculated_at`."""
    elapsed = elapsed_seconds(state.last_update_time, calculated_at)

    rate = parse_i128(state.rate_per_second, "ratePerSecond")
    deposited = parse_i128(state.deposited_amount, "depositedAmount")
    withdrawn = parse_i128(state.withdrawn_amount, "withdrawnAmount")

    streamed = saturating_mul(elapsed, rate)
    remaining = saturating_sub(deposited, withdrawn)
    raw_claimable = min(streamed, remaining)

    # Actionable = what a withdraw call would transfer right now.
    amount = raw_claimable if state.is_active and raw_claimable > 0 else 0

    return ClaimableValue(
        stream_id=state.stream_id,
        claimable_amount=str(amount),
        actionable=amount > 0,
        calculated_at=calculated_at,
    )
