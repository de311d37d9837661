"""Saturating i128 Arithmetic — overflow-safe fixed-width math matching the stream contract.

Invariants:
    - Every result lies in [I128_MIN, I128_MAX]
    - Overflow clamps to the nearest bound; it never wraps and never raises
    - Amount strings are parsed exactly (no float on any path)
    - Out-of-range amounts are clamped on ingestion

Design Decisions:
    - Python int is arbitrary precision: compute exactly, then clamp once
    - Strict base-10 grammar: int() alone would accept underscores and
      non-ASCII digits that the stored wire format never produces
"""

import re

from streampay.core.domain_types import I128_MAX, I128_MIN
from streampay.core.errors import AmountParseError

_DECIMAL_INTEGER = re.compile(r"[+-]?[0-9]+")
_I128_MAX_DIGITS = len(str(I128_MAX))


def clamp_i128(value: int) -> int:
    """Clamp an exact integer into the signed 128-bit range."""
    if value > I128_MAX:
        return I128_MAX
    if value < I128_MIN:
        return I128_MIN
    return value


def saturating_add(a: int, b: int) -> int:
    return clamp_i128(a + b)


def saturating_sub(a: int, b: int) -> int:
    return clamp_i128(a - b)


def saturating_mul(a: int, b: int) -> int:
    return clamp_i128(a * b)


def parse_i128(value: str, field_name: str) -> int:
    """Parse a base-10 amount string into a clamped i128.

    Surrounding whitespace and a single leading sign are accepted.
    Raises AmountParseError naming `field_name` for anything else.
    """
    if isinstance(value, bool):
        raise AmountParseError(field_name, value)
    if isinstance(value, int):
        return clamp_i128(value)
    if not isinstance(value, str):
        raise AmountParseError(field_name, value)
    text = value.strip()
    if not _DECIMAL_INTEGER.fullmatch(text):
        raise AmountParseError(field_name, value)
    negative = text.startswith("-")
    digits = text.lstrip("+-").lstrip("0")
    # Too long for i128 at any value; skips int()'s digit-count limit too.
    if len(digits) > _I128_MAX_DIGITS:
        return I128_MIN if negative else I128_MAX
    magnitude = int(digits) if digits else 0
    return clamp_i128(-magnitude if negative else magnitude)
