"""Error Hierarchy — typed, categorized exceptions for StreamPay failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Validation errors are 400-level and fatal to the call (no retry)
    - There is no overflow error: overflow saturates, it never raises
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with StreamPayError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    stream_id: int | None = None
    field_name: str | None = None
    debug_info: dict[str, Any] | None = None


class StreamPayError(Exception):
    """Base exception for all StreamPay errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "stream_id": self.context.stream_id,
                    "field": self.context.field_name,
                },
            }
        }


# ─── Validation Errors (400-level) ──────────────────────────────

class AmountParseError(StreamPayError):
    """A stored amount is not a valid base-10 integer."""
    def __init__(self, field: str, value: object, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field_name = field
        super().__init__(
            f"Invalid i128 value for '{field}'",
            "INVALID_AMOUNT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.field = field
        self.value = value


# Name used by callers that think of this as the engine's parse failure.
ParseError = AmountParseError


class InvalidTimestampError(StreamPayError):
    """A query timestamp cannot be floored to whole seconds (NaN, infinity)."""
    def __init__(self, field: str, value: object, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.field_name = field
        super().__init__(
            f"Invalid timestamp for '{field}': {value!r}",
            "INVALID_TIMESTAMP", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.field = field
        self.value = value
