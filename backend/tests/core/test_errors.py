"""Error hierarchy — codes, HTTP status, and REST envelope shape."""

from streampay.core.errors import (
    AmountParseError, ErrorCategory, ErrorContext, ErrorSeverity,
    InvalidTimestampError, ParseError, StreamPayError,
)


def test_amount_parse_error_is_validation_400():
    err = AmountParseError("depositedAmount", "abc")
    assert isinstance(err, StreamPayError)
    assert err.code == "INVALID_AMOUNT"
    assert err.category is ErrorCategory.VALIDATION
    assert err.severity is ErrorSeverity.ERROR
    assert err.http_status == 400
    assert err.field == "depositedAmount"
    assert err.value == "abc"
    assert "depositedAmount" in str(err)


def test_parse_error_alias_points_to_amount_parse_error():
    assert ParseError is AmountParseError


def test_to_response_carries_field_and_stream():
    ctx = ErrorContext(stream_id=42)
    response = AmountParseError("ratePerSecond", "x", ctx).to_response()
    body = response["error"]
    assert body["code"] == "INVALID_AMOUNT"
    assert body["category"] == "validation"
    assert body["severity"] == "error"
    assert body["context"] == {"stream_id": 42, "field": "ratePerSecond"}
    assert "timestamp" in body


def test_invalid_timestamp_error_shape():
    err = InvalidTimestampError("requestedAt", float("nan"))
    assert err.code == "INVALID_TIMESTAMP"
    assert err.http_status == 400
    assert err.context.field_name == "requestedAt"
