"""Structured logging — JSON formatter fields and handler setup."""

import json
import logging

import pytest

from streampay.infrastructure.observability import JSONFormatter, setup_logging


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "streampay.test", logging.WARNING, __file__, 1, "Rejected %s", ("stream",), None,
    )
    for key, val in extra.items():
        setattr(record, key, val)
    return record


def test_json_formatter_includes_core_fields():
    payload = json.loads(JSONFormatter().format(_record()))
    assert payload["level"] == "WARNING"
    assert payload["logger"] == "streampay.test"
    assert payload["message"] == "Rejected stream"
    assert "timestamp" in payload


def test_json_formatter_surfaces_known_extras_only():
    payload = json.loads(JSONFormatter().format(
        _record(stream_id=7, error_code="INVALID_AMOUNT", unrelated="x"),
    ))
    assert payload["stream_id"] == 7
    assert payload["error_code"] == "INVALID_AMOUNT"
    assert "unrelated" not in payload


@pytest.fixture
def restore_root_logger():
    level = logging.root.level
    handlers = list(logging.root.handlers)
    yield
    logging.root.handlers = handlers
    logging.root.setLevel(level)


def test_setup_logging_installs_json_handler(restore_root_logger):
    handler = setup_logging("debug", "json")
    assert handler in logging.root.handlers
    assert isinstance(handler.formatter, JSONFormatter)
    assert logging.root.level == logging.DEBUG


def test_setup_logging_text_format_and_unknown_level(restore_root_logger):
    handler = setup_logging("nonsense", "text")
    assert not isinstance(handler.formatter, JSONFormatter)
    assert logging.root.level == logging.INFO
