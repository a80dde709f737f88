"""Request id propagation into log records."""

import logging

from app.middleware.request_id import sanitize_request_id
from app.shared.context import reset_request_id, set_request_id
from app.shared.telemetry import RequestIdFilter


def _record() -> logging.LogRecord:
    return logging.LogRecord("test", logging.INFO, __file__, 1, "msg", None, None)


def test_filter_uses_current_request_id() -> None:
    token = set_request_id("req-1")
    try:
        record = _record()
        assert RequestIdFilter().filter(record) is True
        assert record.request_id == "req-1"
    finally:
        reset_request_id(token)


def test_filter_outside_request_uses_dash() -> None:
    record = _record()
    RequestIdFilter().filter(record)
    assert record.request_id == "-"


def test_sanitize_keeps_safe_ids_and_replaces_others() -> None:
    assert sanitize_request_id("abc-123_X") == "abc-123_X"
    assert sanitize_request_id("x" * 65) != "x" * 65
    assert len(sanitize_request_id(None)) == 36
