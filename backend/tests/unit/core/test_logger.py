"""Unit tests for the logging utility."""

from __future__ import annotations

import json
import logging

from blog_api.core.logger import JSONFormatter, configure_logging


def test_configure_logging_sets_level() -> None:
    """``configure_logging`` should set the root logger level."""

    configure_logging("DEBUG")
    assert logging.getLogger().level == logging.DEBUG

    # Restore the quieter level used by the suite
    configure_logging("WARNING")


def test_json_formatter_includes_known_extras() -> None:
    record = logging.LogRecord(
        name="blog_api.test",
        level=logging.WARNING,
        pathname=__file__,
        lineno=1,
        msg="auth.reuse_detected",
        args=(),
        exc_info=None,
    )
    record.account_id = "abc"
    record.sessions = 3
    record.request_id = "req-1"
    record.unrelated = "ignored"

    line = json.loads(JSONFormatter().format(record))

    assert line["message"] == "auth.reuse_detected"
    assert line["level"] == "WARNING"
    assert line["account_id"] == "abc"
    assert line["sessions"] == 3
    assert line["request_id"] == "req-1"
    assert "unrelated" not in line


def test_request_id_is_echoed_on_responses(client) -> None:
    resp = client.get("/health", headers={"X-Request-ID": "trace-123"})
    assert resp.headers["X-Request-ID"] == "trace-123"


def test_request_id_is_generated_when_absent(client) -> None:
    first = client.get("/health").headers["X-Request-ID"]
    second = client.get("/health").headers["X-Request-ID"]
    assert first
    assert first != second
