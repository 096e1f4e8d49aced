"""Structured logging helpers."""

import json
import logging

from advisor_app.logging_config import (
    JsonFormatter,
    correlation_context,
    ensure_correlation_id,
    log_event,
    redact_for_log,
)


def test_redacts_credentials_and_coordinates() -> None:
    scrubbed = redact_for_log(
        {
            "appid": "secret",
            "lat": 52.3,
            "url": "https://api.example.com/weather?lat=1&appid=abc123&units=metric",
            "nested": [{"lon": 4.9, "activity": "running"}],
        }
    )
    assert scrubbed["appid"] == "[redacted]"
    assert scrubbed["lat"] == "[redacted]"
    assert "abc123" not in scrubbed["url"]
    assert scrubbed["nested"] == [{"lon": "[redacted]", "activity": "running"}]


def test_correlation_context_scopes_id() -> None:
    with correlation_context("abc") as scoped:
        assert scoped == "abc"
        assert ensure_correlation_id() == "abc"


def test_json_formatter_includes_event_fields() -> None:
    logger = logging.getLogger("tests.logging")
    records: list[logging.LogRecord] = []

    class _Capture(logging.Handler):
        def emit(self, record: logging.LogRecord) -> None:
            records.append(record)

    handler = _Capture()
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)
    try:
        with correlation_context("corr-1"):
            log_event(logger, logging.INFO, "weather_fetch_started", lat=1.0, activity="running")
    finally:
        logger.removeHandler(handler)

    payload = json.loads(JsonFormatter().format(records[0]))
    assert payload["event"] == "weather_fetch_started"
    assert payload["correlation_id"] == "corr-1"
    assert payload["lat"] == "[redacted]"
    assert payload["activity"] == "running"
