"""Tests for logging setup and structured records."""

import json
import logging

import pytest

from src.infrastructure.logging.logger import JsonFormatter, StructuredLogger, setup_logging


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_formatter_emits_one_object():
    record = logging.LogRecord("src.test", logging.WARNING, __file__, 1, "hello %s", ("world",), None)
    payload = json.loads(JsonFormatter().format(record))

    assert payload["message"] == "hello world"
    assert payload["level"] == "WARNING"
    assert payload["logger"] == "src.test"


def test_setup_logging_quiets_http_clients(restore_root_logger):
    setup_logging(level="DEBUG", json_output=True, silence_noisy_loggers=True)

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert isinstance(root.handlers[0].formatter, JsonFormatter)
    assert logging.getLogger("httpx").level == logging.WARNING


def test_structured_logger_step(caplog):
    events = StructuredLogger("src.services.series.poller")
    with caplog.at_level(logging.INFO, logger="src.services.series.poller"):
        events.log_step("poll", {"changed": True, "points": 3}, duration_ms=12.5)

    record = json.loads(caplog.records[-1].getMessage())
    assert record["step"] == "poll"
    assert record["state"] == {"changed": True, "points": 3}
    assert record["duration_ms"] == 12.5


def test_structured_logger_error(caplog):
    events = StructuredLogger("src.services.series.poller")
    with caplog.at_level(logging.ERROR, logger="src.services.series.poller"):
        events.log_error("fetch", RuntimeError("down"), {"url": "http://x"})

    record = json.loads(caplog.records[-1].getMessage())
    assert record["error_type"] == "RuntimeError"
    assert record["context"] == {"url": "http://x"}
