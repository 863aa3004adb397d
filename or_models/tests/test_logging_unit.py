"""Unit coverage for structured logging utilities and helpers."""

from __future__ import annotations

import json
import logging

from or_models.base.log_support import JsonFormatter
from or_models.base.logging import (
    BASE_LOGGER_NAME,
    LOG_LEVEL_ENV,
    LogContext,
    configure_logger,
    get_logger,
    log_event,
    normalized_log_event,
)


def test_child_loggers_propagate_to_base():
    child = get_logger("or_models.catalog.test")
    assert child.propagate is True  # nosec B101 - asserts are appropriate in unit tests
    assert child.handlers == []  # nosec B101 - only the base logger owns a console handler


def test_log_event_emits_json_on_stderr(capsys):
    configure_logger(level="DEBUG", json_mode=True)
    logger = get_logger("or_models.test")
    log_event(logger, "catalog.cache.hit", LogContext(api_url="http://x", cache_path="/tmp/m.json"), count=3, skip=None)
    line = capsys.readouterr().err.strip().splitlines()[-1]
    data = json.loads(line)
    assert data["event"] == "catalog.cache.hit"  # nosec B101 - asserts are appropriate in unit tests
    assert data["api_url"] == "http://x"  # nosec B101 - asserts are appropriate in unit tests
    assert data["count"] == 3  # nosec B101 - asserts are appropriate in unit tests
    assert "skip" not in data  # nosec B101 - None fields dropped
    assert data["logger"] == "or_models.test"  # nosec B101 - asserts are appropriate in unit tests


def test_level_filters_events(capsys):
    configure_logger(level="ERROR", json_mode=True)
    logger = get_logger("or_models.test.level")
    log_event(logger, "quiet", level=logging.WARNING)
    assert capsys.readouterr().err == ""  # nosec B101 - asserts are appropriate in unit tests
    log_event(logger, "loud", level=logging.ERROR)
    assert "loud" in capsys.readouterr().err  # nosec B101 - asserts are appropriate in unit tests


def test_plain_mode_keeps_payload_in_message(capsys):
    configure_logger(level="INFO", json_mode=False)
    log_event(get_logger("or_models.plain"), "cli.list", shown=2)
    err = capsys.readouterr().err
    assert "INFO or_models.plain" in err  # nosec B101 - asserts are appropriate in unit tests
    assert '{"event": "cli.list", "shown": 2}' in err  # nosec B101 - asserts are appropriate in unit tests


def test_normalized_log_event_includes_required_keys(log_events):
    logger = get_logger("or_models.test.normalized")
    normalized_log_event(
        logger,
        "catalog.fetch.failed",
        LogContext(cache_path="/c"),
        phase="network",
        error_code=None,
        status_code=None,
        phase_override="ignored",
        structured_extra=1,
    )
    payload = log_events.find("catalog.fetch.failed")
    assert payload["structured"] is True and payload["phase"] == "network"  # nosec B101
    assert "error_code" not in payload and "status_code" not in payload  # nosec B101
    assert payload["cache_path"] == "/c" and payload["structured_extra"] == 1  # nosec B101


def test_normalized_error_code_and_structured_flag(log_events):
    logger = get_logger("or_models.test.flags")
    normalized_log_event(logger, "evt", phase="cache", error_code="corrupt", structured=False, level=logging.WARNING)
    payload = log_events.find("evt")
    assert payload["structured"] is False and payload["error_code"] == "corrupt"  # nosec B101
    assert payload["_level"] == logging.WARNING  # nosec B101 - asserts are appropriate in unit tests


def test_json_formatter_hoists_json_message():
    formatter = JsonFormatter()
    record = logging.LogRecord("or_models.x", logging.INFO, __file__, 1, json.dumps({"event": "e", "n": 1}), None, None)
    data = json.loads(formatter.format(record))
    assert data["event"] == "e" and data["n"] == 1  # nosec B101 - asserts are appropriate in unit tests
    assert "msg" not in data  # nosec B101 - asserts are appropriate in unit tests


def test_json_formatter_keeps_plain_message():
    formatter = JsonFormatter()
    record = logging.LogRecord("or_models.x", logging.WARNING, __file__, 1, "plain text", None, None)
    data = json.loads(formatter.format(record))
    assert data["msg"] == "plain text" and data["level"] == "WARNING"  # nosec B101


def test_log_context_drops_unset_fields():
    assert LogContext(api_url="http://x").to_dict() == {"api_url": "http://x"}  # nosec B101
    assert LogContext().to_dict() == {}  # nosec B101 - asserts are appropriate in unit tests


def test_base_logger_init_ignores_process_environment(monkeypatch):
    monkeypatch.setenv(LOG_LEVEL_ENV, "DEBUG")
    base = logging.getLogger(BASE_LOGGER_NAME)
    monkeypatch.setattr(base, "_or_models_logger_initialized", False)
    logger = get_logger(level=logging.WARNING)
    assert logger.level == logging.WARNING  # nosec B101 - only explicit levels apply
