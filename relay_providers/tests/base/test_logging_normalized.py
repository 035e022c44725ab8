"""Focused tests for relay_providers.base.logging.

Covers:
- _parse_level string parsing
- _coerce_tokens stability
- normalized_log_event emits required keys and the error level default
- JsonFormatter hoists event keys
"""
from __future__ import annotations

import json
import logging

from relay_providers.base.log_support import JsonFormatter, LogContext
from relay_providers.base.logging import (
    REQUIRED_NORMALIZED_KEYS,
    _coerce_tokens,  # type: ignore[attr-defined]
    _parse_level,  # type: ignore[attr-defined]
    get_logger,
    log_event,
    normalized_log_event,
)
from relay_providers.base.models import Usage


class _ListHandler(logging.Handler):
    """Capture log records into a list for assertions."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records: list[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)

    def payloads(self) -> list[dict]:
        return [json.loads(r.getMessage()) for r in self.records]


def _capturing_logger(name: str) -> tuple[logging.Logger, _ListHandler]:
    logger = get_logger(name)
    handler = _ListHandler()
    logger.handlers[:] = [handler]
    logger.propagate = False
    logger.setLevel(logging.DEBUG)
    return logger, handler


def test_parse_level_variants():
    assert _parse_level(None) == logging.INFO  # nosec B101
    assert _parse_level("debug") == logging.DEBUG  # nosec B101
    assert _parse_level("WARN") == logging.WARNING  # nosec B101
    assert _parse_level("unknown", default=logging.ERROR) == logging.ERROR  # nosec B101


def test_get_logger_prefixes_base_name():
    assert get_logger("gemini").name == "providers.gemini"  # nosec B101
    assert get_logger("providers.openai").name == "providers.openai"  # nosec B101


def test_coerce_tokens_shapes():
    assert _coerce_tokens(None) is None  # nosec B101
    assert _coerce_tokens({"prompt": 1}) == {"prompt": 1}  # nosec B101
    assert _coerce_tokens([("a", 1)]) == {"a": 1}  # nosec B101
    dumped = _coerce_tokens(Usage.from_counts(2, 3))
    assert dumped["total_tokens"] == 5  # nosec B101
    assert "reasoning_tokens" not in dumped  # nosec B101


def test_normalized_event_carries_required_keys():
    logger, handler = _capturing_logger("providers.test.normalized")
    normalized_log_event(
        logger,
        "chat.end",
        LogContext(provider="p", model="m"),
        phase="finalize",
        attempt=1,
        emitted=True,
        tokens={"total_tokens": 3},
        duration_ms=1.5,
    )
    payload = handler.payloads()[0]
    for key in REQUIRED_NORMALIZED_KEYS:
        if key == "error_code":
            assert key not in payload  # nosec B101
        else:
            assert key in payload  # nosec B101
    assert payload["provider"] == "p"  # nosec B101
    assert payload["duration_ms"] == 1.5  # nosec B101
    assert handler.records[0].levelno == logging.INFO  # nosec B101


def test_error_events_default_to_warning_and_keep_normalized_values():
    logger, handler = _capturing_logger("providers.test.errors")
    normalized_log_event(logger, "chat.error", phase="finalize", error_code="rate_limit", emitted=False, attempt=1)
    record = handler.records[0]
    assert record.levelno == logging.WARNING  # nosec B101
    assert handler.payloads()[0]["error_code"] == "rate_limit"  # nosec B101


def test_log_event_drops_none_fields():
    logger, handler = _capturing_logger("providers.test.plain")
    log_event(logger, "convert.skip_message", role="robot", detail=None)
    payload = handler.payloads()[0]
    assert payload == {"event": "convert.skip_message", "role": "robot"}  # nosec B101


def test_json_formatter_hoists_event_keys():
    record = logging.LogRecord("providers.x", logging.INFO, __file__, 1, json.dumps({"event": "e", "n": 1}), None, None)
    out = json.loads(JsonFormatter().format(record))
    assert out["event"] == "e" and out["n"] == 1  # nosec B101
    assert out["level"] == "INFO" and out["logger"] == "providers.x"  # nosec B101
    plain = logging.LogRecord("providers.x", logging.INFO, __file__, 1, "hello", None, None)
    assert json.loads(JsonFormatter().format(plain))["msg"] == "hello"  # nosec B101
