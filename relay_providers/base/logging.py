"""Structured logging utilities for the provider layer.

All adapters log through child loggers of the shared ``providers`` logger
(``providers.openai``, ``providers.gemini`` ...). The base logger writes one
JSON object per line to stderr; its level comes from ``PROVIDERS_LOG_LEVEL``
(default INFO).

``log_event`` is the primitive: an event name plus a `LogContext` plus
arbitrary fields, serialized as a JSON message. ``normalized_log_event``
guarantees a fixed key set (``phase``, ``attempt``, ``error_code``,
``emitted``, ``tokens``) so call, stream and error events aggregate uniformly
regardless of provider.
"""
from __future__ import annotations

import json
import logging
import os
import sys
from typing import Any, Dict, Mapping, Optional

from .log_support import JsonFormatter, LogContext


BASE_LOGGER_NAME = "providers"
LOG_LEVEL_ENV = "PROVIDERS_LOG_LEVEL"
_PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
_CONSOLE_HANDLER_ATTR = "_providers_console_handler"


def _parse_level(value: Optional[str], default: int = logging.INFO) -> int:
    """Parse a level name (case-insensitive); unknown values give ``default``."""
    if not value:
        return default
    mapping = {
        "DEBUG": logging.DEBUG,
        "INFO": logging.INFO,
        "WARN": logging.WARNING,
        "WARNING": logging.WARNING,
        "ERROR": logging.ERROR,
        "CRITICAL": logging.CRITICAL,
    }
    return mapping.get(value.strip().upper(), default)


def _ensure_base_logger(json_mode: bool, level: int) -> logging.Logger:
    """Initialize (once) and return the shared ``providers`` logger."""
    logger = logging.getLogger(BASE_LOGGER_NAME)
    desired = _parse_level(os.getenv(LOG_LEVEL_ENV), default=level)
    managed = [h for h in logger.handlers if getattr(h, _CONSOLE_HANDLER_ATTR, False)]
    if managed:
        logger.setLevel(desired)
        for handler in managed:
            handler.setLevel(desired)
        return logger
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(desired)
    handler.setFormatter(JsonFormatter() if json_mode else logging.Formatter(_PLAIN_FORMAT))
    setattr(handler, _CONSOLE_HANDLER_ATTR, True)
    logger.addHandler(handler)
    logger.setLevel(desired)
    logger.propagate = False
    return logger


def get_logger(name: str = BASE_LOGGER_NAME, json_mode: bool = True, level: int = logging.INFO) -> logging.Logger:
    """Return ``name`` as a child of the configured ``providers`` logger."""
    base_logger = _ensure_base_logger(json_mode=json_mode, level=level)
    if name == BASE_LOGGER_NAME:
        return base_logger
    if not name.startswith(BASE_LOGGER_NAME + "."):
        name = f"{BASE_LOGGER_NAME}.{name}"
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    return logger


def log_event(
    logger: logging.Logger,
    event: str,
    ctx: Optional[LogContext] = None,
    *,
    level: int = logging.INFO,
    keep_none: bool = False,
    **fields: Any,
) -> None:
    """Emit a single-line JSON event.

    Keys with ``None`` values are dropped unless ``keep_none`` is set.
    """
    if not logger.isEnabledFor(level):
        return
    payload: Dict[str, Any] = {"event": event}
    if ctx:
        payload.update(ctx.to_dict())
    if keep_none:
        payload.update(fields)
    else:
        payload.update({k: v for k, v in fields.items() if v is not None})
    logger.log(level, json.dumps(payload, ensure_ascii=False, default=str))


REQUIRED_NORMALIZED_KEYS = (
    "phase",
    "attempt",
    "error_code",
    "emitted",
    "tokens",
)


def _coerce_tokens(tokens: Any) -> Any:
    """Coerce usage info (mapping, pydantic model or pairs) into a plain dict."""
    if tokens is None:
        return None
    if hasattr(tokens, "model_dump"):
        return tokens.model_dump(exclude_none=True)
    if isinstance(tokens, Mapping):
        return dict(tokens.items())
    if isinstance(tokens, (list, tuple)):
        try:
            return dict(tokens)
        except (TypeError, ValueError):
            return {"value": repr(tokens)}
    return {"value": repr(tokens)}


def normalized_log_event(
    logger: logging.Logger,
    event: str,
    ctx: Optional[LogContext] = None,
    *,
    phase: str,
    attempt: Optional[int] = None,
    error_code: Optional[str] = None,
    emitted: Optional[bool] = None,
    tokens: Any = None,
    level: Optional[int] = None,
    **extra_fields: Any,
) -> None:
    """Emit an event that always carries the normalized key set.

    ``error_code`` is omitted when ``None``; error events default to WARNING.
    Extra fields never overwrite a normalized value.
    """
    base_fields: Dict[str, Any] = {
        "phase": phase,
        "attempt": attempt,
        "emitted": emitted,
        "tokens": _coerce_tokens(tokens),
    }
    if error_code is not None:
        base_fields["error_code"] = error_code
    for k, v in extra_fields.items():
        if v is None or base_fields.get(k) is not None:
            continue
        base_fields[k] = v
    if level is None:
        level = logging.WARNING if error_code is not None else logging.INFO
    log_event(logger, event, ctx, level=level, keep_none=True, **base_fields)


__all__ = [
    "LogContext",
    "get_logger",
    "log_event",
    "normalized_log_event",
    "REQUIRED_NORMALIZED_KEYS",
    "BASE_LOGGER_NAME",
    "LOG_LEVEL_ENV",
]
