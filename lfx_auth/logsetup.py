"""Structured JSON logging with attributes carried by the current context."""

from __future__ import annotations

import contextvars
import json
import logging
import os
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

_PRIORITY_CRITICAL = "critical"

_LEVELS = {
    "debug": logging.DEBUG,
    "warn": logging.WARNING,
    "info": logging.INFO,
}
_DEFAULT_LEVEL = logging.DEBUG

_LEVEL_NAMES = {
    logging.DEBUG: "DEBUG",
    logging.INFO: "INFO",
    logging.WARNING: "WARN",
    logging.ERROR: "ERROR",
}

_CONTEXT_ATTR = "ctx_fields"
_RESERVED = set(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {
    "message",
    "asctime",
    _CONTEXT_ATTR,
}

_fields: contextvars.ContextVar[tuple[tuple[str, Any], ...]] = contextvars.ContextVar(
    "log_fields", default=()
)

_log = logging.getLogger(__name__)


def append_context(key: str, value: Any) -> contextvars.Token:
    """Add an attribute to every record logged from the current context."""
    return _fields.set(_fields.get() + ((key, value),))


def context_fields() -> dict[str, Any]:
    """Return the attributes attached to the current context."""
    return dict(_fields.get())


class ContextFilter(logging.Filter):
    """Copies the current context's attributes onto each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        setattr(record, _CONTEXT_ATTR, _fields.get())
        return True


class JsonFormatter(logging.Formatter):
    """Renders records as one JSON object per line."""

    def __init__(self, add_source: bool = False) -> None:
        super().__init__()
        self.add_source = add_source

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": _LEVEL_NAMES.get(record.levelno, record.levelname),
        }
        if self.add_source:
            payload["source"] = {
                "function": record.funcName,
                "file": record.pathname,
                "line": record.lineno,
            }
        payload["msg"] = record.getMessage()
        for key, value in vars(record).items():
            if key not in _RESERVED:
                payload[key] = value
        for key, value in getattr(record, _CONTEXT_ATTR, ()):
            payload[key] = value
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def init_structure_log_config(stream: TextIO | None = None) -> logging.Handler:
    """Configure the root logger for JSON output from LOG_LEVEL and LOG_ADD_SOURCE."""
    log_level = os.environ.get("LOG_LEVEL", "")
    _log.info("log config", extra={"logLevel": log_level})
    level = _LEVELS.get(log_level, _DEFAULT_LEVEL)

    add_source = os.environ.get("LOG_ADD_SOURCE", "") == "true"
    _log.info("log config", extra={"LOG_ADD_SOURCE": add_source})

    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.setFormatter(JsonFormatter(add_source=add_source))
    handler.addFilter(ContextFilter())

    root = logging.getLogger()
    for old in list(root.handlers):
        root.removeHandler(old)
    root.addHandler(handler)
    root.setLevel(level)
    return handler


def priority(level: str) -> dict[str, str]:
    """Extra attributes classifying an error's priority."""
    return {"priority": level}


def priority_critical() -> dict[str, str]:
    """Extra attributes marking an error that must be escalated."""
    return priority(_PRIORITY_CRITICAL)