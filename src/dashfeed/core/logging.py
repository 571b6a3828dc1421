# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Structured logging with API-key redaction.

The HTTP client attaches request context (``method``, ``target``,
``attempt``, ``delay``, ``status_code``) to its records via ``extra``; the
JSON formatter emits those fields alongside the message.
"""

import json
import logging
import re
import sys
from typing import Any

# Provider URLs carry their API keys in the query string.
REDACT_PATTERNS = [
    re.compile(r"((?:apiKey|api_key)=[^&\s]{4})[^&\s]*"),
    re.compile(r"(Bearer\s+[a-zA-Z0-9\-._~+/]{6})[a-zA-Z0-9\-._~+/]*"),
]

CONTEXT_FIELDS = ("method", "target", "attempt", "delay", "status_code")


def redact_sensitive(text: str) -> str:
    for pattern in REDACT_PATTERNS:
        text = pattern.sub(r"\1[REDACTED]", text)
    return text


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": redact_sensitive(record.getMessage()),
        }
        for field in CONTEXT_FIELDS:
            value = getattr(record, field, None)
            if value is None:
                continue
            log_entry[field] = redact_sensitive(value) if isinstance(value, str) else value
        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = redact_sensitive(str(record.exc_info[1]))
        return json.dumps(log_entry)


class TextFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        return redact_sensitive(super().format(record))


def setup_logging(level: str = "INFO", fmt: str = "json") -> None:
    """Attach a single stderr handler to the ``dashfeed`` logger."""
    root = logging.getLogger("dashfeed")
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()

    handler = logging.StreamHandler(sys.stderr)
    if fmt == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(
            TextFormatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
    root.addHandler(handler)
