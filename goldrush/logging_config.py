"""JSON log lines for the client's loggers.

Every entry carries ``timestamp``, ``level``, ``logger``, ``message`` and
``request_id`` (None outside a dispatch). Records logged by the dispatcher add
``method``, ``path``, ``status_code``, ``attempt``, ``delay_seconds``,
``error_kind`` and ``error_reason`` through ``extra``.

SECURITY: API keys and bearer tokens are masked before anything is written.
"""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone

# key=value / key: value pairs and bare bearer tokens
_SECRETS = re.compile(
    r"(api.key|secret|password|token|credential|authorization)"
    r"\s*[=:]\s*(?:bearer\s+)?\S+"
    r"|bearer\s+\S+",
    re.IGNORECASE,
)
_MASK = "[REDACTED]"

_CONTEXT_FIELDS = (
    "method",
    "path",
    "status_code",
    "attempt",
    "delay_seconds",
    "error_kind",
)


def redact(text: str) -> str:
    """Mask credential-looking fragments of ``text``."""
    return _SECRETS.sub(_MASK, text)


class JsonFormatter(logging.Formatter):
    """Render a record as one JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": redact(record.getMessage()),
            "request_id": getattr(record, "request_id", None),
        }
        payload.update(
            (name, getattr(record, name))
            for name in _CONTEXT_FIELDS
            if hasattr(record, name)
        )

        reason = getattr(record, "error_reason", None)
        if reason is not None:
            payload["error_reason"] = redact(str(reason))
        if record.exc_info and record.exc_info[1] is not None:
            payload["exception"] = redact(self.formatException(record.exc_info))

        return json.dumps(payload, default=str)


def configure_logging(level: str = "INFO", logger_name: str = "goldrush") -> None:
    """Send the client's logs to stderr as JSON lines.

    Parameters
    ----------
    level:
        Log level name; unknown names fall back to INFO.
    logger_name:
        Logger to configure. Defaults to the package logger so an
        application's own handlers are left alone.
    """
    target = logging.getLogger(logger_name)
    target.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Calling this twice must not duplicate output
    target.handlers.clear()

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    target.addHandler(handler)
