"""Logging setup for the ``fars`` package: plain-text or single-line JSON."""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Union

# Attributes every LogRecord carries; anything else came from ``extra=``.
_RECORD_ATTRS = frozenset({
    "msg", "args", "levelname", "levelno", "pathname", "filename",
    "module", "exc_info", "exc_text", "stack_info", "lineno",
    "funcName", "created", "msecs", "relativeCreated", "thread",
    "threadName", "processName", "process", "name", "message", "taskName",
})

# Accident context: always present in JSON output
_CONTEXT_KEYS = ("year", "state")
# Emitted at top level only when a record carries them
_OPTIONAL_KEYS = ("path", "error")

_TEXT_FORMAT = "%(levelname)-8s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """Emit log records as single-line JSON objects.

    Every line carries the accident context keys ``year`` and ``state``
    (``null`` when the record is not about a particular year or state), so
    log queries can filter on them directly.  ``path`` and ``error`` are
    added when present; any other ``extra=`` field is nested under
    ``"extra"``.
    """

    def format(self, record: logging.LogRecord) -> str:
        fields = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _RECORD_ATTRS
        }

        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: Dict[str, Any] = {
            "ts": created.isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for key in _CONTEXT_KEYS:
            payload[key] = fields.pop(key, None)
        for key in _OPTIONAL_KEYS:
            if key in fields:
                payload[key] = fields.pop(key)
        if fields:
            payload["extra"] = fields

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        # numpy scalars and Paths fall back to str()
        return json.dumps(payload, default=str)


def configure_logging(
    level: Union[int, str] = logging.INFO,
    json_output: bool = False,
) -> logging.Logger:
    """Attach a single stderr handler to the ``fars`` package logger.

    Safe to call repeatedly; previously installed handlers are replaced.

    Args:
        level: Logging level for the ``fars`` logger.
        json_output: Emit JSON lines instead of plain text.

    Returns:
        The configured ``fars`` logger.
    """
    logger = logging.getLogger("fars")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        JsonFormatter() if json_output else logging.Formatter(_TEXT_FORMAT)
    )
    logger.addHandler(handler)
    logger.setLevel(level)
    return logger
