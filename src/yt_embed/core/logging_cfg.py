"""Logging configuration utilities.

Log lines are single JSON objects. Structured context passed through
``extra=`` (e.g. the source and player variables a request produced) is
emitted under ``context`` rather than formatted into the message.
"""
from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Final

# Attributes every LogRecord carries; anything else came in through ``extra=``.
_RECORD_ATTRIBUTES: Final[frozenset[str]] = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime", "taskName"}


def record_context(record: logging.LogRecord) -> dict[str, Any]:
    """Return the ``extra=`` attributes attached to ``record``."""

    return {key: value for key, value in vars(record).items() if key not in _RECORD_ATTRIBUTES}


class JsonFormatter(logging.Formatter):
    """JSON log formatter carrying structured ``extra=`` context."""

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record as a single-line JSON string.

        Notes
        -----
        - Player variables hold only ints, strings and lists of strings, so they are
          emitted as real JSON values. Anything else falls back to ``str``.
        """

        payload: dict[str, Any] = {
            "level": record.levelname,
            "time": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "message": record.getMessage(),
            "name": record.name,
            "function": record.funcName,
            "line": record.lineno,
        }
        context: dict[str, Any] = record_context(record)
        if context:
            payload["context"] = context
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging(debug: bool) -> None:
    """Send JSON lines to stdout from the root logger.

    Parameters
    ----------
    debug: bool
        Log at DEBUG (including every built parameter set) instead of INFO.
    """

    level: int = logging.DEBUG if debug else logging.INFO
    handler: logging.Handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())

    root_logger: logging.Logger = logging.getLogger()
    root_logger.setLevel(level)
    for h in list(root_logger.handlers):
        root_logger.removeHandler(h)
    root_logger.addHandler(handler)

    logging.getLogger("uvicorn.access").setLevel(logging.WARNING if not debug else level)
