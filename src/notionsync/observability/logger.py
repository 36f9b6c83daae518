"""Structured JSON logging for notionsync.

Each record is written as one JSON object per line so conversion
diagnostics can be shipped to a log pipeline without extra parsing::

    {"ts": "2026-01-05T09:30:00.000000+00:00", "level": "WARNING",
     "logger": "notionsync.converter", "message": "frontmatter ignored",
     "op": "split_frontmatter", "reason": "ScannerError"}

Usage::

    from notionsync.observability import get_logger

    log = get_logger("notionsync.converter")
    log.warning("frontmatter ignored", extra={"extra_fields": {"reason": "..."}})
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any

_RESERVED_KEYS = frozenset({"ts", "level", "logger", "message"})


class StructuredFormatter(logging.Formatter):
    """Format log records as single-line JSON objects.

    Guaranteed keys are ``ts`` (ISO-8601 UTC), ``level``, ``logger`` and
    ``message``.  Fields passed as ``extra={"extra_fields": {...}}`` are
    merged into the top-level object; they never overwrite the guaranteed
    keys.  ``exception`` and ``stack_info`` appear when the record carries
    them.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extra_fields: dict[str, Any] | None = getattr(record, "extra_fields", None)
        if extra_fields:
            for key, value in extra_fields.items():
                if key not in _RESERVED_KEYS:
                    entry[key] = value

        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)

        if record.stack_info:
            entry["stack_info"] = self.formatStack(record.stack_info)

        return json.dumps(entry, default=str, ensure_ascii=False)


# Names that already carry our handler, so repeated calls stay idempotent.
_configured_loggers: set[str] = set()


def get_logger(
    name: str = "notionsync",
    *,
    level: int | str = logging.WARNING,
    stream: Any | None = None,
) -> logging.Logger:
    """Get or create a structured JSON logger.

    Parameters
    ----------
    name:
        Logger name.  Module loggers use ``"notionsync.<area>"``.
    level:
        Minimum level, as an ``int`` or a case-insensitive name such as
        ``"debug"``.  Only applied the first time *name* is configured.
    stream:
        Output stream for the handler.  Defaults to ``sys.stderr``.

    Returns
    -------
    logging.Logger
        The logger, with exactly one :class:`StructuredFormatter` handler
        attached no matter how often this is called.
    """
    logger = logging.getLogger(name)

    if name not in _configured_loggers:
        if isinstance(level, str):
            level = logging.getLevelName(level.upper())
        logger.setLevel(level)

        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)
        logger.propagate = False

        _configured_loggers.add(name)

    return logger
