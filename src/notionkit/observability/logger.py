"""Structured JSON logging for notionkit.

Each record is written as one JSON object per line::

    {"ts": "2026-01-05T09:14:03.512345+00:00", "level": "DEBUG",
     "logger": "notionkit.transport", "message": "request complete",
     "op": "request", "method": "GET", "path": "/users", "status": 200,
     "duration_ms": 84.2}

Structured fields ride on ``extra={"extra_fields": {...}}``; :func:`fields`
builds that mapping::

    from notionkit.observability import fields, get_logger

    log = get_logger("notionkit.pagination")
    log.debug("page fetched", extra=fields(op="paginate", page=2, items=100))
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, TextIO

ROOT_LOGGER_NAME = "notionkit"

# Fields that must never reach a log line even if a caller passes them.
_FORBIDDEN_FIELDS = frozenset({"token", "authorization", "start_cursor"})


class StructuredFormatter(logging.Formatter):
    """Render a :class:`logging.LogRecord` as a single-line JSON object.

    Guaranteed keys are ``ts``, ``level``, ``logger`` and ``message``.
    Structured fields are merged at the top level; ``exception`` is added
    when the record carries exception info.
    """

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        extra_fields: dict[str, Any] | None = getattr(record, "extra_fields", None)
        if extra_fields:
            entry.update(
                (k, v) for k, v in extra_fields.items() if k.lower() not in _FORBIDDEN_FIELDS
            )

        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


def fields(**values: Any) -> dict[str, dict[str, Any]]:
    """Build the ``extra=`` mapping understood by :class:`StructuredFormatter`."""
    return {"extra_fields": values}


def _resolve_level(level: int | str) -> int:
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.upper())
    if not isinstance(resolved, int):
        raise ValueError(f"unknown log level {level!r}")
    return resolved


def get_logger(
    name: str = ROOT_LOGGER_NAME,
    *,
    level: int | str | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """Return a logger that writes structured JSON.

    Only the root ``notionkit`` logger gets a handler; child loggers such as
    ``notionkit.transport`` propagate to it.  The handler is installed once,
    so repeated calls never duplicate output.

    Parameters
    ----------
    name:
        Logger name.  Must be ``notionkit`` or a dotted child of it.
    level:
        Optional level to set on the returned logger.
    stream:
        Stream for the root handler the first time it is installed.
        Defaults to ``sys.stderr``.
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    if not any(isinstance(h.formatter, StructuredFormatter) for h in root.handlers):
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(StructuredFormatter())
        root.addHandler(handler)
        root.propagate = False
        if root.level == logging.NOTSET:
            root.setLevel(logging.WARNING)

    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(_resolve_level(level))
    return logger
