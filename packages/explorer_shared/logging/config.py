"""Stdout logging configuration for the explorer core.

One handler writes to stdout. Records carry the bound context; formatters pull
the selection fields (service, version, method, auth mode) and the dispatch
fields (notification, depth, deferred round) out into their own groups so a
cascade can be followed line by line.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any, Mapping

from . import fields
from .context import bind_context, get_context, selection_label

NOTIFICATIONS_LOGGER = "packages.explorer_shared.notifications"


class ContextFilter(logging.Filter):
    """Attach the bound context and its selection label to each record."""

    def filter(self, record: logging.LogRecord) -> bool:
        context = get_context()
        record.context = context
        record.selection = selection_label(context)
        return True


def split_context(
    context: Mapping[str, str],
) -> tuple[dict[str, str], dict[str, str], dict[str, str]]:
    """Split context into selection fields, dispatch fields and the rest."""
    selection = {
        key: context[key] for key in fields.SELECTION_FIELDS if key in context
    }
    dispatch = {key: context[key] for key in fields.DISPATCH_FIELDS if key in context}
    rest = {
        key: value
        for key, value in context.items()
        if key not in selection and key not in dispatch
    }
    return selection, dispatch, rest


class JsonFormatter(logging.Formatter):
    """Emit one JSON object per line with nested selection and dispatch groups."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            fields.TIMESTAMP: datetime.now(UTC).isoformat(),
            fields.LEVEL: record.levelname,
            fields.LOGGER: record.name,
            fields.MESSAGE: record.getMessage(),
        }

        context = getattr(record, "context", None)
        if isinstance(context, dict):
            selection, dispatch, rest = split_context(context)
            payload.update(rest)
            if selection:
                payload[fields.SELECTION] = selection
            if dispatch:
                payload[fields.DISPATCH] = dispatch

        if record.exc_info:
            payload[fields.EXCEPTION] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str, separators=(",", ":"))


class PlainFormatter(logging.Formatter):
    """Readable lines: ``[service/version#method]`` tag, message, then fields."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )

    def format(self, record: logging.LogRecord) -> str:
        message = super().format(record)
        context = getattr(record, "context", None)
        if not isinstance(context, dict) or not context:
            return message

        selection, dispatch, rest = split_context(context)
        label = getattr(record, "selection", None)
        if label is not None:
            message = f"{message} [{label}]"
        if fields.AUTH_MODE in selection:
            message = f"{message} {fields.AUTH_MODE}={selection[fields.AUTH_MODE]}"
        pairs = [f"{key}={value}" for key, value in dispatch.items()]
        pairs.extend(f"{key}={value}" for key, value in sorted(rest.items()))
        if not pairs:
            return message
        return f"{message} {' '.join(pairs)}"


def configure_logging(
    *,
    level: str = "INFO",
    json_output: bool = True,
    notifications_level: str | None = None,
    service: str | None = None,
    environment: str | None = None,
) -> None:
    """Configure root logging with a single stdout handler.

    Existing root handlers are replaced so repeated calls do not duplicate
    emissions. ``notifications_level`` sets the channel and deferred queue
    loggers independently, so dispatch tracing can run at DEBUG alone.
    """
    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level.upper())

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.addFilter(ContextFilter())
    handler.setFormatter(JsonFormatter() if json_output else PlainFormatter())
    root.addHandler(handler)

    notifications = logging.getLogger(NOTIFICATIONS_LOGGER)
    notifications.setLevel(
        notifications_level.upper() if notifications_level else logging.NOTSET
    )

    bind_context(**{fields.SERVICE: service, fields.ENVIRONMENT: environment})


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger using Python's standard logging hierarchy."""
    return logging.getLogger(name)
