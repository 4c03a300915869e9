"""Logging context for the selection cascade.

Context lives in a ``ContextVar`` so the service, version and method a
coordinator is working on are attached to every record emitted inside a
dispatch without threading them through each log call.
"""

from __future__ import annotations

from contextlib import AbstractContextManager, contextmanager
from contextvars import ContextVar
from typing import Iterator, Mapping

from . import fields

_LOG_CONTEXT: ContextVar[dict[str, str]] = ContextVar(
    "explorer_log_context", default={}
)


def get_context() -> dict[str, str]:
    """Return a shallow copy of the current logging context."""
    return dict(_LOG_CONTEXT.get())


def bind_context(**values: object) -> None:
    """Bind values into the current context; ``None`` values are skipped.

    Enum members are bound by value so modes and policies read the same in
    JSON and plain output.
    """
    if not values:
        return
    current = _LOG_CONTEXT.get().copy()
    for key, value in values.items():
        if value is None:
            continue
        current[str(key)] = str(getattr(value, "value", value))
    _LOG_CONTEXT.set(current)


def clear_context(*keys: str) -> None:
    """Clear ``keys``, or everything when none are given."""
    if not keys:
        _LOG_CONTEXT.set({})
        return
    current = _LOG_CONTEXT.get().copy()
    for key in keys:
        current.pop(key, None)
    _LOG_CONTEXT.set(current)


@contextmanager
def log_context(values: Mapping[str, object]) -> Iterator[None]:
    """Temporarily bind ``values`` for the duration of a block."""
    token = _LOG_CONTEXT.set(_LOG_CONTEXT.get().copy())
    try:
        bind_context(**dict(values))
        yield
    finally:
        _LOG_CONTEXT.reset(token)


def selection_context(
    service_name: str | None,
    version: str | None = None,
    method_name: str | None = None,
) -> AbstractContextManager[None]:
    """Bind the cascade position a coordinator is acting on."""
    return log_context(
        {
            fields.SERVICE_NAME: service_name,
            fields.VERSION: version,
            fields.METHOD_NAME: method_name,
        }
    )


def selection_label(context: Mapping[str, str]) -> str | None:
    """Render ``service/version#method`` from the bound selection fields."""
    service_name = context.get(fields.SERVICE_NAME)
    if service_name is None:
        return None
    label = service_name
    version = context.get(fields.VERSION)
    if version is not None:
        label = f"{label}/{version}"
    method_name = context.get(fields.METHOD_NAME)
    if method_name is not None:
        label = f"{label}#{method_name}"
    return label
