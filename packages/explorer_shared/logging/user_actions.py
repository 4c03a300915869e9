"""Logging instrumentation for coordinator user actions.

User actions (picking a service, version, method or scope; authorizing;
revoking) are the only synchronous entry points into the selection cascade
that do not arrive as notifications. Each decorated action emits one
invocation log and one completion log so a cascade can be reconstructed from
the log stream.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import wraps
from time import perf_counter
from typing import Any, Callable, Mapping

from . import fields
from .context import log_context


@dataclass(frozen=True)
class InvocationContext:
    """Structured metadata describing one user action invocation."""

    component_id: str
    action_name: str
    references: Mapping[str, str]


@dataclass(frozen=True)
class CompletionContext:
    """Structured metadata describing one completed user action."""

    invocation: InvocationContext
    success: bool
    duration_ms: float
    errors: list[str]


def user_action_logged(
    *,
    logger: Any,
    component_id: str,
    action_name: str | None = None,
    id_fields: tuple[str, ...] = (),
) -> Callable[[Callable[..., Any]], Callable[..., Any]]:
    """Decorate one coordinator user action with invocation/completion logs.

    ``id_fields`` names keyword or positional arguments whose values are
    attached to both log records as references.
    """

    def decorator(func: Callable[..., Any]) -> Callable[..., Any]:
        name = action_name or func.__name__
        positional = func.__code__.co_varnames[1 : func.__code__.co_argcount]

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            bound = dict(zip(positional, args[1:]))
            bound.update(kwargs)
            references = {
                field: str(bound[field])
                for field in id_fields
                if bound.get(field) not in (None, "")
            }
            invocation = InvocationContext(
                component_id=component_id,
                action_name=name,
                references=references,
            )
            _emit_invocation(logger=logger, context=invocation)

            started = perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as exc:
                _emit_completion(
                    logger=logger,
                    context=CompletionContext(
                        invocation=invocation,
                        success=False,
                        duration_ms=_elapsed_ms(started),
                        errors=[f"{type(exc).__name__}: {exc}"],
                    ),
                )
                raise

            _emit_completion(
                logger=logger,
                context=CompletionContext(
                    invocation=invocation,
                    success=True,
                    duration_ms=_elapsed_ms(started),
                    errors=[],
                ),
            )
            return result

        return wrapper

    return decorator


def _elapsed_ms(started: float) -> float:
    """Return elapsed wall time in milliseconds rounded for logs."""
    return round((perf_counter() - started) * 1000.0, 3)


def _invocation_log_context(context: InvocationContext) -> dict[str, object]:
    """Build common structured fields for one invocation event."""
    return {
        fields.EVENT: fields.USER_ACTION_INVOCATION_EVENT,
        fields.COMPONENT_ID: context.component_id,
        fields.ACTION_NAME: context.action_name,
        **context.references,
    }


def _emit_invocation(*, logger: Any, context: InvocationContext) -> None:
    """Emit standardized structured invocation-start log."""
    with log_context(_invocation_log_context(context)):
        logger.info("User action invocation")


def _emit_completion(*, logger: Any, context: CompletionContext) -> None:
    """Emit standardized structured completion log."""
    payload = _invocation_log_context(context.invocation)
    payload.update(
        {
            fields.EVENT: fields.USER_ACTION_COMPLETION_EVENT,
            fields.SUCCESS: context.success,
            fields.DURATION_MS: context.duration_ms,
            fields.ERRORS: context.errors,
        }
    )
    with log_context(payload):
        if context.success:
            logger.info("User action completion")
        else:
            logger.warning("User action completion")
