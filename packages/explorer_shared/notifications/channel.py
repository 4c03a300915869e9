"""Synchronous publish/subscribe channel shared by every coordinator."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

from packages.explorer_shared.config import ReentrancyPolicy
from packages.explorer_shared.errors import reentrant_publish
from packages.explorer_shared.logging import fields, get_logger, log_context

N = TypeVar("N")
Handler = Callable[[Any], None]

_LOGGER = get_logger(__name__)


class NotificationChannel:
    """Typed publish/subscribe bus with registration-ordered dispatch.

    Handlers are keyed by the exact notification class. ``publish`` snapshots
    the handler list before dispatching, so a handler registered mid-dispatch
    only sees later publishes. Handlers must not publish synchronously; they
    chain new top-level notifications through the deferred task queue.
    ``reentrancy_policy`` decides what happens when one does anyway: the
    default rejects it, ``ALLOW`` restores plain nested dispatch.
    """

    def __init__(
        self, *, reentrancy_policy: ReentrancyPolicy = ReentrancyPolicy.FORBID
    ) -> None:
        self._handlers: dict[type, list[Handler]] = {}
        self._policy = reentrancy_policy
        self._depth = 0
        self._active: object | None = None

    @property
    def is_dispatching(self) -> bool:
        return self._depth > 0

    @property
    def reentrancy_policy(self) -> ReentrancyPolicy:
        return self._policy

    def subscriber_count(self, notification_type: type) -> int:
        """Return how many handlers are registered for ``notification_type``."""
        return len(self._handlers.get(notification_type, ()))

    def subscribe(
        self, notification_type: type[N], handler: Callable[[N], None]
    ) -> None:
        """Register ``handler`` for every future publish of ``notification_type``."""
        self._handlers.setdefault(notification_type, []).append(handler)

    def publish(self, notification: object) -> None:
        """Invoke every handler registered for the notification's type, in order.

        A handler exception propagates to the publisher and the remaining
        handlers of this dispatch do not run.
        """
        name = type(notification).__name__
        if self._depth > 0:
            self._on_reentrant_publish(name)

        handlers = list(self._handlers.get(type(notification), ()))
        if _LOGGER.isEnabledFor(logging.DEBUG):
            with log_context(
                {
                    fields.NOTIFICATION: name,
                    fields.HANDLER_COUNT: len(handlers),
                    fields.DISPATCH_DEPTH: self._depth,
                }
            ):
                _LOGGER.debug("channel publish")

        outer = self._active
        self._depth += 1
        self._active = notification
        try:
            for handler in handlers:
                handler(notification)
        finally:
            self._depth -= 1
            self._active = outer

    def _on_reentrant_publish(self, name: str) -> None:
        active = type(self._active).__name__
        if self._policy is ReentrancyPolicy.FORBID:
            raise reentrant_publish(
                f"{name} published while dispatching {active}; "
                "schedule a deferred task instead",
                metadata={"notification": name, "dispatching": active},
            )
        if self._policy is ReentrancyPolicy.WARN:
            with log_context(
                {fields.NOTIFICATION: name, fields.DISPATCH_DEPTH: self._depth}
            ):
                _LOGGER.warning("re-entrant publish while dispatching %s", active)
