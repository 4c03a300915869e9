"""Notification channel, deferred scheduling and notification types."""

from .channel import NotificationChannel
from .scheduler import DeferredTaskQueue, EventLoopTaskQueue, Scheduler
from .types import (
    AuthGranted,
    AuthRequested,
    DefinitionsLoaded,
    MethodSelected,
    Notification,
    ServiceLoaded,
    ServiceSelected,
    VersionSelected,
)

__all__ = [
    "AuthGranted",
    "AuthRequested",
    "DefinitionsLoaded",
    "DeferredTaskQueue",
    "EventLoopTaskQueue",
    "MethodSelected",
    "Notification",
    "NotificationChannel",
    "Scheduler",
    "ServiceLoaded",
    "ServiceSelected",
    "VersionSelected",
]
