"""Canonical shared error types for the explorer core.

This module defines a transport-agnostic error taxonomy and the exception
hierarchy raised by coordinators. Only two failure classes exist: precondition
violations (stale or impossible selections) and lookups of keys that were never
loaded. Expected empty conditions are never errors.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Mapping


class ErrorCategory(str, Enum):
    """High-level error categories shared across components."""

    PRECONDITION = "precondition"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class ErrorDetail:
    """Structured error object attached to raised explorer errors."""

    code: str
    message: str
    category: ErrorCategory
    metadata: Mapping[str, str] = field(default_factory=dict)


class ExplorerError(Exception):
    """Base error type for explorer core failures."""

    def __init__(self, detail: ErrorDetail) -> None:
        super().__init__(detail.message)
        self.detail = detail

    def __str__(self) -> str:
        """Return human-readable error message."""
        return self.detail.message

    @property
    def code(self) -> str:
        """Return the machine-readable error code."""
        return self.detail.code


class PreconditionViolation(ExplorerError):
    """A selection referenced a key absent from the last published candidates."""


class ReentrantPublishError(PreconditionViolation):
    """A notification was published while the channel was already dispatching."""


class NotFoundError(ExplorerError):
    """A lookup referenced a service or version that was never loaded."""
