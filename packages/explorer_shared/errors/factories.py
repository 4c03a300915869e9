"""Factory helpers for raising consistent explorer errors."""

from __future__ import annotations

from typing import Mapping

from . import codes
from .types import (
    ErrorCategory,
    ErrorDetail,
    NotFoundError,
    PreconditionViolation,
    ReentrantPublishError,
)


def precondition_violation(
    message: str,
    *,
    code: str = codes.PRECONDITION_VIOLATION,
    metadata: Mapping[str, str] | None = None,
) -> PreconditionViolation:
    """Create a precondition-category exception."""
    return PreconditionViolation(
        ErrorDetail(
            code=code,
            message=message,
            category=ErrorCategory.PRECONDITION,
            metadata=_meta(metadata),
        )
    )


def reentrant_publish(
    message: str,
    *,
    metadata: Mapping[str, str] | None = None,
) -> ReentrantPublishError:
    """Create the exception raised for a publish issued mid-dispatch."""
    return ReentrantPublishError(
        ErrorDetail(
            code=codes.REENTRANT_PUBLISH,
            message=message,
            category=ErrorCategory.PRECONDITION,
            metadata=_meta(metadata),
        )
    )


def not_found(
    message: str,
    *,
    code: str = codes.NOT_FOUND,
    metadata: Mapping[str, str] | None = None,
) -> NotFoundError:
    """Create a not-found-category exception."""
    return NotFoundError(
        ErrorDetail(
            code=code,
            message=message,
            category=ErrorCategory.NOT_FOUND,
            metadata=_meta(metadata),
        )
    )


def check_precondition(
    condition: bool,
    message: str,
    *,
    code: str = codes.PRECONDITION_VIOLATION,
    metadata: Mapping[str, str] | None = None,
) -> None:
    """Raise ``PreconditionViolation`` when ``condition`` does not hold."""
    if not condition:
        raise precondition_violation(message, code=code, metadata=metadata)


def _meta(metadata: Mapping[str, str] | None) -> dict[str, str]:
    """Normalize optional metadata into a mutable plain dict."""
    if metadata is None:
        return {}
    return {str(key): str(value) for key, value in metadata.items()}
