"""Public shared error API for the explorer core."""

from . import codes
from .factories import (
    check_precondition,
    not_found,
    precondition_violation,
    reentrant_publish,
)
from .types import (
    ErrorCategory,
    ErrorDetail,
    ExplorerError,
    NotFoundError,
    PreconditionViolation,
    ReentrantPublishError,
)

__all__ = [
    "ErrorCategory",
    "ErrorDetail",
    "ExplorerError",
    "NotFoundError",
    "PreconditionViolation",
    "ReentrantPublishError",
    "check_precondition",
    "codes",
    "not_found",
    "precondition_violation",
    "reentrant_publish",
]
