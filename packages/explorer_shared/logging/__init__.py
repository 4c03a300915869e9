"""Public logging API for the explorer core.

This package wraps Python's ``logging`` module with opinionated defaults for
stdout emission and structured context propagation.
"""

from .config import configure_logging, get_logger
from .context import (
    bind_context,
    clear_context,
    get_context,
    log_context,
    selection_context,
    selection_label,
)
from .user_actions import CompletionContext, InvocationContext, user_action_logged

__all__ = [
    "bind_context",
    "clear_context",
    "CompletionContext",
    "configure_logging",
    "get_context",
    "get_logger",
    "InvocationContext",
    "log_context",
    "selection_context",
    "selection_label",
    "user_action_logged",
]
