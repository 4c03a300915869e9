"""Domain contracts for method selection state."""

from __future__ import annotations

from enum import Enum


class MethodPhase(str, Enum):
    """Method selection state machine phases."""

    IDLE = "idle"
    METHODS_SHOWN = "methods_shown"
    METHOD_SELECTED = "method_selected"
