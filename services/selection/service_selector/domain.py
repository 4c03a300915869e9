"""Domain contracts for service selection state."""

from __future__ import annotations

from enum import Enum


class ServicePhase(str, Enum):
    """Service selection state machine phases."""

    NONE_SELECTED = "none_selected"
    SELECTED = "selected"
