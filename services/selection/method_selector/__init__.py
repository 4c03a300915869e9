"""Method Selection Coordinator native package exports."""

from services.selection.method_selector.component import COMPONENT_ID
from services.selection.method_selector.domain import MethodPhase
from services.selection.method_selector.implementation import (
    MethodSelectionCoordinator,
)
from services.selection.method_selector.service import (
    MethodSelector,
    MethodSelectorDisplay,
)

__all__ = [
    "COMPONENT_ID",
    "MethodPhase",
    "MethodSelectionCoordinator",
    "MethodSelector",
    "MethodSelectorDisplay",
]
