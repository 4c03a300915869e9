"""Version Selection Coordinator native package exports."""

from services.selection.version_selector.component import COMPONENT_ID
from services.selection.version_selector.domain import VersionPhase, VersionSelection
from services.selection.version_selector.implementation import (
    VersionSelectionCoordinator,
)
from services.selection.version_selector.service import (
    VersionSelector,
    VersionSelectorDisplay,
)

__all__ = [
    "COMPONENT_ID",
    "VersionPhase",
    "VersionSelection",
    "VersionSelectionCoordinator",
    "VersionSelector",
    "VersionSelectorDisplay",
]
