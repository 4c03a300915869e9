"""Service Selection Coordinator native package exports."""

from services.selection.service_selector.component import COMPONENT_ID
from services.selection.service_selector.config import (
    ServiceSelectorSettings,
    resolve_service_selector_settings,
)
from services.selection.service_selector.domain import ServicePhase
from services.selection.service_selector.implementation import (
    ServiceSelectionCoordinator,
)
from services.selection.service_selector.service import (
    ServiceSelector,
    ServiceSelectorDisplay,
)

__all__ = [
    "COMPONENT_ID",
    "ServicePhase",
    "ServiceSelectionCoordinator",
    "ServiceSelector",
    "ServiceSelectorDisplay",
    "ServiceSelectorSettings",
    "resolve_service_selector_settings",
]
