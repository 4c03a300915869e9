"""Pydantic settings for Service Selection Coordinator behavior."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator

from packages.explorer_shared.config import ExplorerSettings, resolve_component_settings
from services.selection.service_selector.component import COMPONENT_ID


class ServiceSelectorSettings(BaseModel):
    """Service candidate filtering settings."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    excluded_services: frozenset[str] = frozenset({"discovery"})

    @field_validator("excluded_services", mode="before")
    @classmethod
    def _strip_names(cls, value: object) -> object:
        """Normalize whitespace around configured service names."""
        if isinstance(value, (list, tuple, set, frozenset)):
            return frozenset(str(item).strip() for item in value if str(item).strip())
        return value


def resolve_service_selector_settings(
    settings: ExplorerSettings,
) -> ServiceSelectorSettings:
    """Resolve settings from ``components.selector.service``."""
    return resolve_component_settings(
        settings=settings,
        component_id=COMPONENT_ID,
        model=ServiceSelectorSettings,
    )
