"""Domain contracts for version selection state."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class VersionPhase(str, Enum):
    """Version selection state machine phases."""

    IDLE = "idle"
    VERSIONS_SHOWN = "versions_shown"
    VERSION_SELECTED = "version_selected"


class VersionSelection(BaseModel):
    """One chosen ``(service, version)`` pair."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    service_name: str
    version: str

    def as_tuple(self) -> tuple[str, str]:
        return (self.service_name, self.version)
