"""Public API and display contract for the Version Selection Coordinator."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol

from packages.explorer_shared.discovery import ServiceDefinition
from services.selection.version_selector.domain import VersionPhase, VersionSelection


class VersionSelectorDisplay(Protocol):
    """View capabilities the coordinator drives."""

    def set_candidates(self, candidates: tuple[ServiceDefinition, ...]) -> None:
        """Show the versions of the selected service."""

    def set_selected(self, version: str | None) -> None:
        """Show ``version`` as chosen, or clear the choice."""

    def set_loading(self, loading: bool) -> None:
        """Toggle the loading indicator."""


class VersionSelector(ABC):
    """Owns the version candidates of the selected service and the chosen version."""

    @abstractmethod
    def select_version(self, version: str) -> None:
        """Report the user's pick of ``version`` for the selected service."""

    @property
    @abstractmethod
    def phase(self) -> VersionPhase:
        """Return the current state machine phase."""

    @property
    @abstractmethod
    def selection(self) -> VersionSelection | None:
        """Return the chosen ``(service, version)`` pair, if any."""

    @property
    @abstractmethod
    def candidates(self) -> tuple[ServiceDefinition, ...]:
        """Return the versions currently offered."""
