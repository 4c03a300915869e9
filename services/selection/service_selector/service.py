"""Public API and display contract for the Service Selection Coordinator."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol

from packages.explorer_shared.discovery import ServiceDefinition
from services.selection.service_selector.domain import ServicePhase


class ServiceSelectorDisplay(Protocol):
    """View capabilities the coordinator drives."""

    def set_candidates(self, candidates: tuple[ServiceDefinition, ...]) -> None:
        """Show the services offered to the user."""

    def set_selected(self, service_name: str | None) -> None:
        """Show ``service_name`` as the chosen service."""

    def set_loading(self, loading: bool) -> None:
        """Toggle the directory loading indicator."""


class ServiceSelector(ABC):
    """Owns which service is chosen and which services are offered."""

    @abstractmethod
    def select_service(self, service_name: str) -> None:
        """Report the user's pick of ``service_name``."""

    @property
    @abstractmethod
    def phase(self) -> ServicePhase:
        """Return the current state machine phase."""

    @property
    @abstractmethod
    def selected(self) -> str | None:
        """Return the chosen service name, if any."""

    @property
    @abstractmethod
    def candidates(self) -> tuple[ServiceDefinition, ...]:
        """Return the services last offered to the user."""
