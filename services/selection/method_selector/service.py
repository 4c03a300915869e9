"""Public API and display contract for the Method Selection Coordinator."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol

from packages.explorer_shared.discovery import ApiMethod
from services.selection.method_selector.domain import MethodPhase


class MethodSelectorDisplay(Protocol):
    """View capabilities the coordinator drives."""

    def set_candidates(self, candidates: tuple[ApiMethod, ...]) -> None:
        """Show the methods of the loaded service."""

    def set_selected(self, method_name: str | None) -> None:
        """Show ``method_name`` as chosen, or clear the choice."""

    def set_loading(self, loading: bool) -> None:
        """Toggle the indicator shown while a service document is fetched."""


class MethodSelector(ABC):
    """Owns the method candidates of the loaded service and the chosen method."""

    @abstractmethod
    def select_method(self, method_name: str) -> None:
        """Report the user's pick of ``method_name`` on the active service."""

    @property
    @abstractmethod
    def phase(self) -> MethodPhase:
        """Return the current state machine phase."""

    @property
    @abstractmethod
    def selected(self) -> str | None:
        """Return the chosen method id, if any."""

    @property
    @abstractmethod
    def candidates(self) -> tuple[ApiMethod, ...]:
        """Return the methods currently offered."""
