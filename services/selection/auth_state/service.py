"""Public API and display contract for the Auth State Coordinator."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Protocol

from services.selection.auth_state.domain import AuthMode, AuthSnapshot


class AuthStateDisplay(Protocol):
    """View capabilities the coordinator drives."""

    def set_candidates(self, candidates: tuple[str, ...]) -> None:
        """Show the scope URLs the loaded service declares."""

    def set_selected(self, scope: str | None) -> None:
        """Show ``scope`` as chosen, or clear the choice."""

    def set_loading(self, loading: bool) -> None:
        """Toggle the indicator shown while scopes are unknown."""

    def set_mode(self, mode: AuthMode) -> None:
        """Show the current access mode."""


class AuthState(ABC):
    """Owns the auth mode and scope choice for the loaded service."""

    @abstractmethod
    def choose_scope(self, scope: str) -> None:
        """Record the user's scope pick."""

    @abstractmethod
    def authorize(self) -> None:
        """Request authorization for the chosen scope, if any."""

    @abstractmethod
    def revoke(self) -> None:
        """Drop the held credential and fall back to public access."""

    @abstractmethod
    def scope_label(self, scope_url: str) -> str:
        """Return the short display label for ``scope_url``."""

    @property
    @abstractmethod
    def mode(self) -> AuthMode:
        """Return the current access mode."""

    @property
    @abstractmethod
    def required_scopes(self) -> frozenset[str]:
        """Return the scopes the selected method declares."""

    @abstractmethod
    def snapshot(self) -> AuthSnapshot:
        """Return mode, scopes and chosen scope together."""
