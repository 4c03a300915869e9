"""Authoritative in-process Python API for App State."""

from __future__ import annotations

from abc import ABC, abstractmethod

from packages.explorer_shared.discovery import ApiService


class AppState(ABC):
    """Read-only view of the currently loaded service and selected method."""

    @property
    @abstractmethod
    def current_service(self) -> ApiService:
        """Return the most recently loaded service document."""

    @property
    @abstractmethod
    def current_method_id(self) -> str:
        """Return the most recently selected method id."""
