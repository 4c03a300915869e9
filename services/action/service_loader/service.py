"""Public API for the Service Loader."""

from __future__ import annotations

from abc import ABC, abstractmethod

from packages.explorer_shared.discovery import ApiService


class ServiceLoader(ABC):
    """Turns version selections into loaded service documents."""

    @abstractmethod
    def cached(self, service_name: str, version: str) -> ApiService | None:
        """Return the cached document for ``(service_name, version)``, if any."""

    @property
    @abstractmethod
    def cache_size(self) -> int:
        """Return how many documents are cached."""
