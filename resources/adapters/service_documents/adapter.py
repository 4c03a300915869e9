"""Service document fetch contract consumed by the Service Loader."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from packages.explorer_shared.discovery import ApiService

OnLoaded = Callable[[ApiService], None]


class ServiceFactory(Protocol):
    """Fetches full service documents by ``(name, version)``."""

    def fetch(self, service_name: str, version: str, on_loaded: OnLoaded) -> None:
        """Start fetching one document and call ``on_loaded`` when it arrives.

        ``on_loaded`` may run before ``fetch`` returns or at any later time.
        """
