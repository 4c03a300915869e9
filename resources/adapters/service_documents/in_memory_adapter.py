"""Service document factory backed by preloaded documents."""

from __future__ import annotations

from collections.abc import Iterable

from packages.explorer_shared.discovery import ApiService
from packages.explorer_shared.errors import codes, not_found
from packages.explorer_shared.logging import get_logger
from resources.adapters.service_documents.adapter import OnLoaded

_LOGGER = get_logger(__name__)


class InMemoryServiceFactory:
    """Serve documents from memory, immediately or on demand.

    With ``hold=True`` callbacks are parked until ``complete_pending`` runs,
    which models a fetch that finishes after the triggering dispatch.
    """

    def __init__(
        self, services: Iterable[ApiService] = (), *, hold: bool = False
    ) -> None:
        self._documents = {item.key: item for item in services}
        self._hold = hold
        self._pending: list[tuple[ApiService, OnLoaded]] = []
        self.fetched: list[tuple[str, str]] = []

    def add(self, service: ApiService) -> None:
        self._documents[service.key] = service

    @property
    def pending(self) -> int:
        return len(self._pending)

    def fetch(self, service_name: str, version: str, on_loaded: OnLoaded) -> None:
        document = self._documents.get((service_name, version))
        if document is None:
            raise not_found(
                f"no service document for {service_name}/{version}",
                code=codes.SERVICE_NOT_FOUND,
                metadata={"service_name": service_name, "version": version},
            )
        self.fetched.append((service_name, version))
        _LOGGER.debug("service document fetch: %s/%s", service_name, version)
        if self._hold:
            self._pending.append((document, on_loaded))
            return
        on_loaded(document)

    def complete_pending(self) -> int:
        """Deliver every parked document in request order; return how many."""
        pending, self._pending = self._pending, []
        for document, on_loaded in pending:
            on_loaded(document)
        return len(pending)
