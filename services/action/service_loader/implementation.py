"""Concrete caching Service Loader."""

from __future__ import annotations

from packages.explorer_shared.discovery import ApiService
from packages.explorer_shared.logging import get_logger, selection_context
from packages.explorer_shared.notifications import (
    MethodSelected,
    NotificationChannel,
    Scheduler,
    ServiceLoaded,
    VersionSelected,
)
from resources.adapters.service_documents import ServiceFactory
from services.action.service_loader.service import ServiceLoader

_LOGGER = get_logger(__name__)


class CachingServiceLoader(ServiceLoader):
    """Fetch each ``(name, version)`` document once and announce it when ready.

    Announcements always run as a deferred task, so ``ServiceLoaded`` is never
    published inside the ``VersionSelected`` dispatch even when the document is
    cached or the factory answers synchronously.
    """

    def __init__(
        self,
        *,
        channel: NotificationChannel,
        scheduler: Scheduler,
        factory: ServiceFactory,
    ) -> None:
        self._channel = channel
        self._scheduler = scheduler
        self._factory = factory
        self._cache: dict[tuple[str, str], ApiService] = {}
        channel.subscribe(VersionSelected, self._on_version_selected)

    def cached(self, service_name: str, version: str) -> ApiService | None:
        return self._cache.get((service_name, version))

    @property
    def cache_size(self) -> int:
        return len(self._cache)

    def _on_version_selected(self, notification: VersionSelected) -> None:
        service = self.cached(notification.service_name, notification.version)
        if service is not None:
            with selection_context(notification.service_name, notification.version):
                _LOGGER.debug("service cache hit")
            self._schedule_announce(notification, service)
            return
        self._factory.fetch(
            notification.service_name,
            notification.version,
            lambda loaded: self._on_loaded(notification, loaded),
        )

    def _on_loaded(self, selection: VersionSelected, service: ApiService) -> None:
        self._cache[(selection.service_name, selection.version)] = service
        with selection_context(service.name, service.version):
            _LOGGER.info("service loaded: methods=%d", len(service.all_methods()))
        self._schedule_announce(selection, service)

    def _schedule_announce(
        self, selection: VersionSelected, service: ApiService
    ) -> None:
        self._scheduler.schedule_deferred(lambda: self._announce(selection, service))

    def _announce(self, selection: VersionSelected, service: ApiService) -> None:
        self._channel.publish(ServiceLoaded(service, selection.params))

        # Single-method services are narrowed by the Method Selection Coordinator.
        if selection.method_name is not None and len(service.all_methods()) > 1:
            self._channel.publish(
                MethodSelected(
                    selection.method_name,
                    service.method(selection.method_name),
                    selection.params,
                )
            )
