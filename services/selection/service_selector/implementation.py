"""Concrete Service Selection Coordinator."""

from __future__ import annotations

from collections.abc import Iterable

from packages.explorer_shared.discovery import ServiceDefinition
from packages.explorer_shared.logging import get_logger, user_action_logged
from packages.explorer_shared.notifications import (
    DefinitionsLoaded,
    NotificationChannel,
    ServiceSelected,
    VersionSelected,
)
from services.selection.service_selector.component import COMPONENT_ID
from services.selection.service_selector.config import ServiceSelectorSettings
from services.selection.service_selector.domain import ServicePhase
from services.selection.service_selector.service import (
    ServiceSelector,
    ServiceSelectorDisplay,
)

_LOGGER = get_logger(__name__)


class ServiceSelectionCoordinator(ServiceSelector):
    """Narrow the directory to selectable services and publish user picks."""

    def __init__(
        self,
        *,
        channel: NotificationChannel,
        display: ServiceSelectorDisplay,
        settings: ServiceSelectorSettings | None = None,
    ) -> None:
        self._channel = channel
        self._display = display
        self._settings = settings or ServiceSelectorSettings()
        self._selected: str | None = None
        self._candidates: tuple[ServiceDefinition, ...] = ()

        channel.subscribe(DefinitionsLoaded, self._on_definitions_loaded)
        channel.subscribe(ServiceSelected, self._on_service_selected)
        channel.subscribe(VersionSelected, self._on_version_selected)
        display.set_loading(True)

    @property
    def phase(self) -> ServicePhase:
        if self._selected is None:
            return ServicePhase.NONE_SELECTED
        return ServicePhase.SELECTED

    @property
    def selected(self) -> str | None:
        return self._selected

    @property
    def candidates(self) -> tuple[ServiceDefinition, ...]:
        return self._candidates

    @user_action_logged(
        logger=_LOGGER,
        component_id=COMPONENT_ID,
        id_fields=("service_name",),
    )
    def select_service(self, service_name: str) -> None:
        """Publish the pick; Version Selection validates it against the directory."""
        self._channel.publish(ServiceSelected(service_name))

    def _on_definitions_loaded(self, notification: DefinitionsLoaded) -> None:
        self._candidates = self._narrow(notification.definitions)
        self._display.set_loading(False)
        self._display.set_candidates(self._candidates)

    def _on_service_selected(self, notification: ServiceSelected) -> None:
        self._selected = notification.service_name
        self._display.set_selected(notification.service_name)

    def _on_version_selected(self, notification: VersionSelected) -> None:
        self._selected = notification.service_name
        self._display.set_selected(notification.service_name)

    def _narrow(
        self, definitions: Iterable[ServiceDefinition]
    ) -> tuple[ServiceDefinition, ...]:
        """Keep one preferred, non-excluded definition per name, sorted by name."""
        excluded = self._settings.excluded_services
        by_name: dict[str, ServiceDefinition] = {}
        for definition in definitions:
            if not definition.preferred or definition.name in excluded:
                continue
            by_name.setdefault(definition.name, definition)
        return tuple(by_name[name] for name in sorted(by_name))
