"""Concrete Version Selection Coordinator."""

from __future__ import annotations

from packages.explorer_shared.discovery import ServiceDefinition
from packages.explorer_shared.errors import (
    check_precondition,
    codes,
    precondition_violation,
)
from packages.explorer_shared.logging import (
    get_logger,
    selection_context,
    user_action_logged,
)
from packages.explorer_shared.notifications import (
    DefinitionsLoaded,
    NotificationChannel,
    Scheduler,
    ServiceSelected,
    VersionSelected,
)
from services.selection.version_selector.component import COMPONENT_ID
from services.selection.version_selector.domain import VersionPhase, VersionSelection
from services.selection.version_selector.service import (
    VersionSelector,
    VersionSelectorDisplay,
)
from services.state.directory_state import DirectoryState

_LOGGER = get_logger(__name__)


class VersionSelectionCoordinator(VersionSelector):
    """Offer the versions of the selected service and narrow a lone version.

    This coordinator owns writes to the shared Directory State: every
    ``DefinitionsLoaded`` rebuilds it before later subscribers run.
    """

    def __init__(
        self,
        *,
        channel: NotificationChannel,
        scheduler: Scheduler,
        directory: DirectoryState,
        display: VersionSelectorDisplay,
    ) -> None:
        self._channel = channel
        self._scheduler = scheduler
        self._directory = directory
        self._display = display
        self._service_name: str | None = None
        self._candidates: tuple[ServiceDefinition, ...] = ()
        self._selection: VersionSelection | None = None

        channel.subscribe(DefinitionsLoaded, self._on_definitions_loaded)
        channel.subscribe(ServiceSelected, self._on_service_selected)
        channel.subscribe(VersionSelected, self._on_version_selected)

    @property
    def phase(self) -> VersionPhase:
        if self._selection is not None:
            return VersionPhase.VERSION_SELECTED
        if self._service_name is not None:
            return VersionPhase.VERSIONS_SHOWN
        return VersionPhase.IDLE

    @property
    def selection(self) -> VersionSelection | None:
        return self._selection

    @property
    def candidates(self) -> tuple[ServiceDefinition, ...]:
        return self._candidates

    @user_action_logged(
        logger=_LOGGER,
        component_id=COMPONENT_ID,
        id_fields=("version",),
    )
    def select_version(self, version: str) -> None:
        service_name = self._service_name
        if service_name is None:
            raise precondition_violation(
                "no service selected",
                code=codes.NO_ACTIVE_SELECTION,
                metadata={"version": version},
            )
        check_precondition(
            self._directory.contains(service_name, version),
            f"{service_name}/{version} is not in the directory",
            code=codes.STALE_SELECTION,
            metadata={"service_name": service_name, "version": version},
        )
        self._channel.publish(VersionSelected(service_name, version))

    def _on_definitions_loaded(self, notification: DefinitionsLoaded) -> None:
        self._directory.load(notification.definitions)

    def _on_service_selected(self, notification: ServiceSelected) -> None:
        service_name = notification.service_name
        versions = self._directory.versions_of(service_name)
        self._service_name = service_name
        self._candidates = versions
        self._selection = None
        self._display.set_candidates(versions)
        self._display.set_selected(None)

        if len(versions) == 1:
            version = versions[0].version
            self._scheduler.schedule_deferred(
                lambda: self._auto_select(service_name, version)
            )

    def _on_version_selected(self, notification: VersionSelected) -> None:
        self._service_name = notification.service_name
        self._candidates = self._directory.versions_of(notification.service_name)
        self._selection = VersionSelection(
            service_name=notification.service_name,
            version=notification.version,
        )
        self._display.set_candidates(self._candidates)
        self._display.set_selected(notification.version)

    def _auto_select(self, service_name: str, version: str) -> None:
        if self._service_name != service_name:
            with selection_context(service_name, version):
                _LOGGER.info(
                    "dropping stale version auto-select; current service is %s",
                    self._service_name,
                )
            return
        self._channel.publish(VersionSelected(service_name, version))
