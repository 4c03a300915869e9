"""Concrete Method Selection Coordinator."""

from __future__ import annotations

from packages.explorer_shared.discovery import ApiMethod, ApiService, Params
from packages.explorer_shared.logging import (
    get_logger,
    selection_context,
    user_action_logged,
)
from packages.explorer_shared.notifications import (
    MethodSelected,
    NotificationChannel,
    Scheduler,
    ServiceLoaded,
    ServiceSelected,
    VersionSelected,
)
from services.selection.method_selector.component import COMPONENT_ID
from services.selection.method_selector.domain import MethodPhase
from services.selection.method_selector.service import (
    MethodSelector,
    MethodSelectorDisplay,
)
from services.state.app_state import AppState

_LOGGER = get_logger(__name__)


class MethodSelectionCoordinator(MethodSelector):
    """Offer the methods of the loaded service and narrow a lone method.

    The coordinator never fetches anything: ``VersionSelected`` only turns the
    loading indicator on until the matching ``ServiceLoaded`` arrives.
    """

    def __init__(
        self,
        *,
        channel: NotificationChannel,
        scheduler: Scheduler,
        app_state: AppState,
        display: MethodSelectorDisplay,
    ) -> None:
        self._channel = channel
        self._scheduler = scheduler
        self._app_state = app_state
        self._display = display
        self._loaded: ApiService | None = None
        self._candidates: tuple[ApiMethod, ...] = ()
        self._selected: str | None = None

        channel.subscribe(ServiceLoaded, self._on_service_loaded)
        channel.subscribe(ServiceSelected, self._on_service_selected)
        channel.subscribe(VersionSelected, self._on_version_selected)
        channel.subscribe(MethodSelected, self._on_method_selected)

    @property
    def phase(self) -> MethodPhase:
        if self._selected is not None:
            return MethodPhase.METHOD_SELECTED
        if self._candidates:
            return MethodPhase.METHODS_SHOWN
        return MethodPhase.IDLE

    @property
    def selected(self) -> str | None:
        return self._selected

    @property
    def candidates(self) -> tuple[ApiMethod, ...]:
        return self._candidates

    @user_action_logged(
        logger=_LOGGER,
        component_id=COMPONENT_ID,
        id_fields=("method_name",),
    )
    def select_method(self, method_name: str) -> None:
        method = self._app_state.current_service.method(method_name)
        self._channel.publish(MethodSelected(method_name, method))

    def _on_service_loaded(self, notification: ServiceLoaded) -> None:
        service = notification.service
        self._loaded = service
        entries = sorted(
            service.all_methods().items(),
            key=lambda item: (item[0], item[1].description),
        )
        self._candidates = tuple(method for _, method in entries)
        self._selected = None
        self._display.set_loading(False)
        self._display.set_candidates(self._candidates)
        self._display.set_selected(None)

        if len(entries) == 1:
            method_name, method = entries[0]
            params = notification.params
            self._scheduler.schedule_deferred(
                lambda: self._auto_select(service, method_name, method, params)
            )

    def _on_service_selected(self, notification: ServiceSelected) -> None:
        self._loaded = None
        self._candidates = ()
        self._selected = None
        self._display.set_candidates(self._candidates)
        self._display.set_selected(None)

    def _on_version_selected(self, notification: VersionSelected) -> None:
        self._display.set_loading(True)

    def _on_method_selected(self, notification: MethodSelected) -> None:
        self._selected = notification.method_name
        self._display.set_selected(notification.method_name)

    def _auto_select(
        self,
        service: ApiService,
        method_name: str,
        method: ApiMethod,
        params: Params,
    ) -> None:
        if self._loaded is not service:
            with selection_context(service.name, service.version, method_name):
                _LOGGER.info("dropping stale method auto-select")
            return
        self._channel.publish(MethodSelected(method_name, method, params))
