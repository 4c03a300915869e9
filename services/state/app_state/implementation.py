"""Notification-driven App State implementation."""

from __future__ import annotations

from packages.explorer_shared.discovery import ApiService
from packages.explorer_shared.errors import codes, precondition_violation
from packages.explorer_shared.notifications import (
    MethodSelected,
    NotificationChannel,
    ServiceLoaded,
)
from services.state.app_state.service import AppState


class ChannelAppState(AppState):
    """Track the active service and method from channel notifications."""

    def __init__(self, channel: NotificationChannel) -> None:
        self._service: ApiService | None = None
        self._method_id: str | None = None
        channel.subscribe(ServiceLoaded, self._on_service_loaded)
        channel.subscribe(MethodSelected, self._on_method_selected)

    @property
    def current_service(self) -> ApiService:
        if self._service is None:
            raise precondition_violation(
                "no service has been loaded",
                code=codes.NO_ACTIVE_SELECTION,
            )
        return self._service

    @property
    def current_method_id(self) -> str:
        if self._method_id is None:
            raise precondition_violation(
                "no method has been selected",
                code=codes.NO_ACTIVE_SELECTION,
            )
        return self._method_id

    def _on_service_loaded(self, notification: ServiceLoaded) -> None:
        self._service = notification.service

    def _on_method_selected(self, notification: MethodSelected) -> None:
        self._method_id = notification.method_name
