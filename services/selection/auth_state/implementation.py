"""Concrete Auth State Coordinator."""

from __future__ import annotations

from packages.explorer_shared.errors import check_precondition, codes
from packages.explorer_shared.logging import (
    fields,
    get_logger,
    log_context,
    user_action_logged,
)
from packages.explorer_shared.notifications import (
    AuthGranted,
    AuthRequested,
    MethodSelected,
    NotificationChannel,
    ServiceLoaded,
    ServiceSelected,
)
from resources.adapters.credentials import CredentialHolder
from services.selection.auth_state.component import COMPONENT_ID
from services.selection.auth_state.config import AuthStateSettings
from services.selection.auth_state.domain import AuthMode, AuthSnapshot
from services.selection.auth_state.service import AuthState, AuthStateDisplay

_LOGGER = get_logger(__name__)


class AuthStateCoordinator(AuthState):
    """Derive the access mode of the loaded service from its scopes and credentials.

    A token held when a new service loads is reported as private access for
    that service too; it is not checked against the new scope set. Selecting a
    method pre-selects one of its declared scopes while access is still public.
    """

    def __init__(
        self,
        *,
        channel: NotificationChannel,
        credentials: CredentialHolder,
        display: AuthStateDisplay,
        settings: AuthStateSettings | None = None,
    ) -> None:
        self._channel = channel
        self._credentials = credentials
        self._display = display
        self._settings = settings or AuthStateSettings()
        self._mode = AuthMode.PUBLIC_ONLY
        self._scopes: frozenset[str] = frozenset()
        self._chosen: str | None = None
        self._required: frozenset[str] = frozenset()

        channel.subscribe(ServiceLoaded, self._on_service_loaded)
        channel.subscribe(MethodSelected, self._on_method_selected)
        channel.subscribe(AuthGranted, self._on_auth_granted)
        channel.subscribe(ServiceSelected, self._on_service_selected)

    @property
    def mode(self) -> AuthMode:
        return self._mode

    @property
    def required_scopes(self) -> frozenset[str]:
        return self._required

    def snapshot(self) -> AuthSnapshot:
        return AuthSnapshot(
            mode=self._mode,
            scopes=self._scopes,
            required_scopes=self._required,
            chosen_scope=self._chosen,
        )

    @user_action_logged(
        logger=_LOGGER,
        component_id=COMPONENT_ID,
        id_fields=("scope",),
    )
    def choose_scope(self, scope: str) -> None:
        check_precondition(
            scope in self._scopes,
            f"scope {scope!r} is not declared by the loaded service",
            code=codes.STALE_SELECTION,
            metadata={"scope": scope},
        )
        self._chosen = scope
        self._display.set_selected(scope)

    @user_action_logged(logger=_LOGGER, component_id=COMPONENT_ID)
    def authorize(self) -> None:
        if self._chosen is None:
            return
        self._channel.publish(AuthRequested(self._chosen))

    @user_action_logged(logger=_LOGGER, component_id=COMPONENT_ID)
    def revoke(self) -> None:
        self._credentials.revoke()
        self._set_mode(
            AuthMode.PUBLIC_AVAILABLE if self._scopes else AuthMode.PUBLIC_ONLY
        )

    def scope_label(self, scope_url: str) -> str:
        prefix = self._settings.scope_url_prefix
        if prefix and scope_url.startswith(prefix):
            return scope_url[len(prefix) :]
        return scope_url

    def _on_service_loaded(self, notification: ServiceLoaded) -> None:
        self._scopes = notification.service.scopes_for(self._settings.oauth_key)
        self._chosen = None
        self._required = frozenset()
        self._display.set_loading(False)
        self._display.set_candidates(tuple(sorted(self._scopes)))
        self._display.set_selected(None)
        if not self._scopes:
            self._set_mode(AuthMode.PUBLIC_ONLY)
        elif self._credentials.has_token():
            self._set_mode(AuthMode.PRIVATE_ACTIVE)
        else:
            self._set_mode(AuthMode.PUBLIC_AVAILABLE)

    def _on_method_selected(self, notification: MethodSelected) -> None:
        self._required = frozenset(notification.method.scopes)
        if self._mode is AuthMode.PRIVATE_ACTIVE:
            return
        # Only scopes the loaded service declares can be requested.
        offered = sorted(self._required & self._scopes)
        if not offered:
            return
        self._chosen = offered[0]
        self._display.set_selected(self._chosen)

    def _on_auth_granted(self, notification: AuthGranted) -> None:
        self._credentials.store(notification.token)
        if not self._scopes:
            _LOGGER.info(
                "auth granted for service without scopes: service=%s",
                notification.service_name,
            )
            self._set_mode(AuthMode.PUBLIC_ONLY)
            return
        self._set_mode(AuthMode.PRIVATE_ACTIVE)

    def _on_service_selected(self, notification: ServiceSelected) -> None:
        self._scopes = frozenset()
        self._chosen = None
        self._required = frozenset()
        self._display.set_loading(True)
        self._display.set_candidates(())
        self._display.set_selected(None)
        self._set_mode(AuthMode.PUBLIC_ONLY)

    def _set_mode(self, mode: AuthMode) -> None:
        if mode is not self._mode:
            with log_context({fields.AUTH_MODE: mode.value}):
                _LOGGER.debug("auth mode changed")
        self._mode = mode
        self._display.set_mode(mode)
