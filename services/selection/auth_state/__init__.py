"""Auth State Coordinator native package exports."""

from services.selection.auth_state.component import COMPONENT_ID
from services.selection.auth_state.config import (
    AuthStateSettings,
    resolve_auth_state_settings,
)
from services.selection.auth_state.domain import AuthMode, AuthSnapshot
from services.selection.auth_state.implementation import AuthStateCoordinator
from services.selection.auth_state.service import AuthState, AuthStateDisplay

__all__ = [
    "COMPONENT_ID",
    "AuthMode",
    "AuthSnapshot",
    "AuthState",
    "AuthStateCoordinator",
    "AuthStateDisplay",
    "AuthStateSettings",
    "resolve_auth_state_settings",
]
