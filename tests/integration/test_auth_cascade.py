"""End-to-end tests of auth state across service loads."""

from __future__ import annotations

from packages.explorer_core import Explorer, ExplorerDisplays
from packages.explorer_shared.notifications import (
    AuthGranted,
    AuthRequested,
    DefinitionsLoaded,
)
from resources.adapters.credentials import InMemoryCredentialHolder
from services.selection.auth_state import AuthMode
from tests.helpers.explorer_fakes import NotificationRecorder, definition

DRIVE_SCOPE = "https://www.googleapis.com/auth/drive"

_CATALOG = DefinitionsLoaded(
    (definition("drive", "v1"), definition("drive", "v2"), definition("books", "v1"))
)


def _load_drive_v1(explorer: Explorer) -> None:
    explorer.publish(_CATALOG)
    explorer.services.select_service("drive")
    explorer.settle()
    explorer.versions.select_version("v1")
    explorer.settle()


def test_scoped_service_offers_private_access_and_requests_auth(
    explorer: Explorer, displays: ExplorerDisplays
) -> None:
    """Choosing a scope and authorizing publishes AuthRequested."""
    requests = NotificationRecorder(explorer.channel, AuthRequested)
    _load_drive_v1(explorer)

    assert explorer.auth.mode is AuthMode.PUBLIC_AVAILABLE
    assert displays.auth.candidates == (DRIVE_SCOPE,)

    explorer.auth.choose_scope(DRIVE_SCOPE)
    explorer.auth.authorize()

    assert requests.received == [AuthRequested(DRIVE_SCOPE)]


def test_granted_token_survives_switching_to_an_unscoped_service(
    explorer: Explorer,
    displays: ExplorerDisplays,
    credentials: InMemoryCredentialHolder,
) -> None:
    """Scopeless services stay public even while a token is held."""
    _load_drive_v1(explorer)
    explorer.publish(AuthGranted("drive", "token-1"))
    assert explorer.auth.mode is AuthMode.PRIVATE_ACTIVE

    explorer.services.select_service("books")
    explorer.settle()

    assert explorer.auth.mode is AuthMode.PUBLIC_ONLY
    assert displays.auth.mode is AuthMode.PUBLIC_ONLY
    assert credentials.token == "token-1"


def test_revoke_returns_to_public_available(
    explorer: Explorer, credentials: InMemoryCredentialHolder
) -> None:
    """Revocation is synchronous and clears the credential."""
    _load_drive_v1(explorer)
    explorer.publish(AuthGranted("drive", "token-1"))

    explorer.auth.revoke()

    assert explorer.auth.mode is AuthMode.PUBLIC_AVAILABLE
    assert credentials.has_token() is False


def test_auto_selected_method_preselects_its_scope(
    explorer: Explorer, displays: ExplorerDisplays
) -> None:
    """Narrowing to a scoped method leaves its scope ready to authorize."""
    requests = NotificationRecorder(explorer.channel, AuthRequested)
    explorer.publish(_CATALOG)
    explorer.services.select_service("drive")
    explorer.settle()

    explorer.versions.select_version("v2")
    explorer.settle()

    assert explorer.auth.required_scopes == frozenset({DRIVE_SCOPE})
    assert displays.auth.selected == DRIVE_SCOPE
    explorer.auth.authorize()
    assert requests.received == [AuthRequested(DRIVE_SCOPE)]
