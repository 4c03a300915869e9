"""Pydantic settings for Auth State Coordinator behavior."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from packages.explorer_shared.config import ExplorerSettings, resolve_component_settings
from services.selection.auth_state.component import COMPONENT_ID


class AuthStateSettings(BaseModel):
    """Where scopes live in a service document and how they are labeled."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    oauth_key: str = Field(default="oauth2", min_length=1)
    scope_url_prefix: str = "https://www.googleapis.com/auth/"


def resolve_auth_state_settings(settings: ExplorerSettings) -> AuthStateSettings:
    """Resolve settings from ``components.selector.auth``."""
    return resolve_component_settings(
        settings=settings,
        component_id=COMPONENT_ID,
        model=AuthStateSettings,
    )
