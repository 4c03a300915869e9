"""Domain contracts for auth state."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class AuthMode(str, Enum):
    """Access the user currently has to the loaded service."""

    PUBLIC_ONLY = "public_only"
    PUBLIC_AVAILABLE = "public_available"
    PRIVATE_ACTIVE = "private_active"


class AuthSnapshot(BaseModel):
    """Point-in-time view of the Auth State Coordinator."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    mode: AuthMode
    scopes: frozenset[str] = frozenset()
    required_scopes: frozenset[str] = frozenset()
    chosen_scope: str | None = None
