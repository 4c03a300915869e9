"""Credential holder contract consumed by the Auth State Coordinator."""

from __future__ import annotations

from typing import Protocol


class CredentialHolder(Protocol):
    """Store of the single OAuth token the explorer currently holds.

    The holder is not scoped per service: a token obtained for one service is
    still reported after another service loads.
    """

    @property
    def token(self) -> str | None:
        """Return the held token, if any."""

    def has_token(self) -> bool:
        """Return whether a token is held."""

    def store(self, token: str) -> None:
        """Hold ``token``, replacing any previous one."""

    def revoke(self) -> None:
        """Forget the held token."""
