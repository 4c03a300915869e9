"""In-process credential holder."""

from __future__ import annotations

from packages.explorer_shared.errors import check_precondition
from packages.explorer_shared.logging import get_logger

_LOGGER = get_logger(__name__)


class InMemoryCredentialHolder:
    """Hold one token in memory for the lifetime of the process."""

    def __init__(self, token: str | None = None) -> None:
        self._token = token

    @property
    def token(self) -> str | None:
        return self._token

    def has_token(self) -> bool:
        return self._token is not None

    def store(self, token: str) -> None:
        check_precondition(bool(token), "cannot store an empty token")
        self._token = token
        _LOGGER.info("credential stored")

    def revoke(self) -> None:
        """Drop the token; revoking with nothing held is a no-op."""
        if self._token is None:
            return
        self._token = None
        _LOGGER.info("credential revoked")
