"""Notification payloads exchanged on the explorer notification channel."""

from __future__ import annotations

from dataclasses import dataclass, field

from packages.explorer_shared.discovery import (
    ApiMethod,
    ApiService,
    Params,
    ServiceDefinition,
)


@dataclass(frozen=True)
class DefinitionsLoaded:
    """The directory loader delivered a fresh set of service definitions."""

    definitions: tuple[ServiceDefinition, ...]


@dataclass(frozen=True)
class ServiceSelected:
    """A service name was chosen, before its document is available."""

    service_name: str


@dataclass(frozen=True)
class VersionSelected:
    """A (service, version) pair was chosen.

    ``method_name`` and ``params`` carry an optional method pre-selection, for
    example when a bookmarked call is replayed.
    """

    service_name: str
    version: str
    method_name: str | None = None
    params: Params = field(default_factory=dict)


@dataclass(frozen=True)
class ServiceLoaded:
    """The full service document for the selected version was fetched."""

    service: ApiService
    params: Params = field(default_factory=dict)


@dataclass(frozen=True)
class MethodSelected:
    """A method of the loaded service was chosen."""

    method_name: str
    method: ApiMethod
    params: Params = field(default_factory=dict)


@dataclass(frozen=True)
class AuthRequested:
    """The user asked to authorize with ``scope``."""

    scope: str


@dataclass(frozen=True)
class AuthGranted:
    """The auth layer obtained ``token`` for ``service_name``."""

    service_name: str
    token: str


Notification = (
    DefinitionsLoaded
    | ServiceSelected
    | VersionSelected
    | ServiceLoaded
    | MethodSelected
    | AuthRequested
    | AuthGranted
)
