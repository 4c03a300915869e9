"""Domain contracts for directory entries and loaded discovery documents.

Only the fields the selection coordinators read are modelled. Aliases accept
the camelCase names used by directory and discovery documents so hosts can
validate raw payloads directly.
"""

from __future__ import annotations

from enum import Enum
from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field

from packages.explorer_shared.errors import codes, precondition_violation

Params = Mapping[str, tuple[str, ...]]


class Label(str, Enum):
    """Lifecycle labels attached to directory entries."""

    LABS = "labs"
    STABLE = "stable"
    DEPRECATED = "deprecated"
    LIMITED_AVAILABILITY = "limited_availability"


class Icons(BaseModel):
    """Icon URLs for one directory entry."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    x16: str | None = None
    x32: str | None = None


class ServiceDefinition(BaseModel):
    """One (service, version) row from the API directory."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    name: str = Field(min_length=1)
    version: str = Field(min_length=1)
    title: str = ""
    description: str = ""
    documentation_link: str | None = Field(default=None, alias="documentationLink")
    discovery_link: str | None = Field(default=None, alias="discoveryLink")
    icons: Icons | None = None
    labels: frozenset[Label] = frozenset()
    preferred: bool = False
    auth: Mapping[str, frozenset[str]] = Field(default_factory=dict)

    @property
    def key(self) -> tuple[str, str]:
        """Return the ``(name, version)`` identity of this definition."""
        return (self.name, self.version)

    def __hash__(self) -> int:
        return hash(self.key)


class ApiParameter(BaseModel):
    """Parameter schema for one method parameter."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    type: str = "string"
    description: str = ""
    required: bool = False
    repeated: bool = False
    location: str | None = None
    default: str | None = None
    enum: tuple[str, ...] = ()


class ApiMethod(BaseModel):
    """One callable method of a loaded service."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    id: str = Field(min_length=1)
    description: str = ""
    http_method: str = Field(default="GET", alias="httpMethod")
    path: str = ""
    parameters: Mapping[str, ApiParameter] = Field(default_factory=dict)
    parameter_order: tuple[str, ...] = Field(default=(), alias="parameterOrder")
    scopes: tuple[str, ...] = ()


class AuthScope(BaseModel):
    """Human-readable description of one OAuth scope."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    description: str = ""


class AuthInformation(BaseModel):
    """Scopes declared for one auth mechanism."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    scopes: Mapping[str, AuthScope] = Field(default_factory=dict)


class ApiService(BaseModel):
    """Fully loaded service document for one (service, version)."""

    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    name: str = Field(min_length=1)
    version: str = Field(min_length=1)
    title: str = ""
    description: str = ""
    documentation_link: str | None = Field(default=None, alias="documentationLink")
    auth: Mapping[str, AuthInformation] = Field(default_factory=dict)
    methods: Mapping[str, ApiMethod] = Field(default_factory=dict)

    @property
    def key(self) -> tuple[str, str]:
        """Return the ``(name, version)`` identity of this service."""
        return (self.name, self.version)

    def all_methods(self) -> Mapping[str, ApiMethod]:
        """Return every method keyed by dotted method id."""
        return self.methods

    def method(self, method_id: str) -> ApiMethod:
        """Resolve one method by id; an unknown id is a stale selection."""
        try:
            return self.methods[method_id]
        except KeyError:
            raise precondition_violation(
                f"method {method_id!r} is not declared by {self.name}/{self.version}",
                code=codes.STALE_SELECTION,
                metadata={"service": self.name, "version": self.version},
            ) from None

    def scopes_for(self, auth_key: str) -> frozenset[str]:
        """Return the scope names declared under ``auth_key`` (empty if absent)."""
        info = self.auth.get(auth_key)
        if info is None:
            return frozenset()
        return frozenset(info.scopes)
