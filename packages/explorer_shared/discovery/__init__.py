"""Shared directory and discovery domain models."""

from .models import (
    ApiMethod,
    ApiParameter,
    ApiService,
    AuthInformation,
    AuthScope,
    Icons,
    Label,
    Params,
    ServiceDefinition,
)

__all__ = [
    "ApiMethod",
    "ApiParameter",
    "ApiService",
    "AuthInformation",
    "AuthScope",
    "Icons",
    "Label",
    "Params",
    "ServiceDefinition",
]
