"""Credential holder adapter resource exports."""

from resources.adapters.credentials.adapter import CredentialHolder
from resources.adapters.credentials.component import RESOURCE_COMPONENT_ID
from resources.adapters.credentials.in_memory_adapter import InMemoryCredentialHolder

__all__ = [
    "CredentialHolder",
    "InMemoryCredentialHolder",
    "RESOURCE_COMPONENT_ID",
]
