"""Service document adapter resource exports."""

from resources.adapters.service_documents.adapter import OnLoaded, ServiceFactory
from resources.adapters.service_documents.component import RESOURCE_COMPONENT_ID
from resources.adapters.service_documents.in_memory_adapter import (
    InMemoryServiceFactory,
)

__all__ = [
    "InMemoryServiceFactory",
    "OnLoaded",
    "RESOURCE_COMPONENT_ID",
    "ServiceFactory",
]
