"""Component declaration for the service document adapter resource."""

from __future__ import annotations

RESOURCE_COMPONENT_ID = "adapter_service_documents"
