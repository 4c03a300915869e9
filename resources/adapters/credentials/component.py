"""Component declaration for the credential holder adapter resource."""

from __future__ import annotations

RESOURCE_COMPONENT_ID = "adapter_credentials"
