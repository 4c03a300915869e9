"""Component declaration for the Service Loader."""

from __future__ import annotations

COMPONENT_ID = "action_service_loader"
