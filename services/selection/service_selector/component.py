"""Component declaration for the Service Selection Coordinator."""

from __future__ import annotations

COMPONENT_ID = "selector_service"
