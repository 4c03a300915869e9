"""Component declaration for App State."""

from __future__ import annotations

COMPONENT_ID = "state_app"
