"""Component declaration for the Auth State Coordinator."""

from __future__ import annotations

COMPONENT_ID = "selector_auth"
