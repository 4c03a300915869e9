"""Component declaration for the Method Selection Coordinator."""

from __future__ import annotations

COMPONENT_ID = "selector_method"
