"""Component declaration for the Version Selection Coordinator."""

from __future__ import annotations

COMPONENT_ID = "selector_version"
