"""Component declaration for Directory State."""

from __future__ import annotations

COMPONENT_ID = "state_directory"
