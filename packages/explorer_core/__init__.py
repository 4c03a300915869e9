"""Public API for explorer wiring and startup."""

from .startup import configure_logging_from_settings, start_explorer
from .wiring import Explorer, ExplorerDisplays, build_explorer

__all__ = [
    "Explorer",
    "ExplorerDisplays",
    "build_explorer",
    "configure_logging_from_settings",
    "start_explorer",
]
