"""Public API for shared explorer configuration utilities."""

from .loader import load_settings
from .models import (
    DEFAULT_CONFIG_PATH,
    ChannelSettings,
    ComponentsSettings,
    ExplorerSettings,
    LoggingSettings,
    ReentrancyPolicy,
    resolve_component_settings,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "ChannelSettings",
    "ComponentsSettings",
    "ExplorerSettings",
    "LoggingSettings",
    "ReentrancyPolicy",
    "load_settings",
    "resolve_component_settings",
]
