"""Settings loading with deterministic precedence.

The cascade is always:
1) Init/CLI params
2) Environment variables
3) ``~/.config/api_explorer/explorer.yaml`` (or an explicit path)
4) Model defaults

Environment variable format:
- Prefix: ``EXPLORER_``
- Nested keys: ``__`` separator
- Example: ``EXPLORER_LOGGING__LEVEL=DEBUG`` -> ``logging.level = "DEBUG"``
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from .models import _CONFIG_PATH, ExplorerSettings


def load_settings(
    *,
    cli_params: Mapping[str, Any] | None = None,
    config_path: str | Path | None = None,
) -> ExplorerSettings:
    """Load explorer settings by applying the standard precedence cascade."""
    token = None
    if config_path is not None:
        token = _CONFIG_PATH.set(Path(config_path))
    try:
        return ExplorerSettings(**dict(cli_params or {}))
    finally:
        if token is not None:
            _CONFIG_PATH.reset(token)
