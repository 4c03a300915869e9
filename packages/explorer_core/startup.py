"""Explorer startup: settings first, then logging, then wiring."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Mapping

from packages.explorer_core.wiring import Explorer, ExplorerDisplays, build_explorer
from packages.explorer_shared.config import ExplorerSettings, load_settings
from packages.explorer_shared.logging import configure_logging
from packages.explorer_shared.notifications import Scheduler
from resources.adapters.credentials import CredentialHolder, InMemoryCredentialHolder
from resources.adapters.service_documents import ServiceFactory


def configure_logging_from_settings(settings: ExplorerSettings) -> None:
    """Apply the ``logging`` settings subtree to the root logger."""
    configure_logging(
        level=settings.logging.level,
        json_output=settings.logging.json_output,
        notifications_level=settings.logging.notifications_level,
        service=settings.logging.service,
        environment=settings.logging.environment,
    )


def start_explorer(
    *,
    displays: ExplorerDisplays,
    service_factory: ServiceFactory,
    credentials: CredentialHolder | None = None,
    scheduler: Scheduler | None = None,
    cli_params: Mapping[str, Any] | None = None,
    config_path: str | Path | None = None,
) -> Explorer:
    """Load settings, configure logging and return a wired explorer."""
    settings = load_settings(cli_params=cli_params, config_path=config_path)
    configure_logging_from_settings(settings)
    if credentials is None:
        credentials = InMemoryCredentialHolder()
    return build_explorer(
        settings=settings,
        displays=displays,
        credentials=credentials,
        service_factory=service_factory,
        scheduler=scheduler,
    )
