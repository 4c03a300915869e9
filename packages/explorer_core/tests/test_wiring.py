"""Tests for explorer wiring and startup."""

from __future__ import annotations

import asyncio
import logging
import os
from collections.abc import Iterator
from pathlib import Path

import pytest

from packages.explorer_core import (
    ExplorerDisplays,
    build_explorer,
    start_explorer,
)
from packages.explorer_shared.config import (
    ExplorerSettings,
    ReentrancyPolicy,
    load_settings,
)
from packages.explorer_shared.logging import clear_context
from packages.explorer_shared.logging.config import JsonFormatter, PlainFormatter
from packages.explorer_shared.notifications import (
    DefinitionsLoaded,
    DeferredTaskQueue,
    EventLoopTaskQueue,
    MethodSelected,
    ServiceLoaded,
    ServiceSelected,
    VersionSelected,
)
from resources.adapters.credentials import InMemoryCredentialHolder
from resources.adapters.service_documents import InMemoryServiceFactory
from tests.helpers.explorer_fakes import (
    RecordingAuthDisplay,
    RecordingDisplay,
    definition,
)


@pytest.fixture(autouse=True)
def _clear_explorer_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in list(os.environ):
        if key.startswith("EXPLORER_"):
            monkeypatch.delenv(key)


@pytest.fixture
def settings(tmp_path: Path) -> ExplorerSettings:
    return load_settings(config_path=tmp_path / "explorer.yaml")


@pytest.fixture
def restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if isinstance(handler.formatter, (JsonFormatter, PlainFormatter)):
            root.removeHandler(handler)
    root.setLevel(level)
    clear_context()


def _displays() -> ExplorerDisplays:
    return ExplorerDisplays(
        service=RecordingDisplay(),
        version=RecordingDisplay(),
        method=RecordingDisplay(),
        auth=RecordingAuthDisplay(),
    )


def test_build_explorer_subscribes_components_in_canonical_order(
    settings: ExplorerSettings,
) -> None:
    """Each notification type has exactly the expected subscribers."""
    explorer = build_explorer(
        settings=settings,
        displays=_displays(),
        credentials=InMemoryCredentialHolder(),
        service_factory=InMemoryServiceFactory(),
    )

    # service, version, method, auth
    assert explorer.channel.subscriber_count(ServiceSelected) == 4
    # service, version, method, loader
    assert explorer.channel.subscriber_count(VersionSelected) == 4
    # app state, method, auth
    assert explorer.channel.subscriber_count(ServiceLoaded) == 3
    # app state, method, auth
    assert explorer.channel.subscriber_count(MethodSelected) == 3
    assert isinstance(explorer.scheduler, DeferredTaskQueue)


def test_build_explorer_applies_settings(tmp_path: Path) -> None:
    """Channel behavior and component settings come from configuration."""
    settings = load_settings(
        cli_params={
            "channel": {"reentrancy_policy": "warn", "max_deferred_rounds": 3},
            "components": {"selector": {"service": {"excluded_services": []}}},
        },
        config_path=tmp_path / "explorer.yaml",
    )
    displays = _displays()

    explorer = build_explorer(
        settings=settings,
        displays=displays,
        credentials=InMemoryCredentialHolder(),
        service_factory=InMemoryServiceFactory(),
    )
    explorer.publish(DefinitionsLoaded((definition("discovery", "v1"),)))

    assert explorer.channel.reentrancy_policy is ReentrancyPolicy.WARN
    assert isinstance(explorer.scheduler, DeferredTaskQueue)
    assert explorer.scheduler.max_rounds == 3
    assert [item.name for item in displays.service.candidates] == ["discovery"]


def test_settle_is_a_no_op_for_event_loop_schedulers(
    settings: ExplorerSettings,
) -> None:
    """The event loop drains deferred work on its own."""
    loop = asyncio.new_event_loop()
    try:
        explorer = build_explorer(
            settings=settings,
            displays=_displays(),
            credentials=InMemoryCredentialHolder(),
            service_factory=InMemoryServiceFactory(),
            scheduler=EventLoopTaskQueue(loop),
        )

        assert explorer.settle() == 0
    finally:
        loop.close()


@pytest.mark.usefixtures("restore_root_logger")
def test_start_explorer_loads_settings_and_configures_logging(tmp_path: Path) -> None:
    """Startup reads YAML, installs the log handler and wires components."""
    config_file = tmp_path / "explorer.yaml"
    config_file.write_text(
        "\n".join(
            [
                "logging:",
                "  level: WARNING",
                "  json_output: false",
            ]
        ),
        encoding="utf-8",
    )

    explorer = start_explorer(
        displays=_displays(),
        service_factory=InMemoryServiceFactory(),
        config_path=config_file,
    )

    root = logging.getLogger()
    assert root.level == logging.WARNING
    assert any(isinstance(item.formatter, PlainFormatter) for item in root.handlers)
    assert explorer.auth.snapshot().scopes == frozenset()
