"""Shared fixtures for end-to-end selection cascade tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from packages.explorer_core import Explorer, ExplorerDisplays, build_explorer
from packages.explorer_shared.config import ExplorerSettings, load_settings
from resources.adapters.credentials import InMemoryCredentialHolder
from resources.adapters.service_documents import InMemoryServiceFactory
from tests.helpers.explorer_fakes import (
    RecordingAuthDisplay,
    RecordingDisplay,
    method,
    service,
)

DRIVE_SCOPE = "https://www.googleapis.com/auth/drive"


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> ExplorerSettings:
    """Return default settings isolated from host env and config files."""
    for key in list(os.environ):
        if key.startswith("EXPLORER_"):
            monkeypatch.delenv(key)
    return load_settings(config_path=tmp_path / "explorer.yaml")


@pytest.fixture
def displays() -> ExplorerDisplays:
    """Return one recording display per coordinator."""
    return ExplorerDisplays(
        service=RecordingDisplay(),
        version=RecordingDisplay(),
        method=RecordingDisplay(),
        auth=RecordingAuthDisplay(),
    )


@pytest.fixture
def credentials() -> InMemoryCredentialHolder:
    return InMemoryCredentialHolder()


@pytest.fixture
def service_factory() -> InMemoryServiceFactory:
    """Serve drive v1 (3 methods), drive v2 (1 scoped method) and books v1 (2)."""
    return InMemoryServiceFactory(
        [
            service(
                "drive",
                "v1",
                methods=["drive.files.get", "drive.files.list", "drive.files.insert"],
                scopes=[DRIVE_SCOPE],
            ),
            service(
                "drive",
                "v2",
                methods=[method("drive.about.get", scopes=[DRIVE_SCOPE])],
                scopes=[DRIVE_SCOPE],
            ),
            service("books", "v1", methods=["books.volumes.get", "books.volumes.list"]),
        ]
    )


@pytest.fixture
def explorer(
    settings: ExplorerSettings,
    displays: ExplorerDisplays,
    credentials: InMemoryCredentialHolder,
    service_factory: InMemoryServiceFactory,
) -> Explorer:
    """Return a fully wired explorer driven by a manual deferred queue."""
    return build_explorer(
        settings=settings,
        displays=displays,
        credentials=credentials,
        service_factory=service_factory,
    )
