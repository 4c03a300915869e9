"""Authoritative in-process Python API for Directory State."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable

from packages.explorer_shared.discovery import ServiceDefinition
from services.state.directory_state.domain import DirectorySnapshot


class DirectoryState(ABC):
    """Read/write table of every known (service, version) definition."""

    @abstractmethod
    def load(self, definitions: Iterable[ServiceDefinition]) -> DirectorySnapshot:
        """Replace the whole table with ``definitions``."""

    @abstractmethod
    def versions_of(self, service_name: str) -> tuple[ServiceDefinition, ...]:
        """Return the definitions for one service, sorted by version string."""

    @abstractmethod
    def contains(self, service_name: str, version: str) -> bool:
        """Return whether the current table has a ``(name, version)`` row."""

    @abstractmethod
    def get(self, service_name: str, version: str) -> ServiceDefinition:
        """Return one row of the current table."""

    @abstractmethod
    def names(self) -> tuple[str, ...]:
        """Return every loaded service name, sorted."""

    @abstractmethod
    def snapshot(self) -> DirectorySnapshot:
        """Return a summary of the current table."""
