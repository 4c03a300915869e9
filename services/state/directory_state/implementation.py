"""Concrete in-memory Directory State implementation."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from packages.explorer_shared.discovery import ServiceDefinition
from packages.explorer_shared.errors import codes, not_found, precondition_violation
from packages.explorer_shared.logging import get_logger
from services.state.directory_state.domain import DirectorySnapshot
from services.state.directory_state.service import DirectoryState

_LOGGER = get_logger(__name__)

_Table = Mapping[str, Mapping[str, ServiceDefinition]]


class InMemoryDirectoryState(DirectoryState):
    """Directory table held as ``name -> version -> definition``.

    ``load`` builds a new table and swaps it in with one assignment, so readers
    never observe a partially updated table.
    """

    def __init__(self) -> None:
        self._table: _Table = {}
        self._generation = 0

    def load(self, definitions: Iterable[ServiceDefinition]) -> DirectorySnapshot:
        """Replace the table; identical duplicates collapse, conflicting ones fail."""
        table: dict[str, dict[str, ServiceDefinition]] = {}
        for definition in definitions:
            row = table.setdefault(definition.name, {})
            existing = row.get(definition.version)
            if existing is not None and existing != definition:
                raise precondition_violation(
                    "conflicting duplicate definition for "
                    f"{definition.name}/{definition.version}",
                    code=codes.DUPLICATE_DEFINITION,
                    metadata={
                        "service": definition.name,
                        "version": definition.version,
                    },
                )
            row[definition.version] = definition

        self._table = table
        self._generation += 1
        snapshot = self.snapshot()
        _LOGGER.info(
            "directory loaded: generation=%d services=%d definitions=%d",
            snapshot.generation,
            snapshot.service_count,
            snapshot.definition_count,
        )
        return snapshot

    def versions_of(self, service_name: str) -> tuple[ServiceDefinition, ...]:
        row = self._table.get(service_name)
        if row is None:
            raise not_found(
                f"service {service_name!r} was never loaded",
                code=codes.SERVICE_NOT_FOUND,
                metadata={"service": service_name},
            )
        return tuple(row[version] for version in sorted(row))

    def contains(self, service_name: str, version: str) -> bool:
        return version in self._table.get(service_name, {})

    def get(self, service_name: str, version: str) -> ServiceDefinition:
        definition = self._table.get(service_name, {}).get(version)
        if definition is None:
            raise not_found(
                f"no definition for {service_name}/{version}",
                code=codes.VERSION_NOT_FOUND,
                metadata={"service": service_name, "version": version},
            )
        return definition

    def names(self) -> tuple[str, ...]:
        return tuple(sorted(self._table))

    def snapshot(self) -> DirectorySnapshot:
        table = self._table
        return DirectorySnapshot(
            generation=self._generation,
            service_count=len(table),
            definition_count=sum(len(row) for row in table.values()),
        )
