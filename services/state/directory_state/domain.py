"""Domain contracts for Directory State summaries."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class DirectorySnapshot(BaseModel):
    """Summary of the table installed by the most recent load."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    generation: int
    service_count: int
    definition_count: int
