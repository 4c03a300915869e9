"""Directory State native package exports."""

from services.state.directory_state.component import COMPONENT_ID
from services.state.directory_state.domain import DirectorySnapshot
from services.state.directory_state.implementation import InMemoryDirectoryState
from services.state.directory_state.service import DirectoryState

__all__ = [
    "COMPONENT_ID",
    "DirectorySnapshot",
    "DirectoryState",
    "InMemoryDirectoryState",
]
