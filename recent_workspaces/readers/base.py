"""Storage reader interface.

Each reader decodes one on-disk history format of an editor instance into
``RawWorkspaceEntry`` objects, preserving the storage's own ordering.  A
reader returns an empty list when its source simply doesn't exist, and raises
``StorageReadError`` when the source exists but can't be read.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, runtime_checkable

from recent_workspaces.models import EditorInstance, RawWorkspaceEntry


class StorageReadError(ValueError):
    """Raised when a storage source exists but its content can't be used."""

    def __init__(self, path: Path, message: str) -> None:
        super().__init__(message)
        self.path = path


@runtime_checkable
class StorageReader(Protocol):
    """Reads recently-opened entries from one storage format."""

    def path_for(self, instance: EditorInstance) -> Path:
        """Location of this format's source under the instance's app-data directory."""
        ...

    def read(self, instance: EditorInstance) -> list[RawWorkspaceEntry]:
        """Read entries.  Raises ``StorageReadError`` on unreadable content."""
        ...
