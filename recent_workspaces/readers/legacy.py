"""Legacy ``storage.json`` reader.

Layout::

    {app_data}/storage.json

    {"openedPathsList": {"workspaces3": ["file:///..."],
                         "entries": [{"folderUri": "file:///..."}]}}

``workspaces3`` predates ``entries``; both may be present and are read in
that order.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import ValidationError

from recent_workspaces.models import EditorInstance, LegacyStorageFile, RawWorkspaceEntry, parse_history_entries
from recent_workspaces.readers.base import StorageReadError


class LegacyStorageReader:
    """``StorageReader`` for the flat JSON history file."""

    def __init__(self, filename: str = "storage.json") -> None:
        self._filename = filename

    def path_for(self, instance: EditorInstance) -> Path:
        return instance.app_data / self._filename

    def read(self, instance: EditorInstance) -> list[RawWorkspaceEntry]:
        path = self.path_for(instance)
        try:
            if not path.is_file():
                return []
            raw = path.read_bytes()
        except OSError as exc:
            raise StorageReadError(path, f"Failed to read {path}") from exc

        try:
            storage = LegacyStorageFile.model_validate_json(raw)
        except ValidationError as exc:
            raise StorageReadError(path, f"Failed to deserialize {path}") from exc

        opened = storage.opened_paths_list
        if opened is None:
            return []

        entries: list[RawWorkspaceEntry] = []
        for uri in opened.workspaces3 or []:
            if isinstance(uri, str):
                entries.append(RawWorkspaceEntry(uri=uri))
        for entry in parse_history_entries(opened.entries):
            if entry.folder_uri is not None:
                entries.append(RawWorkspaceEntry(uri=entry.folder_uri))
        return entries
