"""Shared enumerations."""

from __future__ import annotations

from enum import StrEnum


class WorkspaceKind(StrEnum):
    """What a recently-opened entry points at."""

    FOLDER = "folder"
    WORKSPACE_FILE = "workspace_file"
    REMOTE = "remote"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    WorkspaceKind.FOLDER: "Project Folder",
    WorkspaceKind.WORKSPACE_FILE: "Workspace",
    WorkspaceKind.REMOTE: "Remote",
}
