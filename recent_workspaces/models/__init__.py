"""Data models for recent workspaces."""

from recent_workspaces.models.enums import WorkspaceKind
from recent_workspaces.models.storage import (
    HistoryEntry,
    LegacyStorageFile,
    OpenedPathsList,
    RawWorkspaceEntry,
    RecentlyOpenedHistory,
    parse_history_entries,
)
from recent_workspaces.models.workspace import ClassifiedUri, EditorInstance, WorkspaceRecord

__all__ = [
    # Workspace
    "ClassifiedUri",
    "EditorInstance",
    "WorkspaceRecord",
    # Storage
    "HistoryEntry",
    "LegacyStorageFile",
    "OpenedPathsList",
    "RawWorkspaceEntry",
    "RecentlyOpenedHistory",
    "parse_history_entries",
    # Enums
    "WorkspaceKind",
]
