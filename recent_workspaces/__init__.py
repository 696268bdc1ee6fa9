"""Recover recently-opened editor workspaces from VS Code style local state."""

from recent_workspaces.aggregator import filter_workspaces, list_workspaces
from recent_workspaces.classifier import classify, folder_name_for
from recent_workspaces.models import ClassifiedUri, EditorInstance, WorkspaceKind, WorkspaceRecord

__all__ = [
    "ClassifiedUri",
    "EditorInstance",
    "WorkspaceKind",
    "WorkspaceRecord",
    "classify",
    "filter_workspaces",
    "folder_name_for",
    "list_workspaces",
]
