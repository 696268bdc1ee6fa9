"""Transient shapes of the two on-disk history formats.

These models only live at the reader boundary.  Both formats are mapped to
``RawWorkspaceEntry`` before anything else sees them.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class HistoryEntry(BaseModel):
    """One element of an ``entries`` list (``storage.json`` or ``state.vscdb``)."""

    model_config = ConfigDict(populate_by_name=True)

    folder_uri: str | None = Field(default=None, alias="folderUri")
    label: str | None = None


class OpenedPathsList(BaseModel):
    # Older editors stored plain URI strings; later ones objects we don't read.
    workspaces3: list[Any] | None = None
    entries: list[Any] | None = None


class LegacyStorageFile(BaseModel):
    """``<appData>/storage.json``."""

    model_config = ConfigDict(populate_by_name=True)

    opened_paths_list: OpenedPathsList | None = Field(default=None, alias="openedPathsList")


class RecentlyOpenedHistory(BaseModel):
    """Value stored under ``history.recentlyOpenedPathsList`` in ``state.vscdb``."""

    entries: list[Any] = Field(default_factory=list)


class RawWorkspaceEntry(BaseModel):
    """A still-escaped URI plus the label the storage supplied, if any."""

    model_config = ConfigDict(frozen=True)

    uri: str
    label: str | None = None


def parse_history_entries(items: list[Any] | None) -> list[HistoryEntry]:
    """Validate ``entries`` one element at a time, skipping malformed ones."""
    entries: list[HistoryEntry] = []
    for item in items or []:
        try:
            entries.append(HistoryEntry.model_validate(item))
        except ValidationError:
            continue
    return entries
