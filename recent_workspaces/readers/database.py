"""Embedded ``state.vscdb`` reader.

Layout::

    {app_data}/User/globalStorage/state.vscdb

A SQLite key-value store.  The history lives in a single ``ItemTable`` row
whose value is a JSON document::

    {"entries": [{"folderUri": "file:///...", "label": "name [qualifier]"}, ...]}

The database is opened read-only through a throwaway engine and disposed
after the one query, so the editor's own writer is never contended.
"""

from __future__ import annotations

import sqlite3
from pathlib import Path

from pydantic import ValidationError
from sqlalchemy import Column, MetaData, Table, Text, create_engine, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import NullPool

from recent_workspaces.models import EditorInstance, RawWorkspaceEntry, RecentlyOpenedHistory, parse_history_entries
from recent_workspaces.readers.base import StorageReadError

HISTORY_KEY = "history.recentlyOpenedPathsList"

metadata = MetaData()

item_table = Table(
    "ItemTable",
    metadata,
    Column("key", Text, primary_key=True),
    Column("value", Text),
)


def create_readonly_engine(path: Path) -> Engine:
    """Engine over a single read-only SQLite connection to *path*.

    Uses a SQLite URI (``mode=ro``) so a missing file is never created.
    """
    uri = f"{path.resolve().as_uri()}?mode=ro"
    return create_engine(
        "sqlite://",
        creator=lambda: sqlite3.connect(uri, uri=True),
        poolclass=NullPool,
    )


class StateDatabaseReader:
    """``StorageReader`` for the embedded key-value database."""

    def __init__(self, relative_path: str = "User/globalStorage/state.vscdb", key: str = HISTORY_KEY) -> None:
        self._relative_path = relative_path
        self._key = key

    def path_for(self, instance: EditorInstance) -> Path:
        return instance.app_data / self._relative_path

    def read(self, instance: EditorInstance) -> list[RawWorkspaceEntry]:
        path = self.path_for(instance)
        try:
            if not path.is_file():
                return []
        except OSError as exc:
            raise StorageReadError(path, f"Failed to stat {path}") from exc

        value = self._query(path)
        if value is None:
            return []

        try:
            history = RecentlyOpenedHistory.model_validate_json(value)
        except ValidationError as exc:
            raise StorageReadError(path, f"Failed to deserialize {self._key} in {path}") from exc

        return [
            RawWorkspaceEntry(uri=entry.folder_uri, label=entry.label)
            for entry in parse_history_entries(history.entries)
            if entry.folder_uri is not None
        ]

    def _query(self, path: Path) -> str | bytes | None:
        engine = None
        try:
            engine = create_readonly_engine(path)
            with engine.connect() as conn:
                stmt = select(item_table.c.value).where(item_table.c.key == self._key)
                return conn.execute(stmt).scalar()
        except (OSError, SQLAlchemyError, sqlite3.Error) as exc:
            raise StorageReadError(path, f"Failed to query {path}") from exc
        finally:
            if engine is not None:
                engine.dispose()
