"""Readers for the editor's two history storage formats."""

from recent_workspaces.readers.base import StorageReader, StorageReadError
from recent_workspaces.readers.database import StateDatabaseReader
from recent_workspaces.readers.legacy import LegacyStorageReader

__all__ = ["LegacyStorageReader", "StateDatabaseReader", "StorageReadError", "StorageReader"]
