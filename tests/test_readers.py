"""Unit tests for the storage readers (temporary directories, real SQLite)."""

from __future__ import annotations

from pathlib import Path

import pytest

from recent_workspaces.models import RawWorkspaceEntry
from recent_workspaces.readers import LegacyStorageReader, StateDatabaseReader, StorageReadError

# -- storage.json ----------------------------------------------------------------


def test_legacy_missing_file(make_instance) -> None:
    assert LegacyStorageReader().read(make_instance()) == []


def test_legacy_workspaces3_then_entries(make_instance, write_storage_json) -> None:
    instance = make_instance()
    write_storage_json(
        instance,
        {
            "openedPathsList": {
                "workspaces3": ["file:///home/me/old", {"id": "123", "configURIPath": "file:///x.code-workspace"}],
                "entries": [{"folderUri": "file:///home/me/new"}, {"fileUri": "file:///home/me/notes.txt"}],
            },
            "windowsState": {},
        },
    )

    entries = LegacyStorageReader().read(instance)

    assert entries == [
        RawWorkspaceEntry(uri="file:///home/me/old"),
        RawWorkspaceEntry(uri="file:///home/me/new"),
    ]


def test_legacy_without_history(make_instance, write_storage_json) -> None:
    instance = make_instance()
    write_storage_json(instance, {"theme": "dark"})

    assert LegacyStorageReader().read(instance) == []


def test_legacy_malformed(make_instance, write_storage_json) -> None:
    instance = make_instance()
    path = write_storage_json(instance, '{"openedPathsList": {')

    with pytest.raises(StorageReadError) as exc_info:
        LegacyStorageReader().read(instance)

    assert exc_info.value.path == path
    assert str(path) in str(exc_info.value)


def test_legacy_custom_filename(make_instance) -> None:
    instance = make_instance()
    assert LegacyStorageReader("history.json").path_for(instance) == instance.app_data / "history.json"


# -- state.vscdb -------------------------------------------------------------------


def test_database_missing_file(make_instance) -> None:
    instance = make_instance()

    assert StateDatabaseReader().read(instance) == []
    # Read-only open must not create the database.
    assert not StateDatabaseReader().path_for(instance).exists()


def test_database_entries_with_labels(make_instance, write_history) -> None:
    instance = make_instance()
    write_history(
        instance,
        [
            {"folderUri": "file:///home/me/app"},
            {"folderUri": "vscode-remote://wsl%2BUbuntu/home/me/app", "label": "app [WSL: Ubuntu]"},
            {"fileUri": "file:///home/me/notes.txt"},
            {"workspace": {"id": "abc", "configPath": "file:///home/me/all.code-workspace"}},
        ],
    )

    entries = StateDatabaseReader().read(instance)

    assert entries == [
        RawWorkspaceEntry(uri="file:///home/me/app"),
        RawWorkspaceEntry(uri="vscode-remote://wsl%2BUbuntu/home/me/app", label="app [WSL: Ubuntu]"),
    ]


def test_database_missing_key(make_instance, write_state_db) -> None:
    instance = make_instance()
    write_state_db(instance, {"workbench.panel.width": "300"})

    assert StateDatabaseReader().read(instance) == []


def test_database_malformed_value(make_instance, write_state_db) -> None:
    instance = make_instance()
    path = write_state_db(instance, {"history.recentlyOpenedPathsList": "{not json"})

    with pytest.raises(StorageReadError) as exc_info:
        StateDatabaseReader().read(instance)

    assert exc_info.value.path == path


def test_database_not_sqlite(make_instance) -> None:
    instance = make_instance()
    path = StateDatabaseReader().path_for(instance)
    path.parent.mkdir(parents=True)
    path.write_bytes(b"definitely not a database file, just some bytes" * 20)

    with pytest.raises(StorageReadError):
        StateDatabaseReader().read(instance)


def test_database_custom_key(make_instance, write_state_db) -> None:
    instance = make_instance()
    write_state_db(instance, {"custom.history": {"entries": [{"folderUri": "file:///home/me/app"}]}})

    entries = StateDatabaseReader(key="custom.history").read(instance)

    assert entries == [RawWorkspaceEntry(uri="file:///home/me/app")]


def test_database_skips_malformed_elements(make_instance, write_history) -> None:
    instance = make_instance()
    write_history(
        instance,
        [
            {"folderUri": "file:///home/me/a"},
            {"folderUri": "file:///home/me/b", "label": 5},
            "not an object",
            {"folderUri": "file:///home/me/c", "label": "c [Dev]"},
        ],
    )

    entries = StateDatabaseReader().read(instance)

    assert entries == [
        RawWorkspaceEntry(uri="file:///home/me/a"),
        RawWorkspaceEntry(uri="file:///home/me/c", label="c [Dev]"),
    ]


def test_legacy_skips_malformed_elements(make_instance, write_storage_json) -> None:
    instance = make_instance()
    write_storage_json(
        instance,
        {"openedPathsList": {"entries": [{"folderUri": 42}, {"folderUri": "file:///home/me/a"}]}},
    )

    assert LegacyStorageReader().read(instance) == [RawWorkspaceEntry(uri="file:///home/me/a")]


# -- Unreadable locations --------------------------------------------------------


def _denied_is_file(self: Path) -> bool:
    raise PermissionError(13, "Permission denied", str(self))


def test_legacy_stat_error(make_instance, monkeypatch: pytest.MonkeyPatch) -> None:
    instance = make_instance()
    monkeypatch.setattr(Path, "is_file", _denied_is_file)

    with pytest.raises(StorageReadError) as exc_info:
        LegacyStorageReader().read(instance)

    assert exc_info.value.path == instance.app_data / "storage.json"
    assert isinstance(exc_info.value.__cause__, PermissionError)


def test_database_stat_error(make_instance, monkeypatch: pytest.MonkeyPatch) -> None:
    instance = make_instance()
    monkeypatch.setattr(Path, "is_file", _denied_is_file)

    with pytest.raises(StorageReadError) as exc_info:
        StateDatabaseReader().read(instance)

    assert isinstance(exc_info.value.__cause__, PermissionError)
