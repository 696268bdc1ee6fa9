"""Shared test fixtures: editor instances with on-disk history storage.

Everything lives under ``tmp_path``; the state database is a real SQLite file
created with SQLAlchemy Core using the same ``ItemTable`` definition the
reader queries.
"""

from __future__ import annotations

import json
import os
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from sqlalchemy import create_engine

from recent_workspaces.models import EditorInstance
from recent_workspaces.readers.database import HISTORY_KEY, item_table, metadata
from recent_workspaces.settings import get_settings


class RecordingLog:
    """``WorkspaceLog`` that remembers every call."""

    def __init__(self) -> None:
        self.exceptions: list[tuple[str, str, BaseException]] = []
        self.infos: list[tuple[str, str]] = []

    def log_exception(self, source: str, message: str, error: BaseException) -> None:
        self.exceptions.append((source, message, error))

    def log_info(self, source: str, message: str) -> None:
        self.infos.append((source, message))


@pytest.fixture(autouse=True)
def _fresh_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Isolate tests from RECENT_WORKSPACES_* variables in the outer environment."""
    for key in list(os.environ):
        if key.upper().startswith("RECENT_WORKSPACES_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def log() -> RecordingLog:
    return RecordingLog()


@pytest.fixture
def make_instance(tmp_path: Path) -> Callable[..., EditorInstance]:
    def _make(name: str = "Code") -> EditorInstance:
        app_data = tmp_path / name
        app_data.mkdir(parents=True, exist_ok=True)
        return EditorInstance(name=name, app_data=app_data)

    return _make


def _write_storage_json(instance: EditorInstance, content: dict | str) -> Path:
    """Write ``storage.json``; a str is written verbatim (for malformed input)."""
    path = instance.app_data / "storage.json"
    path.write_text(content if isinstance(content, str) else json.dumps(content), encoding="utf-8")
    return path


def _write_state_db(instance: EditorInstance, rows: dict[str, dict | str]) -> Path:
    """Create ``state.vscdb`` with one ``ItemTable`` row per key."""
    path = instance.app_data / "User" / "globalStorage" / "state.vscdb"
    path.parent.mkdir(parents=True, exist_ok=True)

    engine = create_engine(f"sqlite:///{path}")
    try:
        metadata.create_all(engine)
        with engine.begin() as conn:
            for key, value in rows.items():
                conn.execute(
                    item_table.insert(),
                    {"key": key, "value": value if isinstance(value, str) else json.dumps(value)},
                )
    finally:
        engine.dispose()
    return path


def _write_history(instance: EditorInstance, entries: list[dict]) -> Path:
    """Create ``state.vscdb`` holding a recently-opened history."""
    return _write_state_db(instance, {HISTORY_KEY: {"entries": entries}})


@pytest.fixture
def write_storage_json() -> Callable[[EditorInstance, dict | str], Path]:
    return _write_storage_json


@pytest.fixture
def write_state_db() -> Callable[[EditorInstance, dict[str, dict | str]], Path]:
    return _write_state_db


@pytest.fixture
def write_history() -> Callable[[EditorInstance, list[dict]], Path]:
    return _write_history
