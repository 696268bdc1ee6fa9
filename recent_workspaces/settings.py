"""Configuration loaded from RECENT_WORKSPACES_* environment variables."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class WorkspacesSettings(BaseSettings):
    """Recent-workspaces settings.

    All fields are read from environment variables with the
    ``RECENT_WORKSPACES_`` prefix.  For example,
    ``RECENT_WORKSPACES_LOG_LEVEL=DEBUG`` maps to ``log_level``.  List values
    are given as JSON: ``RECENT_WORKSPACES_APP_DATA_DIRS='["~/.config/Code"]'``.
    """

    model_config = SettingsConfigDict(
        env_prefix="RECENT_WORKSPACES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -- Logging ---------------------------------------------------------------
    log_level: str = "INFO"

    # -- Instances -------------------------------------------------------------
    app_data_dirs: list[Path] = []
    """Editor application-data directories used by the CLI when none are given."""

    # -- Storage layout (relative to an instance's app-data directory) ---------
    storage_file: str = "storage.json"
    state_db: str = "User/globalStorage/state.vscdb"
    history_key: str = "history.recentlyOpenedPathsList"


@lru_cache(maxsize=1)
def get_settings() -> WorkspacesSettings:
    """Return a cached settings instance.

    Call ``get_settings.cache_clear()`` in tests to force a re-read after
    overriding env vars.
    """
    return WorkspacesSettings()
