"""Workspace data models.

``ClassifiedUri`` is the classifier's view of a single stored URI.
``WorkspaceRecord`` is the normalized entry handed to callers, built once
with every field (label included) and never mutated afterwards.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, model_validator

from recent_workspaces.models.enums import WorkspaceKind


class EditorInstance(BaseModel):
    """One installed editor variant, identified by its application-data directory."""

    model_config = ConfigDict(frozen=True)

    name: str
    app_data: Path
    channel: str | None = None


class ClassifiedUri(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: WorkspaceKind
    relative_path: str
    remote_authority: str | None = None

    @model_validator(mode="after")
    def _authority_only_for_remote(self) -> ClassifiedUri:
        if (self.kind == WorkspaceKind.REMOTE) != (self.remote_authority is not None):
            msg = f"remote_authority must be set exactly when kind is {WorkspaceKind.REMOTE}"
            raise ValueError(msg)
        return self


class WorkspaceRecord(BaseModel):
    """A recently-opened workspace, ready for presentation."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(min_length=1, description="Unescaped URI, identity for dedup and the open action")
    relative_path: str
    folder_name: str = Field(min_length=1)
    extra_info: str | None = None
    kind: WorkspaceKind
    source_instance: EditorInstance
    label: str | None = None

    @property
    def title(self) -> str:
        """Label when the storage supplied one, otherwise the folder name."""
        return self.label or self.folder_name

    @property
    def subtitle(self) -> str:
        kind = self.kind.description
        if self.extra_info:
            kind = f"{kind} ({self.extra_info})"
        return f"{kind} in {self.source_instance.name}"
