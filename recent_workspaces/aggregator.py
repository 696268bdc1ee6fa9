"""Collect recently-opened workspaces across editor instances.

For every instance, the legacy ``storage.json`` is read first and the
``state.vscdb`` database second.  Each raw URI is unescaped, classified and
turned into a ``WorkspaceRecord``; unrecognized URIs are dropped.  A failure
in one source is logged and contributes nothing, it never aborts the call.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from urllib.parse import unquote

from recent_workspaces.classifier import classify, folder_name_for
from recent_workspaces.log import LoguruWorkspaceLog, WorkspaceLog
from recent_workspaces.models import EditorInstance, RawWorkspaceEntry, WorkspaceRecord
from recent_workspaces.readers import LegacyStorageReader, StateDatabaseReader, StorageReader, StorageReadError
from recent_workspaces.settings import WorkspacesSettings, get_settings

LOG_SOURCE = "RecentWorkspaces"

# "<name> [<qualifier>]...": name is everything before the first "[", qualifier the rest
_LABEL = re.compile(r"(?P<name>[^\[]+?)\s*(?P<qualifier>\[[^\]]+\].*)")


def build_readers(settings: WorkspacesSettings | None = None) -> list[StorageReader]:
    """Readers in the order their entries appear in the result: legacy, then database."""
    settings = settings or get_settings()
    return [
        LegacyStorageReader(settings.storage_file),
        StateDatabaseReader(settings.state_db, key=settings.history_key),
    ]


def format_label(label: str) -> str | None:
    """Reorder ``"MyProj [WSL: Ubuntu]"`` into ``"[WSL: Ubuntu] MyProj"``.

    Returns ``None`` when *label* isn't a name followed by a bracketed qualifier.
    """
    match = _LABEL.fullmatch(label.strip())
    if match is None:
        return None
    return f"{match['qualifier']} {match['name']}"


def build_record(entry: RawWorkspaceEntry, instance: EditorInstance) -> WorkspaceRecord | None:
    """Classify *entry* and build its record, or ``None`` if the URI isn't a workspace."""
    path = unquote(entry.uri)
    classified = classify(path)
    if classified is None:
        return None

    return WorkspaceRecord(
        path=path,
        relative_path=classified.relative_path,
        folder_name=folder_name_for(path),
        extra_info=classified.remote_authority,
        kind=classified.kind,
        source_instance=instance,
        label=format_label(entry.label) if entry.label else None,
    )


def list_workspaces(
    instances: Iterable[EditorInstance],
    log: WorkspaceLog | None = None,
    *,
    settings: WorkspacesSettings | None = None,
    readers: Sequence[StorageReader] | None = None,
) -> list[WorkspaceRecord]:
    """Return every recently-opened workspace of *instances*, in instance order.

    Parameters
    ----------
    instances:
        Editor instances to inspect, in the order their records should appear.
    log:
        Receives one ``log_exception`` per unreadable source and one
        ``log_info`` per instance that contributed records.  Defaults to loguru.
    settings:
        Storage layout.  Ignored when *readers* is given.
    readers:
        Storage readers to consult per instance, in order.
    """
    log = log or LoguruWorkspaceLog()
    if readers is None:
        readers = build_readers(settings)

    workspaces: list[WorkspaceRecord] = []
    for instance in instances:
        records = _collect_instance(instance, readers, log)
        if records:
            paths = ", ".join(record.path for record in records)
            log.log_info(LOG_SOURCE, f"loaded workspaces: {paths} from {instance.app_data}")
        workspaces.extend(records)
    return workspaces


def filter_workspaces(records: Iterable[WorkspaceRecord], query: str) -> list[WorkspaceRecord]:
    """Keep records whose title, path or extra info contains *query* (case-insensitive)."""
    needle = query.strip().casefold()
    if not needle:
        return list(records)
    return [
        record
        for record in records
        if any(needle in (value or "").casefold() for value in (record.title, record.path, record.extra_info))
    ]


def _collect_instance(
    instance: EditorInstance,
    readers: Sequence[StorageReader],
    log: WorkspaceLog,
) -> list[WorkspaceRecord]:
    records: list[WorkspaceRecord] = []
    positions: dict[str, int] = {}

    for reader in readers:
        try:
            entries = reader.read(instance)
        except StorageReadError as exc:
            log.log_exception(LOG_SOURCE, str(exc), exc)
            continue

        for entry in entries:
            record = build_record(entry, instance)
            if record is None:
                continue

            # Same path seen earlier: keep its position, prefer the labeled copy
            index = positions.get(record.path)
            if index is None:
                positions[record.path] = len(records)
                records.append(record)
            elif record.label and not records[index].label:
                records[index] = record

    return records
