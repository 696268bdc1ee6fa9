"""Classify stored workspace URIs.

Recognized forms (input must already be percent-decoded):

- ``file:///c:/src/app``, ``file:///home/me/app``  -> local
- ``file://server/share/app``                       -> local (UNC)
- ``vscode-remote://ssh-remote+myhost/home/me/app`` -> remote, authority ``ssh-remote+myhost``
- ``C:\\src\\app``, ``/home/me/app``                -> local (bare absolute path)

Anything ending in ``.code-workspace`` is a multi-root workspace file.
Everything else is not a workspace URI and yields ``None``.
"""

from __future__ import annotations

import re

from recent_workspaces.models.enums import WorkspaceKind
from recent_workspaces.models.workspace import ClassifiedUri

WORKSPACE_FILE_SUFFIX = ".code-workspace"

_LOCAL_URI = re.compile(r"^file://(?P<host>[^/]*)(?P<path>/.*)?$", re.IGNORECASE)
_REMOTE_URI = re.compile(r"^vscode-remote://(?P<authority>[^/]+)(?P<path>/.*)$", re.IGNORECASE)
_BARE_PATH = re.compile(r"^(?:[A-Za-z]:[\\/]|/)")
_DRIVE_AFTER_SLASH = re.compile(r"^/[A-Za-z]:")

_SEPARATORS = "/\\"


def classify(raw: str) -> ClassifiedUri | None:
    """Return the workspace kind and path of *raw*, or ``None`` if unrecognized."""
    if not raw:
        return None

    if match := _REMOTE_URI.match(raw):
        return _build(match["path"], authority=match["authority"])

    if match := _LOCAL_URI.match(raw):
        path = match["path"] or ""
        if match["host"]:
            path = f"//{match['host']}{path}"
        elif _DRIVE_AFTER_SLASH.match(path):
            path = path[1:]
        return _build(path)

    if _BARE_PATH.match(raw):
        return _build(raw)

    return None


def _build(path: str, *, authority: str | None = None) -> ClassifiedUri | None:
    if authority is None and not path.strip(_SEPARATORS):
        return None

    if path.rstrip(_SEPARATORS).lower().endswith(WORKSPACE_FILE_SUFFIX):
        return ClassifiedUri(kind=WorkspaceKind.WORKSPACE_FILE, relative_path=path)
    if authority is not None:
        return ClassifiedUri(kind=WorkspaceKind.REMOTE, relative_path=path, remote_authority=authority)
    return ClassifiedUri(kind=WorkspaceKind.FOLDER, relative_path=path)


def folder_name_for(path: str) -> str:
    """Display name for *path*: its last segment.

    A drive root such as ``C:\\`` has an empty last segment, so the trailing
    separators are stripped and the drive itself is used, minus its colon.
    """
    name = _last_segment(path)
    if not name:
        name = _last_segment(path.rstrip(_SEPARATORS)).rstrip(":")
    return name or path


def _last_segment(path: str) -> str:
    return re.split(r"[\\/]", path)[-1]
