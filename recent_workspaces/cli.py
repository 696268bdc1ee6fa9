from __future__ import annotations

from pathlib import Path

import click
from pydantic import TypeAdapter

from recent_workspaces.models import EditorInstance, WorkspaceRecord


def _instances(app_data_dirs: tuple[Path, ...] | list[Path]) -> list[EditorInstance]:
    """One instance per directory, named after the directory."""
    instances = []
    for app_data in app_data_dirs:
        app_data = app_data.expanduser()
        instances.append(EditorInstance(name=app_data.name or str(app_data), app_data=app_data))
    return instances


@click.group()
def main() -> None:
    """Recent workspaces - list folders, workspace files and remotes opened in VS Code style editors."""


@main.command(name="list")
@click.option(
    "--app-data",
    "app_data",
    multiple=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Editor application-data directory (repeatable; default: from RECENT_WORKSPACES_APP_DATA_DIRS).",
)
@click.option("--query", default=None, help="Only show workspaces whose title, path or remote contains TEXT.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print records as JSON.")
def list_command(app_data: tuple[Path, ...], query: str | None, as_json: bool) -> None:
    """List recently-opened workspaces, legacy storage first."""
    from recent_workspaces.aggregator import filter_workspaces, list_workspaces
    from recent_workspaces.log import setup_logging
    from recent_workspaces.settings import get_settings

    settings = get_settings()
    setup_logging(settings.log_level)

    instances = _instances(app_data or settings.app_data_dirs)
    records = list_workspaces(instances, settings=settings)
    if query:
        records = filter_workspaces(records, query)

    if as_json:
        adapter = TypeAdapter(list[WorkspaceRecord])
        click.echo(adapter.dump_json(records, indent=2).decode())
        return

    for record in records:
        click.echo(f"{record.title}\t{record.path}\t{record.subtitle}")


@main.command()
@click.option(
    "--app-data",
    "app_data",
    multiple=True,
    type=click.Path(file_okay=False, path_type=Path),
    help="Editor application-data directory (repeatable; default: from RECENT_WORKSPACES_APP_DATA_DIRS).",
)
def paths(app_data: tuple[Path, ...]) -> None:
    """Show which storage files would be read for each instance."""
    from recent_workspaces.aggregator import build_readers
    from recent_workspaces.settings import get_settings

    settings = get_settings()
    readers = build_readers(settings)

    for instance in _instances(app_data or settings.app_data_dirs):
        click.echo(f"{instance.name}:")
        for reader in readers:
            path = reader.path_for(instance)
            state = "found" if path.is_file() else "missing"
            click.echo(f"  {path} ({state})")


if __name__ == "__main__":
    main()
