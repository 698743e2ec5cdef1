"""Mind-map command-line interface.

Every command opens the project file (or starts an empty one), performs a
single action and saves the map again if the action changed it.
"""

from __future__ import annotations

import logging

import click

from mindmap.config import Settings, build_workspace, load_settings
from mindmap.services.workspace import MindMapWorkspace


@click.group()
@click.option("--config", "-c", default="config.yaml", help="Path to config YAML.")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, config: str, verbose: bool) -> None:
    """Mind map: entries, links and fuzzy title search on a JSON project."""
    settings = load_settings(config)
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.logging.resolved_level(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


project_option = click.option(
    "--project", "-p", default=None, help="Project file (defaults to the configured path)."
)


def _open(ctx: click.Context, project: str | None) -> MindMapWorkspace:
    settings: Settings = ctx.obj["settings"]
    workspace = build_workspace(settings)
    if not workspace.open_or_create(project):
        raise click.ClickException(f"Could not load project: {workspace.last_project_path}")
    return workspace


def _save(workspace: MindMapWorkspace) -> None:
    if not workspace.save_project():
        raise click.ClickException(f"Could not save project: {workspace.last_project_path}")


@main.command()
@click.argument("title", required=False)
@click.option("--note", "-n", default="", help="Note text.")
@click.option("--x", "x", type=float, default=None, help="Canvas X position.")
@click.option("--y", "y", type=float, default=None, help="Canvas Y position.")
@project_option
@click.pass_context
def add(
    ctx: click.Context,
    title: str | None,
    note: str,
    x: float | None,
    y: float | None,
    project: str | None,
) -> None:
    """Add an entry titled TITLE."""
    workspace = _open(ctx, project)
    position = None
    if x is not None or y is not None:
        position = (x or 0.0, y or 0.0)
    entry = workspace.add_entry(position, title=title, note=note)
    _save(workspace)
    click.echo(f"Added entry {entry.id}: {entry.title}")


@main.command()
@click.argument("entry_id", type=int)
@click.option("--title", "-t", default=None, help="New title.")
@click.option("--note", "-n", default=None, help="New note text.")
@click.option("--x", "x", type=float, default=None, help="New canvas X position.")
@click.option("--y", "y", type=float, default=None, help="New canvas Y position.")
@project_option
@click.pass_context
def edit(
    ctx: click.Context,
    entry_id: int,
    title: str | None,
    note: str | None,
    x: float | None,
    y: float | None,
    project: str | None,
) -> None:
    """Change the title, note or position of ENTRY_ID."""
    workspace = _open(ctx, project)
    entry = workspace.store.get_entry(entry_id)
    if entry is None:
        raise click.ClickException(f"Entry not found: {entry_id}")
    position = None
    if x is not None or y is not None:
        position = (
            x if x is not None else entry.position_x,
            y if y is not None else entry.position_y,
        )
    workspace.update_entry(entry_id, title=title, note=note, position=position)
    _save(workspace)
    click.echo(f"Updated entry {entry_id}")


@main.command()
@click.argument("entry_id", type=int)
@project_option
@click.pass_context
def remove(ctx: click.Context, entry_id: int, project: str | None) -> None:
    """Remove ENTRY_ID and every link pointing at it."""
    workspace = _open(ctx, project)
    if workspace.remove_entry(entry_id):
        _save(workspace)
        click.echo(f"Removed entry: {entry_id}")
    else:
        click.echo(f"Entry not found: {entry_id}")


@main.command()
@click.argument("from_id", type=int)
@click.argument("to_id", type=int)
@project_option
@click.pass_context
def connect(ctx: click.Context, from_id: int, to_id: int, project: str | None) -> None:
    """Link FROM_ID to TO_ID."""
    workspace = _open(ctx, project)
    if workspace.connect(from_id, to_id):
        _save(workspace)
        click.echo(f"Connected {from_id} -> {to_id}")
    else:
        click.echo(f"No change: {from_id} -> {to_id}")


@main.command()
@click.argument("from_id", type=int)
@click.argument("to_id", type=int)
@project_option
@click.pass_context
def disconnect(ctx: click.Context, from_id: int, to_id: int, project: str | None) -> None:
    """Remove the link from FROM_ID to TO_ID."""
    workspace = _open(ctx, project)
    if workspace.disconnect(from_id, to_id):
        _save(workspace)
        click.echo(f"Disconnected {from_id} -> {to_id}")
    else:
        click.echo(f"No change: {from_id} -> {to_id}")


@main.command()
@project_option
@click.pass_context
def show(ctx: click.Context, project: str | None) -> None:
    """List every entry with its links."""
    workspace = _open(ctx, project)
    entries = workspace.store.get_all_entries()
    click.echo(f"=== {workspace.last_project_path} ({len(entries)} entries, next id {workspace.store.next_id}) ===")
    for e in entries:
        links = ", ".join(str(cid) for cid in e.connection_ids) or "-"
        click.echo(f"  [{e.id}] {e.title}  @ ({e.position_x:g}, {e.position_y:g})  -> {links}")
        for line in e.note.splitlines():
            click.echo(f"        {line}")


def _match_label(count: int) -> str:
    return "1 match" if count == 1 else f"{count} matches"


@main.command()
@click.argument("query_str")
@project_option
@click.pass_context
def search(ctx: click.Context, query_str: str, project: str | None) -> None:
    """Fuzzy-search entry titles for QUERY_STR, best match first."""
    workspace = _open(ctx, project)
    count = workspace.apply_search(query_str)
    click.echo(_match_label(count))
    for entry_id in workspace.search.matches:
        entry = workspace.store.get_entry(entry_id)
        marker = "*" if entry_id == workspace.search.current_id else " "
        click.echo(f" {marker}[{entry_id}] {entry.title if entry else ''}")


@main.command()
@project_option
@click.pass_context
def todos(ctx: click.Context, project: str | None) -> None:
    """List the Todo lines found in entry notes."""
    workspace = _open(ctx, project)
    items = workspace.todos()
    if not items:
        click.echo("No todos.")
        return
    for item in items:
        click.echo(f"  {item}")


if __name__ == "__main__":
    main()
