"""Helpers shared by the DayBook CLI commands."""

import click
from rich.console import Console
from rich.panel import Panel

from daybook.config import get_db_path
from daybook.exceptions import StorageError
from daybook.journal import JournalStore, SaveResult

console = Console()


def error_panel(message: str, detail: str = "") -> None:
    """Print an error panel."""
    body = f"[red]{message}[/red]"
    if detail:
        body += f"\n\n{detail}"
    console.print(Panel(
        body,
        title="[bold red]Error[/bold red]",
        border_style="red",
    ))


def get_journal(ctx: click.Context) -> JournalStore:
    """Open the journal for the database selected on the command line."""
    from daybook.db.store import DataStore

    obj = ctx.obj or {}
    db_path = get_db_path(obj.get("config", {}), obj.get("db_path"))
    try:
        store = DataStore(db_path)
    except StorageError as e:
        error_panel("Failed to open journal database:", str(e))
        raise SystemExit(1)
    return JournalStore.open(store)


def check_saved(result: SaveResult) -> None:
    """Exit with an error if a mutation could not be saved."""
    if not result.ok:
        error_panel("Failed to save journal:", result.error or "")
        raise SystemExit(1)
