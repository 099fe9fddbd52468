"""Journal commands for DayBook CLI.

Handles adding, removing, listing and exporting daily journal entries.
"""

from datetime import date, datetime
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from daybook.calc import derive_equity_series
from daybook.cli.common import check_saved, error_panel, get_journal
from daybook.formatting import currency_format, percent_format
from daybook.models import JournalEntry

console = Console()

DATE_TYPE = click.DateTime(formats=["%Y-%m-%d"])


def _to_date(value: Optional[datetime]) -> date:
    return value.date() if value else date.today()


@click.command()
@click.option(
    "--date",
    "entry_date",
    type=DATE_TYPE,
    default=None,
    help="Journal date (YYYY-MM-DD). Defaults to today.",
)
@click.option(
    "--start",
    "start_balance",
    type=click.FloatRange(min=0),
    required=True,
    help="Balance at the start of the day.",
)
@click.option(
    "--end",
    "end_balance",
    type=click.FloatRange(min=0),
    required=True,
    help="Balance at the end of the day.",
)
@click.option("--notes", default="", help="Setup, emotions, lessons...")
@click.pass_context
def add(
    ctx: click.Context,
    entry_date: Optional[datetime],
    start_balance: float,
    end_balance: float,
    notes: str,
) -> None:
    """Add or update the journal entry for a day.

    An existing entry for the same date is replaced.

    \b
    Examples:
      daybook add --start 1000 --end 1050
      daybook add --date 2024-01-02 --start 1050 --end 1020 --notes "overtraded"
    """
    journal = get_journal(ctx)
    day = _to_date(entry_date)

    replaced = journal.get(day) is not None
    entry = JournalEntry(
        date=day,
        start_balance=start_balance,
        end_balance=end_balance,
        notes=notes,
    )
    check_saved(journal.upsert(entry))

    pl = end_balance - start_balance
    pl_color = "green" if pl >= 0 else "red"
    action = "Updated" if replaced else "Added"
    console.print(
        f"[green]✓ {action} {day.isoformat()}[/green] "
        f"P/L: [{pl_color}]{currency_format(pl, journal.settings.currency)}[/{pl_color}]"
    )


@click.command()
@click.argument("entry_date", type=DATE_TYPE)
@click.pass_context
def remove(ctx: click.Context, entry_date: datetime) -> None:
    """Remove the journal entry for a day.

    \b
    Examples:
      daybook remove 2024-01-02
    """
    journal = get_journal(ctx)
    day = entry_date.date()

    if journal.get(day) is None:
        console.print(f"[yellow]No entry for {day.isoformat()}[/yellow]")
        return

    check_saved(journal.remove(day))
    console.print(f"[green]✓ Removed {day.isoformat()}[/green]")


@click.command()
@click.option(
    "--month",
    default=None,
    help="Only show one month (YYYY-MM).",
)
@click.pass_context
def history(ctx: click.Context, month: Optional[str]) -> None:
    """Display the journal with daily P/L and returns.

    \b
    Examples:
      daybook history
      daybook history --month 2024-01
    """
    journal = get_journal(ctx)
    currency = journal.settings.currency
    entries = journal.all()
    series = derive_equity_series(entries)

    if month:
        series = [r for r in series if r.date.isoformat().startswith(month)]

    if not series:
        console.print(Panel(
            "[dim]No data yet. Add at least one day.[/dim]",
            title="[bold]Journal[/bold]",
            border_style="dim",
        ))
        return

    notes_by_date = {e.date: e.notes for e in entries}

    table = Table(
        title="Journal",
        show_header=True,
        header_style="bold cyan",
    )

    table.add_column("#", justify="right", style="dim")
    table.add_column("Date", style="bold")
    table.add_column("Start", justify="right")
    table.add_column("End", justify="right")
    table.add_column("P/L", justify="right")
    table.add_column("Return", justify="right")
    table.add_column("Notes", max_width=30)

    total_pl = 0.0

    for row in series:
        color = "green" if row.pl >= 0 else "red"
        notes = notes_by_date.get(row.date, "")

        table.add_row(
            str(row.index),
            row.date.isoformat(),
            currency_format(row.start, currency),
            currency_format(row.end, currency),
            f"[{color}]{currency_format(row.pl, currency)}[/{color}]",
            f"[{color}]{percent_format(row.ret_pct)}[/{color}]",
            (notes[:27] + "...") if len(notes) > 30 else (notes or "-"),
        )
        total_pl += row.pl

    console.print(table)

    total_color = "green" if total_pl >= 0 else "red"
    console.print(f"\n[bold]Days:[/bold] {len(series)}")
    console.print(
        f"[bold]Total P/L:[/bold] [{total_color}]{currency_format(total_pl, currency)}[/{total_color}]"
    )


@click.command()
@click.option(
    "--output",
    "output_dir",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory to write the CSV to.",
)
@click.pass_context
def export(ctx: click.Context, output_dir: Optional[str]) -> None:
    """Export the journal to CSV.

    Writes diario_trader_<today>.csv with date, balances, P/L,
    return and notes for every day.

    \b
    Examples:
      daybook export
      daybook export --output ~/Downloads
    """
    from pathlib import Path

    from daybook.config import get_export_dir
    from daybook.export import write_csv

    journal = get_journal(ctx)
    entries = journal.all()
    series = derive_equity_series(entries)

    if output_dir:
        directory = Path(output_dir).expanduser()
    else:
        directory = get_export_dir((ctx.obj or {}).get("config", {}))

    try:
        path = write_csv(directory, series, entries, date.today())
    except OSError as e:
        error_panel("Failed to export journal:", str(e))
        raise SystemExit(1)

    console.print(f"[green]✓ Exported {len(series)} days to {path}[/green]")
