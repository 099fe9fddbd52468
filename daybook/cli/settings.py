"""Settings commands for DayBook CLI.

Shows and updates the currency, risk per trade, daily/monthly targets,
fees and leverage.
"""

from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from daybook.cli.common import check_saved, get_journal
from daybook.formatting import percent_format

console = Console()


@click.group()
def settings() -> None:
    """Show or change risk and target settings.

    \b
    Examples:
      daybook settings show
      daybook settings set --risk 0.5 --leverage 5
      daybook settings set --currency BRL
    """
    pass


@settings.command("show")
@click.pass_context
def show_settings(ctx: click.Context) -> None:
    """Display the current settings."""
    current = get_journal(ctx).settings

    table = Table(
        title="Settings",
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Setting", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("Currency", current.currency)
    table.add_row("Risk per trade", percent_format(current.risk_percent))
    table.add_row("Max daily loss", percent_format(current.max_daily_loss_percent))
    table.add_row("Daily target", percent_format(current.daily_target_percent))
    table.add_row("Monthly target", percent_format(current.monthly_target_percent))
    table.add_row("Round-trip fees", percent_format(current.fee_percent))
    table.add_row("Leverage", f"{current.leverage:g}x")

    console.print(table)


@settings.command("set")
@click.option("--currency", default=None, help="ISO 4217 currency code (e.g. USD, BRL).")
@click.option("--risk", "risk_percent", type=float, default=None, help="Risk per trade (%).")
@click.option(
    "--max-daily-loss", "max_daily_loss_percent", type=float, default=None,
    help="Max daily loss (%).",
)
@click.option(
    "--daily-target", "daily_target_percent", type=float, default=None,
    help="Daily target (%).",
)
@click.option(
    "--monthly-target", "monthly_target_percent", type=float, default=None,
    help="Monthly target (%).",
)
@click.option("--fee", "fee_percent", type=float, default=None, help="Round-trip fees (%).")
@click.option("--leverage", type=float, default=None, help="Leverage multiplier.")
@click.pass_context
def set_settings(
    ctx: click.Context,
    currency: Optional[str],
    risk_percent: Optional[float],
    max_daily_loss_percent: Optional[float],
    daily_target_percent: Optional[float],
    monthly_target_percent: Optional[float],
    fee_percent: Optional[float],
    leverage: Optional[float],
) -> None:
    """Change one or more settings."""
    changes = {
        "currency": currency.upper() if currency else None,
        "risk_percent": risk_percent,
        "max_daily_loss_percent": max_daily_loss_percent,
        "daily_target_percent": daily_target_percent,
        "monthly_target_percent": monthly_target_percent,
        "fee_percent": fee_percent,
        "leverage": leverage,
    }
    changes = {k: v for k, v in changes.items() if v is not None}

    if not changes:
        console.print("[yellow]Nothing to change. See `daybook settings set --help`.[/yellow]")
        return

    journal = get_journal(ctx)
    check_saved(journal.update_settings(**changes))

    for name, value in changes.items():
        console.print(f"[green]✓ {name} = {value}[/green]")
