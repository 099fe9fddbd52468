"""Position sizing command for DayBook CLI."""

from datetime import date
from typing import Optional

import click
from rich.console import Console
from rich.panel import Panel

from daybook.cli.common import get_journal
from daybook.dashboard import build_dashboard
from daybook.formatting import currency_format, percent_format, units_format

console = Console()


@click.command()
@click.option("--entry", type=float, required=True, help="Entry price.")
@click.option("--stop", type=float, required=True, help="Stop-loss price.")
@click.option(
    "--balance",
    type=float,
    default=None,
    help="Balance to size with. Defaults to the current bankroll.",
)
@click.pass_context
def size(ctx: click.Context, entry: float, stop: float, balance: Optional[float]) -> None:
    """Calculate position size from entry, stop and risk settings.

    Risk per trade, fees and leverage come from the settings
    (see `daybook settings show`).

    \b
    Examples:
      daybook size --entry 100 --stop 95
      daybook size --entry 100 --stop 95 --balance 10000
    """
    journal = get_journal(ctx)
    today = date.today()
    dash = build_dashboard(
        journal.state,
        selected_date=today,
        today=today,
        entry=entry,
        stop=stop,
        balance_override=balance,
    )
    settings = dash.settings
    currency = settings.currency
    plan = dash.plan

    if plan is None:
        console.print(Panel(
            "[dim]Fill in entry, stop and balance to calculate.[/dim]\n"
            "[dim]Entry and stop must differ; balance and risk must be non-zero.[/dim]",
            title="[bold]Position Calculator[/bold]",
            border_style="dim",
        ))
        return

    text = (
        f"[bold]Sizing balance:[/bold] {currency_format(dash.sizing_balance, currency)} "
        f"[dim](risk {percent_format(settings.risk_percent)}, "
        f"{settings.leverage:g}x)[/dim]\n\n"
        f"Entry / Stop:     {plan.entry:g} / {plan.stop:g} (distance {plan.stop_dist:g})\n"
        f"Risk (value):     [red]{currency_format(plan.risk_value, currency)}[/red]\n"
        f"Size (notional):  [bold]{currency_format(plan.position_notional, currency)}[/bold]\n"
        f"Units (qty):      {units_format(plan.units)}\n"
        f"Margin required:  [yellow]{currency_format(plan.margin_required, currency)}[/yellow]\n"
        f"Estimated fees:   {currency_format(plan.est_fees, currency)}\n\n"
        f"[dim]Simplified calculation. Check your exchange's contract rules.[/dim]"
    )

    console.print(Panel(
        text,
        title="[bold cyan]Position Calculator[/bold cyan]",
        border_style="cyan",
    ))
