"""Dashboard commands for DayBook CLI.

Shows the bankroll, month P/L, daily rule status and the stop-rules
checklist.
"""

from datetime import date, datetime
from typing import Optional

import click
from rich.columns import Columns
from rich.console import Console
from rich.panel import Panel

from daybook.cli.common import get_journal
from daybook.dashboard import build_dashboard
from daybook.formatting import currency_format, percent_format

console = Console()


def _stat_card(title: str, value: str, subtitle: str, flag: Optional[str] = None) -> Panel:
    """Build one stat card. ``flag`` is "ok", "warn" or None."""
    border = {"ok": "green", "warn": "red"}.get(flag, "cyan")
    return Panel(
        f"[bold]{value}[/bold]\n[dim]{subtitle}[/dim]",
        title=title,
        border_style=border,
        expand=True,
    )


@click.command()
@click.option(
    "--date",
    "selected",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Day to check against the daily rules. Defaults to today.",
)
@click.pass_context
def dashboard(ctx: click.Context, selected: Optional[datetime]) -> None:
    """Display bankroll, month P/L and daily rule status.

    \b
    Examples:
      daybook dashboard
      daybook dashboard --date 2024-01-02
    """
    journal = get_journal(ctx)
    today = date.today()
    day = selected.date() if selected else today

    dash = build_dashboard(journal.state, selected_date=day, today=today)
    settings = dash.settings
    currency = settings.currency

    last = dash.last_date
    balance_card = _stat_card(
        "Bankroll",
        currency_format(dash.balance, currency),
        f"Last date: {last.isoformat()}" if last else "-",
    )

    month_card = _stat_card(
        f"P/L {dash.month}",
        currency_format(dash.month_stats.pl, currency),
        f"Return: {percent_format(dash.month_stats.ret_pct)} "
        f"(target {percent_format(settings.monthly_target_percent)})",
        flag="ok" if dash.month_target_hit else None,
    )

    row = dash.day_row
    target_card = _stat_card(
        "Daily target",
        percent_format(settings.daily_target_percent),
        f"{day.isoformat()}: {percent_format(row.ret_pct)}" if row else "-",
        flag="ok" if dash.rules.target_hit else None,
    )

    if row is None:
        loss_status = "-"
    elif dash.rules.loss_exceeded:
        loss_status = "Limit reached"
    else:
        loss_status = "Within limit"
    loss_card = _stat_card(
        "Max daily loss",
        percent_format(settings.max_daily_loss_percent),
        loss_status,
        flag="warn" if dash.rules.loss_exceeded else None,
    )

    console.print(Columns([balance_card, month_card, target_card, loss_card], equal=True))

    if dash.rules.loss_exceeded:
        console.print("[bold red]Daily loss limit reached: stop trading for today.[/bold red]")
    elif dash.rules.target_hit:
        console.print("[green]Daily target hit: consider stopping to protect gains.[/green]")

    console.print(f"\n[dim]{len(dash.series)} days in journal[/dim]")


@click.command()
@click.pass_context
def rules(ctx: click.Context) -> None:
    """Display the stop rules and trading checklist.

    \b
    Examples:
      daybook rules
    """
    settings = get_journal(ctx).settings

    lines = [
        f"• If the day's loss reaches {percent_format(settings.max_daily_loss_percent)}, stop trading.",
        f"• If the daily target of {percent_format(settings.daily_target_percent)} is hit, "
        "consider stopping to protect gains.",
        "• Only trade validated setups with a clear technical stop.",
        "• Avoid overtrading; trade only the hours where you have an edge.",
        "• Write down the day's lessons (technical and emotional) in the journal.",
    ]

    console.print(Panel(
        "\n".join(lines),
        title="[bold cyan]Stop Rules & Checklist[/bold cyan]",
        border_style="cyan",
    ))
    console.print(
        f"[dim]Suggestion: risk 0.5% to 1% per trade; daily stop 2% to 3%. "
        f"Current risk: {percent_format(settings.risk_percent)}[/dim]"
    )
