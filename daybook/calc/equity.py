"""Equity curve and journal statistics.

All functions here are pure: they take journal entries or derived rows and
return new values without touching storage.
"""

from datetime import date
from typing import Iterable, Optional

from daybook.parsing import number_or_zero
from daybook.models import DailyRules, EquityRow, JournalEntry, MonthStats


def _return_pct(pl: float, start: float) -> float:
    return pl / start * 100 if start > 0 else 0.0


def derive_equity_series(entries: Iterable[JournalEntry]) -> list[EquityRow]:
    """Build the equity curve from journal entries.

    Entries are sorted by date ascending and ranked from 1.

    Args:
        entries: Journal entries in any order.

    Returns:
        List of equity rows, one per entry.
    """
    ordered = sorted(entries, key=lambda e: e.date)
    rows = []
    for i, entry in enumerate(ordered, start=1):
        start = entry.start_balance
        end = entry.end_balance
        pl = end - start
        rows.append(
            EquityRow(
                index=i,
                date=entry.date,
                start=start,
                end=end,
                pl=pl,
                ret_pct=_return_pct(pl, start),
            )
        )
    return rows


def account_balance(series: list[EquityRow]) -> float:
    """Current bankroll: end balance of the latest day, 0 when empty."""
    return series[-1].end if series else 0.0


def find_row(series: Iterable[EquityRow], day: date) -> Optional[EquityRow]:
    """Get the equity row for a given date, if one exists."""
    for row in series:
        if row.date == day:
            return row
    return None


def current_year_month(today: date) -> str:
    """Format a date as its ``YYYY-MM`` month key."""
    return f"{today.year:04d}-{today.month:02d}"


def compute_month_stats(series: Iterable[EquityRow], year_month: str) -> MonthStats:
    """Aggregate P/L and return for one calendar month.

    The return is measured against the start balance of the earliest
    row in the month.

    Args:
        series: Equity rows sorted by date ascending.
        year_month: Month key in ``YYYY-MM`` form.

    Returns:
        MonthStats, zeroed when the month has no rows.
    """
    month_rows = [r for r in series if r.date.isoformat().startswith(year_month)]
    if not month_rows:
        return MonthStats()

    pl = sum(r.pl for r in month_rows)
    return MonthStats(pl=pl, ret_pct=_return_pct(pl, month_rows[0].start))


def evaluate_daily_rules(
    row: Optional[EquityRow],
    max_daily_loss_percent: float,
    daily_target_percent: float,
) -> DailyRules:
    """Check one day against the stop-loss and target rules.

    Only a negative P/L counts toward the loss limit, so a threshold of 0
    trips on any loss but never on a gain.
    """
    if row is None or row.start <= 0:
        return DailyRules()

    loss_pct = abs(row.pl) / row.start * 100 if row.pl < 0 else 0.0
    ret = row.pl / row.start * 100

    return DailyRules(
        loss_exceeded=row.pl < 0 and loss_pct >= number_or_zero(max_daily_loss_percent),
        target_hit=ret >= number_or_zero(daily_target_percent),
    )


def monthly_target_hit(stats: MonthStats, monthly_target_percent: float) -> bool:
    """Whether the month's return reached the monthly target.

    A month without any P/L never counts as hitting the target.
    """
    return stats.ret_pct >= number_or_zero(monthly_target_percent) and stats.pl != 0
