"""Dashboard snapshot for DayBook.

Collects everything the CLI displays from one journal state: the equity
curve, the bankroll, this month's numbers, the selected day against the
daily rules, and the position calculator.
"""

from datetime import date
from typing import Any, Optional

from pydantic import BaseModel, Field

from daybook.calc import (
    account_balance,
    compute_month_stats,
    compute_position,
    current_year_month,
    derive_equity_series,
    evaluate_daily_rules,
    find_row,
    monthly_target_hit,
    parse_number,
)
from daybook.models import (
    DailyRules,
    EquityRow,
    JournalState,
    MonthStats,
    PositionPlan,
    Settings,
)


class Dashboard(BaseModel):
    """Derived values for one view of the journal."""

    settings: Settings
    series: list[EquityRow] = Field(default_factory=list)
    balance: float = Field(default=0.0, description="Current bankroll")
    month: str = Field(..., description="Month key (YYYY-MM)")
    month_stats: MonthStats = Field(default_factory=MonthStats)
    month_target_hit: bool = False
    day: date = Field(..., description="Selected day")
    day_row: Optional[EquityRow] = None
    rules: DailyRules = Field(default_factory=DailyRules)
    sizing_balance: float = Field(default=0.0, description="Balance used for sizing")
    plan: Optional[PositionPlan] = None

    model_config = {"frozen": True}

    @property
    def last_date(self) -> Optional[date]:
        return self.series[-1].date if self.series else None


def sizing_balance(balance_override: Any, balance: float) -> float:
    """Pick the sizing balance: a non-zero override wins over the bankroll.

    An override of 0 (or "0") is treated as unset and falls back to the
    bankroll, so a zero override never yields an empty plan.
    """
    override = parse_number(balance_override)
    return override if override else balance


def build_dashboard(
    state: JournalState,
    selected_date: date,
    today: date,
    entry: Any = None,
    stop: Any = None,
    balance_override: Any = None,
) -> Dashboard:
    """Compute a dashboard snapshot.

    Args:
        state: Journal entries and settings.
        selected_date: Day checked against the daily rules.
        today: Date whose month is summarized.
        entry: Entry price for the position calculator.
        stop: Stop price for the position calculator.
        balance_override: Optional balance to size with instead of the bankroll.

    Returns:
        Dashboard with all derived values.
    """
    settings = state.settings
    series = derive_equity_series(state.entries)
    balance = account_balance(series)

    month = current_year_month(today)
    month_stats = compute_month_stats(series, month)

    day_row = find_row(series, selected_date)
    rules = evaluate_daily_rules(
        day_row, settings.max_daily_loss_percent, settings.daily_target_percent
    )

    sizing = sizing_balance(balance_override, balance)
    plan = compute_position(
        entry,
        stop,
        sizing,
        settings.risk_percent,
        settings.fee_percent,
        settings.leverage,
    )

    return Dashboard(
        settings=settings,
        series=series,
        balance=balance,
        month=month,
        month_stats=month_stats,
        month_target_hit=monthly_target_hit(month_stats, settings.monthly_target_percent),
        day=selected_date,
        day_row=day_row,
        rules=rules,
        sizing_balance=sizing,
        plan=plan,
    )
