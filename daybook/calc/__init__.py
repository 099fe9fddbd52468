"""Journal and position-sizing calculations for DayBook."""

from daybook.calc.equity import (
    account_balance,
    compute_month_stats,
    current_year_month,
    derive_equity_series,
    evaluate_daily_rules,
    find_row,
    monthly_target_hit,
)
from daybook.parsing import number_or_zero, parse_number
from daybook.calc.position import compute_position

__all__ = [
    "account_balance",
    "compute_month_stats",
    "compute_position",
    "current_year_month",
    "derive_equity_series",
    "evaluate_daily_rules",
    "find_row",
    "monthly_target_hit",
    "number_or_zero",
    "parse_number",
]
