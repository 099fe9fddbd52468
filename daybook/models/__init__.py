"""Data models for DayBook."""

from daybook.models.journal import JournalEntry
from daybook.models.settings import Settings
from daybook.models.equity import DailyRules, EquityRow, MonthStats
from daybook.models.position import PositionPlan
from daybook.models.state import JournalState

__all__ = [
    "JournalEntry",
    "Settings",
    "EquityRow",
    "MonthStats",
    "DailyRules",
    "PositionPlan",
    "JournalState",
]
