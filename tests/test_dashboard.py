"""Tests for the dashboard snapshot.

**Feature: daybook**
"""

from datetime import date

import pytest

from daybook.dashboard import build_dashboard, sizing_balance
from daybook.models import JournalEntry, JournalState, Settings


@pytest.fixture
def state() -> JournalState:
    return JournalState(
        entries=[
            JournalEntry(date=date(2024, 2, 2), start_balance=1050, end_balance=1008),
            JournalEntry(date=date(2024, 1, 31), start_balance=900, end_balance=1000),
            JournalEntry(date=date(2024, 2, 1), start_balance=1000, end_balance=1050),
        ],
        settings=Settings(risk_percent=1, max_daily_loss_percent=3, daily_target_percent=1),
    )


class TestBuildDashboard:
    """The snapshot ties the journal, the rules and the sizer together."""

    def test_balance_and_month(self, state: JournalState):
        dash = build_dashboard(state, selected_date=date(2024, 2, 2), today=date(2024, 2, 10))

        assert dash.balance == 1008
        assert dash.last_date == date(2024, 2, 2)
        assert dash.month == "2024-02"
        assert dash.month_stats.pl == pytest.approx(50 - 42)
        assert dash.month_stats.ret_pct == pytest.approx(8 / 1000 * 100)

    def test_selected_day_rules(self, state: JournalState):
        dash = build_dashboard(state, selected_date=date(2024, 2, 2), today=date(2024, 2, 10))

        assert dash.day_row is not None
        assert dash.rules.loss_exceeded is True
        assert dash.rules.target_hit is False

    def test_selected_day_without_entry(self, state: JournalState):
        dash = build_dashboard(state, selected_date=date(2024, 3, 1), today=date(2024, 3, 1))

        assert dash.day_row is None
        assert not dash.rules.loss_exceeded
        assert not dash.rules.target_hit
        assert dash.month_stats.pl == 0

    def test_sizes_from_bankroll(self, state: JournalState):
        dash = build_dashboard(
            state, selected_date=date(2024, 2, 2), today=date(2024, 2, 2), entry=100, stop=95
        )

        assert dash.sizing_balance == 1008
        assert dash.plan is not None
        assert dash.plan.risk_value == pytest.approx(10.08)

    def test_sizes_from_override(self, state: JournalState):
        dash = build_dashboard(
            state,
            selected_date=date(2024, 2, 2),
            today=date(2024, 2, 2),
            entry=100,
            stop=95,
            balance_override="10000",
        )

        assert dash.sizing_balance == 10000
        assert dash.plan.position_notional == pytest.approx(2000)

    def test_empty_journal(self):
        dash = build_dashboard(JournalState(), selected_date=date(2024, 1, 1), today=date(2024, 1, 1))

        assert dash.series == []
        assert dash.balance == 0
        assert dash.last_date is None
        assert dash.plan is None


class TestSizingBalance:
    """A usable non-zero override wins over the bankroll."""

    @pytest.mark.parametrize(
        "override,expected",
        [
            (None, 500.0), ("", 500.0), ("abc", 500.0), (0, 500.0), ("0", 500.0),
            ("2500", 2500.0), (750, 750.0),
        ],
    )
    def test_override(self, override, expected):
        assert sizing_balance(override, 500.0) == expected
