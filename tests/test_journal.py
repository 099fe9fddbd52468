"""Property-based tests for the journal state container.

**Feature: daybook**
"""

from datetime import date
from typing import Optional

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from conftest import journal_entries
from daybook.db.base import BaseStore
from daybook.db.memory import MemoryStore
from daybook.exceptions import StorageError
from daybook.journal import JournalStore, SaveResult
from daybook.models import JournalEntry, JournalState, Settings


class FailingStore(BaseStore):
    """Store whose writes always fail."""

    def __init__(self, state: Optional[JournalState] = None):
        self.state = state

    def load(self) -> Optional[JournalState]:
        return self.state

    def save(self, state: JournalState) -> None:
        raise StorageError("disk full")


class CorruptStore(BaseStore):
    """Store whose reads always fail."""

    def load(self) -> Optional[JournalState]:
        raise StorageError("corrupt")

    def save(self, state: JournalState) -> None:
        pass


def _entry(day: date, start: float = 1000, end: float = 1010, notes: str = "") -> JournalEntry:
    return JournalEntry(date=day, start_balance=start, end_balance=end, notes=notes)


class TestUpsertUniqueness:
    """
    *For any* sequence of upserts, the journal holds at most one entry per
    date, and the last upsert for a date wins.
    """

    @given(entries=journal_entries(max_size=15), data=st.data())
    @settings(max_examples=50)
    def test_upsert_keeps_one_entry_per_date(self, entries, data):
        journal = JournalStore(MemoryStore())
        for entry in entries:
            journal.upsert(entry)

        # Re-upsert a random subset with new balances
        if entries:
            edited = data.draw(st.lists(st.sampled_from(entries), max_size=5))
            for entry in edited:
                journal.upsert(_entry(entry.date, start=1, end=2, notes="edited"))

        stored = journal.all()
        assert len(stored) == len(entries)
        assert len({e.date for e in stored}) == len(stored)

    def test_upsert_replaces_in_place(self):
        journal = JournalStore(MemoryStore())
        journal.upsert(_entry(date(2024, 1, 2)))
        journal.upsert(_entry(date(2024, 1, 1)))

        journal.upsert(_entry(date(2024, 1, 2), start=5, end=6, notes="new"))

        stored = journal.all()
        assert [e.date for e in stored] == [date(2024, 1, 2), date(2024, 1, 1)]
        assert stored[0].start_balance == 5
        assert stored[0].notes == "new"

    def test_upsert_replaces_whole_entry(self):
        journal = JournalStore(MemoryStore())
        journal.upsert(_entry(date(2024, 1, 1), notes="first"))

        journal.upsert(_entry(date(2024, 1, 1), notes=""))

        assert journal.get(date(2024, 1, 1)).notes == ""

    @given(entries=journal_entries(min_size=1, max_size=10))
    @settings(max_examples=50)
    def test_upsert_is_idempotent(self, entries):
        journal = JournalStore(MemoryStore())
        for entry in entries:
            journal.upsert(entry)
        before = journal.all()

        journal.upsert(entries[0])

        assert journal.all() == before


class TestRemove:
    """Removing a date deletes its entry; unknown dates are a no-op."""

    def test_remove_existing(self):
        journal = JournalStore(MemoryStore())
        journal.upsert(_entry(date(2024, 1, 1)))
        journal.upsert(_entry(date(2024, 1, 2)))

        journal.remove(date(2024, 1, 1))

        assert [e.date for e in journal.all()] == [date(2024, 1, 2)]
        assert journal.get(date(2024, 1, 1)) is None

    def test_remove_missing_is_noop(self):
        journal = JournalStore(MemoryStore())
        journal.upsert(_entry(date(2024, 1, 1)))

        result = journal.remove(date(2030, 1, 1))

        assert result.ok
        assert len(journal.all()) == 1


class TestPersistence:
    """
    *For any* mutation, the journal saves its full state through the port.
    """

    def test_every_mutation_saves(self):
        port = MemoryStore()
        journal = JournalStore(port)

        journal.upsert(_entry(date(2024, 1, 1)))
        journal.upsert(_entry(date(2024, 1, 1)))
        journal.remove(date(2024, 1, 1))
        journal.update_settings(risk_percent=0.5)

        assert port.save_count == 4

    def test_saved_shape(self):
        port = MemoryStore()
        journal = JournalStore(port)

        journal.upsert(_entry(date(2024, 1, 1), start=1000, end=1050, notes="ok"))

        assert set(port.data) == {"entries", "settings"}
        assert port.data["entries"] == [
            {"date": "2024-01-01", "startBalance": 1000.0, "endBalance": 1050.0, "notes": "ok"}
        ]
        assert port.data["settings"]["riskPercent"] == 1.0

    def test_reopen_restores_state(self):
        port = MemoryStore()
        journal = JournalStore(port)
        journal.upsert(_entry(date(2024, 1, 2)))
        journal.upsert(_entry(date(2024, 1, 1)))
        journal.update_settings(currency="BRL", leverage=10)

        reopened = JournalStore.open(port)

        assert reopened.all() == journal.all()
        assert reopened.settings.currency == "BRL"
        assert reopened.settings.leverage == 10

    def test_save_failure_is_reported(self):
        journal = JournalStore(FailingStore())

        result = journal.upsert(_entry(date(2024, 1, 1)))

        assert result == SaveResult(ok=False, error="disk full")
        assert len(journal.all()) == 1


class TestLoadRecovery:
    """Absent or unreadable state opens as an empty journal with defaults."""

    def test_open_empty_port(self):
        journal = JournalStore.open(MemoryStore())

        assert journal.all() == []
        assert journal.settings == Settings()

    def test_open_corrupt_port(self):
        journal = JournalStore.open(CorruptStore())

        assert journal.all() == []
        assert journal.settings == Settings()

    def test_open_invalid_payload(self):
        journal = JournalStore.open(MemoryStore({"entries": [{"date": "not-a-date"}]}))

        assert journal.all() == []

    def test_default_settings(self):
        defaults = Settings()

        assert defaults.currency == "USD"
        assert defaults.risk_percent == 1
        assert defaults.max_daily_loss_percent == 3
        assert defaults.daily_target_percent == 1
        assert defaults.monthly_target_percent == 20
        assert defaults.fee_percent == pytest.approx(0.04)
        assert defaults.leverage == 3

    def test_invalid_settings_keep_entries(self):
        port = MemoryStore({
            "entries": [{"date": "2024-01-01", "startBalance": 1000, "endBalance": 1050}],
            "settings": "garbage",
        })

        journal = JournalStore.open(port)

        assert journal.all() == [_entry(date(2024, 1, 1), start=1000, end=1050)]
        assert journal.settings == Settings()

    def test_blank_stored_setting_reads_as_zero(self):
        port = MemoryStore({
            "entries": [{"date": "2024-01-01", "startBalance": 1000, "endBalance": 1050}],
            "settings": {"currency": "BRL", "riskPercent": ""},
        })

        journal = JournalStore.open(port)

        assert len(journal.all()) == 1
        assert journal.settings.currency == "BRL"
        assert journal.settings.risk_percent == 0


class TestSettingsInput:
    """
    *For any* value given to a numeric setting, the setting holds its
    number, or 0 when the value is blank or not numeric.
    """

    @given(value=st.floats(allow_nan=False, allow_infinity=False))
    @settings(max_examples=50)
    def test_numbers_are_kept(self, value):
        assert Settings(risk_percent=value).risk_percent == value
        assert Settings(leverage=str(value)).leverage == value

    @pytest.mark.parametrize("value", ["", "   ", "abc", None])
    def test_unusable_values_become_zero(self, value):
        assert Settings(riskPercent=value).risk_percent == 0

    def test_update_with_blank_value(self):
        journal = JournalStore(MemoryStore())

        result = journal.update_settings(risk_percent="", fee_percent="0.1")

        assert result.ok
        assert journal.settings.risk_percent == 0
        assert journal.settings.fee_percent == pytest.approx(0.1)
