"""Shared fixtures and strategies for DayBook tests."""

import tempfile
from datetime import date
from pathlib import Path

import pytest
from hypothesis import strategies as st

from daybook.db.store import DataStore
from daybook.models import JournalEntry

balances = st.floats(min_value=0.0, max_value=1_000_000.0, allow_nan=False, allow_infinity=False)

notes_text = st.text(
    alphabet=st.characters(whitelist_categories=("Lu", "Ll", "Nd", "Zs", "Po")),
    max_size=40,
)


@st.composite
def journal_entries(draw, min_size=0, max_size=20):
    """Generate journal entries with unique dates in arbitrary order."""
    dates = draw(
        st.lists(
            st.dates(min_value=date(2020, 1, 1), max_value=date(2026, 12, 31)),
            min_size=min_size,
            max_size=max_size,
            unique=True,
        )
    )
    return [
        JournalEntry(
            date=d,
            start_balance=draw(balances),
            end_balance=draw(balances),
            notes=draw(notes_text),
        )
        for d in dates
    ]


@pytest.fixture
def temp_dir():
    """Create a temporary directory for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def temp_db(temp_dir: Path):
    """Create a temporary database for testing."""
    yield DataStore(temp_dir / "test.db")
