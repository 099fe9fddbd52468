"""Journal state container for DayBook.

The ``JournalStore`` owns the entries and settings for the running process
and writes them through a ``BaseStore`` after every change. Mutations never
raise on storage failures; they return a ``SaveResult`` that the caller can
inspect or ignore.
"""

import logging
from datetime import date
from typing import Any, Optional

from pydantic import BaseModel, Field

from daybook.db.base import BaseStore
from daybook.exceptions import StorageError
from daybook.models import JournalEntry, JournalState, Settings

logger = logging.getLogger(__name__)


class SaveResult(BaseModel):
    """Outcome of persisting the journal after a mutation."""

    ok: bool = Field(..., description="Whether the state was saved")
    error: Optional[str] = Field(default=None, description="Storage error message")

    model_config = {"frozen": True}


class JournalStore:
    """In-memory journal keyed by date, backed by a persistence port."""

    def __init__(self, port: BaseStore, state: Optional[JournalState] = None):
        """Initialize the journal.

        Args:
            port: Storage used to persist every mutation.
            state: Initial state. Defaults to an empty journal.
        """
        self.port = port
        state = state or JournalState()
        self._entries: list[JournalEntry] = list(state.entries)
        self._settings: Settings = state.settings

    @classmethod
    def open(cls, port: BaseStore) -> "JournalStore":
        """Load the journal from storage.

        Missing or unreadable state yields an empty journal with default
        settings.

        Args:
            port: Storage to load from and save to.

        Returns:
            JournalStore holding the loaded state.
        """
        try:
            state = port.load()
        except StorageError as e:
            logger.warning("Could not load journal, starting empty: %s", e)
            state = None
        return cls(port, state)

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def state(self) -> JournalState:
        """Snapshot of the current entries and settings."""
        return JournalState(entries=list(self._entries), settings=self._settings)

    def all(self) -> list[JournalEntry]:
        """Get all entries in storage order."""
        return list(self._entries)

    def get(self, day: date) -> Optional[JournalEntry]:
        """Get the entry for a date, if any."""
        for entry in self._entries:
            if entry.date == day:
                return entry
        return None

    def upsert(self, entry: JournalEntry) -> SaveResult:
        """Add an entry, or replace the existing entry for its date.

        Args:
            entry: Entry to store.

        Returns:
            SaveResult of the follow-up save.
        """
        for i, existing in enumerate(self._entries):
            if existing.date == entry.date:
                self._entries[i] = entry
                break
        else:
            self._entries.append(entry)
        return self._persist()

    def remove(self, day: date) -> SaveResult:
        """Delete the entry for a date. Missing dates are a no-op.

        Args:
            day: Date of the entry to delete.

        Returns:
            SaveResult of the follow-up save.
        """
        self._entries = [e for e in self._entries if e.date != day]
        return self._persist()

    def update_settings(self, **changes: Any) -> SaveResult:
        """Change one or more settings fields.

        Args:
            **changes: Settings field names mapped to their new values.

        Returns:
            SaveResult of the follow-up save.
        """
        data = self._settings.model_dump()
        data.update(changes)
        self._settings = Settings.model_validate(data)
        return self._persist()

    def _persist(self) -> SaveResult:
        try:
            self.port.save(self.state)
        except StorageError as e:
            logger.error("Failed to save journal: %s", e)
            return SaveResult(ok=False, error=str(e))
        return SaveResult(ok=True)
