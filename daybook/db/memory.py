"""In-memory store for DayBook.

Keeps the serialized state in a dict so that save/load go through the
same JSON shape as the SQLite store.
"""

import logging
from typing import Optional

from pydantic import TypeAdapter, ValidationError

from daybook.db.base import BaseStore
from daybook.exceptions import StorageError
from daybook.models import JournalEntry, JournalState, Settings

logger = logging.getLogger(__name__)

_ENTRIES = TypeAdapter(list[JournalEntry])


class MemoryStore(BaseStore):
    """Store that keeps journal state in process memory."""

    def __init__(self, data: Optional[dict] = None):
        """Initialize the memory store.

        Args:
            data: Optional pre-serialized ``{entries, settings}`` payload.
        """
        self.data = data
        self.save_count = 0

    def load(self) -> Optional[JournalState]:
        """Load the stored payload.

        Invalid entries raise ``StorageError``. Invalid settings load as
        defaults, the same as ``DataStore``.
        """
        if self.data is None:
            return None
        if not isinstance(self.data, dict):
            raise StorageError("Invalid stored state: expected an object")
        try:
            entries = _ENTRIES.validate_python(self.data.get("entries", []))
        except ValidationError as e:
            raise StorageError(f"Invalid stored entries: {e}") from e
        return JournalState(entries=entries, settings=self._parse_settings())

    def _parse_settings(self) -> Settings:
        raw = self.data.get("settings")
        if raw is None:
            return Settings()
        try:
            return Settings.model_validate(raw)
        except ValidationError as e:
            logger.warning("Stored settings are invalid, using defaults: %s", e)
            return Settings()

    def save(self, state: JournalState) -> None:
        self.data = state.model_dump(mode="json", by_alias=True)
        self.save_count += 1
