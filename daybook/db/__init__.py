"""Persistence for DayBook journal state."""

from daybook.db.base import BaseStore
from daybook.db.memory import MemoryStore
from daybook.db.store import DataStore

__all__ = ["BaseStore", "DataStore", "MemoryStore"]
