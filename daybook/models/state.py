"""Persisted journal state."""

from pydantic import BaseModel, Field

from daybook.models.journal import JournalEntry
from daybook.models.settings import Settings


class JournalState(BaseModel):
    """Everything DayBook persists: the entries and the settings."""

    entries: list[JournalEntry] = Field(default_factory=list, description="Daily entries")
    settings: Settings = Field(default_factory=Settings, description="User settings")

    model_config = {"frozen": True}
