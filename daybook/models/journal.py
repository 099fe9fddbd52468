"""JournalEntry data model."""

from datetime import date as date_type
from pydantic import BaseModel, Field, field_validator


class JournalEntry(BaseModel):
    """Represents one day of account balances in the journal."""

    date: date_type = Field(..., description="Journal entry date (unique key)")
    start_balance: float = Field(
        ..., ge=0, alias="startBalance", description="Balance at start of day"
    )
    end_balance: float = Field(
        ..., ge=0, alias="endBalance", description="Balance at end of day"
    )
    notes: str = Field(default="", description="User notes")

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator("notes", mode="before")
    @classmethod
    def _strip_notes(cls, value):
        return "" if value is None else str(value).strip()
