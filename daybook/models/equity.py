"""Derived equity-curve models."""

from datetime import date as date_type
from pydantic import BaseModel, Field


class EquityRow(BaseModel):
    """One day of the equity curve, derived from a JournalEntry."""

    index: int = Field(..., ge=1, description="1-based rank by date ascending")
    date: date_type = Field(..., description="Journal date")
    start: float = Field(..., description="Start balance")
    end: float = Field(..., description="End balance")
    pl: float = Field(..., description="Profit/Loss (end - start)")
    ret_pct: float = Field(..., description="Return percentage")

    model_config = {"frozen": True}


class MonthStats(BaseModel):
    """Aggregated P/L for one calendar month."""

    pl: float = Field(default=0.0, description="Sum of daily P/L")
    ret_pct: float = Field(default=0.0, description="Return on first start balance")

    model_config = {"frozen": True}


class DailyRules(BaseModel):
    """Daily stop/target rule flags."""

    loss_exceeded: bool = Field(default=False, description="Max daily loss reached")
    target_hit: bool = Field(default=False, description="Daily target reached")

    model_config = {"frozen": True}
