"""Settings data model."""

from typing import Any

from pydantic import BaseModel, Field, field_validator

from daybook.parsing import number_or_zero


class Settings(BaseModel):
    """Risk and target settings shared by the journal and the sizer.

    Numeric fields go through ``number_or_zero``, so a blank or malformed
    value is stored as 0. Leverage is clamped to 1 only where it is used
    (position sizing).
    """

    currency: str = Field(default="USD", description="ISO 4217 currency code")
    risk_percent: float = Field(
        default=1.0, alias="riskPercent", description="Risk per trade (%)"
    )
    max_daily_loss_percent: float = Field(
        default=3.0, alias="maxDailyLossPercent", description="Max daily loss (%)"
    )
    daily_target_percent: float = Field(
        default=1.0, alias="dailyTargetPercent", description="Daily target (%)"
    )
    monthly_target_percent: float = Field(
        default=20.0, alias="monthlyTargetPercent", description="Monthly target (%)"
    )
    fee_percent: float = Field(
        default=0.04, alias="feePercent", description="Round-trip fees (%)"
    )
    leverage: float = Field(default=3.0, description="Leverage multiplier")

    model_config = {"frozen": True, "populate_by_name": True}

    @field_validator(
        "risk_percent",
        "max_daily_loss_percent",
        "daily_target_percent",
        "monthly_target_percent",
        "fee_percent",
        "leverage",
        mode="before",
    )
    @classmethod
    def _fill_numbers(cls, value: Any) -> float:
        return number_or_zero(value)
