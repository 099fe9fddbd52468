"""PositionPlan data model."""

from pydantic import BaseModel, Field


class PositionPlan(BaseModel):
    """Represents a sized position for a leveraged trade."""

    entry: float = Field(..., description="Entry price")
    stop: float = Field(..., description="Stop-loss price")
    stop_dist: float = Field(..., gt=0, description="Absolute entry-stop distance")
    risk_value: float = Field(..., description="Amount at risk")
    position_notional: float = Field(..., description="Position size before leverage")
    units: float = Field(..., description="Quantity in units of the instrument")
    margin_required: float = Field(..., description="Margin at the given leverage")
    est_fees: float = Field(..., description="Estimated round-trip fees")

    model_config = {"frozen": True}
