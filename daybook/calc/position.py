"""Position sizing for leveraged trades."""

from typing import Any, Optional

from daybook.parsing import number_or_zero
from daybook.models import PositionPlan


def compute_position(
    entry: Any,
    stop: Any,
    balance: Any,
    risk_percent: Any,
    fee_percent: Any = 0.0,
    leverage: Any = 1.0,
) -> Optional[PositionPlan]:
    """Size a position so that hitting the stop loses ``risk_percent`` of balance.

    The notional scales inversely with the stop distance as a fraction of
    the entry price: a tighter stop gives a larger position for the same
    amount at risk.

    Args:
        entry: Entry price.
        stop: Stop-loss price.
        balance: Account balance used for sizing.
        risk_percent: Percentage of balance to risk.
        fee_percent: Round-trip fee percentage applied to the notional.
        leverage: Leverage multiplier, clamped to a minimum of 1.

    Returns:
        PositionPlan, or None when entry, stop, balance or risk is zero
        or when entry equals stop.
    """
    e = number_or_zero(entry)
    s = number_or_zero(stop)
    bal = number_or_zero(balance)
    risk = number_or_zero(risk_percent) / 100
    fees = number_or_zero(fee_percent) / 100
    lev = max(1.0, number_or_zero(leverage))

    if not e or not s or not bal or not risk:
        return None

    stop_dist = abs(e - s)
    if stop_dist <= 0:
        return None

    risk_value = bal * risk
    notional = risk_value / (stop_dist / e)

    return PositionPlan(
        entry=e,
        stop=s,
        stop_dist=stop_dist,
        risk_value=risk_value,
        position_notional=notional,
        units=notional / e,
        margin_required=notional / lev,
        est_fees=notional * fees,
    )
