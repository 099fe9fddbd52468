"""Display formatting for currency and percentage values."""

from typing import Any

from daybook.parsing import number_or_zero

# Currency symbols for the codes DayBook knows how to render
CURRENCY_SYMBOLS = {
    "USD": "$",
    "BRL": "R$",
    "EUR": "€",
    "GBP": "£",
    "INR": "₹",
    "JPY": "¥",
    "CAD": "CA$",
    "AUD": "A$",
    "CHF": "CHF ",
    "USDT": "₮",
}


def currency_format(value: Any, currency: str) -> str:
    """Format a value as currency with two decimals and digit grouping.

    Unknown currency codes fall back to ``"<CODE> <amount>"``.

    Args:
        value: Amount to format. Unusable values format as 0.
        currency: ISO 4217 currency code.

    Returns:
        Formatted currency string.
    """
    amount = round(number_or_zero(value), 2)
    code = (currency or "").upper()
    symbol = CURRENCY_SYMBOLS.get(code)

    if symbol is None:
        return f"{code} {amount:.2f}"

    sign = "-" if amount < 0 else ""
    return f"{sign}{symbol}{abs(amount):,.2f}"


def percent_format(value: Any) -> str:
    """Format a value as a percentage with two decimals."""
    return f"{number_or_zero(value):.2f}%"


def units_format(value: Any) -> str:
    return f"{number_or_zero(value):.6f}"
