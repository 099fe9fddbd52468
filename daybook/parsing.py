"""Numeric parsing for user-entered values.

Form fields arrive as strings, numbers or nothing at all. ``parse_number``
reports whether a value is a usable number; ``number_or_zero`` applies the
journal's fill policy on top of it: anything unusable counts as zero.
"""

import math
from typing import Any, Optional


def parse_number(value: Any) -> Optional[float]:
    """Parse a user-entered value into a finite float.

    Args:
        value: Number, numeric string, or None.

    Returns:
        The parsed float, or None if the value is empty or not numeric.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        number = float(value)
    else:
        text = str(value).strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None

    if not math.isfinite(number):
        return None
    return number


def number_or_zero(value: Any) -> float:
    """Parse a value, filling anything unusable with 0.0."""
    number = parse_number(value)
    return 0.0 if number is None else number
