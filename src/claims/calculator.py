"""
Claim total calculation.

Pure helpers for previewing a claim's total while the lecturer is still
typing. The preview never fails; ClaimStore.submit is the validation gate.
"""

import math
from decimal import Decimal
from typing import Any, Optional


def parse_number(value: Any) -> Optional[float]:
    """
    Parse hours or rate input into a finite float.

    Args:
        value: Raw input (str, int, float or Decimal)

    Returns:
        The parsed float, or None if the input is empty, malformed or non-finite
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    elif not isinstance(value, (int, float, Decimal)):
        return None

    try:
        number = float(value)
    except (TypeError, ValueError):
        return None

    if not math.isfinite(number):
        return None
    return number


def compute_total(hours_input: Any, rate_input: Any) -> float:
    """
    Compute the display total for a claim.

    Returns hours * rate rounded to 2 decimal places, or 0.0 when either
    input does not parse or the product overflows.
    """
    hours = parse_number(hours_input)
    rate = parse_number(rate_input)
    if hours is None or rate is None:
        return 0.0
    total = hours * rate
    if not math.isfinite(total):
        return 0.0
    return round(total, 2)


def format_amount(amount: float) -> str:
    """Format an amount the way the claim form displays it, e.g. '$3000.00'."""
    return f"${amount:.2f}"
