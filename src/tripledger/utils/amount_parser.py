"""Amount coercion utilities."""

from decimal import Decimal, InvalidOperation
from typing import Any


def coerce_amount(value: Any) -> Decimal:
    """Convert a stored trip amount to a number.

    Amounts are stored exactly as they were entered, so they may be strings,
    numbers, or missing altogether. Strings must be plain numbers ("75",
    " 12.5 ", "1e3"); currency symbols, thousands separators, parentheses and
    underscores are not numbers. Anything that is not a finite number (None,
    booleans, free text, NaN) counts as 0. This function never raises.

    Args:
        value: Raw amount value

    Returns:
        Decimal amount, or Decimal 0 when the value is not numeric
    """
    if value is None or isinstance(value, bool):
        return Decimal(0)

    if isinstance(value, float):
        amount = Decimal(str(value))
    elif isinstance(value, (int, Decimal)):
        amount = Decimal(value)
    elif isinstance(value, str):
        text = value.strip()
        if not text or "_" in text:
            return Decimal(0)
        try:
            amount = Decimal(text)
        except InvalidOperation:
            return Decimal(0)
    else:
        return Decimal(0)

    return amount if amount.is_finite() else Decimal(0)
