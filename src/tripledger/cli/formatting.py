"""Display helpers shared by CLI commands."""

from decimal import Decimal
from typing import Any

CURRENCY_SYMBOL = "₹"


def format_money(amount: Decimal) -> str:
    """Format an aggregated amount, dropping a zero fraction."""
    if amount == amount.to_integral_value():
        return f"{CURRENCY_SYMBOL}{int(amount):,}"
    return f"{CURRENCY_SYMBOL}{amount:,.2f}"


def format_raw_amount(amount: Any) -> str:
    """Format a trip amount exactly as it was entered."""
    if amount is None:
        return CURRENCY_SYMBOL
    return f"{CURRENCY_SYMBOL}{amount}"
