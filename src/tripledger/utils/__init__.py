"""Utility functions for tripledger."""

from tripledger.utils.date_parser import parse_date, normalize_trip_date
from tripledger.utils.amount_parser import coerce_amount

__all__ = ["parse_date", "normalize_trip_date", "coerce_amount"]
