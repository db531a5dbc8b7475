"""Daily summary and totals for the trip ledger.

All functions here are pure: they take the current sequence of trips and
derive a view from it. Nothing they return is stored.
"""

from decimal import Decimal
from typing import Iterable, Optional, Sequence

from tripledger.domain.entities import DailySummary, LedgerTotals, TripRecord
from tripledger.utils.amount_parser import coerce_amount


def compute_daily_summary(trips: Iterable[TripRecord]) -> dict[str, DailySummary]:
    """Group trips by date string.

    Args:
        trips: Trips in any order

    Returns:
        Mapping of date to DailySummary, iterating in descending date order
    """
    counts: dict[str, int] = {}
    earnings: dict[str, Decimal] = {}
    for trip in trips:
        counts[trip.date] = counts.get(trip.date, 0) + 1
        earnings[trip.date] = earnings.get(trip.date, Decimal(0)) + coerce_amount(trip.amount)

    return {
        trip_date: DailySummary(count=counts[trip_date], earnings=earnings[trip_date])
        for trip_date in sorted(counts, reverse=True)
    }


def compute_totals(trips: Sequence[TripRecord]) -> LedgerTotals:
    """Count trips and sum their coerced amounts."""
    total = sum((coerce_amount(trip.amount) for trip in trips), Decimal(0))
    return LedgerTotals(total_trips=len(trips), total_earnings=total)


def filter_trips_by_date(
    trips: Iterable[TripRecord],
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
) -> list[TripRecord]:
    """Keep trips whose date falls within an inclusive range.

    Dates are compared as plain strings, which orders well-formed YYYY-MM-DD
    values chronologically. Ledger order is preserved.

    Args:
        trips: Trips to filter
        start_date: Optional lower bound (inclusive)
        end_date: Optional upper bound (inclusive)

    Returns:
        List of matching trips
    """
    result = []
    for trip in trips:
        if start_date is not None and trip.date < start_date:
            continue
        if end_date is not None and trip.date > end_date:
            continue
        result.append(trip)
    return result
