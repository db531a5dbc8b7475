"""Domain model entities for tripledger.

These are pure data classes representing business concepts, independent of
the storage format. Amounts are kept exactly as entered; they are only turned
into numbers when trips are aggregated.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import Any

from tripledger.domain.errors import unknown_trip_type

DEFAULT_TRIP_AMOUNT = 200


class TripType(str, Enum):
    """Whether the trip was a pickup or a drop."""

    PICKUP = "Pickup"
    DROP = "Drop"

    @classmethod
    def parse(cls, value: Any) -> "TripType":
        """Parse a trip type, case-insensitively.

        Empty or missing values default to Pickup.

        Raises:
            ValueError: If the value is not a known trip type
        """
        if isinstance(value, cls):
            return value
        if value is None or str(value).strip() == "":
            return cls.PICKUP
        text = str(value).strip().lower()
        for member in cls:
            if member.value.lower() == text:
                return member
        raise ValueError(unknown_trip_type(value))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class TripRecord:
    """One logged vehicle trip."""

    date: str
    company: str = ""
    vehicle: str = ""
    customer: str = ""
    mobile: str = ""
    location: str = ""
    type: TripType = TripType.PICKUP
    # Raw value as entered (str, int, float, Decimal or None)
    amount: Any = DEFAULT_TRIP_AMOUNT


@dataclass(frozen=True)
class DailySummary:
    """Trip count and earnings for a single date."""

    count: int
    earnings: Decimal


@dataclass(frozen=True)
class LedgerTotals:
    """Totals across the whole ledger."""

    total_trips: int
    total_earnings: Decimal
