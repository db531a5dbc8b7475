"""Mapper functions to convert between domain trips and stored payloads.

The ledger is stored as a single JSON array of trip objects with the keys
date, company, vehicle, customer, mobile, location, type and amount.
Amounts are written as entered; Decimal values are written as strings.
"""

import json
from decimal import Decimal
from typing import Any, Iterable

from tripledger.domain.entities import TripRecord, TripType
from tripledger.domain.errors import PersistenceReadError

TEXT_FIELDS = ("date", "company", "vehicle", "customer", "mobile", "location")


def trip_to_dict(trip: TripRecord) -> dict[str, Any]:
    """Convert a TripRecord to its stored object form."""
    amount = trip.amount
    if isinstance(amount, Decimal):
        amount = str(amount)
    return {
        "date": trip.date,
        "company": trip.company,
        "vehicle": trip.vehicle,
        "customer": trip.customer,
        "mobile": trip.mobile,
        "location": trip.location,
        "type": trip.type.value,
        "amount": amount,
    }


def dict_to_trip(data: dict[str, Any]) -> TripRecord:
    """Convert a stored trip object to a TripRecord.

    Missing keys take the record defaults.

    Raises:
        ValueError: If the trip type is not recognised
    """
    text = {
        field: "" if data.get(field) is None else str(data[field])
        for field in TEXT_FIELDS
    }
    extra = {}
    if "amount" in data:
        extra["amount"] = data["amount"]
    return TripRecord(type=TripType.parse(data.get("type")), **text, **extra)


def trips_to_payload(trips: Iterable[TripRecord]) -> str:
    """Serialize trips, in order, to a JSON array."""
    return json.dumps([trip_to_dict(trip) for trip in trips], ensure_ascii=False)


def payload_to_trips(payload: str) -> list[TripRecord]:
    """Deserialize a stored JSON array into trips, preserving order.

    Raises:
        PersistenceReadError: If the payload is not a JSON array of trip objects
    """
    try:
        data = json.loads(payload)
    except ValueError as e:
        raise PersistenceReadError(f"Stored trips are not valid JSON: {e}") from e

    if not isinstance(data, list):
        raise PersistenceReadError("Stored trips must be a JSON array")

    trips = []
    for index, item in enumerate(data):
        if not isinstance(item, dict):
            raise PersistenceReadError(f"Stored trip {index} is not an object")
        try:
            trips.append(dict_to_trip(item))
        except ValueError as e:
            raise PersistenceReadError(f"Stored trip {index} is invalid: {e}") from e
    return trips
