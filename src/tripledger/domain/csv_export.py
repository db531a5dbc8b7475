"""CSV export of the trip ledger."""

import csv
import io
import logging
from pathlib import Path
from typing import Any, Sequence

from tripledger.domain.entities import TripRecord
from tripledger.domain.errors import EmptyExportError, no_trips_to_export

logger = logging.getLogger(__name__)

EXPORT_FILENAME = "Driving_Trips.csv"

CSV_HEADER = (
    "Date",
    "Company",
    "Vehicle",
    "Customer",
    "Mobile",
    "Location",
    "Pickup/Drop",
    "Amount",
)


def _amount_text(amount: Any) -> str:
    """Render a raw amount the way it was entered."""
    if amount is None:
        return ""
    if isinstance(amount, float) and amount.is_integer():
        return str(int(amount))
    return str(amount)


def _trip_row(trip: TripRecord) -> list[str]:
    return [
        trip.date,
        trip.company,
        trip.vehicle,
        trip.customer,
        trip.mobile,
        trip.location,
        str(trip.type),
        _amount_text(trip.amount),
    ]


def export_csv(trips: Sequence[TripRecord]) -> str:
    """Render trips as a CSV document.

    Every field is quoted, embedded quotes are doubled, and rows are joined
    with a bare newline (no trailing newline). Rows follow ledger order.

    Args:
        trips: Trips in ledger order (newest first)

    Returns:
        CSV document text

    Raises:
        EmptyExportError: If there are no trips
    """
    if not trips:
        raise EmptyExportError(no_trips_to_export())

    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="\n")
    writer.writerow(CSV_HEADER)
    for trip in trips:
        writer.writerow(_trip_row(trip))

    # csv.writer terminates every row; drop the final terminator only
    return buffer.getvalue()[:-1]


def write_export(
    trips: Sequence[TripRecord],
    directory: str | Path = ".",
    filename: str = EXPORT_FILENAME,
) -> Path:
    """Export trips to a CSV file.

    Args:
        trips: Trips in ledger order
        directory: Directory to write into
        filename: File name for the export

    Returns:
        Path of the written file

    Raises:
        EmptyExportError: If there are no trips (no file is written)
    """
    document = export_csv(trips)
    path = Path(directory) / filename
    path.write_bytes(document.encode("utf-8"))
    logger.info("Exported %d trips to %s", len(trips), path)
    return path
