"""Trip ledger domain service."""

import logging
from typing import Iterator

from tripledger.database.base import TripStore
from tripledger.database.mappers import payload_to_trips, trips_to_payload
from tripledger.domain.csv_export import export_csv
from tripledger.domain.entities import DailySummary, LedgerTotals, TripRecord
from tripledger.domain.errors import (
    PersistenceReadError,
    PersistenceWriteError,
    ValidationError,
    missing_trip_date,
)
from tripledger.domain.summary import compute_daily_summary, compute_totals

logger = logging.getLogger(__name__)

DEFAULT_SLOT_NAME = "driving_trips_v1"


class TripLedger:
    """Ordered record of trips, newest first.

    The ledger is the single source of truth for trips. Summaries, totals
    and exports are derived from it on demand. Every mutation is written
    back to the store.
    """

    def __init__(self, store: TripStore, slot_name: str = DEFAULT_SLOT_NAME):
        """Initialize an empty ledger.

        Args:
            store: Storage port holding the persisted ledger
            slot_name: Name of the slot the ledger is stored under
        """
        self.store = store
        self.slot_name = slot_name
        self._trips: tuple[TripRecord, ...] = ()

    @property
    def trips(self) -> tuple[TripRecord, ...]:
        """Trips in ledger order (most recent first)."""
        return self._trips

    def __len__(self) -> int:
        return len(self._trips)

    def __iter__(self) -> Iterator[TripRecord]:
        return iter(self._trips)

    def load(self) -> tuple[TripRecord, ...]:
        """Restore the ledger from the store.

        A missing, unreadable or malformed slot leaves the ledger empty.

        Returns:
            Restored trips
        """
        try:
            payload = self.store.read_slot(self.slot_name)
            trips = payload_to_trips(payload) if payload is not None else []
        except PersistenceReadError as e:
            logger.warning("Ignoring stored trips in slot %s: %s", self.slot_name, e)
            trips = []

        self._trips = tuple(trips)
        logger.debug("Loaded %d trips from slot %s", len(self._trips), self.slot_name)
        return self._trips

    def save(self) -> None:
        """Write the full ledger to the store.

        Write failures are logged and otherwise ignored.
        """
        try:
            self.store.write_slot(self.slot_name, trips_to_payload(self._trips))
        except PersistenceWriteError as e:
            logger.warning("Could not save trips to slot %s: %s", self.slot_name, e)

    def add_trip(self, record: TripRecord) -> tuple[TripRecord, ...]:
        """Add a trip as the most recent entry.

        Args:
            record: Trip to add

        Returns:
            Updated trips

        Raises:
            ValidationError: If the trip has no date (ledger is unchanged)
        """
        if not record.date:
            raise ValidationError(missing_trip_date())

        self._trips = (record,) + self._trips
        logger.info("Added %s trip on %s (%d total)", record.type, record.date, len(self._trips))
        self.save()
        return self._trips

    def clear_all(self) -> tuple[TripRecord, ...]:
        """Remove every trip from the ledger."""
        removed = len(self._trips)
        self._trips = ()
        logger.info("Cleared %d trips", removed)
        self.save()
        return self._trips

    def daily_summary(self) -> dict[str, DailySummary]:
        """Daily summary of the current trips, most recent date first."""
        return compute_daily_summary(self._trips)

    def totals(self) -> LedgerTotals:
        """Totals of the current trips."""
        return compute_totals(self._trips)

    def export_csv(self) -> str:
        """CSV document of the current trips.

        Raises:
            EmptyExportError: If the ledger is empty
        """
        return export_csv(self._trips)
