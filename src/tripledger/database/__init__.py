"""Storage layer for tripledger application."""

from tripledger.database.base import TripStore
from tripledger.database.factories import create_sqlite_store
from tripledger.database.memory import InMemoryTripStore

__all__ = ["TripStore", "create_sqlite_store", "InMemoryTripStore"]
