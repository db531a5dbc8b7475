"""Shared pytest fixtures for tripledger tests."""

import tempfile
import os
import pytest

from tripledger.database.factories import create_sqlite_store
from tripledger.database.memory import InMemoryTripStore
from tripledger.domain.entities import TripRecord, TripType
from tripledger.domain.ledger import TripLedger


@pytest.fixture
def temp_db():
    """Create a temporary SQLite store for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    store = create_sqlite_store(database_path=db_path)
    # Store the path for tests that need it
    store.database_path = db_path
    store.connect()
    store.initialize_schema()

    yield store

    # Cleanup
    store.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def memory_store():
    """Create an in-memory store."""
    return InMemoryTripStore()


@pytest.fixture
def ledger(memory_store):
    """Create an empty ledger backed by the in-memory store."""
    trip_ledger = TripLedger(memory_store)
    trip_ledger.load()
    return trip_ledger


@pytest.fixture
def sample_trips():
    """Trips in ledger order (newest first)."""
    return [
        TripRecord(
            date="2024-01-02",
            company="Acme Logistics",
            vehicle="KA01AB1234",
            customer="R. Kumar",
            mobile="9876543210",
            location="Airport",
            type=TripType.DROP,
            amount="75",
        ),
        TripRecord(
            date="2024-01-01",
            company="Acme Logistics",
            vehicle="KA01AB1234",
            customer="S. Rao",
            mobile="9123456780",
            location="Station",
            amount=50,
        ),
        TripRecord(
            date="2024-01-01",
            company="City Cabs",
            vehicle="KA05XY9876",
            customer="P. Shah",
            mobile="9000000001",
            location="Mall",
            amount=100,
        ),
    ]


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
