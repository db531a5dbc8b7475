"""Store factory functions for creating storage instances."""

import os
from pathlib import Path
from typing import Optional

from tripledger.database.sqlalchemy_db import SQLAlchemyTripStore

DB_PATH_ENVVAR = "TRIPLEDGER_DB_PATH"
DEFAULT_DB_PATH = Path("~/.tripledger/trips.db")


def default_database_path() -> Path:
    """Return the default database location, creating its directory."""
    path = DEFAULT_DB_PATH.expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def create_sqlite_store(database_path: Optional[str] = None) -> SQLAlchemyTripStore:
    """Create a SQLite-backed trip store.

    The path is taken from the argument, then the TRIPLEDGER_DB_PATH
    environment variable, then ~/.tripledger/trips.db.

    Args:
        database_path: Path to SQLite database file

    Returns:
        SQLAlchemyTripStore instance configured for SQLite
    """
    path = database_path or os.environ.get(DB_PATH_ENVVAR) or default_database_path()
    return SQLAlchemyTripStore(f"sqlite:///{path}")
