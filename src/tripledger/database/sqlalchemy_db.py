"""Generic SQLAlchemy storage implementation."""

import logging
from typing import Optional
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from tripledger.database.base import TripStore
from tripledger.database.models import StorageSlot, create_schema, create_session_factory
from tripledger.domain.errors import (
    PersistenceError,
    PersistenceReadError,
    PersistenceWriteError,
)

logger = logging.getLogger(__name__)


class SQLAlchemyTripStore(TripStore):
    """SQLAlchemy-based implementation of TripStore interface.

    Nothing touches the database until the schema is initialized or a slot
    is accessed, so an unreadable or corrupt database file surfaces as a
    persistence error on first use rather than at construction.
    """

    def __init__(self, database_url: str):
        """Initialize SQLAlchemy store.

        Args:
            database_url: SQLAlchemy database URL (e.g., 'sqlite:///path/to.db')
        """
        self.database_url = database_url
        self.engine = create_engine(database_url, echo=False)
        self.session_factory = create_session_factory(self.engine)
        self._session: Optional[Session] = None
        self._schema_ready = False

    def _get_session(self) -> Session:
        """Get current session, creating one if needed."""
        if self._session is None:
            self._session = self.session_factory()
        return self._session

    def _require_schema(self, error_type: type[PersistenceError]) -> None:
        """Create the schema if needed, raising error_type when that fails."""
        if self._schema_ready:
            return
        try:
            create_schema(self.engine)
        except SQLAlchemyError as e:
            raise error_type(f"Could not open storage at {self.database_url}: {e}") from e
        self._schema_ready = True

    def connect(self) -> None:
        """Connect to the database."""
        # Connection is lazy, so this is a no-op
        pass

    def disconnect(self) -> None:
        """Disconnect from the database."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def initialize_schema(self) -> None:
        """Initialize database schema (create tables).

        Failures are logged; slot access retries and reports them.
        """
        try:
            self._require_schema(PersistenceReadError)
        except PersistenceReadError as e:
            logger.warning("%s", e)

    def read_slot(self, name: str) -> Optional[str]:
        """Return the payload stored under name, or None if the slot is empty."""
        self._require_schema(PersistenceReadError)
        session = self._get_session()
        try:
            slot = session.get(StorageSlot, name)
        except SQLAlchemyError as e:
            session.rollback()
            raise PersistenceReadError(f"Could not read slot '{name}': {e}") from e

        if slot is None:
            logger.debug("Slot %s is empty", name)
            return None
        logger.debug("Read slot %s (%d bytes)", name, len(slot.payload))
        return slot.payload

    def write_slot(self, name: str, payload: str) -> None:
        """Replace the payload stored under name."""
        self._require_schema(PersistenceWriteError)
        session = self._get_session()
        try:
            slot = session.get(StorageSlot, name)
            if slot is None:
                session.add(StorageSlot(name=name, payload=payload))
            else:
                slot.payload = payload
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            raise PersistenceWriteError(f"Could not write slot '{name}': {e}") from e
        logger.debug("Wrote slot %s (%d bytes)", name, len(payload))
