"""Abstract storage interface."""

from abc import ABC, abstractmethod
from typing import Optional


class TripStore(ABC):
    """Abstract persistence port for tripledger.

    A store holds named slots, each containing one serialized document.
    The ledger owns its slot exclusively; the last write wins.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the store."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the store."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize storage schema (create tables)."""
        pass

    @abstractmethod
    def read_slot(self, name: str) -> Optional[str]:
        """Return the payload stored under name, or None if the slot is empty.

        Raises:
            PersistenceReadError: If the slot cannot be read
        """
        pass

    @abstractmethod
    def write_slot(self, name: str, payload: str) -> None:
        """Replace the payload stored under name.

        Raises:
            PersistenceWriteError: If the slot cannot be written
        """
        pass
