"""In-memory storage implementation."""

from typing import Optional

from tripledger.database.base import TripStore


class InMemoryTripStore(TripStore):
    """Dictionary-backed TripStore.

    Nothing survives the process; useful for tests and dry runs.
    """

    def __init__(self, slots: Optional[dict[str, str]] = None):
        self.slots: dict[str, str] = dict(slots or {})
        self.write_count = 0

    def connect(self) -> None:
        pass

    def disconnect(self) -> None:
        pass

    def initialize_schema(self) -> None:
        pass

    def read_slot(self, name: str) -> Optional[str]:
        return self.slots.get(name)

    def write_slot(self, name: str, payload: str) -> None:
        self.slots[name] = payload
        self.write_count += 1
