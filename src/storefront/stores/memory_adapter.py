"""In-process record store for development and testing."""

import copy

from storefront.stores.port import RecordStore


class MemoryRecordStore(RecordStore):
    """Keeps records in a list; snapshots are deep copies so callers never share state."""

    def __init__(self, name: str, records: list[dict] | None = None):
        super().__init__(name)
        self._records = copy.deepcopy(records or [])

    def read(self) -> list[dict]:
        with self._lock:
            return copy.deepcopy(self._records)

    def write(self, records: list[dict]) -> None:
        with self._lock:
            self._records = copy.deepcopy(records)
