"""Record store port (abstract interface).

A record store holds one collection of plain ``dict`` records and is read and
written as a whole snapshot. Typed stores (catalogue, carts, orders, users)
program against this port; adapters are swapped via configuration.
"""

import threading
from abc import ABC, abstractmethod
from collections.abc import Iterator
from contextlib import contextmanager


class RecordStore(ABC):
    """Abstract snapshot store with a scoped lock for read-modify-write."""

    def __init__(self, name: str):
        self.name = name
        self._lock = threading.RLock()

    @abstractmethod
    def read(self) -> list[dict]:
        """Return a snapshot of every record in the store.

        Raises:
            StorageUnavailable: when the backing medium cannot be read.
        """
        ...

    @abstractmethod
    def write(self, records: list[dict]) -> None:
        """Replace the store contents with ``records``.

        Raises:
            StorageUnavailable: when the backing medium cannot be written.
        """
        ...

    @contextmanager
    def transaction(self) -> Iterator[list[dict]]:
        """Hold the store lock across a read-modify-write.

        Yields the current snapshot; the (possibly mutated) snapshot is written
        back when the block exits without an exception.
        """
        with self._lock:
            records = self.read()
            yield records
            self.write(records)
