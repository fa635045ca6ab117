"""JSON-lines record store: one JSON object per line, rewritten wholesale on every write."""

import json
import os
import tempfile
from pathlib import Path

from storefront.exceptions import StorageUnavailable
from storefront.stores.port import RecordStore


class JsonLinesRecordStore(RecordStore):
    """File-backed store. A missing file reads as an empty store."""

    def __init__(self, name: str, path: Path | str):
        super().__init__(name)
        self.path = Path(path)

    def ensure_exists(self) -> None:
        """Create the parent directory and an empty file if neither exists yet."""
        with self._lock:
            if not self.path.exists():
                self.write([])

    def read(self) -> list[dict]:
        with self._lock:
            if not self.path.exists():
                return []
            try:
                with self.path.open(encoding="utf-8") as fh:
                    return [json.loads(line) for line in fh if line.strip()]
            except (OSError, json.JSONDecodeError) as exc:
                raise StorageUnavailable(self.name, str(exc)) from exc

    def write(self, records: list[dict]) -> None:
        with self._lock:
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
                try:
                    with os.fdopen(fd, "w", encoding="utf-8") as fh:
                        for record in records:
                            fh.write(json.dumps(record, ensure_ascii=False))
                            fh.write("\n")
                    os.replace(tmp_path, self.path)
                except BaseException:
                    Path(tmp_path).unlink(missing_ok=True)
                    raise
            except (OSError, TypeError, ValueError) as exc:
                raise StorageUnavailable(self.name, str(exc)) from exc
