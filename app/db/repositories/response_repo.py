import logging
import threading
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from app.db.connection import read_json_list, write_json_atomic
from app.exceptions import StorageError
from app.models.response import ResponseEntry

log = logging.getLogger(__name__)


def _utc_timestamp() -> str:
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ResponseLog:
    """
    Append-only log of caller responses stored as one JSON array.
    Appends rewrite the whole file, so every read-modify-write cycle runs
    under a single lock.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self._lock = threading.Lock()

    def append(self, fields: dict[str, Any]) -> dict[str, Any]:
        """Stamp `fields` with the current time, append, and return the entry."""
        with self._lock:
            try:
                entries = read_json_list(self.path)
            except StorageError as e:
                # Prior history is dropped rather than blocking new appends.
                log.warning("Could not read existing responses: %s", e)
                entries = []

            entry = ResponseEntry(**fields, timestamp=_utc_timestamp()).as_record()
            entries.append(entry)
            write_json_atomic(self.path, entries)
        return entry

    def read_all(self) -> list[Any]:
        with self._lock:
            return read_json_list(self.path)
