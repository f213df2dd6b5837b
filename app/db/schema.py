import logging
from pathlib import Path

from app.db.connection import write_json_atomic
from app.exceptions import StorageError

log = logging.getLogger(__name__)


def init_response_log(path: Path) -> None:
    """Create the response log as an empty array if it doesn't exist yet."""
    if path.exists():
        return
    try:
        write_json_atomic(path, [])
        log.info("Created empty response log at %s", path)
    except StorageError as e:
        log.error("Could not initialize response log: %s", e)
