"""JSON file access for the response log."""

import json
import os
import tempfile
from pathlib import Path
from typing import Any

from app.exceptions import StorageError


def read_json_list(path: Path) -> list[Any]:
    """Load a JSON array from `path`. Raises StorageError on any failure."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        raise StorageError(f"Could not read {path}: {e}", path=str(path)) from e
    if not isinstance(data, list):
        raise StorageError(
            f"{path} does not contain a JSON array", path=str(path)
        )
    return data


def write_json_atomic(path: Path, data: Any) -> None:
    """
    Replace `path` with `data` serialized as JSON. The new content goes to a
    temp file in the same directory, is fsynced, then renamed over the
    target, so readers see either the old file or the new one.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp = tempfile.mkstemp(
            dir=path.parent, prefix=f".{path.name}.", suffix=".tmp"
        )
    except OSError as e:
        raise StorageError(f"Could not write {path}: {e}", path=str(path)) from e

    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp, path)
    except (OSError, TypeError, ValueError) as e:
        try:
            os.unlink(tmp)
        except OSError:
            pass
        raise StorageError(f"Could not write {path}: {e}", path=str(path)) from e
