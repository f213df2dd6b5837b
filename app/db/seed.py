import json
import logging
from pathlib import Path

from pydantic import ValidationError

from app.db.repositories.carrier_repo import CarrierDirectory
from app.exceptions import DirectoryLoadError
from app.models.carrier import Carrier

log = logging.getLogger(__name__)


def load_carriers(path: Path) -> CarrierDirectory:
    """Read the carrier source file into an immutable directory."""
    try:
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
    except (OSError, ValueError) as e:
        raise DirectoryLoadError(f"Could not read carriers from {path}: {e}") from e

    if not isinstance(raw, list):
        raise DirectoryLoadError(f"{path} must contain a JSON array of carriers")

    try:
        carriers = [Carrier.model_validate(r) for r in raw]
    except ValidationError as e:
        raise DirectoryLoadError(f"Malformed carrier record in {path}: {e}") from e

    log.info("Loaded %d carriers from %s", len(carriers), path)
    return CarrierDirectory(carriers)
