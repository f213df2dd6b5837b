"""Exception hierarchy for the carrier registry service."""


class CarrierRegistryError(Exception):
    """Base exception for all service errors."""


class DirectoryLoadError(CarrierRegistryError):
    """Carrier source is missing, unreadable or not a list of records."""


class BadRequestError(CarrierRegistryError):
    """Request is missing the parameters an operation needs."""


class StorageError(CarrierRegistryError):
    """Reading or writing the response log file failed."""

    def __init__(self, message: str, *, path: str = "") -> None:
        self.path = path
        super().__init__(message)
