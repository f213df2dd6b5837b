from enum import Enum


class CheckStatus(str, Enum):
    """Outcome of a carrier registration check."""

    FOUND = "found"
    INACTIVE = "inactive"
    NOT_FOUND = "not_found"
    BAD_REQUEST = "bad_request"
