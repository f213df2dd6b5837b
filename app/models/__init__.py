from app.models.enums import CheckStatus
from app.models.carrier import (
    Carrier,
    CarrierCheckResponse,
    CarrierListResponse,
)
from app.models.response import (
    CallerResult,
    ResponseEntry,
    StoreResponseResult,
)

__all__ = [
    "CheckStatus",
    "Carrier",
    "CarrierCheckResponse",
    "CarrierListResponse",
    "CallerResult",
    "ResponseEntry",
    "StoreResponseResult",
]
