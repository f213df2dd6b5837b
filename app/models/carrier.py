from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from app.models.enums import CheckStatus


class Carrier(BaseModel):
    """A directory record. Unknown source fields are kept as-is."""

    model_config = ConfigDict(extra="allow", frozen=True)

    mc_number: Optional[str] = None
    dot_number: Optional[str] = None
    carrier_name: Optional[str] = None
    status: Optional[str] = None
    city: Optional[str] = None
    zip: Optional[str] = None

    @field_validator(
        "mc_number", "dot_number", "carrier_name", "status", "city", "zip",
        mode="before",
    )
    @classmethod
    def coerce_to_str(cls, v):
        if v is not None and not isinstance(v, str):
            return str(v)
        return v

    @property
    def is_active(self) -> bool:
        return (self.status or "").strip().lower() == "active"

    def as_record(self) -> dict[str, Any]:
        """The record as it appeared in the source file."""
        keep = self.model_fields_set | set(self.model_extra or {})
        return {k: v for k, v in self.model_dump().items() if k in keep}


class CarrierCheckResponse(BaseModel):
    status: CheckStatus
    carrier: Optional[dict[str, Any]] = None
    message: Optional[str] = None


class CarrierListResponse(BaseModel):
    count: int
    results: list[dict[str, Any]]
