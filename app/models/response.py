from typing import Any, Optional

from pydantic import BaseModel, field_validator

from app.utils.params import clean_str


class CallerResult(BaseModel):
    """What the voice agent reports after a call."""

    carrier_mc: Optional[str] = None
    carrier_name: Optional[str] = None
    phone_number: Optional[str] = None
    dispatcher_name: Optional[str] = None

    @field_validator(
        "carrier_mc", "carrier_name", "phone_number", "dispatcher_name",
        mode="before",
    )
    @classmethod
    def trim(cls, v):
        return clean_str(v)


class ResponseEntry(BaseModel):
    carrier_mc: Optional[str] = None
    carrier_name: Optional[str] = None
    phone_number: Optional[str] = None
    dispatcher_name: Optional[str] = None
    timestamp: str
    # Enrichment, only set when carrier_mc matched a directory record
    carrier_status: Optional[str] = None
    carrier_city: Optional[str] = None
    carrier_zip: Optional[str] = None
    carrier_dot: Optional[str] = None

    def as_record(self) -> dict[str, Any]:
        return self.model_dump(exclude_unset=True)


class StoreResponseResult(BaseModel):
    message: str
    entry: dict[str, Any]
