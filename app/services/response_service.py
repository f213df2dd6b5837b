import logging

from app.db.repositories.carrier_repo import CarrierDirectory
from app.db.repositories.response_repo import ResponseLog
from app.exceptions import BadRequestError
from app.models.response import CallerResult, StoreResponseResult

log = logging.getLogger(__name__)


def store_response(
    directory: CarrierDirectory,
    responses: ResponseLog,
    payload,
) -> StoreResponseResult:
    # Only a missing or falsy scalar counts as missing; {} and [] are stored
    if payload is None or (
        not payload and not isinstance(payload, (dict, list))
    ):
        raise BadRequestError("Missing response data")
    if not isinstance(payload, dict):
        payload = {}

    result = CallerResult.model_validate(payload)
    fields = result.model_dump()

    # Enrich from the directory when the MC number is known
    if result.carrier_mc:
        carrier = directory.find_by_mc(result.carrier_mc)
        if carrier is not None:
            fields["carrier_name"] = result.carrier_name or carrier.carrier_name
            fields["carrier_status"] = carrier.status
            fields["carrier_city"] = carrier.city
            fields["carrier_zip"] = carrier.zip
            fields["carrier_dot"] = carrier.dot_number

    entry = responses.append(fields)
    log.info(
        "Stored response: carrier_mc=%s enriched=%s",
        entry["carrier_mc"], "carrier_status" in entry,
    )
    return StoreResponseResult(message="Data stored successfully", entry=entry)


def list_responses(responses: ResponseLog) -> list:
    return responses.read_all()
