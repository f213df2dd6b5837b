from typing import Optional

from fastapi import HTTPException

from app.db.repositories.carrier_repo import CarrierDirectory
from app.exceptions import BadRequestError
from app.models.carrier import CarrierCheckResponse, CarrierListResponse
from app.models.enums import CheckStatus


def check_carrier(
    directory: CarrierDirectory,
    mc_number: Optional[str],
    dot_number: Optional[str],
) -> CarrierCheckResponse:
    if not mc_number and not dot_number:
        raise BadRequestError("mc_number or dot_number is required.")

    carrier = directory.find_by_pair(mc_number, dot_number)

    if carrier is None:
        return CarrierCheckResponse(
            status=CheckStatus.NOT_FOUND,
            message="Carrier is not registered.",
        )

    if not carrier.is_active:
        return CarrierCheckResponse(
            status=CheckStatus.INACTIVE,
            carrier=carrier.as_record(),
            message="Carrier is registered but not active.",
        )

    return CarrierCheckResponse(
        status=CheckStatus.FOUND,
        carrier=carrier.as_record(),
    )


def list_carriers(
    directory: CarrierDirectory,
    status: Optional[str] = None,
    city: Optional[str] = None,
    zip: Optional[str] = None,
    name: Optional[str] = None,
    mc_number: Optional[str] = None,
    dot_number: Optional[str] = None,
    limit: Optional[int] = None,
) -> CarrierListResponse:
    results, total = directory.filter(
        status=status,
        city=city,
        zip=zip,
        name=name,
        mc_number=mc_number,
        dot_number=dot_number,
        limit=limit,
    )
    return CarrierListResponse(
        count=total,
        results=[c.as_record() for c in results],
    )


def get_carrier(directory: CarrierDirectory, identifier: str) -> dict:
    carrier = directory.find_by_id(identifier)
    if carrier is None:
        raise HTTPException(404, f"Carrier {identifier} not found")
    return carrier.as_record()


def get_carrier_by_dot(directory: CarrierDirectory, dot_number: str) -> dict:
    carrier = directory.find_by_dot(dot_number)
    if carrier is None:
        raise HTTPException(404, f"No carrier with DOT number {dot_number}")
    return carrier.as_record()


def get_carrier_by_mc(directory: CarrierDirectory, mc_number: str) -> dict:
    carrier = directory.find_by_mc(mc_number)
    if carrier is None:
        raise HTTPException(404, f"No carrier with MC number {mc_number}")
    return carrier.as_record()
