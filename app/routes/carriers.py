from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from app.db.repositories.carrier_repo import CarrierDirectory
from app.models.carrier import CarrierCheckResponse, CarrierListResponse
from app.routes._deps import get_directory
from app.services.carrier_service import (
    check_carrier,
    get_carrier,
    get_carrier_by_dot,
    get_carrier_by_mc,
    list_carriers,
)
from app.utils.params import parse_limit, pick, read_json_body

router = APIRouter(tags=["Carriers"])


@router.post(
    "/check-carrier",
    response_model=CarrierCheckResponse,
    response_model_exclude_unset=True,
)
async def check_carrier_route(
    request: Request,
    directory: CarrierDirectory = Depends(get_directory),
):
    """
    Registration check by MC and/or DOT number.
    Reads mc_number/mcNumber and dot_number/dotNumber from the JSON body,
    falling back to the query string.
    """
    body = await read_json_body(request)
    query = request.query_params
    return check_carrier(
        directory,
        mc_number=pick(body, query, "mc_number", "mcNumber"),
        dot_number=pick(body, query, "dot_number", "dotNumber"),
    )


@router.get("/carriers", response_model=CarrierListResponse)
async def list_carriers_route(
    status: Optional[str] = Query(None, description="Exact status, case-insensitive"),
    city: Optional[str] = Query(None, description="Exact city, case-insensitive"),
    zip: Optional[str] = Query(None, description="Exact ZIP code"),
    name: Optional[str] = Query(None, description="Carrier name substring"),
    mc_number: Optional[str] = Query(None),
    dot_number: Optional[str] = Query(None),
    limit: Optional[str] = Query(None, description="Max results to return"),
    directory: CarrierDirectory = Depends(get_directory),
):
    """List carriers matching every supplied filter."""
    return list_carriers(
        directory,
        status=status,
        city=city,
        zip=zip,
        name=name,
        mc_number=mc_number,
        dot_number=dot_number,
        limit=parse_limit(limit),
    )


@router.get("/carrier/dot/{dot_number}")
async def get_carrier_by_dot_route(
    dot_number: str, directory: CarrierDirectory = Depends(get_directory)
):
    return get_carrier_by_dot(directory, dot_number)


@router.get("/carrier/mc/{mc_number}")
async def get_carrier_by_mc_route(
    mc_number: str, directory: CarrierDirectory = Depends(get_directory)
):
    return get_carrier_by_mc(directory, mc_number)


@router.get("/carrier/{identifier}")
async def get_carrier_route(
    identifier: str, directory: CarrierDirectory = Depends(get_directory)
):
    """Lookup by either MC or DOT number."""
    return get_carrier(directory, identifier)
