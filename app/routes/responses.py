from fastapi import APIRouter, Depends, Request

from app.db.repositories.carrier_repo import CarrierDirectory
from app.db.repositories.response_repo import ResponseLog
from app.models.response import StoreResponseResult
from app.routes._deps import get_directory, get_response_log
from app.services.response_service import list_responses, store_response
from app.utils.params import read_json_body

router = APIRouter(tags=["Responses"])


@router.post("/store-response", response_model=StoreResponseResult)
async def store_response_route(
    request: Request,
    directory: CarrierDirectory = Depends(get_directory),
    responses: ResponseLog = Depends(get_response_log),
):
    """Append a call result, enriched with directory data when the MC matches."""
    body = await read_json_body(request)
    return store_response(directory, responses, body.get("response"))


@router.get("/responses")
async def list_responses_route(
    responses: ResponseLog = Depends(get_response_log),
):
    """Every stored response in insertion order."""
    return list_responses(responses)
