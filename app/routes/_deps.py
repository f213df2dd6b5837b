from fastapi import Request

from app.db.repositories.carrier_repo import CarrierDirectory
from app.db.repositories.response_repo import ResponseLog


def get_directory(request: Request) -> CarrierDirectory:
    return request.app.state.directory


def get_response_log(request: Request) -> ResponseLog:
    return request.app.state.responses
