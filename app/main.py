"""
Carrier Registry API.

Endpoints:
  GET  /health                 – Liveness probe
  GET  /                       – Banner
  POST /check-carrier          – Registration check by MC and/or DOT number
  GET  /carriers               – Filtered carrier list
  GET  /carrier/{id}           – Lookup by MC or DOT number
  GET  /carrier/dot/{dot}      – Lookup by DOT number
  GET  /carrier/mc/{mc}        – Lookup by MC number
  POST /store-response         – Append an enriched call result
  GET  /responses              – Full response log
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

from app.config import get_settings
from app.db.repositories.response_repo import ResponseLog
from app.db.schema import init_response_log
from app.db.seed import load_carriers
from app.exceptions import BadRequestError, DirectoryLoadError, StorageError
from app.models.enums import CheckStatus
from app.routes import health, carriers, responses
from app.utils.logging_config import setup_logging

log = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    s = get_settings()
    setup_logging(s.log_level)

    try:
        app.state.directory = load_carriers(Path(s.carriers_path))
    except DirectoryLoadError as e:
        log.critical("Cannot start: %s", e)
        raise

    responses_path = Path(s.responses_path)
    init_response_log(responses_path)
    app.state.responses = ResponseLog(responses_path)

    log.info("%s ready", s.app_name)
    log.info("  Carriers  : %d from %s", len(app.state.directory), s.carriers_path)
    log.info("  Responses : %s", s.responses_path)
    yield


app = FastAPI(
    title="Carrier Registry API",
    description="Carrier registration checks and call-response logging.",
    version="1.0.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(BadRequestError)
async def bad_request_handler(request: Request, exc: BadRequestError):
    content = {"message": str(exc)}
    if request.url.path == "/check-carrier":
        content = {"status": CheckStatus.BAD_REQUEST.value, **content}
    return JSONResponse(status_code=400, content=content)


@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    log.error(
        "Storage failure on %s (file %s): %s", request.url.path, exc.path, exc
    )
    if request.method == "POST":
        message = "Failed to save response data"
    else:
        message = "Failed to read response data"
    return JSONResponse(status_code=500, content={"message": message})


@app.exception_handler(HTTPException)
async def http_error_handler(request: Request, exc: HTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


app.include_router(health.router)
app.include_router(carriers.router)
app.include_router(responses.router)
