from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from app.config import get_settings

router = APIRouter(tags=["Health"])


@router.get("/health", response_class=PlainTextResponse)
async def health():
    return "ok"


@router.get("/", response_class=PlainTextResponse)
async def root():
    return f"{get_settings().app_name} is running"
