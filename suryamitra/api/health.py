from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends

from suryamitra.core.config import Settings
from suryamitra.core.dependencies import get_settings

router = APIRouter()


@router.get("/ping")
def ping() -> dict[str, str]:
    return {"message": "pong"}


@router.get("/healthz")
def healthz() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/")
def root(settings: Settings = Depends(get_settings)) -> dict[str, Any]:
    # The process stays up without a key; estimate and chat then answer 502 / error events.
    return {
        "status": "ok",
        "service": "suryamitra",
        "model": settings.gemini_model_id,
        "aiConfigured": bool(settings.gemini_api_key),
    }
