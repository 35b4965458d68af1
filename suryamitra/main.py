from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from suryamitra.api import chat, estimate, guidance, health
from suryamitra.core.dependencies import get_settings
from suryamitra.core.logging import configure_logging

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Starting suryamitra on port %s", settings.port)
    if not settings.gemini_api_key:
        logger.warning("GEMINI_API_KEY is not set; estimate and chat requests will fail.")
    yield


app = FastAPI(title="suryamitra", version="1.0.0", lifespan=lifespan)
app.include_router(health.router)
app.include_router(estimate.router)
app.include_router(chat.router)
app.include_router(guidance.router)
