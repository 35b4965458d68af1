from __future__ import annotations

from functools import lru_cache

from suryamitra.clients.gemini import GeminiJsonGenerator, JsonGenerator
from suryamitra.clients.strands_chat import ChatEngine, StrandsChatEngine
from suryamitra.core.config import Settings, load_settings
from suryamitra.services.chat import ChatService
from suryamitra.services.estimation import EstimationService


@lru_cache
def get_settings() -> Settings:
    return load_settings()


@lru_cache
def get_json_generator() -> JsonGenerator | None:
    settings = get_settings()
    if not settings.gemini_api_key:
        return None
    return GeminiJsonGenerator(settings)


@lru_cache
def get_chat_engine() -> ChatEngine | None:
    settings = get_settings()
    if not settings.gemini_api_key:
        return None
    return StrandsChatEngine(settings)


@lru_cache
def get_estimation_service() -> EstimationService:
    return EstimationService(get_json_generator())


@lru_cache
def get_chat_service() -> ChatService:
    return ChatService(get_chat_engine())
