from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_GEMINI_MODEL_ID = "gemini-2.5-flash"
DEFAULT_ESTIMATE_TEMPERATURE = 0.2


def _get_int_env(name: str, default: int) -> int:
    value = os.getenv(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _get_temperature_env(name: str) -> float | None:
    value = os.getenv(name, "").strip()
    if not value:
        return None
    try:
        temperature = float(value)
    except ValueError:
        return None
    if not 0.0 <= temperature <= 2.0:
        raise ValueError(f"{name} must be between 0.0 and 2.0, got {value}")
    return temperature


@dataclass(frozen=True)
class Settings:
    port: int
    log_level: str
    gemini_api_key: str
    gemini_model_id: str
    estimate_temperature: float
    chat_temperature: float | None


def load_settings() -> Settings:
    estimate_temperature = _get_temperature_env("ESTIMATE_TEMPERATURE")
    if estimate_temperature is None:
        estimate_temperature = DEFAULT_ESTIMATE_TEMPERATURE
    return Settings(
        port=_get_int_env("PORT", 8000),
        log_level=os.getenv("LOG_LEVEL", "info"),
        gemini_api_key=os.getenv("GEMINI_API_KEY") or os.getenv("API_KEY", ""),
        gemini_model_id=os.getenv("GEMINI_MODEL_ID", DEFAULT_GEMINI_MODEL_ID),
        estimate_temperature=estimate_temperature,
        chat_temperature=_get_temperature_env("CHAT_TEMPERATURE"),
    )
