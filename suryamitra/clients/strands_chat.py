from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from typing import Any, Protocol

from strands import Agent
from strands.models.gemini import GeminiModel

from suryamitra.core.config import Settings
from suryamitra.schemas.chat import ChatTurn

logger = logging.getLogger(__name__)

# Gemini calls the assistant role "model"; strands calls it "assistant".
_STRANDS_ROLES = {"user": "user", "model": "assistant"}


class ChatEngine(Protocol):
    def stream(self, turn: ChatTurn) -> AsyncIterator[str]:
        raise NotImplementedError


class StrandsChatEngine:
    def __init__(self, settings: Settings) -> None:
        model_kwargs: dict[str, Any] = {
            "client_args": {"api_key": settings.gemini_api_key},
            "model_id": settings.gemini_model_id,
        }
        if settings.chat_temperature is not None:
            model_kwargs["params"] = {"temperature": settings.chat_temperature}
        self._model = GeminiModel(**model_kwargs)

    async def stream(self, turn: ChatTurn) -> AsyncIterator[str]:
        # A fresh agent per turn: the whole transcript is resent, nothing is kept remotely.
        agent = Agent(
            model=self._model,
            system_prompt=turn.persona,
            messages=_to_strands_messages(turn.history),
            callback_handler=None,
        )
        async for event in agent.stream_async(turn.message):
            text = event.get("data")
            if isinstance(text, str) and text:
                yield text


def _to_strands_messages(history: tuple[dict[str, object], ...]) -> list[dict[str, Any]]:
    messages: list[dict[str, Any]] = []
    for entry in history:
        role = _STRANDS_ROLES.get(str(entry.get("role")))
        if role is None:
            logger.warning("Skipping history entry with unknown role %r", entry.get("role"))
            continue
        parts = entry.get("parts")
        content = [
            {"text": str(part["text"])}
            for part in (parts if isinstance(parts, list) else [])
            if isinstance(part, dict) and part.get("text")
        ]
        if not content:
            continue
        messages.append({"role": role, "content": content})
    return messages
