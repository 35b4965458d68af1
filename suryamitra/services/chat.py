from __future__ import annotations

import logging
from collections.abc import AsyncIterator

from suryamitra.clients.strands_chat import ChatEngine
from suryamitra.core.errors import RequestFailure, SolarServiceError
from suryamitra.schemas.chat import ChatMessage, ChatTurn, to_history

logger = logging.getLogger(__name__)

GREETING = (
    "Namaste! I am SuryaMitra. Ask me about solar costs, subsidies (PM Surya Ghar), "
    "or how to handle dust and heat for your panels."
)

PERSONA = """You are SuryaMitra, a friendly and knowledgeable Solar Energy Consultant for India.
Your goal is to help Indian homeowners and businesses adopt solar energy.

Key Knowledge Areas:
1. **Indian Challenges**:
   - **Dust/Pollution**: Explain how dust in cities reduces efficiency and the need for cleaning (automated or manual).
   - **Heat**: Explain the temperature coefficient (panels lose efficiency in extreme Indian summers) and suggest mounting solutions for airflow.
   - **Monsoons**: Managing generation dips during July-Sept.
   - **Grid Instability**: The need for Hybrid inverters in areas with power cuts.
2. **Policies**: PM Surya Ghar Yojana, Net Metering rules (state-wise nuances if asked).
3. **Economics**: ROI, financing options in India.

Tone: Encouraging, practical, and technically accurate but accessible.
Format: Use Markdown for clarity (bolding key terms, lists). Keep responses concise."""


def greeting_message() -> ChatMessage:
    return ChatMessage(role="model", text=GREETING)


class ChatService:
    def __init__(self, chat_engine: ChatEngine | None, persona: str = PERSONA) -> None:
        self._chat_engine = chat_engine
        self._persona = persona

    def build_turn(
        self, history: list[ChatMessage] | tuple[ChatMessage, ...], message: str
    ) -> ChatTurn:
        return ChatTurn(persona=self._persona, history=to_history(history), message=message)

    async def stream_reply(
        self,
        history: list[ChatMessage] | tuple[ChatMessage, ...],
        message: str,
    ) -> AsyncIterator[str]:
        """Stream the model reply for one turn as ordered text fragments.

        The iterator is single-use. Any failure while opening or consuming the
        stream is raised as RequestFailure after the fragments already yielded.
        """
        if self._chat_engine is None:
            raise RequestFailure("Chat is unavailable because no API key is configured.")
        turn = self.build_turn(history, message)
        logger.info("Starting chat turn with %d prior messages", len(turn.history))
        try:
            async for fragment in self._chat_engine.stream(turn):
                if fragment:
                    yield fragment
        except SolarServiceError:
            logger.exception("Chat stream failed")
            raise
        except Exception as exc:  # noqa: BLE001
            logger.exception("Chat stream failed")
            raise RequestFailure(f"Chat stream failed: {exc}") from exc
