from __future__ import annotations

import json
import logging
from collections.abc import AsyncIterator

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from suryamitra.core.dependencies import get_chat_service
from suryamitra.core.errors import SolarServiceError
from suryamitra.schemas.chat import ChatRequest
from suryamitra.services.chat import ChatService
from suryamitra.views.assistant import CHAT_ERROR_MESSAGE

logger = logging.getLogger(__name__)

router = APIRouter()


def format_sse(data: str, event: str | None = None) -> str:
    lines = []
    if event:
        lines.append(f"event: {event}")
    lines.append(f"data: {data}")
    return "\n".join(lines) + "\n\n"


@router.post("/chat")
async def chat(
    request: ChatRequest,
    service: ChatService = Depends(get_chat_service),  # noqa: B008
) -> StreamingResponse:
    """Stream a SuryaMitra reply as Server-Sent Events.

    Each fragment is a JSON-encoded string in a default `data:` event. A failure
    emits one `error` event; the stream always closes with a `done` event.
    """

    async def event_generator() -> AsyncIterator[str]:
        try:
            async for fragment in service.stream_reply(request.history, request.message):
                yield format_sse(json.dumps(fragment, ensure_ascii=False))
        except SolarServiceError as exc:
            logger.warning("Chat stream ended with error: %s", exc.message)
            yield format_sse(json.dumps(CHAT_ERROR_MESSAGE, ensure_ascii=False), event="error")
        yield format_sse("complete", event="done")

    return StreamingResponse(
        event_generator(),
        media_type="text/event-stream",
        headers={"Cache-Control": "no-cache", "X-Accel-Buffering": "no"},
    )
