from __future__ import annotations

import logging
from collections.abc import Callable

from suryamitra.core.errors import SolarServiceError
from suryamitra.schemas.chat import ChatMessage
from suryamitra.services.chat import ChatService, greeting_message

logger = logging.getLogger(__name__)

CHAT_ERROR_MESSAGE = "I'm having trouble connecting to the sun right now. Please try again later."

TranscriptListener = Callable[[tuple[ChatMessage, ...]], None]


class AssistantView:
    """Chat transcript driven by streamed replies.

    The transcript is an immutable tuple; every change swaps in a new tuple and
    notifies subscribers, so a renderer can redraw and scroll to the newest entry.
    """

    def __init__(self, service: ChatService) -> None:
        self._service = service
        self._listeners: list[TranscriptListener] = []
        self.transcript: tuple[ChatMessage, ...] = (greeting_message(),)
        self.loading = False

    def subscribe(self, listener: TranscriptListener) -> None:
        self._listeners.append(listener)

    def _set_transcript(self, transcript: tuple[ChatMessage, ...]) -> None:
        self.transcript = transcript
        for listener in self._listeners:
            listener(transcript)

    async def send(self, text: str) -> bool:
        """Run one chat turn. Returns False for blank input or while a turn is outstanding."""
        message = text.strip()
        if not message or self.loading:
            return False
        self.loading = True
        prior = self.transcript
        with_user = prior + (ChatMessage(role="user", text=message),)
        reply = ""
        try:
            self._set_transcript(with_user)
            self._set_transcript(with_user + (ChatMessage(role="model", text=""),))
            async for fragment in self._service.stream_reply(prior, message):
                reply += fragment
                self._set_transcript(with_user + (ChatMessage(role="model", text=reply),))
        except SolarServiceError as exc:
            logger.warning("Chat turn failed: %s", exc.message)
            # Fragments already shown stay; only an empty placeholder is dropped.
            kept = (ChatMessage(role="model", text=reply),) if reply else ()
            error = ChatMessage(role="model", text=CHAT_ERROR_MESSAGE, is_error=True)
            self._set_transcript(with_user + kept + (error,))
        finally:
            self.loading = False
        return True
