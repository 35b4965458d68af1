from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Role = Literal["user", "model"]


class ChatMessage(BaseModel):
    """One transcript entry. Instances are frozen; streaming replaces them."""

    role: Role
    text: str
    is_error: bool = Field(default=False, alias="isError")

    model_config = ConfigDict(populate_by_name=True, frozen=True)


class ChatRequest(BaseModel):
    history: list[ChatMessage] = Field(default_factory=list)
    message: str = Field(min_length=1)

    model_config = ConfigDict(str_strip_whitespace=True)


@dataclass(frozen=True)
class ChatTurn:
    persona: str
    history: tuple[dict[str, object], ...]
    message: str


def to_history(
    messages: list[ChatMessage] | tuple[ChatMessage, ...],
) -> tuple[dict[str, object], ...]:
    """Re-express a transcript as role/parts pairs for the conversation API."""
    return tuple({"role": msg.role, "parts": [{"text": msg.text}]} for msg in messages)
