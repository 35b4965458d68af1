from __future__ import annotations

from collections.abc import AsyncIterator
from types import SimpleNamespace
from typing import Any

import pytest

import suryamitra.clients.gemini as gemini_module
import suryamitra.clients.strands_chat as strands_chat_module
from suryamitra.clients.gemini import ESTIMATION_RESPONSE_SCHEMA, GeminiJsonGenerator
from suryamitra.clients.strands_chat import StrandsChatEngine
from suryamitra.core.config import Settings
from suryamitra.core.errors import RequestFailure
from suryamitra.schemas.chat import ChatMessage
from suryamitra.services.chat import GREETING, PERSONA, ChatService

ESTIMATION_FIELDS = [
    "estimatedSystemSizeKw",
    "estimatedCostINR",
    "subsidyAmountINR",
    "monthlySavingsINR",
    "paybackPeriodYears",
    "co2OffsetTonsPerYear",
    "recommendation",
]


def _settings(chat_temperature: float | None = None) -> Settings:
    return Settings(
        port=8000,
        log_level="info",
        gemini_api_key="test-key",
        gemini_model_id="gemini-2.5-flash",
        estimate_temperature=0.2,
        chat_temperature=chat_temperature,
    )


class _FakeResponse:
    def __init__(self, text: str | None) -> None:
        self.text = text


class _FakeModels:
    def __init__(self, captured: dict[str, Any], text: str | None, error: Exception | None) -> None:
        self._captured = captured
        self._text = text
        self._error = error

    async def generate_content(self, **kwargs: Any) -> _FakeResponse:
        self._captured.update(kwargs)
        if self._error is not None:
            raise self._error
        return _FakeResponse(self._text)


def _install_fake_genai_client(
    monkeypatch: pytest.MonkeyPatch,
    text: str | None = '{"ok": true}',
    error: Exception | None = None,
) -> dict[str, Any]:
    captured: dict[str, Any] = {}

    class FakeClient:
        def __init__(self, api_key: str) -> None:
            captured["api_key"] = api_key
            self.aio = SimpleNamespace(models=_FakeModels(captured, text, error))

    monkeypatch.setattr(gemini_module.genai, "Client", FakeClient)
    return captured


def test_estimation_schema_requires_all_fields() -> None:
    assert ESTIMATION_RESPONSE_SCHEMA.required == ESTIMATION_FIELDS
    assert set(ESTIMATION_RESPONSE_SCHEMA.properties or {}) == set(ESTIMATION_FIELDS)


@pytest.mark.asyncio
async def test_generate_json_requests_schema_constrained_json(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    captured = _install_fake_genai_client(monkeypatch, text='{"estimatedSystemSizeKw": 3}')

    text = await GeminiJsonGenerator(_settings()).generate_json("prompt for Jaipur")

    assert text == '{"estimatedSystemSizeKw": 3}'
    assert captured["api_key"] == "test-key"
    assert captured["model"] == "gemini-2.5-flash"
    assert captured["contents"] == "prompt for Jaipur"
    config = captured["config"]
    assert config.response_mime_type == "application/json"
    assert config.response_schema is ESTIMATION_RESPONSE_SCHEMA
    assert config.temperature == 0.2


@pytest.mark.asyncio
async def test_generate_json_passes_missing_text_through(monkeypatch: pytest.MonkeyPatch) -> None:
    _install_fake_genai_client(monkeypatch, text=None)

    assert await GeminiJsonGenerator(_settings()).generate_json("prompt") is None


@pytest.mark.asyncio
async def test_generate_json_wraps_transport_errors(monkeypatch: pytest.MonkeyPatch) -> None:
    _install_fake_genai_client(monkeypatch, error=ConnectionError("TLS handshake timed out"))

    with pytest.raises(RequestFailure, match="TLS handshake timed out"):
        await GeminiJsonGenerator(_settings()).generate_json("prompt")


def _install_fake_strands(
    monkeypatch: pytest.MonkeyPatch, events: list[dict[str, Any]]
) -> dict[str, Any]:
    captured: dict[str, Any] = {"prompts": []}

    class FakeGeminiModel:
        def __init__(self, **kwargs: Any) -> None:
            captured["model_kwargs"] = kwargs

    class FakeAgent:
        def __init__(self, **kwargs: Any) -> None:
            captured["agent_kwargs"] = kwargs

        async def stream_async(self, prompt: str) -> AsyncIterator[dict[str, Any]]:
            captured["prompts"].append(prompt)
            for event in events:
                yield event

    monkeypatch.setattr(strands_chat_module, "GeminiModel", FakeGeminiModel)
    monkeypatch.setattr(strands_chat_module, "Agent", FakeAgent)
    return captured


@pytest.mark.asyncio
async def test_strands_engine_yields_only_text_data_in_order(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    events: list[dict[str, Any]] = [
        {"init_event_loop": True},
        {"data": "**PM Surya Ghar** ", "delta": {"text": "**PM Surya Ghar** "}},
        {"event": {"contentBlockDelta": {"delta": {"text": "ignored raw event"}}}},
        {"data": ""},
        {"data": "offers up to "},
        {"data": {"not": "text"}},
        {"data": "₹78,000."},
        {"result": object()},
    ]
    captured = _install_fake_strands(monkeypatch, events)
    engine = StrandsChatEngine(_settings())
    turn = ChatService(engine).build_turn(
        [ChatMessage(role="model", text=GREETING)], "What is PM Surya Ghar?"
    )

    fragments = [fragment async for fragment in engine.stream(turn)]

    assert fragments == ["**PM Surya Ghar** ", "offers up to ", "₹78,000."]
    assert captured["prompts"] == ["What is PM Surya Ghar?"]
    agent_kwargs = captured["agent_kwargs"]
    assert agent_kwargs["system_prompt"] == PERSONA
    assert agent_kwargs["callback_handler"] is None
    assert agent_kwargs["messages"] == [
        {"role": "assistant", "content": [{"text": GREETING}]},
    ]


def test_strands_engine_configures_gemini_model(monkeypatch: pytest.MonkeyPatch) -> None:
    captured = _install_fake_strands(monkeypatch, [])

    StrandsChatEngine(_settings(chat_temperature=0.7))

    assert captured["model_kwargs"] == {
        "client_args": {"api_key": "test-key"},
        "model_id": "gemini-2.5-flash",
        "params": {"temperature": 0.7},
    }


def test_strands_engine_omits_params_without_chat_temperature(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    captured = _install_fake_strands(monkeypatch, [])

    StrandsChatEngine(_settings())

    assert "params" not in captured["model_kwargs"]


@pytest.mark.asyncio
async def test_strands_engine_builds_fresh_agent_per_turn(monkeypatch: pytest.MonkeyPatch) -> None:
    captured = _install_fake_strands(monkeypatch, [{"data": "ok"}])
    engine = StrandsChatEngine(_settings())
    service = ChatService(engine)

    first = [f async for f in engine.stream(service.build_turn([], "one"))]
    first_messages = captured["agent_kwargs"]["messages"]
    turn = service.build_turn(
        [ChatMessage(role="user", text="Hi"), ChatMessage(role="model", text="Hello")], "two"
    )
    second = [f async for f in engine.stream(turn)]

    assert first == second == ["ok"]
    assert first_messages == []
    assert captured["agent_kwargs"]["messages"] == [
        {"role": "user", "content": [{"text": "Hi"}]},
        {"role": "assistant", "content": [{"text": "Hello"}]},
    ]
