"""Schema-constrained JSON generation against the Gemini API."""

from __future__ import annotations

import logging
from typing import Protocol

from google import genai
from google.genai import types

from suryamitra.core.config import Settings
from suryamitra.core.errors import RequestFailure

logger = logging.getLogger(__name__)


def _number(description: str) -> types.Schema:
    return types.Schema(type=types.Type.NUMBER, description=description)


ESTIMATION_RESPONSE_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "estimatedSystemSizeKw": _number(
            "Recommended solar system size in kW based on bill and location."
        ),
        "estimatedCostINR": _number(
            "Total estimated cost of installation in Indian Rupees before subsidy."
        ),
        "subsidyAmountINR": _number(
            "Estimated subsidy amount based on current Indian government schemes "
            "(PM Surya Ghar)."
        ),
        "monthlySavingsINR": _number("Estimated monthly savings on electricity bill."),
        "paybackPeriodYears": _number("ROI period in years."),
        "co2OffsetTonsPerYear": _number("Carbon footprint reduction in tons per year."),
        "recommendation": types.Schema(
            type=types.Type.STRING,
            description="A brief, personalized recommendation sentence (max 20 words).",
        ),
    },
    required=[
        "estimatedSystemSizeKw",
        "estimatedCostINR",
        "subsidyAmountINR",
        "monthlySavingsINR",
        "paybackPeriodYears",
        "co2OffsetTonsPerYear",
        "recommendation",
    ],
)


class JsonGenerator(Protocol):
    async def generate_json(self, prompt: str) -> str | None:
        raise NotImplementedError


class GeminiJsonGenerator:
    """Issues one generate_content call constrained to the estimation schema.

    Returns the raw response text (possibly None); parsing is left to the caller.
    """

    def __init__(self, settings: Settings) -> None:
        self._api_key = settings.gemini_api_key
        self._model_id = settings.gemini_model_id
        self._temperature = settings.estimate_temperature
        self._client: genai.Client | None = None

    def _get_client(self) -> genai.Client:
        if self._client is None:
            try:
                self._client = genai.Client(api_key=self._api_key)
            except Exception as exc:  # noqa: BLE001
                raise RequestFailure(f"Failed to create Gemini client: {exc}") from exc
            logger.info("Gemini client initialized for model %s", self._model_id)
        return self._client

    async def generate_json(self, prompt: str) -> str | None:
        client = self._get_client()
        config = types.GenerateContentConfig(
            response_mime_type="application/json",
            response_schema=ESTIMATION_RESPONSE_SCHEMA,
            temperature=self._temperature,
        )
        try:
            response = await client.aio.models.generate_content(
                model=self._model_id,
                contents=prompt,
                config=config,
            )
        except Exception as exc:  # noqa: BLE001
            raise RequestFailure(f"Content generation failed: {exc}") from exc
        return response.text
