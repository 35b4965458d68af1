from __future__ import annotations

import logging

from pydantic import ValidationError

from suryamitra.clients.gemini import JsonGenerator
from suryamitra.core.errors import RequestFailure, SchemaViolation
from suryamitra.schemas.estimate import EstimationRequest, EstimationResult

logger = logging.getLogger(__name__)


def _format_number(value: float) -> str:
    return str(int(value)) if float(value).is_integer() else str(value)


def build_estimation_prompt(request: EstimationRequest) -> str:
    city = request.city
    return (
        "Act as an expert solar engineer in India.\n"
        "User details:\n"
        f"- Location: {city}\n"
        f"- Monthly Electricity Bill: ₹{_format_number(request.monthly_bill_inr)}\n"
        f"- Available Roof Area: {_format_number(request.roof_area_sq_ft)} sq ft.\n\n"
        "Calculate the optimal solar system size, costs, and savings.\n"
        "Consider:\n"
        f"1. Average insolation in {city}.\n"
        "2. Current benchmark costs in India (approx ₹50k-60k per kW).\n"
        "3. PM Surya Ghar: Muft Bijli Yojana subsidy rules "
        "(approx ₹30k for 1kW, ₹60k for 2kW, ₹78k for 3kW+).\n"
        "4. Typical domestic tariff rates in this region.\n\n"
        "Return accurate, realistic estimates."
    )


class EstimationService:
    def __init__(self, generator: JsonGenerator | None) -> None:
        self._generator = generator

    async def estimate(self, request: EstimationRequest) -> EstimationResult:
        """Request one schema-constrained estimate.

        Raises:
            RequestFailure: the AI service was unreachable or is not configured.
            SchemaViolation: the response text was absent or did not match the schema.
        """
        if self._generator is None:
            raise RequestFailure("Estimation is unavailable because no API key is configured.")

        prompt = build_estimation_prompt(request)
        try:
            text = await self._generator.generate_json(prompt)
        except RequestFailure:
            logger.exception("Solar estimation request failed for %s", request.city)
            raise
        except Exception as exc:  # noqa: BLE001
            logger.exception("Solar estimation request failed for %s", request.city)
            raise RequestFailure(f"Estimation request failed: {exc}") from exc

        if not text:
            logger.warning("Solar estimation returned no data for %s", request.city)
            raise SchemaViolation("No data returned")
        try:
            return EstimationResult.model_validate_json(text)
        except ValidationError as exc:
            logger.warning("Solar estimation response did not match schema: %s", exc)
            raise SchemaViolation(f"Malformed estimation response: {exc}") from exc
