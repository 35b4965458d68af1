from __future__ import annotations

import logging

from suryamitra.core.errors import SolarServiceError
from suryamitra.schemas.estimate import EstimationRequest, EstimationResult
from suryamitra.services.estimation import EstimationService

logger = logging.getLogger(__name__)

ESTIMATE_ERROR_MESSAGE = (
    "Failed to generate estimate. Please check your internet connection or API key."
)


class CalculatorView:
    """Form state for the savings estimator: one request in flight at a time."""

    def __init__(self, service: EstimationService) -> None:
        self._service = service
        self.result: EstimationResult | None = None
        self.error: str | None = None
        self.loading = False

    async def submit(self, request: EstimationRequest) -> bool:
        """Run one estimate. Returns False without calling the service while busy."""
        if self.loading:
            return False
        self.loading = True
        self.error = None
        self.result = None
        try:
            self.result = await self._service.estimate(request)
        except SolarServiceError as exc:
            logger.warning("Estimate failed: %s", exc.message)
            self.error = ESTIMATE_ERROR_MESSAGE
        finally:
            self.loading = False
        return True
