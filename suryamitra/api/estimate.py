from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException

from suryamitra.core.dependencies import get_estimation_service
from suryamitra.core.errors import SolarServiceError
from suryamitra.schemas.estimate import EstimateReport, EstimationRequest
from suryamitra.services.estimation import EstimationService
from suryamitra.views.calculator import ESTIMATE_ERROR_MESSAGE

router = APIRouter()


@router.post("/estimate", response_model=EstimateReport)
async def estimate(
    request: EstimationRequest,
    service: EstimationService = Depends(get_estimation_service),  # noqa: B008
) -> EstimateReport:
    """Estimate system size, cost, subsidy and savings for one household."""
    try:
        result = await service.estimate(request)
    except SolarServiceError as exc:
        raise HTTPException(status_code=502, detail=ESTIMATE_ERROR_MESSAGE) from exc
    return EstimateReport.from_result(result)
