from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

CO2_PROJECTION_YEARS = (1, 5, 10, 25)


class EstimationRequest(BaseModel):
    monthly_bill_inr: float = Field(alias="monthlyBillINR", gt=0, allow_inf_nan=False)
    city: str = Field(min_length=1)
    roof_area_sq_ft: float = Field(alias="roofAreaSqFt", ge=50, allow_inf_nan=False)

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True)


class EstimationResult(BaseModel):
    """Structured estimate returned by the AI service.

    Parsed strictly: numbers must arrive as JSON numbers and every field is required.
    """

    estimated_system_size_kw: float = Field(
        alias="estimatedSystemSizeKw", ge=0, allow_inf_nan=False
    )
    estimated_cost_inr: float = Field(alias="estimatedCostINR", ge=0, allow_inf_nan=False)
    subsidy_amount_inr: float = Field(alias="subsidyAmountINR", ge=0, allow_inf_nan=False)
    monthly_savings_inr: float = Field(alias="monthlySavingsINR", ge=0, allow_inf_nan=False)
    payback_period_years: float = Field(alias="paybackPeriodYears", gt=0, allow_inf_nan=False)
    co2_offset_tons_per_year: float = Field(
        alias="co2OffsetTonsPerYear", ge=0, allow_inf_nan=False
    )
    recommendation: str

    model_config = ConfigDict(populate_by_name=True, strict=True)


class Co2Projection(BaseModel):
    year: int
    tons: float


class EstimateReport(BaseModel):
    result: EstimationResult
    net_cost_inr: float = Field(alias="netCostINR")
    co2_projection: list[Co2Projection] = Field(alias="co2Projection")

    model_config = ConfigDict(populate_by_name=True)

    @classmethod
    def from_result(cls, result: EstimationResult) -> EstimateReport:
        return cls(
            result=result,
            net_cost_inr=result.estimated_cost_inr - result.subsidy_amount_inr,
            co2_projection=[
                Co2Projection(year=year, tons=result.co2_offset_tons_per_year * year)
                for year in CO2_PROJECTION_YEARS
            ],
        )
