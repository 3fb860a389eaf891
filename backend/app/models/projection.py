from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ProjectionParameters(BaseModel):
    """Engine input. Rates are fractions in [0, 1]."""
    model_config = ConfigDict(frozen=True, allow_inf_nan=False)

    upfront_fee: float = Field(ge=0)
    setup_costs: float = Field(ge=0)
    monthly_tech_fee: float = Field(ge=0)
    monthly_marketing: float = Field(ge=0)
    monthly_staff_cost: float = Field(ge=0)
    avg_deal_value: float = Field(ge=0)
    commission_rate: float = Field(ge=0, le=1)
    leads_per_month: float = Field(ge=0)
    conversion_rate: float = Field(ge=0, le=1)
    ramp_up_months: int = Field(ge=1)


class ProjectionInputs(BaseModel):
    """Boundary form of ProjectionParameters with rates as percentages."""
    model_config = ConfigDict(allow_inf_nan=False)

    upfront_fee: float = Field(ge=0)
    setup_costs: float = Field(ge=0)
    monthly_tech_fee: float = Field(ge=0)
    monthly_marketing: float = Field(ge=0)
    monthly_staff_cost: float = Field(ge=0)
    avg_deal_value: float = Field(ge=0)
    commission_pct: float = Field(ge=0, le=100)
    leads_per_month: float = Field(ge=0)
    conversion_pct: float = Field(ge=0, le=100)
    ramp_up_months: int = Field(ge=1)

    def to_parameters(self) -> ProjectionParameters:
        return ProjectionParameters(
            upfront_fee=self.upfront_fee,
            setup_costs=self.setup_costs,
            monthly_tech_fee=self.monthly_tech_fee,
            monthly_marketing=self.monthly_marketing,
            monthly_staff_cost=self.monthly_staff_cost,
            avg_deal_value=self.avg_deal_value,
            commission_rate=self.commission_pct / 100.0,
            leads_per_month=self.leads_per_month,
            conversion_rate=self.conversion_pct / 100.0,
            ramp_up_months=self.ramp_up_months,
        )

    @classmethod
    def from_parameters(cls, params: ProjectionParameters) -> "ProjectionInputs":
        return cls(
            upfront_fee=params.upfront_fee,
            setup_costs=params.setup_costs,
            monthly_tech_fee=params.monthly_tech_fee,
            monthly_marketing=params.monthly_marketing,
            monthly_staff_cost=params.monthly_staff_cost,
            avg_deal_value=params.avg_deal_value,
            commission_pct=round(params.commission_rate * 100.0, 6),
            leads_per_month=params.leads_per_month,
            conversion_pct=round(params.conversion_rate * 100.0, 6),
            ramp_up_months=params.ramp_up_months,
        )


class MonthlyRecord(BaseModel):
    """Projected cash position for a single month, rounded for display."""
    month: int
    revenue: int
    expenses: int
    net_monthly: int
    cumulative_cash: int


class ProjectionSummary(BaseModel):
    """Headline metrics derived from the full 24-month series."""
    initial_investment: float
    monthly_burn: float
    monthly_revenue_at_scale: int
    breakeven_month: Optional[int] = None
    first_year_profit: int
    roi_year1: Optional[int] = None  # None when there is no initial investment
    two_year_profit: int
    total_revenue: int


class BreakevenInsight(BaseModel):
    category: str  # fast_return | standard | long_term | beyond_horizon
    headline: str
    message: str


class PresetSummary(BaseModel):
    preset_id: str
    label: str
    description: str


class ProjectionRequest(BaseModel):
    """Either a named preset or an explicit parameter set.

    Explicit parameters replace the preset wholesale when both are given.
    """
    preset: Optional[str] = None
    parameters: Optional[ProjectionInputs] = None


class ProjectionResult(BaseModel):
    preset: Optional[str] = None
    inputs: ProjectionInputs
    records: list[MonthlyRecord]
    summary: ProjectionSummary
    insight: BreakevenInsight
    computed_at: datetime
