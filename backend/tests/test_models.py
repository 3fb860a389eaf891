import math

import pytest
from pydantic import ValidationError

from app.models.projection import (
    MonthlyRecord,
    ProjectionInputs,
    ProjectionParameters,
    ProjectionRequest,
    ProjectionSummary,
)

_INPUTS = dict(
    upfront_fee=25_000,
    setup_costs=5_000,
    monthly_tech_fee=500,
    monthly_marketing=2_000,
    monthly_staff_cost=0,
    avg_deal_value=15_000,
    commission_pct=30,
    leads_per_month=20,
    conversion_pct=5,
    ramp_up_months=3,
)


def _error_fields(exc: ValidationError) -> set[str]:
    return {str(err["loc"][0]) for err in exc.errors()}


def test_inputs_convert_percentages_to_fractions():
    params = ProjectionInputs(**_INPUTS).to_parameters()
    assert params.commission_rate == pytest.approx(0.30)
    assert params.conversion_rate == pytest.approx(0.05)
    assert params.ramp_up_months == 3


def test_inputs_from_parameters_restores_percentages():
    params = ProjectionInputs(**_INPUTS).to_parameters()
    inputs = ProjectionInputs.from_parameters(params)
    assert inputs.commission_pct == pytest.approx(30)
    assert inputs.conversion_pct == pytest.approx(5)


@pytest.mark.parametrize("field, value", [
    ("ramp_up_months", 0),
    ("ramp_up_months", -2),
    ("upfront_fee", -1),
    ("monthly_staff_cost", -0.01),
    ("commission_pct", 101),
    ("conversion_pct", -5),
    ("avg_deal_value", math.nan),
    ("leads_per_month", math.inf),
])
def test_invalid_inputs_name_the_field(field, value):
    with pytest.raises(ValidationError) as exc:
        ProjectionInputs(**{**_INPUTS, field: value})
    assert field in _error_fields(exc.value)


def test_missing_field_rejected():
    data = dict(_INPUTS)
    del data["leads_per_month"]
    with pytest.raises(ValidationError) as exc:
        ProjectionInputs(**data)
    assert "leads_per_month" in _error_fields(exc.value)


def test_fractional_ramp_rejected():
    with pytest.raises(ValidationError):
        ProjectionInputs(**{**_INPUTS, "ramp_up_months": 2.5})


def test_parameters_reject_rate_as_percentage():
    params = ProjectionInputs(**_INPUTS).to_parameters().model_dump()
    with pytest.raises(ValidationError) as exc:
        ProjectionParameters(**{**params, "commission_rate": 30})
    assert "commission_rate" in _error_fields(exc.value)


def test_request_defaults_empty():
    req = ProjectionRequest()
    assert req.preset is None
    assert req.parameters is None


def test_summary_optional_fields():
    summary = ProjectionSummary(
        initial_investment=0,
        monthly_burn=100,
        monthly_revenue_at_scale=0,
        first_year_profit=-1200,
        two_year_profit=-2400,
        total_revenue=0,
    )
    assert summary.breakeven_month is None
    assert summary.roi_year1 is None


def test_monthly_record():
    r = MonthlyRecord(month=1, revenue=1500, expenses=2500, net_monthly=-1000, cumulative_cash=-31000)
    assert r.month == 1
    assert r.cumulative_cash == -31000
