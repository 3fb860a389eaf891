"""Projection engine — 24-month partner cash-flow projection.

Turns a validated ProjectionParameters into an ordered list of
MonthlyRecord plus a ProjectionSummary. Revenue ramps linearly from
1/ramp_up_months of capacity in month 1 to full capacity at month
ramp_up_months. Cash accumulates at full precision; only the emitted
records and summary figures are rounded.
"""
from __future__ import annotations

import math
from collections.abc import Iterable

from app.models.projection import MonthlyRecord, ProjectionParameters, ProjectionSummary

HORIZON_MONTHS = 24
_FIRST_YEAR_MONTH = 12


class InvalidParameterError(ValueError):
    """A parameter is missing, non-finite or outside its domain."""

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


def round_currency(value: float) -> int:
    """Round to the nearest whole currency unit, halves toward +inf."""
    return math.floor(value + 0.5)


def ramp_factor(month: int, ramp_up_months: int) -> float:
    """Share of full operating capacity reached in a given month."""
    if ramp_up_months < 1:
        raise InvalidParameterError("ramp_up_months", "must be at least 1")
    if month <= ramp_up_months:
        return month / ramp_up_months
    return 1.0


def breakeven_month(cumulative_cash: Iterable[float]) -> int | None:
    """First 1-based month whose cumulative cash is non-negative.

    Later dips below zero do not move the result.
    """
    for month, cash in enumerate(cumulative_cash, start=1):
        if cash >= 0:
            return month
    return None


_REVENUE_FIELDS = ("leads_per_month", "avg_deal_value", "conversion_rate", "commission_rate")
_COST_FIELDS = ("monthly_tech_fee", "monthly_marketing", "monthly_staff_cost")
_INVESTMENT_FIELDS = ("upfront_fee", "setup_costs")


def _largest_field(params: ProjectionParameters, names: tuple[str, ...]) -> str:
    return max(names, key=lambda name: getattr(params, name))


def _require_finite(value: float, params: ProjectionParameters, names: tuple[str, ...]) -> None:
    """Reject parameter combinations whose derived figures overflow a float."""
    if not math.isfinite(value):
        raise InvalidParameterError(
            _largest_field(params, names),
            f"too large; {' / '.join(names)} overflow the projection",
        )


def _check_parameters(params: ProjectionParameters) -> None:
    # Parameters built through model_construct skip pydantic validation
    for name, value in params.model_dump().items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise InvalidParameterError(name, "must be a number")
        if not math.isfinite(value):
            raise InvalidParameterError(name, "must be a finite number")
        if value < 0:
            raise InvalidParameterError(name, "must not be negative")
    for name in ("commission_rate", "conversion_rate"):
        if getattr(params, name) > 1:
            raise InvalidParameterError(name, "must be a fraction between 0 and 1")
    if params.ramp_up_months < 1:
        raise InvalidParameterError("ramp_up_months", "must be at least 1")


def compute_projection(
    params: ProjectionParameters,
) -> tuple[list[MonthlyRecord], ProjectionSummary]:
    """Project monthly cash flows over the fixed 24-month horizon.

    Returns exactly HORIZON_MONTHS records in ascending month order and the
    summary derived from them. Raises InvalidParameterError for parameters
    outside their domain; never raises for ordinary numeric outcomes such
    as zero revenue or no breakeven.
    """
    _check_parameters(params)

    total_monthly_cost = params.monthly_tech_fee + params.monthly_marketing + params.monthly_staff_cost
    max_monthly_revenue = (
        params.leads_per_month
        * params.conversion_rate
        * params.avg_deal_value
        * params.commission_rate
    )
    initial_investment = params.upfront_fee + params.setup_costs
    _require_finite(total_monthly_cost, params, _COST_FIELDS)
    _require_finite(max_monthly_revenue, params, _REVENUE_FIELDS)
    _require_finite(initial_investment, params, _INVESTMENT_FIELDS)

    cumulative = -initial_investment
    cumulative_series: list[float] = []
    total_revenue = 0.0
    records: list[MonthlyRecord] = []

    for month in range(1, HORIZON_MONTHS + 1):
        revenue = max_monthly_revenue * ramp_factor(month, params.ramp_up_months)
        net_monthly = revenue - total_monthly_cost
        cumulative += net_monthly
        total_revenue += revenue
        _require_finite(total_revenue, params, _REVENUE_FIELDS)
        if max_monthly_revenue >= total_monthly_cost:
            _require_finite(cumulative, params, _REVENUE_FIELDS)
        else:
            _require_finite(cumulative, params, _COST_FIELDS + _INVESTMENT_FIELDS)
        cumulative_series.append(cumulative)

        records.append(MonthlyRecord(
            month=month,
            revenue=round_currency(revenue),
            expenses=round_currency(total_monthly_cost),
            net_monthly=round_currency(net_monthly),
            cumulative_cash=round_currency(cumulative),
        ))

    first_year_profit = records[_FIRST_YEAR_MONTH - 1].cumulative_cash
    roi_year1 = None
    if initial_investment > 0:
        roi = first_year_profit / initial_investment * 100.0
        # A near-zero investment can push the ratio past float range
        if math.isfinite(roi):
            roi_year1 = round_currency(roi)

    summary = ProjectionSummary(
        initial_investment=initial_investment,
        monthly_burn=total_monthly_cost,
        monthly_revenue_at_scale=round_currency(max_monthly_revenue),
        breakeven_month=breakeven_month(cumulative_series),
        first_year_profit=first_year_profit,
        roi_year1=roi_year1,
        two_year_profit=records[HORIZON_MONTHS - 1].cumulative_cash,
        total_revenue=round_currency(total_revenue),
    )
    return records, summary
