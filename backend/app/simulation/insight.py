"""Narrative reading of a breakeven month for partner-facing display."""
from __future__ import annotations

from app.models.projection import BreakevenInsight

_FAST_RETURN_MAX_MONTH = 6
_STANDARD_MAX_MONTH = 12


def classify_breakeven(breakeven_month: int | None) -> BreakevenInsight:
    if breakeven_month is None:
        return BreakevenInsight(
            category="beyond_horizon",
            headline="> 24 Months",
            message=(
                "Based on these inputs, the partner requires more than 2 years to break even. "
                "This is a longer-term play; consider reducing the upfront fee or "
                "increasing the ramp-up speed."
            ),
        )

    lead = f"Based on these inputs, the partner requires {breakeven_month} months to break even."
    if breakeven_month <= _FAST_RETURN_MAX_MONTH:
        category = "fast_return"
        detail = "This is a highly attractive 'Fast Return' opportunity."
    elif breakeven_month <= _STANDARD_MAX_MONTH:
        category = "standard"
        detail = "This is a standard ROI period for a B2B service franchise."
    else:
        category = "long_term"
        detail = (
            "This is a longer-term play; consider reducing the upfront fee or "
            "increasing the ramp-up speed."
        )
    return BreakevenInsight(
        category=category,
        headline=f"Month {breakeven_month}",
        message=f"{lead} {detail}",
    )
