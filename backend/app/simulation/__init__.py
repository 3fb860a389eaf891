"""Projection engine, partner presets and breakeven insight."""
from app.simulation.projection import (
    HORIZON_MONTHS,
    InvalidParameterError,
    breakeven_month,
    compute_projection,
    ramp_factor,
    round_currency,
)
from app.simulation.presets import (
    Preset,
    UnknownPresetError,
    get_preset,
    get_preset_parameters,
    list_preset_ids,
    list_presets,
)
from app.simulation.insight import classify_breakeven

__all__ = [
    "HORIZON_MONTHS",
    "InvalidParameterError",
    "breakeven_month",
    "compute_projection",
    "ramp_factor",
    "round_currency",
    "Preset",
    "UnknownPresetError",
    "get_preset",
    "get_preset_parameters",
    "list_preset_ids",
    "list_presets",
    "classify_breakeven",
]
