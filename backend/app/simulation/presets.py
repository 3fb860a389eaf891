"""Preset definitions — named partner parameter sets.

Each preset is a complete ProjectionParameters; applying one replaces the
active parameter set wholesale. The engine itself has no notion of presets.
"""
from __future__ import annotations

import re
from dataclasses import dataclass

from app.models.projection import PresetSummary, ProjectionParameters


class UnknownPresetError(KeyError):
    """Raised when a preset identifier does not name a known preset."""


@dataclass(frozen=True)
class Preset:
    """A partner type and its parameter set."""
    preset_id: str
    label: str
    description: str
    parameters: ProjectionParameters


_PRESETS: dict[str, Preset] = {
    "strategic": Preset(
        preset_id="strategic",
        label="Strategic",
        description="Low investment, low commission, low lead volume.",
        parameters=ProjectionParameters(
            upfront_fee=5_000,
            setup_costs=1_000,
            monthly_tech_fee=100,
            monthly_marketing=500,
            monthly_staff_cost=0,
            avg_deal_value=15_000,
            commission_rate=0.15,
            leads_per_month=10,
            conversion_rate=0.05,
            ramp_up_months=3,
        ),
    ),
    "direct": Preset(
        preset_id="direct",
        label="Direct",
        description="Moderate investment, commission and lead volume.",
        parameters=ProjectionParameters(
            upfront_fee=25_000,
            setup_costs=5_000,
            monthly_tech_fee=500,
            monthly_marketing=2_000,
            monthly_staff_cost=0,
            avg_deal_value=15_000,
            commission_rate=0.30,
            leads_per_month=20,
            conversion_rate=0.05,
            ramp_up_months=3,
        ),
    ),
    "white_label": Preset(
        preset_id="white_label",
        label="White Label",
        description="High investment and commission, high volume, dedicated support staff.",
        parameters=ProjectionParameters(
            upfront_fee=75_000,
            setup_costs=15_000,
            monthly_tech_fee=2_000,
            monthly_marketing=5_000,
            monthly_staff_cost=4_000,
            avg_deal_value=15_000,
            commission_rate=0.60,
            leads_per_month=40,
            conversion_rate=0.05,
            ramp_up_months=3,
        ),
    ),
}


def normalize_preset_id(name: str) -> str:
    """Map 'whiteLabel', 'white-label' or 'White Label' to 'white_label'."""
    snake = re.sub(r"(?<=[a-z0-9])([A-Z])", r"_\1", name.strip())
    return re.sub(r"[\s\-]+", "_", snake).lower()


def get_preset(name: str) -> Preset:
    """Return the preset for an identifier. Raises UnknownPresetError."""
    preset = _PRESETS.get(normalize_preset_id(name))
    if preset is None:
        raise UnknownPresetError(name)
    return preset


def get_preset_parameters(name: str) -> ProjectionParameters:
    return get_preset(name).parameters


def list_preset_ids() -> list[str]:
    return list(_PRESETS.keys())


def list_presets() -> list[PresetSummary]:
    return [
        PresetSummary(preset_id=p.preset_id, label=p.label, description=p.description)
        for p in _PRESETS.values()
    ]
