"""Tests for partner presets."""
import pytest
from pydantic import ValidationError

from app.models.projection import ProjectionParameters
from app.simulation.presets import (
    UnknownPresetError,
    get_preset,
    get_preset_parameters,
    list_preset_ids,
    list_presets,
    normalize_preset_id,
)
from app.simulation.projection import compute_projection


def test_list_preset_ids_returns_all_three():
    assert list_preset_ids() == ["strategic", "direct", "white_label"]


def test_list_presets_has_labels():
    labels = {p.preset_id: p.label for p in list_presets()}
    assert labels == {"strategic": "Strategic", "direct": "Direct", "white_label": "White Label"}


@pytest.mark.parametrize("name", ["white_label", "white-label", "whiteLabel", "White Label", " WHITE_LABEL "])
def test_white_label_aliases(name):
    assert normalize_preset_id(name) == "white_label"
    assert get_preset(name).preset_id == "white_label"


def test_unknown_preset_raises():
    with pytest.raises(UnknownPresetError):
        get_preset("enterprise")


def test_presets_are_complete_parameter_sets():
    for name in list_preset_ids():
        params = get_preset_parameters(name)
        assert isinstance(params, ProjectionParameters)
        assert ProjectionParameters(**params.model_dump()) == params


def test_direct_preset_values():
    p = get_preset_parameters("direct")
    assert p.upfront_fee == 25_000
    assert p.setup_costs == 5_000
    assert p.monthly_tech_fee == 500
    assert p.monthly_marketing == 2_000
    assert p.monthly_staff_cost == 0
    assert p.commission_rate == pytest.approx(0.30)
    assert p.leads_per_month == 20


def test_white_label_includes_staff_cost():
    p = get_preset_parameters("white_label")
    assert p.monthly_staff_cost == 4_000
    assert p.commission_rate == pytest.approx(0.60)


def test_investment_and_commission_rise_across_tiers():
    tiers = [get_preset_parameters(n) for n in ("strategic", "direct", "white_label")]
    for lower, higher in zip(tiers, tiers[1:]):
        assert higher.upfront_fee + higher.setup_costs > lower.upfront_fee + lower.setup_costs
        assert higher.commission_rate > lower.commission_rate
        assert higher.leads_per_month > lower.leads_per_month


@pytest.mark.parametrize("name, month", [("strategic", 14), ("direct", 18), ("white_label", 16)])
def test_preset_breakeven_months(name, month):
    _, summary = compute_projection(get_preset_parameters(name))
    assert summary.breakeven_month == month


def test_preset_parameters_are_immutable():
    p = get_preset_parameters("direct")
    with pytest.raises(ValidationError):
        p.upfront_fee = 0
    assert get_preset_parameters("direct").upfront_fee == 25_000
