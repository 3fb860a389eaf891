"""Tests for breakeven insight classification."""
import pytest

from app.simulation.insight import classify_breakeven


@pytest.mark.parametrize("month", [1, 3, 6])
def test_fast_return(month):
    insight = classify_breakeven(month)
    assert insight.category == "fast_return"
    assert insight.headline == f"Month {month}"
    assert "Fast Return" in insight.message


@pytest.mark.parametrize("month", [7, 12])
def test_standard(month):
    insight = classify_breakeven(month)
    assert insight.category == "standard"
    assert "B2B service franchise" in insight.message


@pytest.mark.parametrize("month", [13, 24])
def test_long_term(month):
    assert classify_breakeven(month).category == "long_term"


def test_no_breakeven_is_beyond_horizon_not_fast_return():
    insight = classify_breakeven(None)
    assert insight.category == "beyond_horizon"
    assert insight.headline == "> 24 Months"
    assert "more than 2 years" in insight.message
    assert "Fast Return" not in insight.message
