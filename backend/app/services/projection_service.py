"""Projection orchestration service.

Resolves a ProjectionRequest into a parameter set (explicit parameters or a
named preset), runs the engine and attaches the breakeven insight.
"""
from __future__ import annotations

import logging
from datetime import datetime, timezone

from app.config import settings
from app.models.projection import ProjectionInputs, ProjectionRequest, ProjectionResult
from app.simulation.insight import classify_breakeven
from app.simulation.presets import get_preset
from app.simulation.projection import compute_projection

logger = logging.getLogger(__name__)


def resolve_inputs(request: ProjectionRequest) -> tuple[str | None, ProjectionInputs]:
    """Pick the active parameter set for a request.

    Explicit parameters win wholesale over a preset; with neither, the
    configured default preset applies. Raises UnknownPresetError.
    """
    if request.parameters is not None:
        return None, request.parameters
    preset = get_preset(request.preset or settings.DEFAULT_PRESET)
    return preset.preset_id, ProjectionInputs.from_parameters(preset.parameters)


def run_projection(request: ProjectionRequest) -> ProjectionResult:
    preset_id, inputs = resolve_inputs(request)
    records, summary = compute_projection(inputs.to_parameters())

    logger.info(
        "Projection computed (preset=%s): breakeven=%s, year-1 profit=%d",
        preset_id, summary.breakeven_month, summary.first_year_profit,
    )

    return ProjectionResult(
        preset=preset_id,
        inputs=inputs,
        records=records,
        summary=summary,
        insight=classify_breakeven(summary.breakeven_month),
        computed_at=datetime.now(timezone.utc),
    )
