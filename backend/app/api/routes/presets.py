from fastapi import APIRouter, HTTPException

from app.models.projection import PresetSummary, ProjectionInputs
from app.simulation.presets import UnknownPresetError, get_preset, list_presets

router = APIRouter(tags=["presets"])


@router.get("/presets", response_model=list[PresetSummary])
def get_presets():
    return list_presets()


@router.get("/presets/{preset_id}", response_model=ProjectionInputs)
def get_preset_inputs(preset_id: str):
    """Return a preset's complete parameter set, rates as percentages."""
    try:
        preset = get_preset(preset_id)
    except UnknownPresetError:
        raise HTTPException(status_code=404, detail=f"Preset {preset_id} not found")
    return ProjectionInputs.from_parameters(preset.parameters)
