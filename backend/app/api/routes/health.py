from fastapi import APIRouter

from app.config import settings
from app.simulation.presets import list_preset_ids

router = APIRouter(tags=["health"])


@router.get("/health")
def health_check():
    return {
        "status": "ok",
        "presets": list_preset_ids(),
        "default_preset": settings.DEFAULT_PRESET,
    }
