from fastapi import APIRouter, HTTPException, Query, Response

from app.config import settings
from app.models.projection import ProjectionRequest, ProjectionResult
from app.services.export_service import export_csv, export_xlsx
from app.services.projection_service import run_projection
from app.simulation.presets import UnknownPresetError
from app.simulation.projection import InvalidParameterError

router = APIRouter(tags=["projections"])

_XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


def _run(request: ProjectionRequest) -> ProjectionResult:
    try:
        return run_projection(request)
    except UnknownPresetError:
        raise HTTPException(status_code=404, detail=f"Preset {request.preset} not found")
    except InvalidParameterError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.post("/projections/run", response_model=ProjectionResult)
def run_projection_endpoint(request: ProjectionRequest):
    """Compute the 24-month projection for a preset or explicit parameters.

    Every call is independent; clients recomputing on each edit should
    display the latest response.
    """
    return _run(request)


@router.post("/projections/export")
def export_projection(request: ProjectionRequest, format: str = Query("csv")):
    """Download the monthly series as CSV or XLSX."""
    fmt = format.lower()
    if fmt not in ("csv", "xlsx"):
        raise HTTPException(
            status_code=400,
            detail=f"Unsupported export format '{format}'. Use csv or xlsx",
        )

    result = _run(request)
    filename = f"{settings.EXPORT_FILENAME}.{fmt}"
    headers = {"Content-Disposition": f'attachment; filename="{filename}"'}
    if fmt == "csv":
        return Response(export_csv(result.records), media_type="text/csv", headers=headers)
    return Response(
        export_xlsx(result.records, result.summary), media_type=_XLSX_MEDIA_TYPE, headers=headers,
    )
