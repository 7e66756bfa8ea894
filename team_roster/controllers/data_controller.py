# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Data management — dashboard, export/import, clear and reset.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException

from team_roster.core.dependencies import get_data_service
from team_roster.schemas.roster import DashboardResponse
from team_roster.services.data_service import DataService

router = APIRouter(prefix="/api/v1", tags=["Data"])


@router.get("/dashboard", response_model=DashboardResponse)
def get_dashboard(service: DataService = Depends(get_data_service)):
    return service.get_dashboard()


@router.get("/data/export")
def export_data(service: DataService = Depends(get_data_service)):
    """The whole roster document, suitable for re-import."""
    return service.export_data()


@router.post("/data/import")
def import_data(
    payload: Any = Body(...),
    service: DataService = Depends(get_data_service),
):
    """Replace the roster with an exported document."""
    try:
        return service.import_data(payload)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/data/clear")
def clear_data(service: DataService = Depends(get_data_service)):
    return service.clear_data()


@router.post("/data/reset")
def reset_data(service: DataService = Depends(get_data_service)):
    """Reload the configured seed document, or start empty when there is none."""
    return service.reset_data()
