# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Support-availability endpoints — calendar grid, navigation,
per-team application coverage and day detail.
"""

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from team_roster.core.dependencies import get_availability_service
from team_roster.schemas.availability import (
    CalendarResponse,
    CoverageRow,
    DayDetailResponse,
    NavigateRequest,
)
from team_roster.services.availability_service import AvailabilityService
from team_roster.services.calendar import MAX_YEAR, MIN_YEAR, CalendarState

router = APIRouter(prefix="/api/v1/availability", tags=["Availability"])


@router.get("/calendar", response_model=CalendarResponse)
def get_calendar(
    team_id: Optional[str] = Query(default=None),
    application: Optional[str] = Query(default=None, description="Application name or 'all'"),
    year: Optional[int] = Query(default=None, ge=MIN_YEAR, le=MAX_YEAR),
    month: Optional[int] = Query(default=None, ge=1, le=12),
    service: AvailabilityService = Depends(get_availability_service),
):
    """Month grid of whole weeks with per-day risk. Empty until team and application are set."""
    try:
        return service.get_calendar(
            team_id=team_id, application=application, year=year, month=month
        )
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/calendar/navigate", response_model=CalendarResponse)
def navigate_calendar(
    payload: NavigateRequest,
    service: AvailabilityService = Depends(get_availability_service),
):
    """Apply previous/next/today or a team/application selection and recompute."""
    state = CalendarState(**payload.state.model_dump())
    try:
        return service.navigate(state, payload.action, payload.value)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/teams/{team_id}/applications", response_model=list[str])
def get_team_applications(
    team_id: str,
    service: AvailabilityService = Depends(get_availability_service),
):
    try:
        return service.get_team_applications(team_id)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/teams/{team_id}/coverage", response_model=list[CoverageRow])
def get_coverage(
    team_id: str,
    service: AvailabilityService = Depends(get_availability_service),
):
    """Developers per application, most covered first."""
    try:
        return service.get_coverage(team_id)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/teams/{team_id}/days/{day}", response_model=DayDetailResponse)
def get_day_detail(
    team_id: str,
    day: date,
    service: AvailabilityService = Depends(get_availability_service),
):
    try:
        return service.get_day_detail(team_id, day)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))
