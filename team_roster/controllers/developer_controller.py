# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Developer endpoints — CRUD, skill ratings and vacation entries.
Thin HTTP layer — delegates ALL logic to DeveloperService.
"""

from fastapi import APIRouter, Depends, HTTPException

from team_roster.core.dependencies import get_developer_service
from team_roster.models.domain import VacationEntry
from team_roster.schemas.roster import (
    DeveloperRequest,
    DeveloperResponse,
    DeveloperSummaryResponse,
    SkillRatingRequest,
    VacationResponse,
)
from team_roster.services.developer_service import DeveloperService

router = APIRouter(prefix="/api/v1", tags=["Developers"])


def _fields(payload: DeveloperRequest) -> dict:
    return {
        "name": payload.name,
        "team_id": payload.team_id,
        "is_shared_resource": payload.is_shared_resource,
        "assigned_teams": payload.assigned_teams,
        "tech_skills": payload.tech_skills,
        "app_skills": payload.app_skills,
        "availability": payload.availability,
    }


# ── Developers ──

@router.post("/developers", status_code=201, response_model=DeveloperResponse)
def create_developer(
    payload: DeveloperRequest,
    service: DeveloperService = Depends(get_developer_service),
):
    """Create a developer and add it to its team(s)."""
    try:
        return service.create_developer(**_fields(payload))
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/developers", response_model=list[DeveloperResponse])
def list_developers(service: DeveloperService = Depends(get_developer_service)):
    return service.list_developers()


@router.get("/developers/stats")
def developer_stats(service: DeveloperService = Depends(get_developer_service)):
    return service.get_stats()


@router.get("/developers/{developer_id}", response_model=DeveloperResponse)
def get_developer(
    developer_id: str,
    service: DeveloperService = Depends(get_developer_service),
):
    try:
        return service.get_developer(developer_id)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/developers/{developer_id}/summary", response_model=DeveloperSummaryResponse)
def get_developer_summary(
    developer_id: str,
    service: DeveloperService = Depends(get_developer_service),
):
    """Profile card: teams, manager, skill counts, top skills, vacation days."""
    try:
        return service.get_developer_summary(developer_id)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/developers/{developer_id}", response_model=DeveloperResponse)
def update_developer(
    developer_id: str,
    payload: DeveloperRequest,
    service: DeveloperService = Depends(get_developer_service),
):
    try:
        return service.update_developer(developer_id=developer_id, **_fields(payload))
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/developers/{developer_id}")
def delete_developer(
    developer_id: str,
    service: DeveloperService = Depends(get_developer_service),
):
    try:
        return service.delete_developer(developer_id)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put(
    "/developers/{developer_id}/skills/{kind}/{skill}",
    response_model=DeveloperResponse,
)
def set_skill_rating(
    developer_id: str,
    kind: str,
    skill: str,
    payload: SkillRatingRequest,
    service: DeveloperService = Depends(get_developer_service),
):
    """Set a single tech or app rating (0-10)."""
    try:
        return service.set_skill_rating(developer_id, kind, skill, payload.rating)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))


# ── Vacations ──

@router.get("/developers/{developer_id}/vacations", response_model=list[dict])
def list_vacations(
    developer_id: str,
    service: DeveloperService = Depends(get_developer_service),
):
    try:
        return service.list_vacations(developer_id)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post(
    "/developers/{developer_id}/vacations",
    status_code=201,
    response_model=VacationResponse,
)
def add_vacation(
    developer_id: str,
    payload: VacationEntry,
    service: DeveloperService = Depends(get_developer_service),
):
    try:
        return service.add_vacation(developer_id, payload)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/developers/{developer_id}/vacations/{index}", response_model=VacationResponse)
def update_vacation(
    developer_id: str,
    index: int,
    payload: VacationEntry,
    service: DeveloperService = Depends(get_developer_service),
):
    try:
        return service.update_vacation(developer_id, index, payload)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/developers/{developer_id}/vacations/{index}", response_model=VacationResponse)
def delete_vacation(
    developer_id: str,
    index: int,
    service: DeveloperService = Depends(get_developer_service),
):
    try:
        return service.delete_vacation(developer_id, index)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))
