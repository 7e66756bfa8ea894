# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Team CRUD endpoints.
Thin HTTP layer — delegates ALL logic to TeamService.
"""

from fastapi import APIRouter, Depends, HTTPException

from team_roster.core.dependencies import get_team_service
from team_roster.schemas.roster import (
    DeveloperResponse,
    TeamRequest,
    TeamResponse,
    TeamSummaryResponse,
)
from team_roster.services.team_service import TeamService

router = APIRouter(prefix="/api/v1", tags=["Teams"])


@router.post("/teams", status_code=201, response_model=TeamResponse)
def create_team(
    payload: TeamRequest,
    service: TeamService = Depends(get_team_service),
):
    try:
        return service.create_team(
            name=payload.name,
            description=payload.description,
            manager_id=payload.manager_id,
            developers=payload.developers,
            shared_resources=payload.shared_resources,
        )
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/teams", response_model=list[TeamResponse])
def list_teams(service: TeamService = Depends(get_team_service)):
    return service.list_teams()


@router.get("/teams/stats")
def team_stats(service: TeamService = Depends(get_team_service)):
    """Totals across all teams."""
    return service.get_stats()


@router.get("/teams/{team_id}", response_model=TeamResponse)
def get_team(
    team_id: str,
    service: TeamService = Depends(get_team_service),
):
    try:
        return service.get_team(team_id)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/teams/{team_id}/summary", response_model=TeamSummaryResponse)
def get_team_summary(
    team_id: str,
    service: TeamService = Depends(get_team_service),
):
    try:
        return service.get_team_summary(team_id)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/teams/{team_id}/developers", response_model=list[DeveloperResponse])
def get_team_developers(
    team_id: str,
    service: TeamService = Depends(get_team_service),
):
    """Primary members followed by assigned shared resources."""
    try:
        return service.get_team_developers(team_id)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/teams/{team_id}", response_model=TeamResponse)
def update_team(
    team_id: str,
    payload: TeamRequest,
    service: TeamService = Depends(get_team_service),
):
    try:
        return service.update_team(
            team_id=team_id,
            name=payload.name,
            description=payload.description,
            manager_id=payload.manager_id,
            developers=payload.developers,
            shared_resources=payload.shared_resources,
        )
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/teams/{team_id}")
def delete_team(
    team_id: str,
    service: TeamService = Depends(get_team_service),
):
    """Delete a team and unassign its developers."""
    try:
        return service.delete_team(team_id)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))
