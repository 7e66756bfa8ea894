# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Manager CRUD endpoints.
Thin HTTP layer — delegates ALL logic to ManagerService.
"""

from fastapi import APIRouter, Depends, HTTPException

from team_roster.core.dependencies import get_manager_service
from team_roster.schemas.roster import ManagerRequest, ManagerResponse, TeamResponse
from team_roster.services.manager_service import ManagerService

router = APIRouter(prefix="/api/v1", tags=["Managers"])


@router.post("/managers", status_code=201, response_model=ManagerResponse)
def create_manager(
    payload: ManagerRequest,
    service: ManagerService = Depends(get_manager_service),
):
    """Create a manager and take over the listed teams."""
    try:
        return service.create_manager(
            name=payload.name,
            role=payload.role,
            teams=payload.teams,
            description=payload.description,
        )
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/managers", response_model=list[ManagerResponse])
def list_managers(service: ManagerService = Depends(get_manager_service)):
    return service.list_managers()


@router.get("/managers/{manager_id}", response_model=ManagerResponse)
def get_manager(
    manager_id: str,
    service: ManagerService = Depends(get_manager_service),
):
    try:
        return service.get_manager(manager_id)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/managers/{manager_id}/teams", response_model=list[TeamResponse])
def get_manager_teams(
    manager_id: str,
    service: ManagerService = Depends(get_manager_service),
):
    """Teams whose manager_id points at this manager."""
    try:
        return service.teams_for_manager(manager_id)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/managers/{manager_id}", response_model=ManagerResponse)
def update_manager(
    manager_id: str,
    payload: ManagerRequest,
    service: ManagerService = Depends(get_manager_service),
):
    try:
        return service.update_manager(
            manager_id=manager_id,
            name=payload.name,
            role=payload.role,
            teams=payload.teams,
            description=payload.description,
        )
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.delete("/managers/{manager_id}")
def delete_manager(
    manager_id: str,
    service: ManagerService = Depends(get_manager_service),
):
    """Delete a manager; its teams are left without one."""
    try:
        return service.delete_manager(manager_id)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))
