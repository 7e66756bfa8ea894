# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: Skill definition endpoints for the tech and app catalogues.
"""

from fastapi import APIRouter, Depends, HTTPException

from team_roster.core.dependencies import get_skill_service
from team_roster.schemas.roster import SkillRequest, SkillResponse
from team_roster.services.skill_service import SkillService

router = APIRouter(prefix="/api/v1", tags=["Skills"])


@router.get("/skills/{kind}", response_model=list[SkillResponse])
def list_skills(kind: str, service: SkillService = Depends(get_skill_service)):
    """Definitions of one kind with the number of developers rated on each."""
    try:
        return service.list_skills(kind)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/skills/{kind}/{name}", response_model=SkillResponse)
def get_skill(kind: str, name: str, service: SkillService = Depends(get_skill_service)):
    try:
        return service.get_skill(kind, name)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.post("/skills/{kind}", status_code=201, response_model=SkillResponse)
def create_skill(
    kind: str,
    payload: SkillRequest,
    service: SkillService = Depends(get_skill_service),
):
    try:
        return service.create_skill(
            kind=kind,
            name=payload.name,
            description=payload.description,
            category=payload.category,
            scale=payload.scale,
        )
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.put("/skills/{kind}/{name}", response_model=SkillResponse)
def update_skill(
    kind: str,
    name: str,
    payload: SkillRequest,
    service: SkillService = Depends(get_skill_service),
):
    """Update a definition. A different payload name renames it on every developer."""
    try:
        return service.update_skill(
            kind=kind,
            name=name,
            new_name=payload.name,
            description=payload.description,
            category=payload.category,
            scale=payload.scale,
        )
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.delete("/skills/{kind}/{name}")
def delete_skill(kind: str, name: str, service: SkillService = Depends(get_skill_service)):
    """Delete a definition and strip the rating from every developer."""
    try:
        return service.delete_skill(kind, name)
    except KeyError as e:
        raise HTTPException(status_code=404, detail=str(e))
