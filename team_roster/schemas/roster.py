# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Request / Response schemas — API contract definitions.
These are Pydantic models used ONLY at the controller (HTTP) boundary.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field

from team_roster.models.domain import Availability, Rating, VacationEntry


# ── Manager Schemas ──

class ManagerRequest(BaseModel):
    name: str = Field(..., min_length=2, max_length=255)
    role: str = Field(..., min_length=2, max_length=255)
    teams: list[str] = Field(default_factory=list, description="Team ids managed")
    description: str = Field(..., min_length=10, max_length=2000)


class ManagerResponse(BaseModel):
    id: str
    name: str
    role: str = ""
    teams: list[str] = Field(default_factory=list)
    description: str = ""


# ── Team Schemas ──

class TeamRequest(BaseModel):
    name: str = Field(..., min_length=2, max_length=255)
    manager_id: Optional[str] = None
    developers: list[str] = Field(default_factory=list)
    shared_resources: list[str] = Field(default_factory=list)
    description: str = Field(..., min_length=10, max_length=2000)


class TeamResponse(BaseModel):
    id: str
    name: str
    manager_id: Optional[str] = None
    developers: list[str] = Field(default_factory=list)
    shared_resources: list[str] = Field(default_factory=list)
    description: str = ""


class TeamSummaryResponse(BaseModel):
    team: TeamResponse
    manager_name: str
    member_count: int
    shared_resource_count: int
    primary_developers: list[dict[str, str]]
    shared_resources: list[dict[str, str]]


# ── Developer Schemas ──

class DeveloperRequest(BaseModel):
    name: str = Field(..., min_length=2, max_length=255)
    team_id: Optional[str] = None
    is_shared_resource: bool = False
    assigned_teams: list[str] = Field(default_factory=list)
    tech_skills: dict[str, Rating] = Field(default_factory=dict)
    app_skills: dict[str, Rating] = Field(default_factory=dict)
    availability: Optional[Availability] = None


class DeveloperResponse(BaseModel):
    id: str
    name: str
    team_id: Optional[str] = None
    is_shared_resource: bool = False
    assigned_teams: list[str] = Field(default_factory=list)
    tech_skills: dict[str, Any] = Field(default_factory=dict)
    app_skills: dict[str, Any] = Field(default_factory=dict)
    availability: dict[str, Any] = Field(default_factory=dict)


class DeveloperSummaryResponse(BaseModel):
    developer: DeveloperResponse
    developer_type: str
    team_names: list[str]
    manager_name: str
    skill_count: int
    app_count: int
    top_skills: list[str]
    vacation_day_count: int
    vacation_entry_count: int


class SkillRatingRequest(BaseModel):
    rating: Rating


# ── Vacation Schemas ──

class VacationResponse(BaseModel):
    index: int
    entry: dict[str, Any]


# ── Skill Definition Schemas ──

class SkillRequest(BaseModel):
    name: str = Field(..., min_length=2, max_length=100)
    description: str = Field(..., min_length=10, max_length=1000)
    category: str = Field(..., min_length=1, max_length=100)
    scale: str = Field(default="1-10", min_length=1, max_length=20)


class SkillResponse(BaseModel):
    name: str
    kind: str
    description: str
    category: str
    scale: str
    usage_count: int = 0


# ── Data Management Schemas ──

class DashboardResponse(BaseModel):
    organization: str
    total_managers: int
    total_teams: int
    total_developers: int
    shared_resources: int
    active_developers: int
    total_vacations: int
    last_updated: str
    data_size_bytes: int
    data_size: str
    has_stored_data: bool


__all__ = [
    "ManagerRequest", "ManagerResponse",
    "TeamRequest", "TeamResponse", "TeamSummaryResponse",
    "DeveloperRequest", "DeveloperResponse", "DeveloperSummaryResponse",
    "SkillRatingRequest", "VacationEntry", "VacationResponse",
    "SkillRequest", "SkillResponse", "DashboardResponse",
]
