# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Request / Response schemas for the support-availability endpoints.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from team_roster.models.domain import DeveloperRef
from team_roster.services.calendar import MAX_YEAR, MIN_YEAR


class CalendarStateModel(BaseModel):
    year: int = Field(..., ge=MIN_YEAR, le=MAX_YEAR)
    month: int = Field(..., ge=1, le=12)
    team_id: Optional[str] = None
    application: Optional[str] = None


class DayCell(BaseModel):
    date: date
    is_current_month: bool
    is_today: bool
    is_at_risk: bool
    unavailable_developers: list[DeveloperRef]
    affected_applications: list[str]


class CalendarResponse(BaseModel):
    state: CalendarStateModel
    month_name: str
    has_risk_days: bool
    days: list[DayCell]


class NavigateRequest(BaseModel):
    state: CalendarStateModel
    action: str = Field(
        ...,
        pattern="^(previous|next|today|select_team|select_application)$",
        description="Navigation or selection action",
    )
    value: Optional[str] = Field(default=None, description="New team id or application")


class CoverageRow(BaseModel):
    application: str
    developers: list[DeveloperRef]
    count: int


class ApplicationDetail(BaseModel):
    application: str
    is_at_risk: bool
    available_developers: list[DeveloperRef]
    unavailable_developers: list[DeveloperRef]


class DayDetailResponse(BaseModel):
    team_id: str
    date: date
    is_at_risk: bool
    applications: list[ApplicationDetail]
