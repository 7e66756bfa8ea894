# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Domain models — pure data structures, NO FastAPI dependency.
"""

import datetime as dt
from typing import Annotated, Optional

from pydantic import BaseModel, Field, model_validator

Rating = Annotated[int, Field(ge=0, le=10)]

SKILL_KINDS = ("tech", "app")

# Application selector meaning "every application the team holds".
ALL_APPLICATIONS = "all"


class VacationEntry(BaseModel):
    """A single day off, or an inclusive start/end range."""
    type: str = Field(..., pattern="^(single|range)$", description="single or range")
    date: Optional[dt.date] = None
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None
    description: str = Field(..., min_length=1, max_length=500)

    @model_validator(mode="after")
    def check_dates(self) -> "VacationEntry":
        if self.type == "single":
            if self.date is None:
                raise ValueError("a single vacation entry requires 'date'")
            self.start_date = None
            self.end_date = None
        else:
            if self.start_date is None or self.end_date is None:
                raise ValueError("a range vacation entry requires 'start_date' and 'end_date'")
            if self.start_date > self.end_date:
                raise ValueError("'start_date' must not be after 'end_date'")
            self.date = None
        return self

    def to_record(self) -> dict:
        """Storage form: ISO strings, only the fields meaningful for the type."""
        if self.type == "single":
            return {"type": "single", "date": self.date.isoformat(), "description": self.description}
        return {
            "type": "range",
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "description": self.description,
        }


class Availability(BaseModel):
    status: str = Field(default="active", pattern="^(active|inactive)$")
    vacation_days: list[VacationEntry] = Field(default_factory=list)

    def to_record(self) -> dict:
        return {
            "status": self.status,
            "vacation_days": [v.to_record() for v in self.vacation_days],
        }


class SkillDefinition(BaseModel):
    description: str = Field(..., min_length=10, max_length=1000)
    scale: str = Field(default="1-10", min_length=1, max_length=20)
    category: str = Field(..., min_length=1, max_length=100)


class DeveloperRef(BaseModel):
    """Lightweight pointer to a developer, used inside calendar cells."""
    id: str
    name: str
