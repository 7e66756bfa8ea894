# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Support availability — validates selections against the roster,
runs the calendar projector on a snapshot and records projection metrics.
"""

import calendar as _cal
from datetime import date
from typing import Any, Optional

from team_roster.core.logging import get_logger
from team_roster.metrics.prometheus import AT_RISK_DAYS, CALENDAR_PROJECTIONS
from team_roster.models.domain import ALL_APPLICATIONS
from team_roster.repositories.roster_repository import RosterRepository
from team_roster.services.availability import (
    application_coverage,
    day_breakdown,
    team_applications,
)
from team_roster.services.calendar import CalendarState, compute_calendar, dispatch

logger = get_logger(__name__)


class AvailabilityService:
    """Read-only views of who can support which application, and when."""

    def __init__(self, roster_repo: RosterRepository) -> None:
        self._roster = roster_repo

    # ── Calendar ──

    def get_calendar(
        self,
        team_id: Optional[str] = None,
        application: Optional[str] = None,
        year: Optional[int] = None,
        month: Optional[int] = None,
        today: Optional[date] = None,
    ) -> dict[str, Any]:
        """Project one month. Year and month default to today's."""
        today = today or date.today()
        state = CalendarState(
            year=year or today.year,
            month=month or today.month,
            team_id=team_id or None,
            application=application or None,
        )
        return self._project(state, today)

    def navigate(
        self,
        state: CalendarState,
        action: str,
        value: Optional[str] = None,
        today: Optional[date] = None,
    ) -> dict[str, Any]:
        """Apply one navigation/selection action, then recompute the grid."""
        today = today or date.today()
        new_state = dispatch(state, action, value, today=today)
        logger.info(
            "Calendar navigated: action=%s, %04d-%02d -> %04d-%02d",
            action, state.year, state.month, new_state.year, new_state.month,
        )
        return self._project(new_state, today)

    # ── Team views ──

    def get_team_applications(self, team_id: str) -> list[str]:
        doc = self._roster.snapshot()
        self._check_team(doc, team_id)
        return team_applications(doc["developers"], team_id)

    def get_coverage(self, team_id: str) -> list[dict[str, Any]]:
        doc = self._roster.snapshot()
        self._check_team(doc, team_id)
        return application_coverage(doc["developers"], team_id)

    def get_day_detail(self, team_id: str, day: date) -> dict[str, Any]:
        doc = self._roster.snapshot()
        self._check_team(doc, team_id)
        rows = day_breakdown(doc["developers"], team_id, day)
        return {
            "team_id": team_id,
            "date": day,
            "is_at_risk": any(r["is_at_risk"] for r in rows),
            "applications": rows,
        }

    # ── Internal ──

    def _project(self, state: CalendarState, today: date) -> dict[str, Any]:
        doc = self._roster.snapshot()
        if state.team_id:
            self._check_team(doc, state.team_id)
            if state.application:
                self._check_application(doc, state.team_id, state.application)

        days = compute_calendar(state, doc["developers"], today=today)
        at_risk = sum(1 for d in days if d["is_at_risk"])
        if days:
            mode = "all" if state.application == ALL_APPLICATIONS else "single"
            CALENDAR_PROJECTIONS.labels(mode=mode).inc()
            AT_RISK_DAYS.observe(at_risk)
            logger.info(
                "Calendar computed: team=%s, application=%s, month=%04d-%02d, at_risk_days=%d",
                state.team_id, state.application, state.year, state.month, at_risk,
            )
        return {
            "state": {
                "year": state.year,
                "month": state.month,
                "team_id": state.team_id,
                "application": state.application,
            },
            "month_name": f"{_cal.month_name[state.month]} {state.year}",
            "has_risk_days": at_risk > 0,
            "days": days,
        }

    @staticmethod
    def _check_team(doc: dict[str, Any], team_id: str) -> None:
        if not any(t["id"] == team_id for t in doc["teams"]):
            raise KeyError(f"No team found with id '{team_id}'")

    @staticmethod
    def _check_application(doc: dict[str, Any], team_id: str, application: str) -> None:
        if application == ALL_APPLICATIONS:
            return
        defined = (doc.get("skill_definitions") or {}).get("app_skills") or {}
        if application in defined:
            return
        if application in team_applications(doc["developers"], team_id):
            return
        raise KeyError(f"No application named '{application}'")
