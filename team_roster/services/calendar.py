# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Calendar projection — pure computation, no I/O, no metrics, no logging.

A projection is a month grid of whole weeks (Sunday..Saturday), spill-over
days from the neighbouring months included, each day annotated with the
support-availability risk for one team and one application (or all of them).
"""

import calendar as _cal
from dataclasses import dataclass, replace
from datetime import date, timedelta
from typing import Any, Optional

from team_roster.models.domain import ALL_APPLICATIONS
from team_roster.services.availability import (
    assess_day,
    team_applications,
    team_developers,
)

NAVIGATION_ACTIONS = ("previous", "next", "today", "select_team", "select_application")

# Years 1 and 9999 are excluded: their display windows spill past date.min/date.max.
MIN_YEAR = 2
MAX_YEAR = 9998


@dataclass(frozen=True)
class CalendarState:
    """Everything a projection depends on besides the roster itself."""
    year: int
    month: int  # 1..12
    team_id: Optional[str] = None
    application: Optional[str] = None


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def _in_range(state: CalendarState, year: int, month: int) -> CalendarState:
    if not MIN_YEAR <= year <= MAX_YEAR:
        raise ValueError(f"Calendar can only show years {MIN_YEAR} to {MAX_YEAR}, got {year}")
    return replace(state, year=year, month=month)


def dispatch(
    state: CalendarState,
    action: str,
    value: Optional[str] = None,
    today: Optional[date] = None,
) -> CalendarState:
    """Apply one user action to the state. Raises ValueError on unknown actions or out-of-range months."""
    if action == "previous":
        return _in_range(state, *shift_month(state.year, state.month, -1))
    if action == "next":
        return _in_range(state, *shift_month(state.year, state.month, 1))
    if action == "today":
        today = today or date.today()
        return _in_range(state, today.year, today.month)
    if action == "select_team":
        return replace(state, team_id=value or None)
    if action == "select_application":
        return replace(state, application=value or None)
    raise ValueError(f"Unknown calendar action '{action}'. Expected one of {NAVIGATION_ACTIONS}")


def calendar_window(year: int, month: int) -> tuple[date, date]:
    """Sunday on/before the 1st through Saturday on/after the last day."""
    first = date(year, month, 1)
    last = date(year, month, _cal.monthrange(year, month)[1])
    # date.weekday(): Monday=0 .. Sunday=6; shift so Sunday=0.
    start = first - timedelta(days=(first.weekday() + 1) % 7)
    end = last + timedelta(days=6 - (last.weekday() + 1) % 7)
    return start, end


def compute_calendar(
    state: CalendarState,
    developers: list[dict[str, Any]],
    today: Optional[date] = None,
) -> list[dict[str, Any]]:
    """
    One cell per day of the display window, ascending.
    Empty when no team or no application is selected.
    """
    if not state.team_id or not state.application:
        return []

    today = today or date.today()
    members = team_developers(developers, state.team_id)
    aggregate = state.application == ALL_APPLICATIONS
    applications = (
        team_applications(members, state.team_id) if aggregate else [state.application]
    )

    start, end = calendar_window(state.year, state.month)
    cells: list[dict[str, Any]] = []
    current = start
    while current <= end:
        cell = {
            "date": current,
            "is_current_month": current.month == state.month,
            "is_today": current == today,
        }
        cell.update(assess_day(members, applications, current, aggregate))
        cells.append(cell)
        current += timedelta(days=1)
    return cells
