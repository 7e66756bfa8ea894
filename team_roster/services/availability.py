# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Availability index — pure computation, no side effects.

Works directly on roster dicts. Answers two questions:
who on a team is away on a given day, and is an application left
without any available developer ("at risk") on that day.
"""

from datetime import date, datetime, timedelta
from typing import Any, Iterable, Optional

WEEKEND = (5, 6)  # Saturday, Sunday


def parse_day(value: Any) -> Optional[date]:
    """
    Coerce an ISO date/datetime string (or date/datetime) to a calendar day.
    Time of day is dropped. Returns None for missing or unparseable values.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.strip()).date()
        except ValueError:
            return None
    return None


def _vacation_span(entry: Any) -> Optional[tuple[date, date]]:
    """Inclusive (start, end) of an entry, or None when the entry is malformed."""
    if not isinstance(entry, dict):
        return None
    kind = entry.get("type")
    if kind == "single":
        day = parse_day(entry.get("date"))
        return (day, day) if day else None
    if kind == "range":
        start = parse_day(entry.get("start_date"))
        end = parse_day(entry.get("end_date"))
        if start and end:
            return start, end
    return None


def vacation_entries(developer: dict[str, Any]) -> list[Any]:
    availability = developer.get("availability")
    if not isinstance(availability, dict):
        return []
    days = availability.get("vacation_days")
    return days if isinstance(days, list) else []


def rating_value(value: Any) -> float:
    """A stored rating as a number; anything non-numeric counts as 0."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    return value


def skill_ratings(developer: dict[str, Any], field: str) -> dict[str, Any]:
    ratings = developer.get(field)
    return ratings if isinstance(ratings, dict) else {}


def has_application_skill(developer: dict[str, Any], application: str) -> bool:
    return rating_value(skill_ratings(developer, "app_skills").get(application)) > 0


def is_on_vacation(developer: dict[str, Any], day: date | datetime) -> bool:
    check = parse_day(day)
    for entry in vacation_entries(developer):
        span = _vacation_span(entry)
        if span and span[0] <= check <= span[1]:
            return True
    return False


def count_vacation_days(developer: dict[str, Any]) -> int:
    """Working days (Mon-Fri) covered by the developer's vacation entries."""
    total = 0
    for entry in vacation_entries(developer):
        span = _vacation_span(entry)
        if span is None:
            continue
        current, end = span
        while current <= end:
            if current.weekday() not in WEEKEND:
                total += 1
            current += timedelta(days=1)
    return total


def _has_id(developer: Any) -> bool:
    return isinstance(developer, dict) and isinstance(developer.get("id"), str)


def team_developers(developers: Iterable[dict[str, Any]], team_id: str) -> list[dict[str, Any]]:
    """Primary members first, then shared resources, each developer once."""
    developers = [d for d in developers if _has_id(d)]
    primary = [d for d in developers if d.get("team_id") == team_id]
    shared = [
        d for d in developers
        if d.get("is_shared_resource") and team_id in (d.get("assigned_teams") or [])
    ]
    seen: set[str] = set()
    result: list[dict[str, Any]] = []
    for dev in primary + shared:
        if dev["id"] not in seen:
            seen.add(dev["id"])
            result.append(dev)
    return result


def team_applications(developers: Iterable[dict[str, Any]], team_id: str) -> list[str]:
    """Every application held (rating > 0) by someone on the team, first-seen order."""
    apps: list[str] = []
    for dev in team_developers(developers, team_id):
        for app in skill_ratings(dev, "app_skills"):
            if app not in apps and has_application_skill(dev, app):
                apps.append(app)
    return apps


def application_risk(
    members: list[dict[str, Any]], application: str, day: date
) -> tuple[bool, list[dict[str, Any]]]:
    """
    (at_risk, unavailable) for one application on one day.
    At risk only when at least one member has the skill and all of them are away.
    """
    skilled = [d for d in members if has_application_skill(d, application)]
    unavailable = [d for d in skilled if is_on_vacation(d, day)]
    at_risk = bool(skilled) and len(unavailable) == len(skilled)
    return at_risk, unavailable


def assess_day(
    members: list[dict[str, Any]],
    applications: list[str],
    day: date,
    aggregate: bool,
) -> dict[str, Any]:
    """
    Risk annotation for one day.

    Single-application mode reports every skilled developer who is away,
    even when others still cover. Aggregate mode reports only the developers
    behind affected applications.
    """
    if not aggregate:
        app = applications[0]
        at_risk, unavailable = application_risk(members, app, day)
        return {
            "is_at_risk": at_risk,
            "unavailable_developers": _refs(unavailable),
            "affected_applications": [app] if at_risk else [],
        }

    affected: list[str] = []
    unavailable_all: list[dict[str, Any]] = []
    for app in applications:
        at_risk, unavailable = application_risk(members, app, day)
        if at_risk:
            affected.append(app)
            unavailable_all.extend(unavailable)
    return {
        "is_at_risk": bool(affected),
        "unavailable_developers": _refs(unavailable_all),
        "affected_applications": affected,
    }


def application_coverage(
    developers: Iterable[dict[str, Any]], team_id: str
) -> list[dict[str, Any]]:
    """Developers holding each team application, most covered first."""
    members = team_developers(developers, team_id)
    rows = []
    for app in team_applications(members, team_id):
        holders = [d for d in members if has_application_skill(d, app)]
        rows.append({
            "application": app,
            "developers": _refs(holders),
            "count": len(holders),
        })
    rows.sort(key=lambda r: (-r["count"], r["application"]))
    return rows


def day_breakdown(
    developers: Iterable[dict[str, Any]], team_id: str, day: date
) -> list[dict[str, Any]]:
    """Per-application detail for one day: who covers it, who is away, is it at risk."""
    members = team_developers(developers, team_id)
    rows = []
    for app in team_applications(members, team_id):
        skilled = [d for d in members if has_application_skill(d, app)]
        at_risk, unavailable = application_risk(members, app, day)
        away_ids = {d["id"] for d in unavailable}
        rows.append({
            "application": app,
            "is_at_risk": at_risk,
            "available_developers": _refs(d for d in skilled if d["id"] not in away_ids),
            "unavailable_developers": _refs(unavailable),
        })
    return rows


def _refs(developers: Iterable[dict[str, Any]]) -> list[dict[str, str]]:
    """De-duplicated {id, name} pointers, order preserved."""
    seen: set[str] = set()
    refs = []
    for dev in developers:
        if not _has_id(dev) or dev["id"] in seen:
            continue
        seen.add(dev["id"])
        refs.append({"id": dev["id"], "name": str(dev.get("name") or "")})
    return refs
