# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Developer management — CRUD, skill ratings and vacation entries.
Team membership lists are rebuilt from the developer's own team fields on every write.
"""

from typing import Any, Optional

from team_roster.core.logging import get_logger
from team_roster.metrics.prometheus import ENTITIES_CREATED, ENTITIES_DELETED, ENTITIES_UPDATED
from team_roster.models.domain import Availability, VacationEntry
from team_roster.repositories.roster_repository import RosterRepository
from team_roster.services.availability import (
    count_vacation_days,
    rating_value,
    skill_ratings,
    vacation_entries,
)
from team_roster.services.helpers import find_index, generate_id, update_size_gauges

logger = get_logger(__name__)

SKILL_FIELDS = {"tech": "tech_skills", "app": "app_skills"}


class DeveloperService:
    """Business logic for developers and their availability."""

    def __init__(self, roster_repo: RosterRepository) -> None:
        self._roster = roster_repo

    # ── Commands ──

    def create_developer(
        self,
        name: str,
        team_id: Optional[str] = None,
        is_shared_resource: bool = False,
        assigned_teams: list[str] | None = None,
        tech_skills: dict[str, int] | None = None,
        app_skills: dict[str, int] | None = None,
        availability: Optional[Availability] = None,
    ) -> dict[str, Any]:
        with self._roster.edit() as doc:
            developer: dict[str, Any] = {
                "id": generate_id("dev"),
                "name": name,
                "availability": (availability or Availability()).to_record(),
            }
            self._apply_fields(
                doc, developer, team_id, is_shared_resource,
                assigned_teams or [], tech_skills or {}, app_skills or {},
            )
            doc["developers"].append(developer)
            _place_developer(doc, developer)

        ENTITIES_CREATED.labels(kind="developer").inc()
        update_size_gauges(doc)
        logger.info(
            "Developer created: id=%s, team=%s, shared=%s",
            developer["id"], developer["team_id"], developer["is_shared_resource"],
        )
        return developer

    def update_developer(
        self,
        developer_id: str,
        name: str,
        team_id: Optional[str] = None,
        is_shared_resource: bool = False,
        assigned_teams: list[str] | None = None,
        tech_skills: dict[str, int] | None = None,
        app_skills: dict[str, int] | None = None,
        availability: Optional[Availability] = None,
    ) -> dict[str, Any]:
        """Replace a developer's fields. Availability is kept when not given. Raises KeyError."""
        with self._roster.edit() as doc:
            idx = find_index(doc["developers"], developer_id, "developer")
            developer = doc["developers"][idx]

            developer["name"] = name
            if availability is not None:
                developer["availability"] = availability.to_record()
            self._apply_fields(
                doc, developer, team_id, is_shared_resource,
                assigned_teams or [], tech_skills or {}, app_skills or {},
            )
            _place_developer(doc, developer)

        ENTITIES_UPDATED.labels(kind="developer").inc()
        logger.info("Developer updated: id=%s", developer_id)
        return developer

    def delete_developer(self, developer_id: str) -> dict[str, str]:
        with self._roster.edit() as doc:
            idx = find_index(doc["developers"], developer_id, "developer")

            for team in doc["teams"]:
                team["developers"] = [d for d in team.get("developers") or [] if d != developer_id]
                team["shared_resources"] = [
                    d for d in team.get("shared_resources") or [] if d != developer_id
                ]
            del doc["developers"][idx]

        ENTITIES_DELETED.labels(kind="developer").inc()
        update_size_gauges(doc)
        logger.info("Developer deleted: id=%s", developer_id)
        return {"status": "deleted", "id": developer_id}

    def set_skill_rating(
        self, developer_id: str, kind: str, skill: str, rating: int
    ) -> dict[str, Any]:
        """Set one tech/app rating. Raises KeyError for unknown developer or skill."""
        field = _skill_field(kind)
        with self._roster.edit() as doc:
            idx = find_index(doc["developers"], developer_id, "developer")
            if skill not in (doc["skill_definitions"].get(field) or {}):
                raise KeyError(f"No {kind} skill named '{skill}'")

            developer = doc["developers"][idx]
            developer.setdefault(field, {})[skill] = rating

        ENTITIES_UPDATED.labels(kind="developer").inc()
        logger.info("Skill rating set: developer=%s, %s=%s", developer_id, skill, rating)
        return developer

    # ── Vacations ──

    def list_vacations(self, developer_id: str) -> list[dict[str, Any]]:
        return vacation_entries(self.get_developer(developer_id))

    def add_vacation(self, developer_id: str, entry: VacationEntry) -> dict[str, Any]:
        with self._roster.edit() as doc:
            developer = doc["developers"][find_index(doc["developers"], developer_id, "developer")]
            days = _vacation_list(developer)
            days.append(entry.to_record())

        ENTITIES_CREATED.labels(kind="vacation").inc()
        logger.info("Vacation added: developer=%s, type=%s", developer_id, entry.type)
        return {"index": len(days) - 1, "entry": days[-1]}

    def update_vacation(
        self, developer_id: str, index: int, entry: VacationEntry
    ) -> dict[str, Any]:
        with self._roster.edit() as doc:
            developer = doc["developers"][find_index(doc["developers"], developer_id, "developer")]
            days = _vacation_list(developer)
            _check_vacation_index(days, index, developer_id)
            days[index] = entry.to_record()

        ENTITIES_UPDATED.labels(kind="vacation").inc()
        logger.info("Vacation updated: developer=%s, index=%d", developer_id, index)
        return {"index": index, "entry": days[index]}

    def delete_vacation(self, developer_id: str, index: int) -> dict[str, Any]:
        with self._roster.edit() as doc:
            developer = doc["developers"][find_index(doc["developers"], developer_id, "developer")]
            days = _vacation_list(developer)
            _check_vacation_index(days, index, developer_id)
            removed = days.pop(index)

        ENTITIES_DELETED.labels(kind="vacation").inc()
        logger.info("Vacation deleted: developer=%s, index=%d", developer_id, index)
        return {"index": index, "entry": removed}

    # ── Queries ──

    def list_developers(self) -> list[dict[str, Any]]:
        return self._roster.get_developers()

    def get_developer(self, developer_id: str) -> dict[str, Any]:
        developer = self._roster.get_developer(developer_id)
        if developer is None:
            raise KeyError(f"No developer found with id '{developer_id}'")
        return developer

    def get_developer_summary(self, developer_id: str) -> dict[str, Any]:
        developer = self.get_developer(developer_id)
        doc = self._roster.snapshot()
        teams = {t["id"]: t for t in doc["teams"]}
        managers = {m["id"]: m for m in doc["managers"]}

        if developer.get("is_shared_resource"):
            team_names = [
                teams[t]["name"] if t in teams else "Unknown Team"
                for t in developer.get("assigned_teams") or []
            ]
        elif developer.get("team_id"):
            team = teams.get(developer["team_id"])
            team_names = [team["name"] if team else "Unknown Team"]
        else:
            team_names = []

        manager_name = "No Manager"
        primary = teams.get(developer.get("team_id"))
        if primary and primary.get("manager_id"):
            manager = managers.get(primary["manager_id"])
            manager_name = manager["name"] if manager else "Unknown Manager"

        tech = {s: rating_value(r) for s, r in skill_ratings(developer, "tech_skills").items()}
        apps = [r for r in skill_ratings(developer, "app_skills").values() if rating_value(r) > 0]
        ranked = sorted(((s, r) for s, r in tech.items() if r > 0), key=lambda sr: -sr[1])
        return {
            "developer": developer,
            "developer_type": (
                "Shared Resource" if developer.get("is_shared_resource") else "Primary Team Member"
            ),
            "team_names": team_names,
            "manager_name": manager_name,
            "skill_count": sum(1 for r in tech.values() if r > 0),
            "app_count": len(apps),
            "top_skills": [s for s, _ in ranked[:3]],
            "vacation_day_count": count_vacation_days(developer),
            "vacation_entry_count": len(vacation_entries(developer)),
        }

    def get_stats(self) -> dict[str, int]:
        developers = self._roster.get_developers()
        return {
            "total": len(developers),
            "primary": sum(1 for d in developers if not d.get("is_shared_resource")),
            "shared": sum(1 for d in developers if d.get("is_shared_resource")),
            "active": sum(
                1 for d in developers
                if (d.get("availability") or {}).get("status") == "active"
            ),
            "with_vacations": sum(1 for d in developers if vacation_entries(d)),
            "unassigned": sum(
                1 for d in developers
                if not d.get("team_id") and not d.get("assigned_teams")
            ),
        }

    # ── Internal ──

    @staticmethod
    def _apply_fields(
        doc: dict[str, Any],
        developer: dict[str, Any],
        team_id: Optional[str],
        is_shared_resource: bool,
        assigned_teams: list[str],
        tech_skills: dict[str, int],
        app_skills: dict[str, int],
    ) -> None:
        known_teams = {t["id"] for t in doc["teams"]}
        if is_shared_resource:
            # Shared resources have no primary team.
            team_id = None
            assigned_teams = list(dict.fromkeys(assigned_teams))
        else:
            assigned_teams = []
        unknown = [t for t in ([team_id] if team_id else []) + assigned_teams if t not in known_teams]
        if unknown:
            raise KeyError(f"Unknown team id(s): {', '.join(unknown)}")

        defs = doc["skill_definitions"]
        for kind, ratings in (("tech", tech_skills), ("app", app_skills)):
            undefined = [s for s in ratings if s not in (defs.get(SKILL_FIELDS[kind]) or {})]
            if undefined:
                raise ValueError(f"Unknown {kind} skill(s): {', '.join(undefined)}")

        developer["team_id"] = team_id or None
        developer["is_shared_resource"] = is_shared_resource
        developer["assigned_teams"] = assigned_teams
        developer["tech_skills"] = dict(tech_skills)
        developer["app_skills"] = dict(app_skills)


def _skill_field(kind: str) -> str:
    if kind not in SKILL_FIELDS:
        raise KeyError(f"Unknown skill kind '{kind}'")
    return SKILL_FIELDS[kind]


def _place_developer(doc: dict[str, Any], developer: dict[str, Any]) -> None:
    """Rebuild this developer's entries in every team's member lists."""
    dev_id = developer["id"]
    for team in doc["teams"]:
        members = [d for d in team.get("developers") or [] if d != dev_id]
        shared = [d for d in team.get("shared_resources") or [] if d != dev_id]
        if developer.get("team_id") == team["id"]:
            members.append(dev_id)
        if developer.get("is_shared_resource") and team["id"] in developer["assigned_teams"]:
            shared.append(dev_id)
        team["developers"] = members
        team["shared_resources"] = shared


def _vacation_list(developer: dict[str, Any]) -> list[dict[str, Any]]:
    availability = developer.setdefault("availability", {"status": "active"})
    return availability.setdefault("vacation_days", [])


def _check_vacation_index(days: list, index: int, developer_id: str) -> None:
    if not 0 <= index < len(days):
        raise KeyError(f"No vacation entry at index {index} for developer '{developer_id}'")
