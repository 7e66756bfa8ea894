# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Team management — business logic for CRUD operations.

A team's member lists and each developer's own team fields describe the
same assignment; every write here updates both sides.
"""

from typing import Any, Optional

from team_roster.core.logging import get_logger
from team_roster.metrics.prometheus import ENTITIES_CREATED, ENTITIES_DELETED, ENTITIES_UPDATED
from team_roster.repositories.roster_repository import RosterRepository
from team_roster.services.availability import team_developers
from team_roster.services.helpers import find_index, generate_id, update_size_gauges

logger = get_logger(__name__)


class TeamService:
    """Business logic for teams."""

    def __init__(self, roster_repo: RosterRepository) -> None:
        self._roster = roster_repo

    # ── Commands ──

    def create_team(
        self,
        name: str,
        description: str,
        manager_id: Optional[str] = None,
        developers: list[str] | None = None,
        shared_resources: list[str] | None = None,
    ) -> dict[str, Any]:
        with self._roster.edit() as doc:
            developers = list(dict.fromkeys(developers or []))
            shared_resources = list(dict.fromkeys(shared_resources or []))
            self._check_members(doc, manager_id, developers, shared_resources)

            team: dict[str, Any] = {
                "id": generate_id("team"),
                "name": name,
                "manager_id": manager_id or None,
                "developers": [],
                "shared_resources": [],
                "description": description,
            }
            doc["teams"].append(team)
            _set_manager(doc, team, manager_id or None)
            _sync_members(doc, team, developers, shared_resources)

        ENTITIES_CREATED.labels(kind="team").inc()
        update_size_gauges(doc)
        logger.info(
            "Team created: id=%s, developers=%d, shared=%d",
            team["id"], len(developers), len(shared_resources),
        )
        return team

    def update_team(
        self,
        team_id: str,
        name: str,
        description: str,
        manager_id: Optional[str] = None,
        developers: list[str] | None = None,
        shared_resources: list[str] | None = None,
    ) -> dict[str, Any]:
        """Replace a team's fields and membership. Raises KeyError / ValueError."""
        with self._roster.edit() as doc:
            idx = find_index(doc["teams"], team_id, "team")
            developers = list(dict.fromkeys(developers or []))
            shared_resources = list(dict.fromkeys(shared_resources or []))
            self._check_members(doc, manager_id, developers, shared_resources)

            team = doc["teams"][idx]
            team["name"] = name
            team["description"] = description
            _set_manager(doc, team, manager_id or None)
            _sync_members(doc, team, developers, shared_resources)

        ENTITIES_UPDATED.labels(kind="team").inc()
        logger.info("Team updated: id=%s", team_id)
        return team

    def delete_team(self, team_id: str) -> dict[str, str]:
        """Delete a team and unassign its developers. Raises KeyError."""
        with self._roster.edit() as doc:
            idx = find_index(doc["teams"], team_id, "team")

            for dev in doc["developers"]:
                if dev.get("team_id") == team_id:
                    dev["team_id"] = None
                if team_id in (dev.get("assigned_teams") or []):
                    dev["assigned_teams"] = [t for t in dev["assigned_teams"] if t != team_id]
            for manager in doc["managers"]:
                manager["teams"] = [t for t in manager.get("teams") or [] if t != team_id]
            del doc["teams"][idx]

        ENTITIES_DELETED.labels(kind="team").inc()
        update_size_gauges(doc)
        logger.info("Team deleted: id=%s", team_id)
        return {"status": "deleted", "id": team_id}

    # ── Queries ──

    def list_teams(self) -> list[dict[str, Any]]:
        return self._roster.get_teams()

    def get_team(self, team_id: str) -> dict[str, Any]:
        team = self._roster.get_team(team_id)
        if team is None:
            raise KeyError(f"No team found with id '{team_id}'")
        return team

    def get_team_developers(self, team_id: str) -> list[dict[str, Any]]:
        self.get_team(team_id)
        return team_developers(self._roster.get_developers(), team_id)

    def get_team_summary(self, team_id: str) -> dict[str, Any]:
        doc = self._roster.snapshot()
        team = self.get_team(team_id)
        manager = next(
            (m for m in doc["managers"] if m["id"] == team.get("manager_id")), None
        )
        primary = [d for d in doc["developers"] if d.get("team_id") == team_id]
        shared = [
            d for d in doc["developers"]
            if d.get("is_shared_resource") and team_id in (d.get("assigned_teams") or [])
        ]
        return {
            "team": team,
            "manager_name": manager["name"] if manager else "No Manager Assigned",
            "member_count": len(team_developers(doc["developers"], team_id)),
            "shared_resource_count": len(shared),
            "primary_developers": [{"id": d["id"], "name": d["name"]} for d in primary],
            "shared_resources": [{"id": d["id"], "name": d["name"]} for d in shared],
        }

    def get_stats(self) -> dict[str, Any]:
        doc = self._roster.snapshot()
        return {
            "total_teams": len(doc["teams"]),
            "teams_with_managers": sum(1 for t in doc["teams"] if t.get("manager_id")),
            "total_developers": len(doc["developers"]),
        }

    # ── Internal ──

    @staticmethod
    def _check_members(
        doc: dict[str, Any],
        manager_id: Optional[str],
        developers: list[str],
        shared_resources: list[str],
    ) -> None:
        if manager_id and not any(m["id"] == manager_id for m in doc["managers"]):
            raise KeyError(f"No manager found with id '{manager_id}'")
        by_id = {d["id"]: d for d in doc["developers"]}
        unknown = [d for d in developers + shared_resources if d not in by_id]
        if unknown:
            raise KeyError(f"Unknown developer id(s): {', '.join(unknown)}")
        wrong_primary = [d for d in developers if by_id[d].get("is_shared_resource")]
        if wrong_primary:
            raise ValueError(
                f"Shared resources cannot be primary members: {', '.join(wrong_primary)}"
            )
        wrong_shared = [d for d in shared_resources if not by_id[d].get("is_shared_resource")]
        if wrong_shared:
            raise ValueError(
                f"Developers are not shared resources: {', '.join(wrong_shared)}"
            )


def _set_manager(doc: dict[str, Any], team: dict[str, Any], manager_id: Optional[str]) -> None:
    team["manager_id"] = manager_id
    for manager in doc["managers"]:
        teams = [t for t in manager.get("teams") or [] if t != team["id"]]
        if manager["id"] == manager_id:
            teams.append(team["id"])
        manager["teams"] = teams


def _sync_members(
    doc: dict[str, Any],
    team: dict[str, Any],
    developers: list[str],
    shared_resources: list[str],
) -> None:
    """Make the team's lists and the developers' own fields agree."""
    team_id = team["id"]
    for dev in doc["developers"]:
        if dev["id"] in developers:
            old_team = dev.get("team_id")
            if old_team and old_team != team_id:
                for other in doc["teams"]:
                    if other["id"] == old_team:
                        other["developers"] = [d for d in other["developers"] if d != dev["id"]]
            dev["team_id"] = team_id
        elif dev.get("team_id") == team_id:
            dev["team_id"] = None

        assigned = [t for t in dev.get("assigned_teams") or [] if t != team_id]
        if dev["id"] in shared_resources:
            assigned.append(team_id)
        dev["assigned_teams"] = assigned

    team["developers"] = developers
    team["shared_resources"] = shared_resources
