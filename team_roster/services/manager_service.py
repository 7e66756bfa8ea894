# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Manager management — business logic for CRUD operations.
Keeps each team's manager_id in step with the manager's team list.
"""

from typing import Any

from team_roster.core.logging import get_logger
from team_roster.metrics.prometheus import ENTITIES_CREATED, ENTITIES_DELETED, ENTITIES_UPDATED
from team_roster.repositories.roster_repository import RosterRepository
from team_roster.services.helpers import find_index, generate_id, update_size_gauges

logger = get_logger(__name__)


class ManagerService:
    """Business logic for managers."""

    def __init__(self, roster_repo: RosterRepository) -> None:
        self._roster = roster_repo

    # ── Commands ──

    def create_manager(
        self, name: str, role: str, teams: list[str], description: str
    ) -> dict[str, Any]:
        with self._roster.edit() as doc:
            self._check_teams(doc, teams)

            manager: dict[str, Any] = {
                "id": generate_id("mgr"),
                "name": name,
                "role": role,
                "teams": list(dict.fromkeys(teams)),
                "description": description,
            }
            for team in doc["teams"]:
                if team["id"] in manager["teams"]:
                    team["manager_id"] = manager["id"]
            _release_teams(doc, manager["teams"], keep=manager["id"])
            doc["managers"].append(manager)

        ENTITIES_CREATED.labels(kind="manager").inc()
        update_size_gauges(doc)
        logger.info("Manager created: id=%s, teams=%d", manager["id"], len(manager["teams"]))
        return manager

    def update_manager(
        self, manager_id: str, name: str, role: str, teams: list[str], description: str
    ) -> dict[str, Any]:
        """Replace a manager's fields. Raises KeyError."""
        with self._roster.edit() as doc:
            idx = find_index(doc["managers"], manager_id, "manager")
            self._check_teams(doc, teams)

            manager = doc["managers"][idx]
            previous = set(manager.get("teams") or [])
            current = list(dict.fromkeys(teams))

            for team in doc["teams"]:
                was_assigned = team["id"] in previous
                is_assigned = team["id"] in current
                if was_assigned and not is_assigned:
                    team["manager_id"] = None
                elif is_assigned and not was_assigned:
                    team["manager_id"] = manager_id

            manager.update(name=name, role=role, teams=current, description=description)
            _release_teams(doc, current, keep=manager_id)

        ENTITIES_UPDATED.labels(kind="manager").inc()
        logger.info("Manager updated: id=%s", manager_id)
        return manager

    def delete_manager(self, manager_id: str) -> dict[str, str]:
        """Delete a manager and detach it from its teams. Raises KeyError."""
        with self._roster.edit() as doc:
            idx = find_index(doc["managers"], manager_id, "manager")

            for team in doc["teams"]:
                if team.get("manager_id") == manager_id:
                    team["manager_id"] = None
            del doc["managers"][idx]

        ENTITIES_DELETED.labels(kind="manager").inc()
        update_size_gauges(doc)
        logger.info("Manager deleted: id=%s", manager_id)
        return {"status": "deleted", "id": manager_id}

    # ── Queries ──

    def list_managers(self) -> list[dict[str, Any]]:
        return self._roster.get_managers()

    def get_manager(self, manager_id: str) -> dict[str, Any]:
        manager = self._roster.get_manager(manager_id)
        if manager is None:
            raise KeyError(f"No manager found with id '{manager_id}'")
        return manager

    def teams_for_manager(self, manager_id: str) -> list[dict[str, Any]]:
        self.get_manager(manager_id)
        return [t for t in self._roster.get_teams() if t.get("manager_id") == manager_id]

    # ── Internal ──

    @staticmethod
    def _check_teams(doc: dict[str, Any], team_ids: list[str]) -> None:
        known = {t["id"] for t in doc["teams"]}
        unknown = [t for t in team_ids if t not in known]
        if unknown:
            raise KeyError(f"Unknown team id(s): {', '.join(unknown)}")


def _release_teams(doc: dict[str, Any], team_ids: list[str], keep: str) -> None:
    """A team has one manager: drop these teams from every other manager's list."""
    for other in doc["managers"]:
        if other["id"] != keep:
            other["teams"] = [t for t in other.get("teams") or [] if t not in team_ids]
