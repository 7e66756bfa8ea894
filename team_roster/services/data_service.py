# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Data management — dashboard totals and whole-document operations
(export, import, clear, reset to seed data).
"""

import json
from pathlib import Path
from typing import Any

from team_roster.core.config import settings
from team_roster.core.logging import get_logger
from team_roster.repositories.roster_repository import (
    RosterRepository,
    empty_document,
    is_valid_document,
)
from team_roster.services.availability import vacation_entries
from team_roster.services.helpers import update_size_gauges

logger = get_logger(__name__)


def format_size(num_bytes: int) -> str:
    """Human-readable size: 512 B, 1.5 KB, 2.25 MB."""
    if num_bytes < 1024:
        return f"{num_bytes} B"
    if num_bytes < 1024 * 1024:
        return f"{round(num_bytes / 1024, 2)} KB"
    return f"{round(num_bytes / (1024 * 1024), 2)} MB"


class DataService:
    """Dashboard and import/export over the whole roster document."""

    def __init__(self, roster_repo: RosterRepository, seed_path: str = "") -> None:
        self._roster = roster_repo
        self._seed_path = seed_path

    def get_dashboard(self) -> dict[str, Any]:
        doc = self._roster.snapshot()
        developers = doc["developers"]
        size = self._roster.stored_size()
        return {
            "organization": (doc.get("organization") or {}).get("name", ""),
            "total_managers": len(doc["managers"]),
            "total_teams": len(doc["teams"]),
            "total_developers": len(developers),
            "shared_resources": sum(1 for d in developers if d.get("is_shared_resource")),
            "active_developers": sum(
                1 for d in developers
                if (d.get("availability") or {}).get("status") == "active"
            ),
            "total_vacations": sum(len(vacation_entries(d)) for d in developers),
            "last_updated": (doc.get("organization") or {}).get("last_updated", ""),
            "data_size_bytes": size,
            "data_size": format_size(size),
            "has_stored_data": self._roster.has_stored_data(),
        }

    def export_data(self) -> dict[str, Any]:
        return self._roster.snapshot()

    def import_data(self, data: Any) -> dict[str, Any]:
        """Replace the roster with an uploaded document. Raises ValueError if malformed."""
        if not is_valid_document(data):
            raise ValueError(
                "Invalid roster document: expected organization, managers, teams, "
                "developers, skill_definitions and metadata sections, with an id on every entity"
            )
        document = self._roster.commit(data)
        update_size_gauges(document)
        logger.info(
            "Roster imported: managers=%d, teams=%d, developers=%d",
            len(document["managers"]), len(document["teams"]), len(document["developers"]),
        )
        return self._summary("imported", document)

    def clear_data(self) -> dict[str, Any]:
        document = empty_document()
        self._roster.replace(document)
        update_size_gauges(document)
        logger.info("Roster cleared")
        return self._summary("cleared", document)

    def reset_data(self) -> dict[str, Any]:
        """Restore the seed document if one is configured and valid, else an empty roster."""
        document = self._load_seed()
        source = "seed"
        if document is None:
            document = empty_document()
            source = "empty"
        self._roster.replace(document)
        update_size_gauges(document)
        logger.info("Roster reset: source=%s", source)
        return {**self._summary("reset", document), "source": source}

    def _load_seed(self) -> dict[str, Any] | None:
        path = self._seed_path or settings.SEED_DATA_PATH
        if not path:
            return None
        try:
            data = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.error("Seed data at %s could not be read: %s", path, exc)
            return None
        if not is_valid_document(data):
            logger.error("Seed data at %s is not a valid roster document", path)
            return None
        return data

    @staticmethod
    def _summary(status: str, document: dict[str, Any]) -> dict[str, Any]:
        return {
            "status": status,
            "managers": len(document["managers"]),
            "teams": len(document["teams"]),
            "developers": len(document["developers"]),
        }
