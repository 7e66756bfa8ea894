# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: Roster document data access.
The whole roster graph lives in one JSON document under one storage key.
Reads hand out copies; writes replace the document and persist it.
NO business rules here — pure load/save/lookup.
"""

import copy
import json
import threading
from contextlib import contextmanager
from datetime import date
from typing import Any, Iterator, Optional

from team_roster.core.config import settings
from team_roster.core.logging import get_logger
from team_roster.metrics.prometheus import STORE_DOCUMENT_BYTES, STORE_WRITES
from team_roster.repositories.kv_repository import KeyValueRepository

logger = get_logger(__name__)

REQUIRED_LISTS = ("managers", "teams", "developers")


def empty_document() -> dict[str, Any]:
    """A roster with no entities and default metadata."""
    return {
        "organization": {
            "name": settings.ORGANIZATION_NAME,
            "version": "1.0.0",
            "last_updated": date.today().isoformat(),
        },
        "managers": [],
        "teams": [],
        "developers": [],
        "skill_definitions": {"tech_skills": {}, "app_skills": {}},
        "metadata": {
            "skill_scales": {"tech_skills_scale": "0-10", "app_skills_scale": "0-10"},
            "default_tech_skill_rating": settings.DEFAULT_TECH_SKILL_RATING,
            "default_app_skill_rating": settings.DEFAULT_APP_SKILL_RATING,
            "shared_resource_indicator": "is_shared_resource",
            "vacation_tracking": True,
        },
    }


def _is_entity_list(items: Any) -> bool:
    return isinstance(items, list) and all(
        isinstance(item, dict) and isinstance(item.get("id"), str) for item in items
    )


def is_valid_document(data: Any) -> bool:
    """Shape check only: the top-level sections exist and every entity carries a string id."""
    return (
        isinstance(data, dict)
        and isinstance(data.get("organization"), dict)
        and all(_is_entity_list(data.get(k)) for k in REQUIRED_LISTS)
        and isinstance(data.get("skill_definitions"), dict)
        and isinstance(data.get("metadata"), dict)
    )


class RosterRepository:
    """Write-through cache of the roster document over a key-value store."""

    def __init__(self, kv_repo: KeyValueRepository, storage_key: str) -> None:
        self._kv = kv_repo
        self._key = storage_key
        self._lock = threading.RLock()
        self._document: dict[str, Any] = empty_document()

    # ── Lifecycle ──

    def load(self) -> bool:
        """Load the stored document. Returns False (and stores an empty one) if none is usable."""
        with self._lock:
            stored = self._read_stored()
            if stored is not None and is_valid_document(stored):
                self._document = stored
                logger.info("Roster loaded from store key=%s", self._key)
                return True
            logger.info("No valid roster stored under key=%s, creating empty structure", self._key)
            self._persist(empty_document())
            return False

    def _read_stored(self) -> Optional[dict[str, Any]]:
        raw = self._kv.get(self._key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError as exc:
            logger.error("Stored roster under key=%s is not valid JSON: %s", self._key, exc)
            return None

    # ── Read ──

    def snapshot(self) -> dict[str, Any]:
        with self._lock:
            return copy.deepcopy(self._document)

    def get_managers(self) -> list[dict[str, Any]]:
        return self.snapshot()["managers"]

    def get_teams(self) -> list[dict[str, Any]]:
        return self.snapshot()["teams"]

    def get_developers(self) -> list[dict[str, Any]]:
        return self.snapshot()["developers"]

    def get_manager(self, manager_id: str) -> Optional[dict[str, Any]]:
        return next((m for m in self.get_managers() if m["id"] == manager_id), None)

    def get_team(self, team_id: str) -> Optional[dict[str, Any]]:
        return next((t for t in self.get_teams() if t["id"] == team_id), None)

    def get_developer(self, developer_id: str) -> Optional[dict[str, Any]]:
        return next((d for d in self.get_developers() if d["id"] == developer_id), None)

    def has_stored_data(self) -> bool:
        return self._kv.exists(self._key)

    def stored_size(self) -> int:
        return self._kv.size(self._key)

    # ── Write ──

    @contextmanager
    def edit(self) -> Iterator[dict[str, Any]]:
        """
        Hold the write lock around a read-modify-write cycle.
        Yields a working copy; it is committed only if the block exits cleanly.
        """
        with self._lock:
            working = copy.deepcopy(self._document)
            yield working
            self.commit(working)

    def commit(self, document: dict[str, Any]) -> dict[str, Any]:
        """Stamp last_updated and persist a copy of the document."""
        with self._lock:
            document.setdefault("organization", {})["last_updated"] = date.today().isoformat()
            self._persist(document)
            return document

    def replace(self, document: dict[str, Any]) -> None:
        """Replace without touching last_updated (reset/clear/import of a full document)."""
        with self._lock:
            self._persist(document)

    def _persist(self, document: dict[str, Any]) -> None:
        """Write to the store first; the in-memory copy only changes on success."""
        payload = json.dumps(document)
        try:
            self._kv.set(self._key, payload)
        except Exception:
            STORE_WRITES.labels(status="failed").inc()
            raise
        self._document = copy.deepcopy(document)
        STORE_WRITES.labels(status="ok").inc()
        STORE_DOCUMENT_BYTES.set(len(payload.encode("utf-8")))
