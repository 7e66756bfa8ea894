# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Service: Skill definitions — the tech and application skill catalogues.
Renames and deletions carry through to every developer's rating map.
"""

from typing import Any, Optional

from team_roster.core.logging import get_logger
from team_roster.metrics.prometheus import ENTITIES_CREATED, ENTITIES_DELETED, ENTITIES_UPDATED
from team_roster.models.domain import ALL_APPLICATIONS, SKILL_KINDS, SkillDefinition
from team_roster.repositories.roster_repository import RosterRepository

logger = get_logger(__name__)


def _field(kind: str) -> str:
    if kind not in SKILL_KINDS:
        raise KeyError(f"Unknown skill kind '{kind}'. Expected one of {SKILL_KINDS}")
    return f"{kind}_skills"


class SkillService:
    """Business logic for skill definitions."""

    def __init__(self, roster_repo: RosterRepository) -> None:
        self._roster = roster_repo

    def list_skills(self, kind: str) -> list[dict[str, Any]]:
        field = _field(kind)
        doc = self._roster.snapshot()
        definitions = (doc.get("skill_definitions") or {}).get(field) or {}
        return [
            _to_row(kind, name, definition, _usage(doc["developers"], field, name))
            for name, definition in definitions.items()
        ]

    def get_skill(self, kind: str, name: str) -> dict[str, Any]:
        field = _field(kind)
        doc = self._roster.snapshot()
        definitions = (doc.get("skill_definitions") or {}).get(field) or {}
        if name not in definitions:
            raise KeyError(f"No {kind} skill named '{name}'")
        return _to_row(kind, name, definitions[name], _usage(doc["developers"], field, name))

    def create_skill(
        self, kind: str, name: str, description: str, category: str, scale: str = "1-10"
    ) -> dict[str, Any]:
        field = _field(kind)
        name = name.strip()
        _check_reserved(kind, name)
        definition = SkillDefinition(description=description, category=category, scale=scale)

        with self._roster.edit() as doc:
            definitions = doc["skill_definitions"].setdefault(field, {})
            if name in definitions:
                raise ValueError(f"A {kind} skill named '{name}' already exists")
            definitions[name] = definition.model_dump()

        ENTITIES_CREATED.labels(kind=f"{kind}_skill").inc()
        logger.info("Skill created: kind=%s, name=%s", kind, name)
        return _to_row(kind, name, definitions[name], 0)

    def update_skill(
        self,
        kind: str,
        name: str,
        description: str,
        category: str,
        scale: str = "1-10",
        new_name: Optional[str] = None,
    ) -> dict[str, Any]:
        """Update a definition, optionally renaming it. Raises KeyError / ValueError."""
        field = _field(kind)
        target = (new_name or name).strip()
        definition = SkillDefinition(description=description, category=category, scale=scale)

        with self._roster.edit() as doc:
            definitions = doc["skill_definitions"].setdefault(field, {})
            if name not in definitions:
                raise KeyError(f"No {kind} skill named '{name}'")
            if target != name:
                _check_reserved(kind, target)
                if target in definitions:
                    raise ValueError(f"A {kind} skill named '{target}' already exists")
                # Rebuild to keep catalogue order with the renamed key in place.
                doc["skill_definitions"][field] = definitions = {
                    (target if k == name else k): v for k, v in definitions.items()
                }
                for dev in doc["developers"]:
                    ratings = dev.get(field) or {}
                    if name in ratings:
                        dev[field] = {(target if k == name else k): v for k, v in ratings.items()}
            definitions[target] = definition.model_dump()
            usage = _usage(doc["developers"], field, target)

        ENTITIES_UPDATED.labels(kind=f"{kind}_skill").inc()
        if target != name:
            logger.info("Skill renamed: kind=%s, %s -> %s, developers=%d", kind, name, target, usage)
        else:
            logger.info("Skill updated: kind=%s, name=%s", kind, name)
        return _to_row(kind, target, definitions[target], usage)

    def delete_skill(self, kind: str, name: str) -> dict[str, Any]:
        field = _field(kind)
        with self._roster.edit() as doc:
            definitions = doc["skill_definitions"].setdefault(field, {})
            if name not in definitions:
                raise KeyError(f"No {kind} skill named '{name}'")
            del definitions[name]
            affected = 0
            for dev in doc["developers"]:
                ratings = dev.get(field) or {}
                if name in ratings:
                    del ratings[name]
                    affected += 1

        ENTITIES_DELETED.labels(kind=f"{kind}_skill").inc()
        logger.info("Skill deleted: kind=%s, name=%s, developers=%d", kind, name, affected)
        return {"status": "deleted", "kind": kind, "name": name, "developers_affected": affected}


def _check_reserved(kind: str, name: str) -> None:
    if kind == "app" and name == ALL_APPLICATIONS:
        raise ValueError(f"'{ALL_APPLICATIONS}' is reserved and cannot be an application name")


def _usage(developers: list[dict[str, Any]], field: str, name: str) -> int:
    return sum(1 for d in developers if (d.get(field) or {}).get(name) is not None)


def _to_row(kind: str, name: str, definition: dict[str, Any], usage: int) -> dict[str, Any]:
    return {
        "name": name,
        "kind": kind,
        "description": definition.get("description", ""),
        "category": definition.get("category", ""),
        "scale": definition.get("scale", "1-10"),
        "usage_count": usage,
    }
