# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Small helpers shared by the CRUD services."""
import uuid
from typing import Any

from team_roster.metrics.prometheus import ROSTER_SIZE


def generate_id(prefix: str) -> str:
    return f"{prefix}-{uuid.uuid4().hex[:12]}"


def update_size_gauges(document: dict[str, Any]) -> None:
    for kind in ("managers", "teams", "developers"):
        ROSTER_SIZE.labels(kind=kind).set(len(document.get(kind) or []))


def find_index(items: list[dict[str, Any]], item_id: str, label: str) -> int:
    """Position of the entity with this id. Raises KeyError when absent."""
    for i, item in enumerate(items):
        if item.get("id") == item_id:
            return i
    raise KeyError(f"No {label} found with id '{item_id}'")
