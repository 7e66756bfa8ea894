# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository: key-value store data access.
One row per key, value is an opaque text blob. NO business rules here.
"""
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from team_roster.core.logging import get_logger

logger = get_logger(__name__)


class KeyValueRepository:
    """Persistent string store backed by a single SQL table."""

    def __init__(self, engine: Engine):
        self._engine = engine

    def ensure_schema(self) -> None:
        with self._engine.begin() as conn:
            conn.execute(text("""
                CREATE TABLE IF NOT EXISTS kv_store (
                    key        VARCHAR(255) PRIMARY KEY,
                    value      TEXT NOT NULL,
                    updated_at VARCHAR(64) NOT NULL
                )
            """))

    # ── Read ──

    def get(self, key: str) -> Optional[str]:
        with self._engine.connect() as conn:
            row = conn.execute(
                text("SELECT value FROM kv_store WHERE key = :key"),
                {"key": key},
            ).first()
        return row[0] if row else None

    def exists(self, key: str) -> bool:
        return self.get(key) is not None

    def size(self, key: str) -> int:
        """Stored size in bytes (UTF-8), 0 when the key is absent."""
        value = self.get(key)
        return len(value.encode("utf-8")) if value is not None else 0

    # ── Write ──

    def set(self, key: str, value: str) -> None:
        try:
            with self._engine.begin() as conn:
                conn.execute(text("DELETE FROM kv_store WHERE key = :key"), {"key": key})
                conn.execute(
                    text("""
                        INSERT INTO kv_store (key, value, updated_at)
                        VALUES (:key, :value, :updated_at)
                    """),
                    {
                        "key": key,
                        "value": value,
                        "updated_at": datetime.now(timezone.utc).isoformat(),
                    },
                )
        except SQLAlchemyError as exc:
            logger.error("Failed to persist key %s: %s", key, exc)
            raise

    def verify_connection(self) -> bool:
        with self._engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        return True

    def dispose(self):
        self._engine.dispose()
