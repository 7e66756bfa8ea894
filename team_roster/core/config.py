# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Core configuration — all env-driven, zero hardcode.
Single source of truth for every tunable parameter.
"""

import os


class Settings:
    """Application settings loaded from environment variables."""

    SERVICE_NAME: str = os.getenv("SERVICE_NAME", "team-roster")
    SERVICE_VERSION: str = os.getenv("SERVICE_VERSION", "1.0.0")
    SERVICE_PORT: int = int(os.getenv("SERVICE_PORT", "8010"))

    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./team_roster.db")
    STORAGE_KEY: str = os.getenv("STORAGE_KEY", "teamRosterData")
    SEED_DATA_PATH: str = os.getenv("SEED_DATA_PATH", "")

    ORGANIZATION_NAME: str = os.getenv("ORGANIZATION_NAME", "Team Roster Organization")
    DEFAULT_TECH_SKILL_RATING: int = int(os.getenv("DEFAULT_TECH_SKILL_RATING", "7"))
    DEFAULT_APP_SKILL_RATING: int = int(os.getenv("DEFAULT_APP_SKILL_RATING", "8"))

    CORS_ORIGINS: list[str] = os.getenv("CORS_ORIGINS", "*").split(",")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


settings = Settings()
