# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
FastAPI dependency injection — wire the store, repositories and services.
"""

from team_roster.core.config import settings
from team_roster.core.database import engine
from team_roster.repositories.kv_repository import KeyValueRepository
from team_roster.repositories.roster_repository import RosterRepository
from team_roster.services.availability_service import AvailabilityService
from team_roster.services.data_service import DataService
from team_roster.services.developer_service import DeveloperService
from team_roster.services.manager_service import ManagerService
from team_roster.services.skill_service import SkillService
from team_roster.services.team_service import TeamService

# ── Singleton repository instances ──
_kv_repo = KeyValueRepository(engine)
_roster_repo = RosterRepository(kv_repo=_kv_repo, storage_key=settings.STORAGE_KEY)

# ── Service instances (with injected dependencies) ──
_manager_service = ManagerService(roster_repo=_roster_repo)
_team_service = TeamService(roster_repo=_roster_repo)
_developer_service = DeveloperService(roster_repo=_roster_repo)
_skill_service = SkillService(roster_repo=_roster_repo)
_availability_service = AvailabilityService(roster_repo=_roster_repo)
_data_service = DataService(roster_repo=_roster_repo, seed_path=settings.SEED_DATA_PATH)


# ── FastAPI dependency functions ──
def get_manager_service() -> ManagerService:
    return _manager_service


def get_team_service() -> TeamService:
    return _team_service


def get_developer_service() -> DeveloperService:
    return _developer_service


def get_skill_service() -> SkillService:
    return _skill_service


def get_availability_service() -> AvailabilityService:
    return _availability_service


def get_data_service() -> DataService:
    return _data_service


def get_kv_repo() -> KeyValueRepository:
    return _kv_repo


def get_roster_repo() -> RosterRepository:
    return _roster_repo
