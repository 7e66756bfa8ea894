# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Shared pytest fixtures: an in-memory SQLite store and a small known roster.
"""

import os

# Must be set before anything imports team_roster.core.database.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_LEVEL", "WARNING")

import pytest

from team_roster.core.dependencies import get_kv_repo, get_roster_repo


def sample_document() -> dict:
    """
    Payments: Ana and Ben (primary), Sam (shared). Operations: Cleo, Sam.
    Ana is away 2024-06-10..12, Cleo on 2024-06-11.
    """
    return {
        "organization": {
            "name": "Test Org",
            "version": "1.0.0",
            "last_updated": "2024-01-01",
        },
        "managers": [
            {
                "id": "mgr-1",
                "name": "Alice Manager",
                "role": "Engineering Manager",
                "teams": ["team-pay"],
                "description": "Runs the payments group",
            },
        ],
        "teams": [
            {
                "id": "team-pay",
                "name": "Payments",
                "manager_id": "mgr-1",
                "developers": ["dev-a", "dev-b"],
                "shared_resources": ["dev-s"],
                "description": "Payment processing team",
            },
            {
                "id": "team-ops",
                "name": "Operations",
                "manager_id": None,
                "developers": ["dev-c"],
                "shared_resources": ["dev-s"],
                "description": "Platform operations team",
            },
        ],
        "developers": [
            {
                "id": "dev-a",
                "name": "Ana",
                "team_id": "team-pay",
                "is_shared_resource": False,
                "assigned_teams": [],
                "tech_skills": {"Python": 8, "SQL": 6, "Docker": 0},
                "app_skills": {"Ledger": 9, "Billing": 5},
                "availability": {
                    "status": "active",
                    "vacation_days": [
                        {
                            "type": "range",
                            "start_date": "2024-06-10",
                            "end_date": "2024-06-12",
                            "description": "Summer trip",
                        },
                    ],
                },
            },
            {
                "id": "dev-b",
                "name": "Ben",
                "team_id": "team-pay",
                "is_shared_resource": False,
                "assigned_teams": [],
                "tech_skills": {"Python": 7},
                "app_skills": {"Ledger": 7},
                "availability": {"status": "active", "vacation_days": []},
            },
            {
                "id": "dev-c",
                "name": "Cleo",
                "team_id": "team-ops",
                "is_shared_resource": False,
                "assigned_teams": [],
                "tech_skills": {"Docker": 9},
                "app_skills": {"Monitor": 6},
                "availability": {
                    "status": "active",
                    "vacation_days": [
                        {"type": "single", "date": "2024-06-11", "description": "Day off"},
                    ],
                },
            },
            {
                "id": "dev-s",
                "name": "Sam",
                "team_id": None,
                "is_shared_resource": True,
                "assigned_teams": ["team-pay", "team-ops"],
                "tech_skills": {"SQL": 9},
                "app_skills": {"Billing": 4, "Monitor": 0},
                "availability": {"status": "active", "vacation_days": []},
            },
        ],
        "skill_definitions": {
            "tech_skills": {
                "Python": {"description": "Python programming", "scale": "1-10", "category": "Language"},
                "SQL": {"description": "Relational databases", "scale": "1-10", "category": "Data"},
                "Docker": {"description": "Container tooling", "scale": "1-10", "category": "Platform"},
            },
            "app_skills": {
                "Ledger": {"description": "General ledger application", "scale": "1-10", "category": "Finance"},
                "Billing": {"description": "Customer billing application", "scale": "1-10", "category": "Finance"},
                "Monitor": {"description": "Monitoring dashboards", "scale": "1-10", "category": "Ops"},
            },
        },
        "metadata": {"vacation_tracking": True},
    }


@pytest.fixture(autouse=True)
def reset_roster():
    """Fresh store contents for every test."""
    get_kv_repo().ensure_schema()
    get_roster_repo().replace(sample_document())
    yield


@pytest.fixture
def roster_repo():
    return get_roster_repo()
