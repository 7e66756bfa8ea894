# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Controller: System endpoints — health, readiness, metrics.
Pure HTTP layer — no business logic.
"""

from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from sqlalchemy.exc import SQLAlchemyError
from starlette.responses import Response

from team_roster.core.config import settings
from team_roster.core.dependencies import get_kv_repo, get_roster_repo

router = APIRouter(tags=["System"])


@router.get("/health")
def health_check():
    """Liveness probe."""
    document = get_roster_repo().snapshot()
    return {
        "status": "ok",
        "service": settings.SERVICE_NAME,
        "version": settings.SERVICE_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "managers_count": len(document["managers"]),
        "teams_count": len(document["teams"]),
        "developers_count": len(document["developers"]),
    }


@router.get("/health/ready")
def readiness_check():
    """Readiness probe — verifies the backing store answers."""
    try:
        get_kv_repo().verify_connection()
    except SQLAlchemyError as exc:
        raise HTTPException(status_code=503, detail=f"Store unavailable: {exc}")
    return {
        "status": "ready",
        "service": settings.SERVICE_NAME,
        "store": "connected",
        "has_stored_data": get_roster_repo().has_stored_data(),
    }


@router.get("/metrics")
def prometheus_metrics():
    """Expose Prometheus metrics."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
