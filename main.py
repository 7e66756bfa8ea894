# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Team Roster Service
===================
Keeps the organisation's managers, teams and developers (skills, shared
resources, vacations) in one persisted document and answers the question
"on which days is an application left without an available developer?".

Port: 8010
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from team_roster.controllers import (
    availability_controller,
    data_controller,
    developer_controller,
    manager_controller,
    skill_controller,
    system_controller,
    team_controller,
)
from team_roster.core.config import settings
from team_roster.core.dependencies import get_kv_repo, get_roster_repo
from team_roster.core.logging import get_logger
from team_roster.middleware import MetricsMiddleware, RequestIDMiddleware
from team_roster.services.helpers import update_size_gauges

logger = get_logger(settings.SERVICE_NAME)


# ── Lifespan ──
@asynccontextmanager
async def lifespan(application: FastAPI):
    kv_repo = get_kv_repo()
    roster_repo = get_roster_repo()
    kv_repo.ensure_schema()
    loaded = roster_repo.load()
    update_size_gauges(roster_repo.snapshot())
    logger.info(
        "%s v%s started (stored roster %s)",
        settings.SERVICE_NAME, settings.SERVICE_VERSION,
        "loaded" if loaded else "initialised empty",
    )
    yield
    kv_repo.dispose()
    logger.info("Shutting down, connection pool disposed")


# ── FastAPI App ──
app = FastAPI(
    title="Team Roster Service",
    description="Team, skill and vacation roster with support-availability calendars.",
    version=settings.SERVICE_VERSION,
    lifespan=lifespan,
    responses={500: {"description": "Internal server error"}},
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(MetricsMiddleware)
app.add_middleware(RequestIDMiddleware)


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    request_id = getattr(request.state, "request_id", None)
    logger.exception("Unhandled exception", extra={"request_id": request_id})
    return JSONResponse(
        status_code=500,
        content={"error": "internal_server_error", "detail": str(exc), "request_id": request_id},
    )


app.include_router(system_controller.router)
app.include_router(manager_controller.router)
app.include_router(team_controller.router)
app.include_router(developer_controller.router)
app.include_router(skill_controller.router)
app.include_router(availability_controller.router)
app.include_router(data_controller.router)


# ── Entrypoint ──
if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.SERVICE_PORT, log_level="info")
