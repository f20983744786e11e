"""
OccupancyAnalytics Main Application
===================================

FastAPI entry point exposing the analytics engine to the presentation
layer. The service is stateless: every request carries its own snapshot
and receives a complete report.

Endpoints:
    GET  /         - Service information
    GET  /health   - Liveness probe (is process alive?)
    POST /analyze  - Analyze one snapshot, return the AnalyticsReport
"""

import logging
import os
import threading
import time
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from occupancy_analytics.config import settings
from occupancy_analytics.engine import AnalyticsEngine
from occupancy_analytics.exceptions import OccupancyAnalyticsError
from occupancy_analytics.models.input import AnalyticsSnapshot


logger = logging.getLogger(__name__)


# =============================================================================
# Global State
# =============================================================================

_engine: Optional[AnalyticsEngine] = None
_startup_time: float = time.time()
_reports_served: int = 0
_reports_lock = threading.Lock()


def get_engine() -> AnalyticsEngine:
    """Return the shared engine, creating it on first use."""
    global _engine
    if _engine is None:
        _engine = AnalyticsEngine(settings)
    return _engine


# =============================================================================
# Lifecycle
# =============================================================================

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: build the engine on startup."""
    global _startup_time
    _startup_time = time.time()

    logger.info(f"Starting {settings.service.name} {settings.service.version}")
    get_engine()

    yield

    logger.info("Shutdown complete")


# =============================================================================
# FastAPI Application
# =============================================================================

app = FastAPI(
    title="OccupancyAnalytics",
    description="Predictive and descriptive analytics for occupancy sensor data",
    version=settings.service.version,
    lifespan=lifespan,
)


@app.exception_handler(OccupancyAnalyticsError)
async def analytics_error_handler(request: Request, exc: OccupancyAnalyticsError) -> JSONResponse:
    """Map boundary validation failures to 422."""
    logger.warning(f"Rejected request to {request.url.path}: {exc}")
    return JSONResponse({"error": str(exc)}, status_code=422)


# =============================================================================
# HTTP Endpoints
# =============================================================================

@app.get("/")
async def root() -> JSONResponse:
    """Service information endpoint."""
    return JSONResponse({
        "service": "OccupancyAnalytics",
        "version": settings.service.version,
        "name": settings.service.name,
        "status": "running",
        "timezone": settings.seasonal.timezone,
    })


@app.get("/health")
async def health() -> JSONResponse:
    """
    Liveness probe - is the process alive?

    Always returns 200 if the service is running.
    """
    return JSONResponse({
        "status": "healthy",
        "uptime_seconds": round(time.time() - _startup_time, 1),
        "reports_served": _reports_served,
    })


@app.post("/analyze")
def analyze(snapshot: AnalyticsSnapshot) -> JSONResponse:
    """Analyze one snapshot and return the full report."""
    global _reports_served

    report = get_engine().analyze(snapshot)
    with _reports_lock:
        _reports_served += 1
    return JSONResponse(report.to_dict())


# =============================================================================
# Main Entry Point
# =============================================================================

if __name__ == "__main__":
    import uvicorn

    # Cloud Run uses PORT env var
    port = int(os.environ.get("PORT", settings.server.port))

    uvicorn.run(
        "occupancy_analytics.main:app",
        host=settings.server.host,
        port=port,
        reload=False,
    )
