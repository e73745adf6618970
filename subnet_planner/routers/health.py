"""Health probes for the subnet planner.

The planner is pure computation over in-process rate tables, so readiness
only depends on configuration having loaded at import time.
"""

from fastapi import APIRouter

from .. import __version__

router = APIRouter(prefix="/api/v1", tags=["health"])


@router.get("/health")
async def health_check():
    """Service name and version."""
    return {
        "status": "healthy",
        "service": "Subnet Planner API",
        "version": __version__,
    }


@router.get("/health/ready")
async def readiness_check():
    """Ready once startup validation has passed and routers are mounted.

    Invalid LOG_LEVEL, TELEMETRY_SINK or PRICING_RATES_JSON values
    stop the import, so a serving process is always ready to calculate.
    """
    return {"status": "ready"}


@router.get("/health/live")
async def liveness_check():
    """Process is up and the event loop is answering."""
    return {"status": "alive"}
