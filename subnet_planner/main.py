"""FastAPI application for the subnet planner.

Runs directly on Uvicorn:
    uvicorn subnet_planner.main:app --port 8090

Environment Variables:
    CORS_ORIGINS: Comma-separated list of allowed CORS origins
                  If not set or empty, localhost development origins are used
                  Example: http://localhost:3000,http://localhost:5173

    LOG_LEVEL: DEBUG, INFO, WARNING, ERROR, or CRITICAL (default: INFO)

    Telemetry:
        TELEMETRY_SINK: none, log, or memory (default: log)
        TELEMETRY_BUFFER_SIZE: Events kept by the memory sink (default: 100)

    Pricing:
        PRICING_RATES_JSON: JSON object adding or replacing provider rates
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import (
    get_cors_origins,
    get_log_level,
    get_telemetry_buffer_size,
    get_telemetry_sink,
    validate_configuration,
)
from .routers import costs, health, scenarios, subnets
from .telemetry import create_event_sink

# Fail fast on bad configuration
validate_configuration()

logging.basicConfig(level=get_log_level())
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Subnet Planner API",
    description="IPv4 subnet calculator with VLSM planning, security scoring, and multi-cloud cost estimates",
    version=__version__,
    docs_url="/api/v1/docs",  # Swagger UI
    redoc_url="/api/v1/redoc",  # ReDoc
    openapi_url="/api/v1/openapi.json",  # OpenAPI spec
)

# If not set or empty, only localhost development origins are allowed (no wildcard)
cors_origins = get_cors_origins()
if not cors_origins:
    cors_origins = [
        "http://localhost:3000",  # TypeScript Vite frontend
        "http://localhost:8001",  # Static HTML frontend
        "http://localhost:5173",  # Vite dev server
    ]
    logger.warning("CORS: Using default localhost origins for development")
else:
    logger.info(f"CORS: Allowed origins: {', '.join(cors_origins)}")

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

telemetry_sink = get_telemetry_sink()
app.state.event_sink = create_event_sink(telemetry_sink, get_telemetry_buffer_size())
logger.info(f"Telemetry: {telemetry_sink.value}")

app.include_router(health.router)
app.include_router(subnets.router)
app.include_router(costs.router)
app.include_router(scenarios.router)


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "name": "Subnet Planner API",
        "version": __version__,
        "docs": "/api/v1/docs",
        "openapi": "/api/v1/openapi.json",
        "health": "/api/v1/health",
    }
