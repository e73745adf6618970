"""Pytest configuration and shared fixtures."""

import os
from importlib import reload

import pytest
from fastapi.testclient import TestClient

from subnet_planner.telemetry import InMemoryEventSink

CONFIG_VARIABLES = [
    "CORS_ORIGINS",
    "LOG_LEVEL",
    "TELEMETRY_SINK",
    "TELEMETRY_BUFFER_SIZE",
    "PRICING_RATES_JSON",
]


@pytest.fixture(autouse=True)
def reset_environment():
    """Reset environment variables before each test."""
    # Store original env vars
    original_env = os.environ.copy()

    # Start every test from default configuration
    for name in CONFIG_VARIABLES:
        os.environ.pop(name, None)

    yield

    # Restore original env vars after test
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def client():
    """Create test client."""
    from subnet_planner.main import app

    return TestClient(app)


@pytest.fixture
def event_sink():
    """Swap the app's telemetry sink for an in-memory one."""
    from subnet_planner.main import app

    original = app.state.event_sink
    sink = InMemoryEventSink()
    app.state.event_sink = sink
    yield sink
    app.state.event_sink = original


@pytest.fixture
def reload_main():
    """Rebuild the app from the current environment.

    The module is reloaded again under default configuration afterwards so
    later tests never see a patched app.
    """
    from subnet_planner import main

    yield lambda: reload(main)

    for name in CONFIG_VARIABLES:
        os.environ.pop(name, None)
    reload(main)
