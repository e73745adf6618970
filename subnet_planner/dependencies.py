"""FastAPI dependencies shared by the routers.

Provides the telemetry sink and cost rate table to endpoints. Tests override
these through ``app.dependency_overrides`` or by replacing ``app.state``.
"""

from fastapi import Request

from .config import get_pricing_overrides
from .costs import DEFAULT_RATE_TABLE, ProviderRates, RateTable
from .telemetry import EventSink


def get_event_sink(request: Request) -> EventSink:
    """
    FastAPI dependency returning the application's event sink.

    Args:
        request: FastAPI Request object

    Returns:
        EventSink: Sink configured at startup (stored on app.state)
    """
    return request.app.state.event_sink


def get_rate_table() -> RateTable:
    """
    FastAPI dependency returning the pricing table.

    Default rates with any PRICING_RATES_JSON overrides applied.
    """
    overrides = {name: ProviderRates(**rates) for name, rates in get_pricing_overrides().items()}
    return DEFAULT_RATE_TABLE.with_providers(overrides)
