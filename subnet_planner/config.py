"""
Application configuration management.

Handles loading and validating settings from environment variables.
Values are read at call time so tests and containers can change them without
rebuilding anything.
"""

import json
import os
from enum import Enum


class TelemetrySink(str, Enum):
    """Where calculation events are sent."""

    NONE = "none"
    LOG = "log"  # stdlib logging at INFO
    MEMORY = "memory"  # bounded in-process buffer


VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_TELEMETRY_BUFFER_SIZE = 100

PROVIDER_RATE_KEYS = ["compute", "networking", "storage", "load_balancer", "nat_gateway"]


def get_cors_origins() -> list[str]:
    """
    Get allowed CORS origins from environment.

    Returns:
        list[str]: Origins from CORS_ORIGINS (empty list if not set)
    """
    origins_str = os.getenv("CORS_ORIGINS", "").strip()

    if not origins_str:
        return []

    origins = [origin.strip() for origin in origins_str.split(",")]
    return [origin for origin in origins if origin]


def get_log_level() -> str:
    """
    Get log level from environment.

    Returns:
        str: Level name (default: INFO)

    Raises:
        ValueError: If LOG_LEVEL is not a standard level name
    """
    level = os.getenv("LOG_LEVEL", "INFO").strip().upper()

    if level not in VALID_LOG_LEVELS:
        raise ValueError(f"Invalid LOG_LEVEL: '{level}'. Valid options: {', '.join(VALID_LOG_LEVELS)}")

    return level


def get_telemetry_sink() -> TelemetrySink:
    """
    Get the configured telemetry sink from environment.

    Returns:
        TelemetrySink: The sink to use (default: LOG)

    Raises:
        ValueError: If TELEMETRY_SINK is set to an invalid value
    """
    sink_str = os.getenv("TELEMETRY_SINK", "log").strip().lower()

    try:
        return TelemetrySink(sink_str)
    except ValueError as e:
        valid_sinks = ", ".join([s.value for s in TelemetrySink])
        raise ValueError(f"Invalid TELEMETRY_SINK: '{sink_str}'. Valid options: {valid_sinks}") from e


def get_telemetry_buffer_size() -> int:
    """
    Get the number of events kept by the in-memory sink.

    Returns:
        int: Buffer size (default: 100)
    """
    try:
        size = int(os.getenv("TELEMETRY_BUFFER_SIZE", str(DEFAULT_TELEMETRY_BUFFER_SIZE)))
    except ValueError:
        return DEFAULT_TELEMETRY_BUFFER_SIZE

    if size < 1:
        return DEFAULT_TELEMETRY_BUFFER_SIZE
    return size


def get_pricing_overrides() -> dict[str, dict[str, float]]:
    """
    Get provider rate overrides for the cost estimator.

    PRICING_RATES_JSON example:
        {"oci": {"compute": 0.03, "networking": 0.0085, "storage": 0.0255,
                 "load_balancer": 0.0113, "nat_gateway": 0.0}}

    Returns:
        dict: Provider name to rate mapping (empty if not set)

    Raises:
        ValueError: If PRICING_RATES_JSON is invalid JSON or a provider is missing rates
    """
    rates_json = os.getenv("PRICING_RATES_JSON", "").strip()

    if not rates_json:
        return {}

    try:
        overrides = json.loads(rates_json)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in PRICING_RATES_JSON: {e}") from e

    if not isinstance(overrides, dict):
        raise ValueError("PRICING_RATES_JSON must be a JSON object")

    parsed = {}
    for provider, rates in overrides.items():
        if not isinstance(rates, dict):
            raise ValueError(f"PRICING_RATES_JSON: rates for '{provider}' must be a JSON object")

        missing = [key for key in PROVIDER_RATE_KEYS if key not in rates]
        if missing:
            raise ValueError(f"PRICING_RATES_JSON: '{provider}' is missing rates: {', '.join(missing)}")

        try:
            parsed[provider.lower()] = {key: float(rates[key]) for key in PROVIDER_RATE_KEYS}
        except (TypeError, ValueError) as e:
            raise ValueError(f"PRICING_RATES_JSON: rates for '{provider}' must be numbers") from e

    return parsed


def validate_configuration():
    """
    Validate configuration at startup.

    Raises:
        ValueError: If configuration is invalid
    """
    get_log_level()
    get_telemetry_sink()
    # This will raise ValueError if PRICING_RATES_JSON is malformed
    get_pricing_overrides()
