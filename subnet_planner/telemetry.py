"""Calculation telemetry.

Routers report events through an EventSink held on ``app.state``; the
calculators themselves never see it. Swap the sink to change where events
go (logs, an in-memory buffer for tests, or nowhere).
"""

import logging
from collections import Counter, deque
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, Protocol

from .config import DEFAULT_TELEMETRY_BUFFER_SIZE, TelemetrySink

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TelemetryEvent:
    name: str
    properties: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))


class EventSink(Protocol):
    def emit(self, name: str, properties: dict[str, Any] | None = None) -> None: ...


class NullEventSink:
    """Discards every event."""

    def emit(self, name: str, properties: dict[str, Any] | None = None) -> None:
        return None


class LoggingEventSink:
    """Writes each event to the log at INFO."""

    def __init__(self, log: logging.Logger | None = None):
        self._log = log or logger

    def emit(self, name: str, properties: dict[str, Any] | None = None) -> None:
        self._log.info(
            f"Telemetry event: {name}",
            extra={"event_name": name, "event_properties": dict(properties or {})},
        )


class InMemoryEventSink:
    """Keeps the most recent ``max_events`` events in process."""

    def __init__(self, max_events: int = DEFAULT_TELEMETRY_BUFFER_SIZE):
        if max_events < 1:
            raise ValueError("max_events must be at least 1")
        self._events: deque[TelemetryEvent] = deque(maxlen=max_events)

    def emit(self, name: str, properties: dict[str, Any] | None = None) -> None:
        self._events.append(TelemetryEvent(name=name, properties=dict(properties or {})))

    @property
    def events(self) -> list[TelemetryEvent]:
        return list(self._events)

    def counts(self) -> dict[str, int]:
        """Number of buffered events per event name."""
        return dict(Counter(event.name for event in self._events))

    def clear(self) -> None:
        self._events.clear()


def create_event_sink(kind: TelemetrySink, buffer_size: int = DEFAULT_TELEMETRY_BUFFER_SIZE) -> EventSink:
    if kind == TelemetrySink.NONE:
        return NullEventSink()
    if kind == TelemetrySink.MEMORY:
        return InMemoryEventSink(buffer_size)
    return LoggingEventSink()
