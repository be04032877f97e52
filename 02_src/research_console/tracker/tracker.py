"""Tracker implementation for creating TraceEvents."""

import uuid
from datetime import datetime, timezone
from typing import Protocol

from ..event_bus import IEventBus
from ..models import BusMessage, Topic, TraceEvent
from .log import TraceLog


class ITracker(Protocol):
    """Creating TraceEvents. Two channels: EventBus subscription + direct calls."""

    def track(self, event_type: str, actor: str, data: dict) -> None:
        """Create a TraceEvent and append it to the log."""
        ...


class Tracker:
    """Creates TraceEvents via EventBus subscription and direct track() calls."""

    def __init__(self, event_bus: IEventBus, log: TraceLog | None = None):
        self._event_bus = event_bus
        self._log = log if log is not None else TraceLog()

    @property
    def log(self) -> TraceLog:
        return self._log

    def start(self) -> None:
        """Subscribe to all EventBus topics."""
        for topic in Topic:
            self._event_bus.subscribe(topic, self._handle_bus_message)

    async def _handle_bus_message(self, bus_message: BusMessage) -> None:
        payload_summary = str(bus_message.payload)[:100]

        self.track(
            event_type="bus_message_published",
            actor=bus_message.source,
            data={
                "topic": bus_message.topic.value,
                "payload_summary": payload_summary,
            },
        )

    def track(self, event_type: str, actor: str, data: dict) -> None:
        """Create a TraceEvent and append it to the log."""
        self._log.append(
            TraceEvent(
                id=str(uuid.uuid4()),
                event_type=event_type,
                actor=actor,
                data=data,
                timestamp=datetime.now(timezone.utc),
            )
        )
