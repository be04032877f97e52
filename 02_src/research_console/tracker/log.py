"""In-memory trace log (nothing outlives the process)."""

from collections import deque
from datetime import datetime

from ..models import TraceEvent

DEFAULT_CAPACITY = 2000


class TraceLog:
    """Bounded, append-only log of TraceEvents; oldest entries fall off."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY):
        self._events: deque[TraceEvent] = deque(maxlen=capacity)

    def append(self, event: TraceEvent) -> None:
        self._events.append(event)

    def query(
        self,
        after: datetime | None = None,
        event_types: list[str] | None = None,
        actor: str | None = None,
        limit: int = 100,
    ) -> list[TraceEvent]:
        """Newest-first events matching every given filter."""
        matched = []
        for event in reversed(self._events):
            if after and event.timestamp <= after:
                continue
            if event_types and event.event_type not in event_types:
                continue
            if actor and event.actor != actor:
                continue
            matched.append(event)
            if len(matched) >= limit:
                break
        return matched

    def clear(self) -> None:
        self._events.clear()

    def __len__(self) -> int:
        return len(self._events)
