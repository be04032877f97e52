"""Core data models for Research Console."""

from .activity import Activity
from .bus import BusMessage, Topic
from .events import EventPhase, FlattenedEvent, RawEvent, Stage, TracedEvent
from .messages import AI, HUMAN, ChatMessage, RunConfiguration, RunRequest
from .tracing import TraceEvent

__all__ = [
    # Timeline
    "Activity",
    # Stream events
    "EventPhase",
    "FlattenedEvent",
    "RawEvent",
    "Stage",
    "TracedEvent",
    # Transcript
    "AI",
    "HUMAN",
    "ChatMessage",
    "RunConfiguration",
    "RunRequest",
    # Bus
    "BusMessage",
    "Topic",
    # Tracing
    "TraceEvent",
]
