"""Research Console: activity timeline client for a streaming research agent."""

from .app import Application, IApplication
from .event_bus import EventBus, IEventBus
from .models import (
    Activity,
    BusMessage,
    ChatMessage,
    EventPhase,
    FlattenedEvent,
    RawEvent,
    RunConfiguration,
    RunRequest,
    Stage,
    Topic,
    TracedEvent,
    TraceEvent,
)
from .session import ResearchSession, RunSubmitter
from .stream import classify, classify_event, decode
from .timeline import ArchiveReconciler, HistoryStore, LiveTimeline, RunLifecycle, RunPhase
from .tracker import ITracker, TraceLog, Tracker
from .transport import ITransport, LangGraphTransport, StreamingTransport

__all__ = [
    # Application
    "Application",
    "IApplication",
    # Models
    "Activity",
    "BusMessage",
    "ChatMessage",
    "EventPhase",
    "FlattenedEvent",
    "RawEvent",
    "RunConfiguration",
    "RunRequest",
    "Stage",
    "Topic",
    "TracedEvent",
    "TraceEvent",
    # Core
    "classify",
    "classify_event",
    "decode",
    "LiveTimeline",
    "HistoryStore",
    "RunLifecycle",
    "RunPhase",
    "ArchiveReconciler",
    "RunSubmitter",
    "ResearchSession",
    # Components
    "IEventBus",
    "EventBus",
    "ITracker",
    "Tracker",
    "TraceLog",
    "ITransport",
    "StreamingTransport",
    "LangGraphTransport",
]
