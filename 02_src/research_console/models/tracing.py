"""Tracing and observability data models."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class TraceEvent:
    """A single diagnostic event kept by the Tracker."""

    id: str
    event_type: str  # e.g. "activity_recorded", "timeline_archived"
    actor: str  # who created this event
    data: dict
    timestamp: datetime
