"""Timeline module."""

from .history import HistoryStore
from .lifecycle import RunLifecycle, RunPhase
from .live import LiveTimeline
from .reconciler import ArchiveReconciler, archive_target

__all__ = [
    "ArchiveReconciler",
    "HistoryStore",
    "LiveTimeline",
    "RunLifecycle",
    "RunPhase",
    "archive_target",
]
