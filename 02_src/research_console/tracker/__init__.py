"""Tracker module."""

from .log import TraceLog
from .tracker import ITracker, Tracker

__all__ = ["ITracker", "TraceLog", "Tracker"]
