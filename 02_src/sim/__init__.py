"""Scripted research engine."""

from .sim import (
    SCRIPTS,
    SHAPE_EVENTS,
    SHAPE_UPDATES,
    Sim,
    events_script,
    load_script,
    updates_script,
)

__all__ = [
    "SCRIPTS",
    "SHAPE_EVENTS",
    "SHAPE_UPDATES",
    "Sim",
    "events_script",
    "load_script",
    "updates_script",
]
