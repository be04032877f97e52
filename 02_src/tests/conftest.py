"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest
import pytest_asyncio

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))


class RecordingTransport:
    """Transport double: remembers what it was asked to do."""

    def __init__(self):
        self.requests = []
        self.stop_calls = 0
        self.closed = False

    def submit(self, request):
        self.requests.append(request)

    def stop(self):
        self.stop_calls += 1

    async def close(self):
        self.closed = True


@pytest.fixture
def transport():
    """Create a recording transport."""
    return RecordingTransport()


@pytest.fixture
def event_bus():
    """Create an EventBus."""
    from research_console.event_bus import EventBus

    return EventBus()


@pytest.fixture
def tracker(event_bus):
    """Create Tracker bound to the event bus (not subscribed)."""
    from research_console.tracker import Tracker

    return Tracker(event_bus=event_bus)


@pytest.fixture
def session(transport, tracker):
    """Create a ResearchSession with a recording transport."""
    from research_console.session import ResearchSession

    return ResearchSession(transport=transport, tracker=tracker)


@pytest.fixture
def timeline_parts():
    """LiveTimeline, RunLifecycle and HistoryStore wired to a reconciler."""
    from research_console.timeline import (
        ArchiveReconciler,
        HistoryStore,
        LiveTimeline,
        RunLifecycle,
    )

    timeline = LiveTimeline()
    lifecycle = RunLifecycle()
    history = HistoryStore()
    reconciler = ArchiveReconciler(timeline, lifecycle, history)
    return timeline, lifecycle, history, reconciler


@pytest_asyncio.fixture
async def application(transport):
    """Started Application using the recording transport."""
    from research_console.app import Application

    app = Application(transport_factory=lambda bus: transport)
    await app.start()
    yield app
    await app.stop()

