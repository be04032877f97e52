"""Tests for Tracker and TraceLog."""

from datetime import datetime, timedelta, timezone

import pytest

from research_console.models import BusMessage, Topic, TraceEvent
from research_console.tracker import TraceLog


class TestTrackerTrack:
    """Tests for Tracker.track() method."""

    def test_track_creates_event(self, tracker):
        """Test that track() creates a TraceEvent."""
        tracker.track(event_type="test_event", actor="test_actor", data={"key": "value"})

        events = tracker.log.query()
        assert len(events) == 1
        assert events[0].event_type == "test_event"
        assert events[0].actor == "test_actor"
        assert events[0].data == {"key": "value"}
        assert events[0].id


class TestTrackerSubscription:
    """Tests for Tracker EventBus subscription."""

    @pytest.mark.asyncio
    async def test_records_bus_messages(self, event_bus, tracker):
        tracker.start()

        await event_bus.publish(
            BusMessage(
                id="",
                topic=Topic.STATUS,
                payload={"loading": True},
                source="sim",
                timestamp=datetime.now(timezone.utc),
            )
        )

        events = tracker.log.query(event_types=["bus_message_published"])
        assert len(events) == 1
        assert events[0].actor == "sim"
        assert events[0].data["topic"] == "status"


def make_event(n, event_type="activity_recorded", actor="session", timestamp=None):
    return TraceEvent(
        id=f"e{n}",
        event_type=event_type,
        actor=actor,
        data={"n": n},
        timestamp=timestamp or datetime.now(timezone.utc),
    )


class TestTraceLog:
    """Tests for TraceLog.query()."""

    def test_newest_first(self):
        log = TraceLog()
        for n in range(3):
            log.append(make_event(n))
        assert [e.id for e in log.query()] == ["e2", "e1", "e0"]

    def test_filters(self):
        log = TraceLog()
        log.append(make_event(0, event_type="run_submitted"))
        log.append(make_event(1, actor="sim"))
        log.append(make_event(2))

        assert [e.id for e in log.query(event_types=["run_submitted"])] == ["e0"]
        assert [e.id for e in log.query(actor="sim")] == ["e1"]

    def test_after(self):
        log = TraceLog()
        base = datetime(2025, 1, 1, tzinfo=timezone.utc)
        for n in range(3):
            log.append(make_event(n, timestamp=base + timedelta(seconds=n)))
        assert [e.id for e in log.query(after=base)] == ["e2", "e1"]

    def test_limit(self):
        log = TraceLog()
        for n in range(10):
            log.append(make_event(n))
        assert len(log.query(limit=4)) == 4

    def test_capacity(self):
        log = TraceLog(capacity=2)
        for n in range(5):
            log.append(make_event(n))
        assert len(log) == 2
        assert [e.id for e in log.query()] == ["e4", "e3"]
