"""Tests for EventBus."""

from datetime import datetime, timezone

import pytest

from research_console.models import BusMessage, Topic


def make_message(topic=Topic.UPDATE, payload=None, message_id="bus1"):
    return BusMessage(
        id=message_id,
        topic=topic,
        payload=payload or {},
        source="test",
        timestamp=datetime.now(timezone.utc),
    )


class TestEventBusSubscribe:
    """Tests for EventBus subscription."""

    def test_subscribe_multiple_handlers(self, event_bus):
        """Test subscribing multiple handlers to same topic."""

        async def handler1(msg: BusMessage):
            pass

        async def handler2(msg: BusMessage):
            pass

        event_bus.subscribe(Topic.UPDATE, handler1)
        event_bus.subscribe(Topic.UPDATE, handler2)

        assert len(event_bus._subscribers[Topic.UPDATE]) == 2
        assert event_bus._subscribers[Topic.STATUS] == []


class TestEventBusPublish:
    """Tests for EventBus publishing."""

    @pytest.mark.asyncio
    async def test_publish_multiple_subscribers(self, event_bus):
        """Test publishing to multiple subscribers."""
        calls = []

        async def handler1(msg: BusMessage):
            calls.append(("h1", msg))

        async def handler2(msg: BusMessage):
            calls.append(("h2", msg))

        event_bus.subscribe(Topic.UPDATE, handler1)
        event_bus.subscribe(Topic.UPDATE, handler2)

        await event_bus.publish(make_message(payload={"event": {}}))

        assert [name for name, _ in calls] == ["h1", "h2"]
        assert calls[0][1].payload == {"event": {}}

    @pytest.mark.asyncio
    async def test_publish_different_topics(self, event_bus):
        """Test that subscribers only receive messages from their topic."""
        update_calls = []
        status_calls = []

        async def update_handler(msg: BusMessage):
            update_calls.append(msg)

        async def status_handler(msg: BusMessage):
            status_calls.append(msg)

        event_bus.subscribe(Topic.UPDATE, update_handler)
        event_bus.subscribe(Topic.STATUS, status_handler)

        await event_bus.publish(make_message(topic=Topic.UPDATE))

        assert len(update_calls) == 1
        assert len(status_calls) == 0

    @pytest.mark.asyncio
    async def test_publish_without_subscribers(self, event_bus):
        await event_bus.publish(make_message(topic=Topic.VALUES))

    @pytest.mark.asyncio
    async def test_publish_assigns_missing_id(self, event_bus):
        msg = make_message(message_id="")
        await event_bus.publish(msg)
        assert msg.id

    @pytest.mark.asyncio
    async def test_publish_preserves_order(self, event_bus):
        """Each publish is fully handled before the next one starts."""
        seen = []

        async def handler(msg: BusMessage):
            seen.append(msg.payload["n"])

        event_bus.subscribe(Topic.UPDATE, handler)
        for n in range(5):
            await event_bus.publish(make_message(payload={"n": n}))

        assert seen == [0, 1, 2, 3, 4]

    @pytest.mark.asyncio
    async def test_publish_error_in_handler(self, event_bus):
        """Test that errors in one handler don't affect others."""
        calls = []

        async def failing_handler(msg: BusMessage):
            calls.append("failing")
            raise RuntimeError("Test error")

        async def normal_handler(msg: BusMessage):
            calls.append("normal")

        event_bus.subscribe(Topic.UPDATE, failing_handler)
        event_bus.subscribe(Topic.UPDATE, normal_handler)

        # Should not raise error
        await event_bus.publish(make_message())

        assert "failing" in calls
        assert "normal" in calls
