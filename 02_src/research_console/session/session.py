"""ResearchSession: the client-side state machine around one conversation."""

from typing import Any, Iterable, Mapping

from ..event_bus import IEventBus
from ..logging_config import get_logger
from ..models import Activity, BusMessage, ChatMessage, RunConfiguration, Topic
from ..stream import classify_event
from ..timeline import (
    ArchiveReconciler,
    HistoryStore,
    LiveTimeline,
    RunLifecycle,
    RunPhase,
)
from ..tracker import ITracker
from ..transport import ITransport
from .submitter import RunSubmitter

logger = get_logger(__name__)


class ResearchSession:
    """Owns the live timeline, the run lifecycle and the archived history.

    All mutations go through ``ingest``, ``sync``, ``submit``, ``cancel`` and
    ``reset``; each runs synchronously, one notification at a time, in the
    order the transport delivered them.
    """

    def __init__(
        self,
        transport: ITransport | None = None,
        tracker: ITracker | None = None,
    ):
        self._transport = transport
        self._tracker = tracker

        self._timeline = LiveTimeline()
        self._lifecycle = RunLifecycle()
        self._history = HistoryStore()
        self._reconciler = ArchiveReconciler(self._timeline, self._lifecycle, self._history)
        self._submitter = RunSubmitter(self._timeline, self._lifecycle, transport)

        self._messages: list[ChatMessage] = []
        self._loading = False

    # Read side

    @property
    def live_timeline(self) -> tuple[Activity, ...]:
        return self._timeline.snapshot()

    @property
    def history(self) -> Mapping[str, tuple[Activity, ...]]:
        return self._history.view()

    def history_dict(self) -> dict[str, list[dict[str, str]]]:
        return self._history.to_dict()

    @property
    def terminal(self) -> bool:
        return self._lifecycle.terminal

    @property
    def phase(self) -> RunPhase:
        return self._lifecycle.phase

    @property
    def messages(self) -> tuple[ChatMessage, ...]:
        return tuple(self._messages)

    @property
    def loading(self) -> bool:
        return self._loading

    # Transitions

    def ingest(self, raw: Any) -> Activity | None:
        """Classify one stream event into the live timeline."""
        if not self._lifecycle.accepting_events:
            logger.debug("Run cancelled, dropping stream event")
            return None

        result = classify_event(raw)
        if result is None:
            logger.debug("Unrecognized stream event dropped: %s", str(raw)[:100])
            return None

        self._timeline.append(result.activity)
        if result.terminal:
            self._lifecycle.finalize()

        self._track(
            "activity_recorded",
            {"title": result.activity.title, "data": result.activity.data, "terminal": result.terminal},
        )
        self._reconcile()
        return result.activity

    def sync(
        self,
        messages: Iterable[ChatMessage] | None = None,
        loading: bool | None = None,
    ) -> str | None:
        """Record transport state. Returns the message id archived, if any."""
        if messages is not None:
            self._messages = list(messages)
        if loading is not None:
            self._loading = loading
        return self._reconcile()

    def submit(self, text: str, config: RunConfiguration | None = None) -> None:
        """Start a new run for ``text``."""
        config = config or RunConfiguration()
        request = self._submitter.submit(text, config, self._messages)
        if request is None:
            return
        self._messages = list(request.messages)
        self._track(
            "run_submitted",
            {"message_id": request.messages[-1].id, "configurable": config.to_configurable()},
        )

    def cancel(self) -> None:
        """Stop the run and clear the client; partial timelines are discarded.

        The lifecycle stays cancelled until the next submit, so frames the
        stopping transport still delivers are dropped.
        """
        self._lifecycle.cancel()
        if self._transport is not None:
            self._transport.stop()
        self._track("run_cancelled", {"discarded_activities": len(self._timeline)})
        self._clear()
        logger.info("Run cancelled, session cleared")

    def reset(self) -> None:
        """Back to the initial state, as if the client had just started."""
        self._clear()
        self._lifecycle.reset()
        self._track("session_reset", {})
        logger.info("Session reset")

    # EventBus wiring

    def attach(self, event_bus: IEventBus) -> None:
        """Consume transport notifications from the EventBus."""
        event_bus.subscribe(Topic.UPDATE, self._handle_update)
        event_bus.subscribe(Topic.VALUES, self._handle_values)
        event_bus.subscribe(Topic.STATUS, self._handle_status)

    async def _handle_update(self, bus_message: BusMessage) -> None:
        self.ingest(bus_message.payload.get("event"))

    async def _handle_values(self, bus_message: BusMessage) -> None:
        if not self._lifecycle.accepting_events:
            return
        raw_messages = bus_message.payload.get("messages") or []
        self.sync(
            messages=[ChatMessage.from_wire(m) for m in raw_messages if isinstance(m, Mapping)]
        )

    async def _handle_status(self, bus_message: BusMessage) -> None:
        self.sync(loading=bool(bus_message.payload.get("loading")))

    # Internals

    def _clear(self) -> None:
        self._timeline.clear()
        self._history.clear()
        self._messages = []
        self._loading = False

    def _reconcile(self) -> str | None:
        message_id = self._reconciler.reconcile(self._messages, self._loading)
        if message_id is not None:
            archived = self._history.get(message_id) or ()
            self._track(
                "timeline_archived",
                {"message_id": message_id, "activity_count": len(archived)},
            )
        return message_id

    def _track(self, event_type: str, data: dict) -> None:
        if self._tracker is not None:
            self._tracker.track(event_type=event_type, actor="session", data=data)
