"""Application bootstrap and lifecycle management."""

import os
from typing import Callable, Iterable, Protocol

from .config import ASSISTANT_ID, parse_stream_modes, resolve_api_url
from .event_bus import EventBus, IEventBus
from .logging_config import get_logger
from .session import ResearchSession
from .tracker import Tracker
from .transport import ITransport, LangGraphTransport

logger = get_logger(__name__)

TransportFactory = Callable[[IEventBus], ITransport]


class IApplication(Protocol):
    """Bootstrap and lifecycle."""

    async def start(self) -> None:
        """Initialize components in dependency order."""
        ...

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        ...

    async def reset(self) -> None:
        """Drop all client state, as a page reload would."""
        ...


def langgraph_transport_factory(
    api_url: str | None = None,
    assistant_id: str | None = None,
    stream_modes: Iterable[str] | None = None,
) -> TransportFactory:
    """Factory for the HTTP transport, configured from the environment."""
    url = resolve_api_url(
        api_url or os.getenv("LANGGRAPH_API_URL"),
        dev=os.getenv("APP_ENV", "dev") == "dev",
    )
    assistant = assistant_id or os.getenv("LANGGRAPH_ASSISTANT_ID", ASSISTANT_ID)
    modes = tuple(stream_modes or parse_stream_modes(os.getenv("LANGGRAPH_STREAM_MODES")))

    def create(event_bus: IEventBus) -> ITransport:
        return LangGraphTransport(
            event_bus, api_url=url, assistant_id=assistant, stream_modes=modes
        )

    return create


class Application:
    """Main application bootstrap."""

    def __init__(self, transport_factory: TransportFactory | None = None):
        self._transport_factory = transport_factory or langgraph_transport_factory()

        # Components (will be initialized in start())
        self._event_bus: EventBus | None = None
        self._tracker: Tracker | None = None
        self._transport: ITransport | None = None
        self._session: ResearchSession | None = None

    async def start(self) -> None:
        """Initialize components in dependency order."""
        logger.info("Starting application")

        # 1. EventBus (no dependencies)
        self._event_bus = EventBus()

        # 2. Tracker (depends on EventBus)
        self._tracker = Tracker(self._event_bus)
        self._tracker.start()

        # 3. Transport (publishes on EventBus)
        self._transport = self._transport_factory(self._event_bus)
        logger.info("Transport initialized: %s", type(self._transport).__name__)

        # 4. Session (consumes EventBus, drives Transport)
        self._session = ResearchSession(transport=self._transport, tracker=self._tracker)
        self._session.attach(self._event_bus)
        logger.info("All components initialized successfully")

    async def stop(self) -> None:
        """Shutdown in reverse order."""
        if self._transport:
            await self._transport.close()
            logger.info("Transport closed")

    async def reset(self) -> None:
        """Stop any run in flight and reset the session."""
        if self._transport:
            self._transport.stop()
        if self._session:
            self._session.reset()

    @property
    def session(self) -> ResearchSession:
        if not self._session:
            raise RuntimeError("Application not started")
        return self._session

    @property
    def tracker(self) -> Tracker:
        if not self._tracker:
            raise RuntimeError("Application not started")
        return self._tracker

    @property
    def transport(self) -> ITransport:
        if not self._transport:
            raise RuntimeError("Application not started")
        return self._transport
