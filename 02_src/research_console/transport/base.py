"""Transport protocol and the shared run-task plumbing."""

import asyncio
import uuid
from datetime import datetime, timezone
from typing import Protocol

from ..event_bus import IEventBus
from ..logging_config import get_logger
from ..models import BusMessage, RunRequest, Topic

logger = get_logger(__name__)


class ITransport(Protocol):
    """Delivers runs to the engine and publishes what it streams back."""

    def submit(self, request: RunRequest) -> None:
        """Schedule a run. Returns immediately; progress arrives on the EventBus."""
        ...

    def stop(self) -> None:
        """Ask the run in flight to stop."""
        ...

    async def close(self) -> None:
        """Stop and release connections."""
        ...


class StreamingTransport:
    """Runs each request in a background task and publishes its notifications.

    Subclasses implement ``_stream(request)``. Loading is published as true
    before the stream starts and false once it ends, however it ends.
    """

    source = "transport"

    def __init__(self, event_bus: IEventBus):
        self._event_bus = event_bus
        self._task: asyncio.Task | None = None
        self._loading = False

    @property
    def loading(self) -> bool:
        return self._loading

    def submit(self, request: RunRequest) -> None:
        """Schedule a run on the running event loop."""
        if self._task and not self._task.done():
            logger.warning("%s: run already in flight, cancelling it", self.source)
            self._task.cancel()
        self._task = asyncio.get_running_loop().create_task(self._drive(request))

    def stop(self) -> None:
        """Cancel the run task, if any."""
        if self._task and not self._task.done():
            logger.info("%s: stopping run", self.source)
            self._task.cancel()

    async def wait(self) -> None:
        """Wait for the run in flight to finish (or finish cancelling)."""
        if not self._task:
            return
        try:
            await self._task
        except asyncio.CancelledError:
            pass

    async def close(self) -> None:
        self.stop()
        await self.wait()

    async def _drive(self, request: RunRequest) -> None:
        await self._set_loading(True)
        try:
            await self._stream(request)
        except asyncio.CancelledError:
            logger.info("%s: run cancelled", self.source)
            raise
        except Exception as e:
            logger.error("%s: run failed: %s", self.source, e, exc_info=True)
        finally:
            await self._set_loading(False)

    async def _stream(self, request: RunRequest) -> None:
        raise NotImplementedError

    async def _set_loading(self, loading: bool) -> None:
        self._loading = loading
        await self._publish(Topic.STATUS, {"loading": loading})

    async def _publish(self, topic: Topic, payload: dict) -> None:
        await self._event_bus.publish(
            BusMessage(
                id=str(uuid.uuid4()),
                topic=topic,
                payload=payload,
                source=self.source,
                timestamp=datetime.now(timezone.utc),
            )
        )
