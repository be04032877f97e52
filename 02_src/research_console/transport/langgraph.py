"""LangGraph server transport (httpx, server-sent events)."""

import asyncio
import json
from typing import AsyncIterator, Iterable

import httpx

from ..config import ASSISTANT_ID, DEFAULT_STREAM_MODES
from ..event_bus import IEventBus
from ..logging_config import get_logger
from ..models import RunRequest, Topic
from .base import StreamingTransport

logger = get_logger(__name__)


async def iter_sse(lines: AsyncIterator[str]) -> AsyncIterator[tuple[str, str]]:
    """Yield (event, data) pairs from a text/event-stream line iterator."""
    event = "message"
    data: list[str] = []
    async for line in lines:
        if not line:
            if data:
                yield event, "\n".join(data)
            event, data = "message", []
            continue
        if line.startswith(":"):
            continue
        field, _, value = line.partition(":")
        if value.startswith(" "):
            value = value[1:]
        if field == "event":
            event = value
        elif field == "data":
            data.append(value)
    if data:
        yield event, "\n".join(data)


class LangGraphTransport(StreamingTransport):
    """Streams runs of a LangGraph assistant over its HTTP API."""

    source = "langgraph"

    def __init__(
        self,
        event_bus: IEventBus,
        api_url: str,
        assistant_id: str = ASSISTANT_ID,
        stream_modes: Iterable[str] = DEFAULT_STREAM_MODES,
        client: httpx.AsyncClient | None = None,
        timeout: float = 300.0,
    ):
        super().__init__(event_bus)
        self._assistant_id = assistant_id
        self._stream_modes = list(stream_modes)
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(base_url=api_url, timeout=timeout)
        self._thread_id: str | None = None
        self._run_id: str | None = None
        self._cancel_tasks: set[asyncio.Task] = set()

    @property
    def thread_id(self) -> str | None:
        return self._thread_id

    def stop(self) -> None:
        """Cancel locally, then ask the server to cancel the run."""
        super().stop()
        if self._thread_id and self._run_id:
            task = asyncio.get_running_loop().create_task(
                self._cancel_remote(self._thread_id, self._run_id)
            )
            self._cancel_tasks.add(task)
            task.add_done_callback(self._cancel_tasks.discard)
            self._run_id = None

    async def close(self) -> None:
        await super().close()
        if self._cancel_tasks:
            await asyncio.gather(*self._cancel_tasks)
        if self._owns_client:
            await self._client.aclose()

    async def _stream(self, request: RunRequest) -> None:
        self._run_id = None
        payload = request.to_payload()
        body = {
            "assistant_id": self._assistant_id,
            "input": {"messages": payload["messages"]},
            "config": {"configurable": payload["configurable"]},
            "stream_mode": self._stream_modes,
        }

        try:
            thread_id = await self._ensure_thread()
            async with self._client.stream(
                "POST", f"/threads/{thread_id}/runs/stream", json=body
            ) as response:
                response.raise_for_status()
                async for event, data in iter_sse(response.aiter_lines()):
                    await self._dispatch(event, data)
        except httpx.HTTPError as e:
            logger.error("LangGraph stream failed: %s", e, exc_info=True)

    async def _ensure_thread(self) -> str:
        if self._thread_id is None:
            response = await self._client.post("/threads", json={})
            response.raise_for_status()
            self._thread_id = response.json()["thread_id"]
            logger.info("Created thread %s", self._thread_id)
        return self._thread_id

    async def _dispatch(self, event: str, data: str) -> None:
        mode = event.split("|", 1)[0]
        if mode == "end":
            return

        try:
            decoded = json.loads(data) if data else None
        except json.JSONDecodeError:
            logger.warning("Skipping undecodable %s frame: %s", mode, data[:100])
            return

        if mode == "metadata":
            if isinstance(decoded, dict):
                self._run_id = decoded.get("run_id") or self._run_id
        elif mode in ("updates", "events"):
            await self._publish(Topic.UPDATE, {"event": decoded})
        elif mode == "values":
            if isinstance(decoded, dict) and "messages" in decoded:
                await self._publish(Topic.VALUES, {"messages": decoded["messages"]})
        elif mode == "error":
            logger.error("Engine reported error: %s", decoded)
        else:
            logger.debug("Ignoring %s frame", event)

    async def _cancel_remote(self, thread_id: str, run_id: str) -> None:
        try:
            response = await self._client.post(f"/threads/{thread_id}/runs/{run_id}/cancel")
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning("Remote cancel of run %s failed: %s", run_id, e)
