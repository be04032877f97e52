"""SIM implementation - scripted research engine for demos and tests."""

import asyncio
import json
import uuid
from pathlib import Path
from typing import Callable

from research_console.event_bus import IEventBus
from research_console.logging_config import get_logger
from research_console.models import AI, RunRequest, Topic
from research_console.transport import StreamingTransport

logger = get_logger(__name__)

Step = tuple[Topic, dict]
ScriptBuilder = Callable[[RunRequest], list[Step]]

SHAPE_UPDATES = "updates"
SHAPE_EVENTS = "events"


def _traced(phase: str, name: str, output: dict | None = None) -> Step:
    data: dict = {"input": {}}
    if output is not None:
        data["output"] = output
    return Topic.UPDATE, {"event": {"event": f"on_chain_{phase}", "name": name, "data": data}}


def _flattened(name: str, output: dict) -> Step:
    return Topic.UPDATE, {"event": {name: output}}


def _research_outputs(request: RunRequest) -> tuple[list[str], list[dict], str]:
    question = str(request.messages[-1].content).strip()
    count = max(1, request.configuration.number_of_initial_queries)
    queries = [question] + [f"{question} background {i}" for i in range(1, count)]
    sources = [
        {"label": f"source-{i + 1}", "short_url": f"https://sim.local/{i + 1}"}
        for i in range(len(queries))
    ]
    answer = f"Simulated answer to: {question}"
    return queries, sources, answer


def updates_script(request: RunRequest) -> list[Step]:
    """One node-update frame per finished stage."""
    queries, sources, answer = _research_outputs(request)
    transcript = [msg.to_wire() for msg in request.messages]
    steps: list[Step] = [(Topic.VALUES, {"messages": transcript})]
    steps.append(_flattened("generate_query", {"query_list": queries}))
    for source in sources:
        steps.append(_flattened("web_research", {"sources_gathered": [source]}))
    steps.append(_flattened("reflection", {"is_sufficient": True, "follow_up_queries": []}))
    steps.append(_flattened("finalize_answer", {"messages": [answer]}))
    reply = {"type": AI, "id": f"sim-{uuid.uuid4()}", "content": answer}
    steps.append((Topic.VALUES, {"messages": transcript + [reply]}))
    return steps


def events_script(request: RunRequest) -> list[Step]:
    """Callback frames: a start and an end per stage."""
    queries, sources, answer = _research_outputs(request)
    transcript = [msg.to_wire() for msg in request.messages]
    steps: list[Step] = [(Topic.VALUES, {"messages": transcript})]
    steps.append(_traced("start", "generate_query"))
    steps.append(_traced("end", "generate_query", {"query_list": queries}))
    for source in sources:
        steps.append(_traced("start", "web_research"))
        steps.append(_traced("end", "web_research", {"sources_gathered": [source]}))
    steps.append(_traced("start", "reflection"))
    steps.append(_traced("end", "reflection", {"is_sufficient": True, "follow_up_queries": []}))
    steps.append(_traced("start", "finalize_answer"))
    reply = {"type": AI, "id": f"sim-{uuid.uuid4()}", "content": answer}
    steps.append((Topic.VALUES, {"messages": transcript + [reply]}))
    return steps


SCRIPTS: dict[str, ScriptBuilder] = {
    SHAPE_UPDATES: updates_script,
    SHAPE_EVENTS: events_script,
}


def load_script(path: str | Path) -> list[Step]:
    """Read a recorded run: a JSON list of {"topic": ..., "payload": {...}}."""
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    return [(Topic(step["topic"]), dict(step["payload"])) for step in raw]


class Sim(StreamingTransport):
    """Replays a scripted research run instead of calling an engine."""

    source = "sim"

    def __init__(
        self,
        event_bus: IEventBus,
        shape: str = SHAPE_UPDATES,
        script: list[Step] | None = None,
        delay: float = 0.0,
    ):
        super().__init__(event_bus)
        if shape not in SCRIPTS:
            raise ValueError(f"Unknown SIM shape: {shape}")
        self._builder = SCRIPTS[shape]
        self._script = script
        self._delay = delay

    async def _stream(self, request: RunRequest) -> None:
        steps = self._script if self._script is not None else self._builder(request)
        logger.info("SIM: replaying %s steps", len(steps))
        for topic, payload in steps:
            await asyncio.sleep(self._delay)
            await self._publish(topic, payload)
