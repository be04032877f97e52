"""Stream event models.

The engine emits two unrelated wire shapes. Both are translated into the
variants below before classification, see ``stream.adapter``.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Union


class Stage(str, Enum):
    """Pipeline stages of the research graph, in execution order."""

    GENERATE_QUERY = "generate_query"
    WEB_RESEARCH = "web_research"
    REFLECTION = "reflection"
    FINALIZE_ANSWER = "finalize_answer"


class EventPhase(str, Enum):
    """Lifecycle marker of a traced event."""

    CHAIN_START = "chain_start"
    CHAIN_END = "chain_end"
    OTHER = "other"


@dataclass(frozen=True)
class TracedEvent:
    """Callback-style event: ``{"event": "on_chain_start", "name": ..., "data": {...}}``."""

    phase: EventPhase
    name: str
    data: Mapping[str, Any] | None = None

    @property
    def output(self) -> Any:
        if self.data is None:
            return None
        return self.data.get("output")


@dataclass(frozen=True)
class FlattenedEvent:
    """Node-update event: ``{"web_research": {...node output...}}``."""

    stage: Stage
    output: Any = field(default=None)


RawEvent = Union[TracedEvent, FlattenedEvent]
