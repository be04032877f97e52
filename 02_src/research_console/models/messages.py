"""Chat transcript and run request models."""

from dataclasses import dataclass, field
from typing import Any

from ..config import (
    DEFAULT_ANSWER_MODEL,
    DEFAULT_EFFORT,
    DEFAULT_QUERY_GENERATOR_MODEL,
    DEFAULT_REFLECTION_MODEL,
    EFFORT_PRESETS,
)

HUMAN = "human"
AI = "ai"


@dataclass
class ChatMessage:
    """A single transcript message as seen by the transport."""

    id: str | None
    role: str  # "human", "ai", "system", "tool"
    content: Any

    @property
    def is_agent(self) -> bool:
        return self.role == AI

    @classmethod
    def from_wire(cls, raw: dict) -> "ChatMessage":
        """Build from a LangGraph message dict (``type`` or ``role`` key)."""
        role = raw.get("type") or raw.get("role") or ""
        if role == "assistant":
            role = AI
        elif role == "user":
            role = HUMAN
        message_id = raw.get("id")
        return cls(
            id=str(message_id) if message_id else None,
            role=role,
            content=raw.get("content", ""),
        )

    def to_wire(self) -> dict:
        return {"type": self.role, "content": self.content, "id": self.id}


@dataclass
class RunConfiguration:
    """Per-run settings forwarded to the engine as ``configurable``."""

    query_generator_model: str = DEFAULT_QUERY_GENERATOR_MODEL
    reflection_model: str = DEFAULT_REFLECTION_MODEL
    answer_model: str = DEFAULT_ANSWER_MODEL
    number_of_initial_queries: int = EFFORT_PRESETS[DEFAULT_EFFORT]["queries"]
    max_research_loops: int = EFFORT_PRESETS[DEFAULT_EFFORT]["loops"]
    enable_thinking: bool = False

    @classmethod
    def from_effort(cls, effort: str, **overrides: Any) -> "RunConfiguration":
        """Start from an effort preset; explicit overrides win."""
        if effort not in EFFORT_PRESETS:
            raise ValueError(f"Unknown effort preset: {effort}")
        preset = EFFORT_PRESETS[effort]
        values = {
            "number_of_initial_queries": preset["queries"],
            "max_research_loops": preset["loops"],
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def to_configurable(self) -> dict[str, Any]:
        return {
            "query_generator_model": self.query_generator_model,
            "reflection_model": self.reflection_model,
            "answer_model": self.answer_model,
            "number_of_initial_queries": self.number_of_initial_queries,
            "max_research_loops": self.max_research_loops,
            "enable_thinking": bool(self.enable_thinking),
        }


@dataclass
class RunRequest:
    """Outgoing payload for one submitted turn."""

    messages: list[ChatMessage]
    configuration: RunConfiguration = field(default_factory=RunConfiguration)

    def to_payload(self) -> dict[str, Any]:
        return {
            "messages": [msg.to_wire() for msg in self.messages],
            "configurable": self.configuration.to_configurable(),
        }
