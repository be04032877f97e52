"""Request/response models for the HTTP API."""

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field

from ..config import (
    DEFAULT_ANSWER_MODEL,
    DEFAULT_EFFORT,
    DEFAULT_QUERY_GENERATOR_MODEL,
    DEFAULT_REFLECTION_MODEL,
    MAX_LOOPS,
    MAX_QUERIES,
    MIN_LOOPS,
    MIN_QUERIES,
)
from ..models import RunConfiguration


class RunConfigModel(BaseModel):
    """Run settings as collected by the input form."""

    effort: Literal["low", "medium", "high", "custom"] = DEFAULT_EFFORT
    query_generator_model: str = DEFAULT_QUERY_GENERATOR_MODEL
    reflection_model: str = DEFAULT_REFLECTION_MODEL
    answer_model: str = DEFAULT_ANSWER_MODEL
    number_of_initial_queries: int | None = Field(None, ge=MIN_QUERIES, le=MAX_QUERIES)
    max_research_loops: int | None = Field(None, ge=MIN_LOOPS, le=MAX_LOOPS)
    enable_thinking: bool = False

    def to_configuration(self) -> RunConfiguration:
        """Effort preset, overridden by any explicit counts."""
        return RunConfiguration.from_effort(
            self.effort,
            **self.model_dump(exclude={"effort"}),
        )


class SubmitRequest(BaseModel):
    """Request model for submitting a turn."""

    text: str
    config: RunConfigModel = Field(default_factory=RunConfigModel)


class StatusResponse(BaseModel):
    """Response model for status."""

    status: str


class ActivityModel(BaseModel):
    title: str
    data: str


class MessageModel(BaseModel):
    id: str | None
    role: str
    content: Any


class MessagesResponse(BaseModel):
    messages: list[MessageModel]
    loading: bool


class TimelineResponse(BaseModel):
    phase: str
    terminal: bool
    activities: list[ActivityModel]


class TraceEventResponse(BaseModel):
    """Response model for trace event."""

    id: str
    event_type: str
    actor: str
    data: dict[str, Any]
    timestamp: datetime
