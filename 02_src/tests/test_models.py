"""Tests for data models."""

import pytest

from research_console.models import (
    Activity,
    ChatMessage,
    EventPhase,
    FlattenedEvent,
    RunConfiguration,
    RunRequest,
    Stage,
    TracedEvent,
)


class TestActivity:
    """Tests for Activity model."""

    def test_equality_and_dict(self):
        activity = Activity("Web Research", "Searching the web...")
        assert activity == Activity("Web Research", "Searching the web...")
        assert activity.to_dict() == {"title": "Web Research", "data": "Searching the web..."}


class TestEvents:
    """Tests for stream event models."""

    def test_traced_output(self):
        event = TracedEvent(EventPhase.CHAIN_END, "reflection", {"output": {"is_sufficient": True}})
        assert event.output == {"is_sufficient": True}

    def test_traced_output_without_data(self):
        assert TracedEvent(EventPhase.CHAIN_START, "reflection").output is None

    def test_flattened_defaults(self):
        assert FlattenedEvent(Stage.WEB_RESEARCH).output is None


class TestChatMessage:
    """Tests for ChatMessage model."""

    @pytest.mark.parametrize(
        "raw,role",
        [
            ({"type": "ai", "id": "1"}, "ai"),
            ({"role": "assistant", "id": "1"}, "ai"),
            ({"role": "user", "id": "1"}, "human"),
            ({"type": "human", "id": "1"}, "human"),
        ],
    )
    def test_from_wire_roles(self, raw, role):
        assert ChatMessage.from_wire(raw).role == role

    def test_from_wire_id(self):
        assert ChatMessage.from_wire({"type": "ai", "id": 42}).id == "42"
        assert ChatMessage.from_wire({"type": "ai"}).id is None

    def test_is_agent(self):
        assert ChatMessage(id="1", role="ai", content="").is_agent
        assert not ChatMessage(id="1", role="human", content="").is_agent

    def test_to_wire(self):
        msg = ChatMessage(id="1", role="human", content="hi")
        assert msg.to_wire() == {"type": "human", "content": "hi", "id": "1"}


class TestRunConfiguration:
    """Tests for RunConfiguration model."""

    @pytest.mark.parametrize(
        "effort,queries,loops",
        [("low", 1, 1), ("medium", 3, 3), ("high", 5, 10), ("custom", 3, 3)],
    )
    def test_effort_presets(self, effort, queries, loops):
        config = RunConfiguration.from_effort(effort)
        assert config.number_of_initial_queries == queries
        assert config.max_research_loops == loops

    def test_overrides_win(self):
        config = RunConfiguration.from_effort("low", max_research_loops=7, answer_model=None)
        assert config.max_research_loops == 7
        assert config.answer_model == RunConfiguration().answer_model

    def test_unknown_effort(self):
        with pytest.raises(ValueError):
            RunConfiguration.from_effort("extreme")

    def test_configurable_keys(self):
        assert set(RunConfiguration().to_configurable()) == {
            "query_generator_model",
            "reflection_model",
            "answer_model",
            "number_of_initial_queries",
            "max_research_loops",
            "enable_thinking",
        }


class TestRunRequest:
    """Tests for RunRequest model."""

    def test_payload(self):
        request = RunRequest(messages=[ChatMessage(id="1", role="human", content="q")])
        payload = request.to_payload()
        assert payload["messages"] == [{"type": "human", "content": "q", "id": "1"}]
        assert payload["configurable"]["max_research_loops"] == 3
