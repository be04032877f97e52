"""Event classifier: one stream event -> zero or one timeline Activity.

Pure and total. Anything it does not recognise yields ``None``; recognised
events with missing or malformed fields degrade to empty collections rather
than raising.
"""

from dataclasses import dataclass
from typing import Any, Callable, Mapping

from ..models import Activity, EventPhase, FlattenedEvent, Stage, TracedEvent
from .adapter import decode

GENERATING_QUERIES = "Generating Search Queries"
WEB_RESEARCH = "Web Research"
REFLECTION = "Reflection"
FINALIZING = "Finalizing Answer"

MAX_EXAMPLE_LABELS = 3

START_ACTIVITIES: dict[Stage, Activity] = {
    Stage.GENERATE_QUERY: Activity(GENERATING_QUERIES, "Creating search queries..."),
    Stage.WEB_RESEARCH: Activity(WEB_RESEARCH, "Searching the web..."),
    Stage.REFLECTION: Activity(REFLECTION, "Analyzing gathered information..."),
    Stage.FINALIZE_ANSWER: Activity(FINALIZING, "Composing and presenting the final answer."),
}


@dataclass(frozen=True)
class Classification:
    """Classifier result. ``terminal`` marks the finalize activity."""

    activity: Activity
    terminal: bool = False


def classify(raw: Any) -> Activity | None:
    """Classify a wire payload or decoded RawEvent."""
    result = classify_event(raw)
    return result.activity if result else None


def classify_event(raw: Any) -> Classification | None:
    """Like classify(), but also reports whether the run is finalizing."""
    for event in decode(raw):
        if isinstance(event, TracedEvent):
            result = _classify_traced(event)
        else:
            result = _classify_flattened(event)
        if result is not None:
            return result
    return None


def _classify_traced(event: TracedEvent) -> Classification | None:
    if event.phase is EventPhase.OTHER:
        return None
    try:
        stage = Stage(event.name)
    except ValueError:
        return None

    if stage is Stage.FINALIZE_ANSWER:
        if event.phase is EventPhase.CHAIN_START:
            return Classification(START_ACTIVITIES[stage], terminal=True)
        return None

    if event.data is None:
        return None
    output = event.output
    if output is not None:
        return Classification(_END_BUILDERS[stage](output))
    if event.phase is EventPhase.CHAIN_START:
        return Classification(START_ACTIVITIES[stage])
    return None


def _classify_flattened(event: FlattenedEvent) -> Classification:
    # node updates only exist once a stage has finished
    if event.stage is Stage.FINALIZE_ANSWER:
        return Classification(START_ACTIVITIES[event.stage], terminal=True)
    return Classification(_END_BUILDERS[event.stage](event.output))


def _generated_queries(output: Any) -> Activity:
    return Activity(GENERATING_QUERIES, ", ".join(_strings(_field(output, "query_list"))))


def _research_summary(output: Any) -> Activity:
    sources = _items(_field(output, "sources_gathered"))
    labels: list[str] = []
    for source in sources:
        label = _field(source, "label")
        if not label:
            continue
        label = str(label)
        if label not in labels:
            labels.append(label)
    related = ", ".join(labels[:MAX_EXAMPLE_LABELS]) or "N/A"
    return Activity(WEB_RESEARCH, f"Gathered {len(sources)} sources. Related to: {related}.")


def _reflection_verdict(output: Any) -> Activity:
    if _field(output, "is_sufficient"):
        return Activity(REFLECTION, "Search successful, generating final answer.")
    follow_ups = ", ".join(_strings(_field(output, "follow_up_queries"))) or "additional info"
    return Activity(REFLECTION, f"Need more information, searching for {follow_ups}.")


_END_BUILDERS: dict[Stage, Callable[[Any], Activity]] = {
    Stage.GENERATE_QUERY: _generated_queries,
    Stage.WEB_RESEARCH: _research_summary,
    Stage.REFLECTION: _reflection_verdict,
}


def _field(obj: Any, key: str) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(key)
    return None


def _items(value: Any) -> list:
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def _strings(value: Any) -> list[str]:
    return [str(item) for item in _items(value) if item is not None]
