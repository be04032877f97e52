"""Wire adapter: raw stream payloads -> RawEvent variants.

The engine speaks two dialects. Callback streams carry an event type and a
node name (``{"event": "on_chain_end", "name": "reflection", "data": {...}}``),
node-update streams carry a single key naming the stage that just finished
(``{"reflection": {...}}``). Neither declares its shape, so it is detected
structurally here and nowhere else.
"""

from typing import Any, Mapping

from ..models import EventPhase, FlattenedEvent, RawEvent, Stage, TracedEvent

_PHASES = {
    "on_chain_start": EventPhase.CHAIN_START,
    "chain_start": EventPhase.CHAIN_START,
    "on_chain_end": EventPhase.CHAIN_END,
    "chain_end": EventPhase.CHAIN_END,
}


def decode(payload: Any) -> list[RawEvent]:
    """Return every plausible reading of ``payload``, traced reading first.

    An empty list means the payload matches neither shape.
    """
    if isinstance(payload, (TracedEvent, FlattenedEvent)):
        return [payload]
    if not isinstance(payload, Mapping):
        return []

    candidates: list[RawEvent] = []
    traced = decode_traced(payload)
    if traced is not None:
        candidates.append(traced)
    flattened = decode_flattened(payload)
    if flattened is not None:
        candidates.append(flattened)
    return candidates


def decode_traced(payload: Mapping) -> TracedEvent | None:
    event_type = payload.get("event") or payload.get("type")
    name = payload.get("name")
    if not isinstance(event_type, str) and not isinstance(name, str):
        return None

    data = payload.get("data")
    return TracedEvent(
        phase=parse_phase(event_type),
        name=name if isinstance(name, str) else "",
        data=data if isinstance(data, Mapping) else None,
    )


def decode_flattened(payload: Mapping) -> FlattenedEvent | None:
    for stage in Stage:
        value = payload.get(stage.value)
        # empty containers still mark a finished stage, falsy scalars do not
        if isinstance(value, (Mapping, list, tuple)) or value:
            return FlattenedEvent(stage=stage, output=value)
    return None


def parse_phase(event_type: Any) -> EventPhase:
    if not isinstance(event_type, str):
        return EventPhase.OTHER
    return _PHASES.get(event_type, EventPhase.OTHER)
