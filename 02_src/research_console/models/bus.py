"""EventBus data models."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Topic(str, Enum):
    """EventBus topics published by transports."""

    STATUS = "status"  # {"loading": bool}
    UPDATE = "update"  # {"event": <raw stream event>}
    VALUES = "values"  # {"messages": [<wire message>, ...]}


@dataclass
class BusMessage:
    """A transport notification exchanged through EventBus."""

    id: str
    topic: Topic
    payload: dict  # varies by topic
    source: str  # transport that published
    timestamp: datetime
