"""HistoryStore implementation."""

from types import MappingProxyType
from typing import Iterable, Iterator, Mapping

from ..models import Activity


class HistoryStore:
    """Archived timelines keyed by the id of the agent message they explain."""

    def __init__(self) -> None:
        self._entries: dict[str, tuple[Activity, ...]] = {}

    def archive(self, message_id: str, activities: Iterable[Activity]) -> None:
        """Store ``activities`` under ``message_id``, replacing any earlier entry."""
        self._entries[message_id] = tuple(activities)

    def get(self, message_id: str) -> tuple[Activity, ...] | None:
        return self._entries.get(message_id)

    def view(self) -> Mapping[str, tuple[Activity, ...]]:
        """Live read-only mapping of the store."""
        return MappingProxyType(self._entries)

    def message_ids(self) -> list[str]:
        return list(self._entries)

    def to_dict(self) -> dict[str, list[dict[str, str]]]:
        return {
            message_id: [activity.to_dict() for activity in activities]
            for message_id, activities in self._entries.items()
        }

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, message_id: object) -> bool:
        return message_id in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.message_ids())
