"""LiveTimeline implementation."""

from typing import Iterator

from ..models import Activity


class LiveTimeline:
    """Activities of the run currently in flight, in arrival order.

    Repeated activities are kept: the timeline is a log of what the stream
    reported, not a summary.
    """

    def __init__(self) -> None:
        self._activities: list[Activity] = []

    def append(self, activity: Activity) -> None:
        """Add an activity at the end of the timeline."""
        self._activities.append(activity)

    def snapshot(self) -> tuple[Activity, ...]:
        """Read-only copy of the current timeline."""
        return tuple(self._activities)

    def clear(self) -> None:
        """Drop every activity."""
        self._activities.clear()

    def __len__(self) -> int:
        return len(self._activities)

    def __iter__(self) -> Iterator[Activity]:
        return iter(self.snapshot())
