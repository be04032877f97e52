"""Archive reconciler.

The engine never says "the run is complete and this is its final message".
Two soft signals stand in for it: the finalize activity (the run intends to
finish) and loading turning false (the transport stopped). The timeline is
archived only when both hold and the transcript ends with an agent message
that has an id. A run that stops without a finalize activity (error, cancel)
is never archived.
"""

from typing import Sequence

from ..logging_config import get_logger
from ..models import ChatMessage
from .history import HistoryStore
from .lifecycle import RunLifecycle
from .live import LiveTimeline

logger = get_logger(__name__)


def archive_target(
    messages: Sequence[ChatMessage], loading: bool, terminal: bool
) -> str | None:
    """Id of the message the live timeline should be archived under, if any."""
    if not terminal or loading or not messages:
        return None
    last = messages[-1]
    if last.is_agent and last.id:
        return last.id
    return None


class ArchiveReconciler:
    """Moves the live timeline into history once a run has settled."""

    def __init__(
        self,
        timeline: LiveTimeline,
        lifecycle: RunLifecycle,
        history: HistoryStore,
    ):
        self._timeline = timeline
        self._lifecycle = lifecycle
        self._history = history

    def reconcile(self, messages: Sequence[ChatMessage], loading: bool) -> str | None:
        """Archive if the run has settled. Returns the archived message id."""
        terminal = self._lifecycle.terminal
        message_id = archive_target(messages, loading, terminal)

        if message_id is None:
            if terminal and not loading:
                # finalize seen but the final message has not landed yet
                last_role = messages[-1].role if messages else None
                logger.debug(
                    "Archive deferred: no agent message to attach timeline to",
                    extra={"context": {"message_count": len(messages), "last_role": last_role}},
                )
            return None

        activities = self._timeline.snapshot()
        self._history.archive(message_id, activities)
        self._timeline.clear()
        self._lifecycle.complete()

        logger.info(
            "Archived %s activities under message %s",
            len(activities),
            message_id,
            extra={"context": {"message_id": message_id}},
        )
        return message_id
