"""Run submitter."""

from datetime import datetime, timezone
from typing import Sequence

from ..logging_config import get_logger
from ..models import HUMAN, ChatMessage, RunConfiguration, RunRequest
from ..timeline import LiveTimeline, RunLifecycle
from ..transport import ITransport

logger = get_logger(__name__)


def timestamp_id() -> str:
    """Millisecond wall-clock id for locally authored messages."""
    return str(int(datetime.now(timezone.utc).timestamp() * 1000))


class RunSubmitter:
    """Starts a new run: resets per-run state, then hands the request to the transport."""

    def __init__(
        self,
        timeline: LiveTimeline,
        lifecycle: RunLifecycle,
        transport: ITransport | None = None,
    ):
        self._timeline = timeline
        self._lifecycle = lifecycle
        self._transport = transport

    def submit(
        self,
        text: str,
        config: RunConfiguration,
        prior_messages: Sequence[ChatMessage] = (),
    ) -> RunRequest | None:
        """Dispatch ``text`` as a new turn. Returns the dispatched request.

        Blank input is ignored. ``config`` is forwarded as given.
        """
        if not text or not text.strip():
            logger.debug("Ignoring blank submission")
            return None

        self._timeline.clear()
        self._lifecycle.begin()

        message = ChatMessage(id=timestamp_id(), role=HUMAN, content=text)
        request = RunRequest(messages=[*prior_messages, message], configuration=config)

        if self._transport is None:
            logger.warning("No transport attached, run %s not dispatched", message.id)
        else:
            self._transport.submit(request)

        logger.info(
            "Submitted run with %s messages",
            len(request.messages),
            extra={"context": {"message_id": message.id, **config.to_configurable()}},
        )
        return request
