"""Run lifecycle state machine.

The terminal flag of a run is derived from the phase: it is set only by
``finalize()`` and cleared by ``complete()``, ``begin()`` or ``reset()``.
"""

from enum import Enum

from ..logging_config import get_logger

logger = get_logger(__name__)


class RunPhase(str, Enum):
    """Where the current run stands."""

    IDLE = "idle"
    STREAMING = "streaming"
    FINALIZING = "finalizing"  # terminal activity seen, not yet archived
    CANCELLED = "cancelled"


class RunLifecycle:
    """Tracks the phase of the run in flight."""

    def __init__(self) -> None:
        self._phase = RunPhase.IDLE

    @property
    def phase(self) -> RunPhase:
        return self._phase

    @property
    def terminal(self) -> bool:
        return self._phase is RunPhase.FINALIZING

    @property
    def accepting_events(self) -> bool:
        return self._phase is not RunPhase.CANCELLED

    def begin(self) -> None:
        """A new submission: whatever the previous run left is discarded."""
        self._transition(RunPhase.STREAMING)

    def finalize(self) -> None:
        """The terminal activity was observed."""
        if self._phase is RunPhase.CANCELLED:
            return
        self._transition(RunPhase.FINALIZING)

    def complete(self) -> None:
        """The timeline was archived."""
        if self._phase is RunPhase.FINALIZING:
            self._transition(RunPhase.IDLE)

    def cancel(self) -> None:
        self._transition(RunPhase.CANCELLED)

    def reset(self) -> None:
        self._transition(RunPhase.IDLE)

    def _transition(self, phase: RunPhase) -> None:
        if phase is not self._phase:
            logger.debug("Run phase %s -> %s", self._phase.value, phase.value)
        self._phase = phase
