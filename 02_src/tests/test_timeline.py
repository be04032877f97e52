"""Tests for LiveTimeline, HistoryStore and RunLifecycle."""

import pytest

from research_console.models import Activity
from research_console.timeline import HistoryStore, LiveTimeline, RunLifecycle, RunPhase

A = Activity("Web Research", "Searching the web...")
B = Activity("Reflection", "Analyzing gathered information...")


class TestLiveTimeline:
    """Tests for LiveTimeline."""

    def test_append_preserves_order(self):
        timeline = LiveTimeline()
        timeline.append(A)
        timeline.append(B)
        assert timeline.snapshot() == (A, B)

    def test_repeated_activities_are_kept(self):
        """No deduplication."""
        timeline = LiveTimeline()
        timeline.append(A)
        timeline.append(A)
        assert len(timeline) == 2

    def test_snapshot_is_a_copy(self):
        timeline = LiveTimeline()
        timeline.append(A)
        snapshot = timeline.snapshot()
        timeline.append(B)
        assert snapshot == (A,)

    def test_clear(self):
        timeline = LiveTimeline()
        timeline.append(A)
        timeline.clear()
        assert timeline.snapshot() == ()
        assert list(timeline) == []


class TestHistoryStore:
    """Tests for HistoryStore."""

    def test_archive_and_get(self):
        history = HistoryStore()
        history.archive("m1", [A, B])
        assert history.get("m1") == (A, B)
        assert "m1" in history
        assert len(history) == 1

    def test_get_missing(self):
        assert HistoryStore().get("nope") is None

    def test_later_write_replaces(self):
        """Same id twice: the later write wins, no merge."""
        history = HistoryStore()
        history.archive("m1", [A])
        history.archive("m1", [B])
        assert history.get("m1") == (B,)

    def test_archived_entry_is_detached_from_source(self):
        history = HistoryStore()
        source = [A]
        history.archive("m1", source)
        source.append(B)
        assert history.get("m1") == (A,)

    def test_view_is_read_only(self):
        history = HistoryStore()
        history.archive("m1", [A])
        view = history.view()
        with pytest.raises(TypeError):
            view["m2"] = (B,)

    def test_to_dict(self):
        history = HistoryStore()
        history.archive("m1", [A])
        assert history.to_dict() == {"m1": [{"title": A.title, "data": A.data}]}

    def test_clear(self):
        history = HistoryStore()
        history.archive("m1", [A])
        history.clear()
        assert history.message_ids() == []


class TestRunLifecycle:
    """Tests for RunLifecycle transitions."""

    def test_initial_state(self):
        lifecycle = RunLifecycle()
        assert lifecycle.phase is RunPhase.IDLE
        assert lifecycle.terminal is False
        assert lifecycle.accepting_events is True

    def test_full_run(self):
        lifecycle = RunLifecycle()
        lifecycle.begin()
        assert lifecycle.phase is RunPhase.STREAMING
        lifecycle.finalize()
        assert lifecycle.terminal is True
        lifecycle.complete()
        assert lifecycle.phase is RunPhase.IDLE
        assert lifecycle.terminal is False

    def test_begin_clears_terminal(self):
        """The flag never carries over into the next run."""
        lifecycle = RunLifecycle()
        lifecycle.finalize()
        lifecycle.begin()
        assert lifecycle.terminal is False

    def test_complete_without_terminal_is_noop(self):
        lifecycle = RunLifecycle()
        lifecycle.begin()
        lifecycle.complete()
        assert lifecycle.phase is RunPhase.STREAMING

    def test_cancelled_run_ignores_finalize(self):
        lifecycle = RunLifecycle()
        lifecycle.begin()
        lifecycle.cancel()
        lifecycle.finalize()
        assert lifecycle.terminal is False
        assert lifecycle.accepting_events is False

    def test_reset(self):
        lifecycle = RunLifecycle()
        lifecycle.cancel()
        lifecycle.reset()
        assert lifecycle.phase is RunPhase.IDLE
        assert lifecycle.accepting_events is True
