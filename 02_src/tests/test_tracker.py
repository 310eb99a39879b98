"""Tests for Tracker."""

from datetime import datetime, timezone

from parcelbot.tracker import Tracker


class TestTrackerTrack:
    """Tests for Tracker.track() method."""

    def test_track_creates_event(self, tracker):
        """Test that track() creates a TraceEvent."""
        tracker.track(
            event_type="test_event",
            actor="test_actor",
            data={"key": "value"},
        )

        events = tracker.get_events()
        assert len(events) == 1
        assert events[0].event_type == "test_event"
        assert events[0].actor == "test_actor"
        assert events[0].data == {"key": "value"}

    def test_track_generates_id_and_timestamp(self, tracker):
        before = datetime.now(timezone.utc)
        event = tracker.track(event_type="test_event", actor="test_actor", data={})
        after = datetime.now(timezone.utc)

        assert event.id
        assert before <= event.timestamp <= after

    def test_ring_buffer_keeps_latest(self):
        tracker = Tracker(max_events=3)
        for i in range(5):
            tracker.track(event_type="e", actor="a", data={"i": i})

        assert [e.data["i"] for e in tracker.get_events()] == [2, 3, 4]


class TestTrackerGetEvents:
    """Tests for Tracker.get_events() filters."""

    def test_filter_by_type_and_actor(self, tracker):
        tracker.track("turn_received", "dialogue_agent", {})
        tracker.track("guard_triggered", "dialogue_agent", {})
        tracker.track("idle_reminder_sent", "idle_monitor", {})

        assert len(tracker.get_events(event_types=["guard_triggered"])) == 1
        assert len(tracker.get_events(actor="dialogue_agent")) == 2
        assert tracker.get_events(event_types=["turn_received"], actor="idle_monitor") == []

    def test_limit_returns_most_recent(self, tracker):
        for i in range(10):
            tracker.track("e", "a", {"i": i})

        assert [e.data["i"] for e in tracker.get_events(limit=2)] == [8, 9]

    def test_clear(self, tracker):
        tracker.track("e", "a", {})
        tracker.clear()
        assert tracker.get_events() == []
