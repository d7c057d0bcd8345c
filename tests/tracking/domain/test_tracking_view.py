"""Tests for TrackingView — the observer that caches the latest snapshot."""

from tracking.projections.tracking_view import TrackingView
from tracking.shipment.behaviors import behavior_for


class TestTrackingView:
    def test_shipment_id(self, shipment):
        assert TrackingView(shipment).shipment_id == "s-001"

    def test_no_snapshot_before_tracking(self, shipment):
        view = TrackingView(shipment)
        assert view.latest_snapshot is None
        assert not view.is_tracking

    def test_start_tracking_captures_current_state(self, shipment):
        shipment.apply_update(behavior_for("shipped"), 2000, "Dock A")
        view = TrackingView(shipment)
        view.start_tracking()
        assert view.is_tracking
        assert view.latest_snapshot.status == "shipped"
        assert view.latest_snapshot.location == "Dock A"

    def test_start_tracking_registers_observer(self, shipment):
        view = TrackingView(shipment)
        view.start_tracking()
        assert view in shipment.observers

    def test_notification_replaces_snapshot(self, shipment):
        view = TrackingView(shipment)
        view.start_tracking()
        first = view.latest_snapshot

        shipment.apply_update(behavior_for("location"), 3000, "Denver CO")

        assert view.latest_snapshot is not first
        assert view.latest_snapshot.location == "Denver CO"
        assert first.location == "unknown"

    def test_snapshot_is_independent_of_shipment(self, shipment):
        view = TrackingView(shipment)
        view.start_tracking()
        shipment.notes.append("direct append without notify")
        assert view.latest_snapshot.notes == []

    def test_stop_tracking_freezes_snapshot(self, shipment):
        view = TrackingView(shipment)
        view.start_tracking()
        shipment.add_note("seen")
        before = view.latest_snapshot

        view.stop_tracking()
        shipment.add_note("unseen")
        shipment.apply_update(behavior_for("delivered"), 4000, None)

        assert view.latest_snapshot is before
        assert view.latest_snapshot.notes == ["seen"]
        assert view.latest_snapshot.status == "created"
        assert not view.is_tracking
        assert view not in shipment.observers

    def test_restart_tracking_resyncs(self, shipment):
        view = TrackingView(shipment)
        view.start_tracking()
        view.stop_tracking()
        shipment.add_note("while detached")

        view.start_tracking()

        assert view.latest_snapshot.notes == ["while detached"]

    def test_two_views_track_independently(self, shipment):
        left, right = TrackingView(shipment), TrackingView(shipment)
        left.start_tracking()
        right.start_tracking()

        right.stop_tracking()
        shipment.add_note("only left")

        assert left.latest_snapshot.notes == ["only left"]
        assert right.latest_snapshot.notes == []
