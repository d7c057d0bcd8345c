"""Shared BDD fixtures and step definitions for the Tracking domain."""

import asyncio

import pytest
from pytest_bdd import given, parsers, then, when
from tracking.feed.static_adapter import StaticFeed
from tracking.projections.tracking_view import TrackingView
from tracking.simulation import TrackingSimulator


@pytest.fixture()
def simulator():
    return TrackingSimulator(feed=StaticFeed(), delay=0)


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.parse('the feed "{lines}"'))
def given_feed(simulator, lines):
    simulator.feed = StaticFeed(lines.split("|"))


@given("the feed is unavailable")
def given_feed_unavailable(simulator):
    simulator.feed.configure(available=False)


@given(parsers.parse('the simulator has applied "{line}"'))
def given_applied(simulator, line):
    simulator.process_record(line)


@given(parsers.parse('a tracking view on shipment "{shipment_id}"'), target_fixture="view")
def given_tracking_view(simulator, shipment_id):
    view = TrackingView(simulator.shipments[shipment_id])
    view.start_tracking()
    return view


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when("the simulator replays the feed")
def replay_feed(simulator):
    asyncio.run(simulator.run())


@when(parsers.parse('the simulator applies "{line}"'))
def apply_line(simulator, line):
    simulator.process_record(line)


@when("the tracking view stops tracking")
def stop_tracking(view):
    view.stop_tracking()


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.parse('shipment "{shipment_id}" has status "{status}"'))
def shipment_has_status(simulator, shipment_id, status):
    assert simulator.shipments[shipment_id].status == status


@then(parsers.parse('shipment "{shipment_id}" is at location "{location}"'))
def shipment_at_location(simulator, shipment_id, location):
    assert simulator.shipments[shipment_id].location == location


@then(parsers.parse('shipment "{shipment_id}" is expected for delivery at {timestamp:d}'))
def shipment_expected_at(simulator, shipment_id, timestamp):
    assert simulator.shipments[shipment_id].expected_delivery == timestamp


@then(parsers.parse('shipment "{shipment_id}" has no updates'))
def shipment_has_no_updates(simulator, shipment_id):
    assert simulator.shipments[shipment_id].updates == []


@then(parsers.parse('shipment "{shipment_id}" has the update "{update}"'))
def shipment_has_update(simulator, shipment_id, update):
    assert update in simulator.shipments[shipment_id].updates


@then("the simulator holds no shipments")
def no_shipments(simulator):
    assert simulator.shipments == {}


@then(parsers.parse('the tracking view shows location "{location}"'))
def view_shows_location(view, location):
    assert view.latest_snapshot.location == location
