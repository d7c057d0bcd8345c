import pytest
from protean.integrations.pytest import DomainFixture
from tracking.shipment.shipment import Shipment


@pytest.fixture(scope="session")
def tracking_bed():
    from tracking.domain import tracking

    bed = DomainFixture(tracking)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(tracking_bed):
    with tracking_bed.domain_context():
        yield


@pytest.fixture(autouse=True)
def _reset_singletons():
    yield

    from tracking.feed import reset_feed
    from tracking.simulation import reset_simulator

    reset_feed()
    reset_simulator()


class RecordingObserver:
    """Observer that keeps every snapshot it is handed."""

    def __init__(self):
        self.received: list[Shipment] = []

    @property
    def call_count(self) -> int:
        return len(self.received)

    @property
    def last(self) -> Shipment | None:
        return self.received[-1] if self.received else None

    def on_shipment_changed(self, shipment: Shipment) -> None:
        self.received.append(shipment)


@pytest.fixture()
def observer():
    return RecordingObserver()


@pytest.fixture()
def shipment():
    return Shipment("s-001")


@pytest.fixture()
def make_observer():
    return RecordingObserver
