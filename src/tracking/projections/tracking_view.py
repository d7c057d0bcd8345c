"""Shipment tracking view — the display-side cache of one shipment.

A TrackingView observes a single shipment and keeps the most recent
snapshot it was handed. The snapshot is replaced wholesale on every
notification and frozen once tracking stops.
"""

from __future__ import annotations

from typing import Protocol

import structlog

from tracking.shipment.shipment import Shipment

logger = structlog.get_logger(__name__)


class ShipmentObserver(Protocol):
    def on_shipment_changed(self, shipment: Shipment) -> None: ...


class TrackingView:
    def __init__(self, shipment: Shipment):
        self._shipment = shipment
        self._latest_snapshot: Shipment | None = None
        self._tracking = False

    @property
    def shipment_id(self) -> str:
        return self._shipment.id

    @property
    def latest_snapshot(self) -> Shipment | None:
        return self._latest_snapshot

    @property
    def is_tracking(self) -> bool:
        return self._tracking

    def start_tracking(self) -> None:
        """Attach to the shipment and capture its state as of now."""
        self._shipment.register_observer(self)
        self._latest_snapshot = self._shipment.snapshot()
        self._tracking = True

    def stop_tracking(self) -> None:
        self._shipment.remove_observer(self)
        self._tracking = False

    def on_shipment_changed(self, shipment: Shipment) -> None:
        self._latest_snapshot = shipment.snapshot()
        logger.debug(
            "Tracking view received update",
            shipment_id=self.shipment_id,
            status=shipment.status,
        )
