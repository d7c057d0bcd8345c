"""Tracking simulator — replays an ordered event feed against shipments.

One ingestion task per run. The task reads the feed in order, resolves
(or lazily creates) the shipment each record refers to, applies the
matching update behavior and then pauses for a fixed delay before the
next record. The pause is the only suspension point, so a stop request
always lands between two records.

Failure modes:
    - Feed unavailable: logged, the run ends without processing anything.
    - Malformed record: logged and re-raised, aborting the run.
    - Unknown event type: not an error, the record is a no-op.
"""

from __future__ import annotations

import asyncio
import os

import structlog
from protean.exceptions import ValidationError

from tracking.feed import FeedPort, FeedUnavailable, get_feed
from tracking.shipment.behaviors import behavior_for
from tracking.shipment.records import parse_record
from tracking.shipment.shipment import Shipment
from tracking.utils.logging import add_context

logger = structlog.get_logger(__name__)

DEFAULT_EVENT_DELAY = 1.0


def get_event_delay() -> float:
    """Seconds to pause between records, from TRACKING_EVENT_DELAY."""
    return float(os.environ.get("TRACKING_EVENT_DELAY", DEFAULT_EVENT_DELAY))


class TrackingSimulator:
    def __init__(self, feed: FeedPort | None = None, delay: float | None = None):
        self.feed = feed if feed is not None else get_feed()
        self.delay = get_event_delay() if delay is None else delay
        self.shipments: dict[str, Shipment] = {}
        self._task: asyncio.Task | None = None
        self._stop_requested = False
        self._wakeup: asyncio.Event | None = None

    # -------------------------------------------------------------------
    # Registry
    # -------------------------------------------------------------------
    def get_shipment(self, shipment_id: str) -> Shipment | None:
        return self.shipments.get(shipment_id)

    def get_or_create_shipment(self, shipment_id: str) -> Shipment:
        shipment = self.shipments.get(shipment_id)
        if shipment is None:
            shipment = Shipment(shipment_id)
            self.shipments[shipment_id] = shipment
        return shipment

    # -------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------
    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> asyncio.Task:
        """Launch the ingestion task on the running event loop.

        Returns the task without waiting for it. While a run is in progress
        the existing task is returned instead of starting a second one.
        """
        if self.is_running:
            return self._task

        self._stop_requested = False
        self._task = asyncio.get_running_loop().create_task(self.run(), name="tracking-simulator")
        return self._task

    def stop(self) -> None:
        """Ask the ingestion task to stop at its next pause.

        Must be called from the thread running the event loop.
        """
        self._stop_requested = True
        if self._wakeup is not None:
            self._wakeup.set()

    @property
    def stop_requested(self) -> bool:
        return self._stop_requested

    # -------------------------------------------------------------------
    # Ingestion
    # -------------------------------------------------------------------
    async def run(self) -> None:
        self._wakeup = asyncio.Event()
        add_context(feed=self.feed.name)
        try:
            lines = self.feed.open()
        except FeedUnavailable as exc:
            logger.error("Tracking feed unavailable", error=str(exc))
            return

        logger.info("Tracking simulation started", delay=self.delay)
        processed = 0
        for line in lines:
            if self.stop_requested:
                break
            if not line.strip():
                continue

            try:
                self.process_record(line)
            except ValidationError as exc:
                logger.error("Malformed tracking record", line=line, error=str(exc))
                raise
            processed += 1

            await self._pause()

        logger.info(
            "Tracking simulation finished",
            records=processed,
            shipments=len(self.shipments),
            stopped=self.stop_requested,
        )

    async def _pause(self) -> None:
        if self._stop_requested:
            return
        try:
            await asyncio.wait_for(self._wakeup.wait(), timeout=self.delay)
        except TimeoutError:
            pass

    def process_record(self, line: str) -> Shipment:
        """Apply one feed line to its shipment and return the shipment."""
        record = parse_record(line)
        # Empty text fields come back from the value object as None
        event_type = record.event_type or ""
        shipment = self.get_or_create_shipment(record.shipment_id or "")
        logger.info(
            "Applying tracking event",
            event_type=event_type,
            shipment_id=shipment.id,
        )
        shipment.apply_update(behavior_for(event_type), record.timestamp, record.payload)
        return shipment
