"""Update behaviors — one mutation rule per feed event type.

Behaviors are stateless callables ``(shipment, timestamp, payload)``. The
event type vocabulary is closed: ``EventType`` enumerates it and
``BEHAVIORS`` maps every member to its rule. Codes outside the vocabulary
resolve to ``ignore``.

Only ``canceled`` and ``lost`` record an audit entry in ``updates``. The
other status changes set the status silently.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import Enum
from typing import Protocol

from tracking.shipment.shipment import Shipment, ShipmentStatus


class EventType(Enum):
    CREATED = "created"
    SHIPPED = "shipped"
    LOCATION = "location"
    DELIVERED = "delivered"
    DELAYED = "delayed"
    LOST = "lost"
    CANCELED = "canceled"
    NOTE_ADDED = "noteadded"

    @classmethod
    def parse(cls, code: str) -> EventType | None:
        """Exact, case-sensitive lookup. Unknown codes return None."""
        try:
            return cls(code)
        except ValueError:
            return None


class UpdateBehavior(Protocol):
    def __call__(self, shipment: Shipment, timestamp: int, payload: str | None) -> None: ...


def format_timestamp(timestamp: int) -> str:
    """Render an epoch-milliseconds timestamp as UTC ``YYYY-MM-DD HH:MM:SS``.

    Timestamps outside the datetime range render as the raw integer.
    """
    try:
        return datetime.fromtimestamp(timestamp / 1000, UTC).strftime("%Y-%m-%d %H:%M:%S")
    except (ValueError, OverflowError, OSError):
        return str(timestamp)


def _transition_message(previous: str, current: str, timestamp: int) -> str:
    return f"Shipment went from {previous} to {current} on {format_timestamp(timestamp)}"


# ---------------------------------------------------------------------------
# Behaviors
# ---------------------------------------------------------------------------
def mark_created(shipment: Shipment, timestamp: int, payload: str | None) -> None:
    shipment.status = ShipmentStatus.CREATED.value


def mark_shipped(shipment: Shipment, timestamp: int, payload: str | None) -> None:
    shipment.status = ShipmentStatus.SHIPPED.value
    if payload is not None:
        shipment.location = payload
    shipment.expected_delivery = timestamp


def move_location(shipment: Shipment, timestamp: int, payload: str | None) -> None:
    if payload is not None:
        shipment.location = payload


def mark_delivered(shipment: Shipment, timestamp: int, payload: str | None) -> None:
    shipment.status = ShipmentStatus.DELIVERED.value


def mark_delayed(shipment: Shipment, timestamp: int, payload: str | None) -> None:
    shipment.status = ShipmentStatus.DELAYED.value


def mark_lost(shipment: Shipment, timestamp: int, payload: str | None) -> None:
    previous = shipment.status
    shipment.status = ShipmentStatus.LOST.value
    shipment.add_update(_transition_message(previous, shipment.status, timestamp))


def mark_canceled(shipment: Shipment, timestamp: int, payload: str | None) -> None:
    previous = shipment.status
    shipment.status = ShipmentStatus.CANCELED.value
    shipment.add_update(_transition_message(previous, shipment.status, timestamp))


def add_note(shipment: Shipment, timestamp: int, payload: str | None) -> None:
    if payload is not None:
        shipment.add_note(payload)


def ignore(shipment: Shipment, timestamp: int, payload: str | None) -> None:
    """Fallback for event types outside the vocabulary."""


BEHAVIORS: dict[EventType, UpdateBehavior] = {
    EventType.CREATED: mark_created,
    EventType.SHIPPED: mark_shipped,
    EventType.LOCATION: move_location,
    EventType.DELIVERED: mark_delivered,
    EventType.DELAYED: mark_delayed,
    EventType.LOST: mark_lost,
    EventType.CANCELED: mark_canceled,
    EventType.NOTE_ADDED: add_note,
}


def behavior_for(code: str) -> UpdateBehavior:
    """Select the behavior for a feed event type code."""
    event_type = EventType.parse(code)
    if event_type is None:
        return ignore
    return BEHAVIORS[event_type]
