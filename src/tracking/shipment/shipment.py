"""Shipment entity — the subject every tracking observer attaches to.

A Shipment holds the state a carrier feed evolves over time: status,
location, expected delivery, free-form notes and an audit trail of
updates. Every public mutation entry point (``add_note``, ``add_update``,
``apply_update``) ends in a synchronous notification of all attached
observers.

Observers never receive the live entity. Each one is handed its own
independent snapshot, so a slow or careless observer cannot alias the
registry's copy.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from tracking.projections.tracking_view import ShipmentObserver
    from tracking.shipment.behaviors import UpdateBehavior


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class ShipmentStatus(Enum):
    CREATED = "created"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    DELAYED = "delayed"
    LOST = "lost"
    CANCELED = "canceled"


DEFAULT_LOCATION = "unknown"


# ---------------------------------------------------------------------------
# Entity
# ---------------------------------------------------------------------------
class Shipment:
    def __init__(self, shipment_id: str):
        self._id = shipment_id
        self.status: str = ShipmentStatus.CREATED.value
        self.location: str = DEFAULT_LOCATION
        self.expected_delivery: int | None = None
        self.notes: list[str] = []
        self.updates: list[str] = []
        self._observers: list[ShipmentObserver] = []

    @property
    def id(self) -> str:
        return self._id

    def __repr__(self) -> str:
        return f"<Shipment {self._id} status={self.status} location={self.location}>"

    # -------------------------------------------------------------------
    # Observers
    # -------------------------------------------------------------------
    @property
    def observers(self) -> tuple[ShipmentObserver, ...]:
        return tuple(self._observers)

    def register_observer(self, observer: ShipmentObserver) -> None:
        """Attach an observer. Registering the same observer twice is a no-op."""
        if not any(o is observer for o in self._observers):
            self._observers.append(observer)

    def remove_observer(self, observer: ShipmentObserver) -> None:
        """Detach an observer if it is attached."""
        self._observers = [o for o in self._observers if o is not observer]

    def notify_observers(self) -> None:
        """Hand every attached observer a fresh snapshot of the current state.

        Iterates over a copy of the observer list: an observer that detaches
        itself (or another observer) mid-dispatch does not cause anyone
        else to be skipped or notified twice.
        """
        for observer in list(self._observers):
            observer.on_shipment_changed(self.snapshot())

    # -------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------
    def add_note(self, note: str) -> None:
        self.notes.append(note)
        self.notify_observers()

    def add_update(self, update: str) -> None:
        self.updates.append(update)
        self.notify_observers()

    def apply_update(self, behavior: UpdateBehavior, timestamp: int, payload: str | None = None) -> None:
        """Run ``behavior`` against this shipment, then notify exactly once.

        Behaviors that call ``add_note``/``add_update`` themselves trigger
        their own notifications in addition to this one.
        """
        behavior(self, timestamp, payload)
        self.notify_observers()

    # -------------------------------------------------------------------
    # Views
    # -------------------------------------------------------------------
    def snapshot(self) -> Shipment:
        """Return an independent copy of the current state, without observers."""
        copy = Shipment(self._id)
        copy.status = self.status
        copy.location = self.location
        copy.expected_delivery = self.expected_delivery
        copy.notes = list(self.notes)
        copy.updates = list(self.updates)
        return copy

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self._id,
            "status": self.status,
            "location": self.location,
            "expected_delivery": self.expected_delivery,
            "notes": list(self.notes),
            "updates": list(self.updates),
        }
