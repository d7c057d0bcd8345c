"""Pydantic API schemas for the Tracking domain.

These are the external API contracts, separate from the Shipment entity.
The API layer only ever reads snapshots.
"""

from pydantic import BaseModel


class ShipmentResponse(BaseModel):
    id: str
    status: str
    location: str
    expected_delivery: int | None = None
    notes: list[str]
    updates: list[str]


class ShipmentListResponse(BaseModel):
    shipments: list[ShipmentResponse]
    total: int


class SimulationStatusResponse(BaseModel):
    running: bool
    feed: str
    delay: float
    shipment_count: int
