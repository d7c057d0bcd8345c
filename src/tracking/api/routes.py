"""FastAPI routes for the Tracking domain.

Read-only access to the simulator's shipment registry. Every response is
built from a snapshot, never from the live entity.
"""

from fastapi import APIRouter, Depends, HTTPException

from tracking.api.schemas import ShipmentListResponse, ShipmentResponse, SimulationStatusResponse
from tracking.simulation import TrackingSimulator, get_simulator

# ---------------------------------------------------------------------------
# Shipment Router
# ---------------------------------------------------------------------------
shipment_router = APIRouter(prefix="/shipments", tags=["shipments"])


@shipment_router.get("", response_model=ShipmentListResponse)
async def list_shipments(simulator: TrackingSimulator = Depends(get_simulator)) -> ShipmentListResponse:
    """List every shipment the simulator has seen, ordered by id."""
    shipments = [
        ShipmentResponse(**simulator.shipments[shipment_id].snapshot().to_dict())
        for shipment_id in sorted(simulator.shipments)
    ]
    return ShipmentListResponse(shipments=shipments, total=len(shipments))


@shipment_router.get("/{shipment_id}", response_model=ShipmentResponse)
async def get_shipment(shipment_id: str, simulator: TrackingSimulator = Depends(get_simulator)) -> ShipmentResponse:
    """Return the current state of one shipment."""
    shipment = simulator.get_shipment(shipment_id)
    if shipment is None:
        raise HTTPException(status_code=404, detail=f"Shipment {shipment_id} not found")
    return ShipmentResponse(**shipment.snapshot().to_dict())


# ---------------------------------------------------------------------------
# Simulation Router
# ---------------------------------------------------------------------------
simulation_router = APIRouter(prefix="/simulation", tags=["simulation"])


@simulation_router.get("", response_model=SimulationStatusResponse)
async def simulation_status(simulator: TrackingSimulator = Depends(get_simulator)) -> SimulationStatusResponse:
    return SimulationStatusResponse(
        running=simulator.is_running,
        feed=simulator.feed.name,
        delay=simulator.delay,
        shipment_count=len(simulator.shipments),
    )
