"""Tracking domain API package."""

from tracking.api.routes import shipment_router, simulation_router

__all__ = ["shipment_router", "simulation_router"]
