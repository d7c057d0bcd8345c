"""Simulation runtime — the process-wide simulator and its shipment registry."""

from tracking.simulation.simulator import TrackingSimulator

_simulator_instance = None


def get_simulator() -> TrackingSimulator:
    """Return the process-wide simulator (singleton), built from the configured feed."""
    global _simulator_instance
    if _simulator_instance is None:
        _simulator_instance = TrackingSimulator()
    return _simulator_instance


def reset_simulator():
    """Reset the simulator singleton (useful for testing)."""
    global _simulator_instance
    _simulator_instance = None


__all__ = ["TrackingSimulator", "get_simulator", "reset_simulator"]
