"""BDD tests for shipment feed simulation."""

from pytest_bdd import scenarios

scenarios("features/shipment_simulation.feature")
