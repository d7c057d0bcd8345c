"""Tracking bounded context — Shipment state driven by carrier event feeds.

Shipments are in-memory entities mutated by one update behavior per feed
event type. Interested parties attach observers to a shipment and receive a
snapshot after every mutation. The simulator replays an ordered feed at a
paced rate.
"""

from protean.domain import Domain

tracking = Domain(name="tracking")
