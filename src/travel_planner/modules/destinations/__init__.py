"""Destination module."""

from travel_planner.modules.destinations.catalog import DestinationCatalog, default_catalog
from travel_planner.modules.destinations.scoring import budget_band, score_destination, trip_length

__all__ = ["DestinationCatalog", "default_catalog", "budget_band", "score_destination", "trip_length"]
