"""Itinerary module."""

from travel_planner.modules.itinerary.builder import build_travel_plan, estimate_total, select_experiences

__all__ = ["build_travel_plan", "estimate_total", "select_experiences"]
