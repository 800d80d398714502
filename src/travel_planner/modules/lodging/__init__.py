"""Lodging module."""

from travel_planner.modules.lodging.selection import all_stays, preferred_stays, select_accommodations

__all__ = ["all_stays", "preferred_stays", "select_accommodations"]
