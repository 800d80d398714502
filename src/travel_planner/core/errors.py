"""Custom exceptions for the travel planner."""

class TravelPlannerError(Exception):
    """Base error for planner failures."""


class ValidationError(TravelPlannerError):
    """Raised when a traveler profile is invalid or incomplete."""


class CatalogError(TravelPlannerError):
    """Raised when destination catalog data breaks its invariants."""


class DestinationNotFoundError(TravelPlannerError):
    """Raised when a destination id is not in the catalog."""
