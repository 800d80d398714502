from __future__ import annotations

from typing import Any, Dict, List

import pytest

from travel_planner.core.models import (
    ActivityTag,
    ClimateTag,
    StayStyle,
    TravelDates,
    TravelerProfile,
    TravelPace,
)
from travel_planner.modules.destinations.catalog import DestinationCatalog, default_catalog


def build_profile(**overrides: Any) -> TravelerProfile:
    fields: Dict[str, Any] = {
        "full_name": "Ada Traveler",
        "email": "ada@example.com",
        "phone": "+1 555 0100",
        "departure_city": "New York",
        "travel_dates": TravelDates(start="2025-05-01", end="2025-05-09"),
        "traveler_count": 2,
        "budget_per_person": 300,
        "travel_pace": TravelPace.BALANCED,
        "climate_preferences": (ClimateTag.TROPICAL,),
        "activity_preferences": (ActivityTag.ADVENTURE, ActivityTag.FOOD),
        "accommodation_styles": (StayStyle.RESORT, StayStyle.ECO),
        "special_notes": None,
    }
    fields.update(overrides)
    return TravelerProfile(**fields)


def budget_record(destination_id: str, **overrides: Any) -> Dict[str, Any]:
    record: Dict[str, Any] = {
        "id": destination_id,
        "name": destination_id.title(),
        "country": "Portugal",
        "description": "",
        "ideal_seasons": ["May"],
        "climate": ["temperate"],
        "activity_highlights": ["culture"],
        "budget_tier": "budget",
        "duration": {"min_days": 2, "max_days": 3},
        "accommodations": [
            {"name": f"{destination_id} inn", "style": "hotel", "nightly_rate": 100, "description": ""},
            {"name": f"{destination_id} hostel", "style": "boutique", "nightly_rate": 50, "description": ""},
        ],
        "experiences": [
            {"name": f"{destination_id} walk", "category": "culture", "description": ""},
            {"name": f"{destination_id} market", "category": "food", "description": ""},
            {"name": f"{destination_id} bar crawl", "category": "nightlife", "description": ""},
        ],
        "travel_tips": [],
    }
    record.update(overrides)
    return record


@pytest.fixture
def profile() -> TravelerProfile:
    return build_profile()


@pytest.fixture
def catalog() -> DestinationCatalog:
    return default_catalog()


@pytest.fixture
def budget_catalog() -> DestinationCatalog:
    return DestinationCatalog.from_records([budget_record("alpha"), budget_record("beta"), budget_record("gamma")])


@pytest.fixture
def profile_payload() -> Dict[str, Any]:
    return {
        "fullName": "Ada Traveler",
        "email": "ada@example.com",
        "phone": "+1 555 0100",
        "departureCity": "New York",
        "travelDates": {"start": "2025-05-01", "end": "2025-05-09"},
        "travelerCount": 2,
        "budgetPerPerson": 300,
        "travelStyle": "balanced",
        "climatePreference": ["tropical"],
        "activityPreferences": ["adventure", "food"],
        "accommodationStyle": ["resort", "eco"],
        "specialNotes": "Celebrating an anniversary.",
    }


def ids(proposals: List[Any]) -> List[str]:
    return [proposal.destination.id for proposal in proposals]
