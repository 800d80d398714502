"""Itinerary builder for proposed travel plans."""

from __future__ import annotations

import math
from typing import List, Optional

from travel_planner.core.config import PricingConfig
from travel_planner.core.models import (
    AccommodationItem,
    Destination,
    ExperienceItem,
    ExperienceOption,
    ReservationStatus,
    TravelerProfile,
    TravelPlan,
)
from travel_planner.core.selection import select_first
from travel_planner.modules.destinations.scoring import trip_length
from travel_planner.modules.lodging.selection import select_accommodations

SAMPLE_EXPERIENCE_COUNT = 2
CONCIERGE_NOTE = "Transfers and daily support arranged by the on-ground concierge partner."


def _schedule(options: List[ExperienceOption], status: ReservationStatus) -> List[ExperienceItem]:
    return [
        ExperienceItem(name=option.name, day=day, description=option.description, status=status)
        for day, option in enumerate(options, start=1)
    ]


def matching_experiences(profile: TravelerProfile, destination: Destination) -> List[ExperienceItem]:
    matches = [option for option in destination.experiences if option.category in profile.activity_preferences]
    return _schedule(matches, ReservationStatus.RESERVED)


def sample_experiences(profile: TravelerProfile, destination: Destination) -> List[ExperienceItem]:
    return _schedule(list(destination.experiences[:SAMPLE_EXPERIENCE_COUNT]), ReservationStatus.REQUESTED)


EXPERIENCE_STRATEGIES = (matching_experiences, sample_experiences)


def select_experiences(profile: TravelerProfile, destination: Destination) -> List[ExperienceItem]:
    _, items = select_first(EXPERIENCE_STRATEGIES, profile, destination)
    return items


def build_notes(profile: TravelerProfile) -> List[str]:
    notes = [
        f"Flights from {profile.departure_city} will be monitored for best fares.",
        CONCIERGE_NOTE,
    ]
    if profile.special_notes:
        notes.append(profile.special_notes)
    return notes


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def estimate_total(
    profile: TravelerProfile,
    nights: int,
    accommodations: List[AccommodationItem],
    experiences: List[ExperienceItem],
    pricing: PricingConfig,
) -> int:
    """Illustrative trip cost.

    Charges the first staged stay only, the experiences held as reserved, and a
    daily spend share of (budget + buffer) per traveler per night.
    """
    travelers = profile.traveler_count
    stay_cost = accommodations[0].total_cost_estimate if accommodations else 0
    reserved = sum(1 for item in experiences if item.status is ReservationStatus.RESERVED)
    experience_cost = reserved * pricing.experience_cost * travelers
    daily_budget = profile.budget_per_person + pricing.daily_spend_buffer
    daily_cost = daily_budget * nights * travelers * pricing.daily_spend_ratio
    return _round_half_up(stay_cost + experience_cost + daily_cost)


def build_travel_plan(
    profile: TravelerProfile,
    destination: Destination,
    pricing: Optional[PricingConfig] = None,
) -> TravelPlan:
    pricing = pricing or PricingConfig()
    nights = max(trip_length(profile.travel_dates, pricing.default_trip_length), destination.duration.min_days)
    accommodations = select_accommodations(profile, destination, nights)
    experiences = select_experiences(profile, destination)
    return TravelPlan(
        stay_length=nights,
        accommodations=accommodations,
        experiences=experiences,
        notes=build_notes(profile),
        total_trip_estimate=estimate_total(profile, nights, accommodations, experiences, pricing),
    )
