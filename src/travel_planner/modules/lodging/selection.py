"""Accommodation staging for a proposed stay."""

from __future__ import annotations

from typing import List

from travel_planner.core.models import (
    AccommodationItem,
    AccommodationOption,
    Destination,
    ReservationStatus,
    TravelerProfile,
)
from travel_planner.core.selection import select_first


def _line_item(
    option: AccommodationOption,
    nights: int,
    travelers: int,
    status: ReservationStatus,
) -> AccommodationItem:
    return AccommodationItem(
        name=option.name,
        style=option.style,
        total_cost_estimate=option.nightly_rate * nights * travelers,
        description=option.description,
        status=status,
    )


def preferred_stays(profile: TravelerProfile, destination: Destination, nights: int) -> List[AccommodationItem]:
    matches = [stay for stay in destination.accommodations if stay.style in profile.accommodation_styles]
    return [
        _line_item(
            stay,
            nights,
            profile.traveler_count,
            ReservationStatus.RESERVED if index == 0 else ReservationStatus.REQUESTED,
        )
        for index, stay in enumerate(matches)
    ]


def all_stays(profile: TravelerProfile, destination: Destination, nights: int) -> List[AccommodationItem]:
    return [
        _line_item(stay, nights, profile.traveler_count, ReservationStatus.REQUESTED)
        for stay in destination.accommodations
    ]


STAY_STRATEGIES = (preferred_stays, all_stays)


def select_accommodations(profile: TravelerProfile, destination: Destination, nights: int) -> List[AccommodationItem]:
    _, items = select_first(STAY_STRATEGIES, profile, destination, nights)
    return items
