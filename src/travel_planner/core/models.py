"""Shared domain models for the travel planner."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from travel_planner.core.errors import CatalogError


class ClimateTag(Enum):
    TROPICAL = "tropical"
    TEMPERATE = "temperate"
    COLD = "cold"
    DRY = "dry"


class ActivityTag(Enum):
    CULTURE = "culture"
    FOOD = "food"
    ADVENTURE = "adventure"
    RELAXATION = "relaxation"
    NATURE = "nature"
    NIGHTLIFE = "nightlife"


class StayStyle(Enum):
    BOUTIQUE = "boutique"
    RESORT = "resort"
    ECO = "eco"
    HOTEL = "hotel"
    VILLA = "villa"


class BudgetTier(Enum):
    BUDGET = "budget"
    MODERATE = "moderate"
    LUXURY = "luxury"

    @property
    def rank(self) -> int:
        return list(BudgetTier).index(self)


class TravelPace(Enum):
    RELAXED = "relaxed"
    BALANCED = "balanced"
    FAST_PACED = "fast-paced"


class ReservationStatus(Enum):
    RESERVED = "reserved"
    REQUESTED = "requested"


@dataclass(frozen=True)
class TravelDates:
    start: str
    end: str


@dataclass(frozen=True)
class TravelerProfile:
    full_name: str
    email: str
    phone: str
    departure_city: str
    travel_dates: TravelDates
    traveler_count: int
    budget_per_person: float
    travel_pace: TravelPace
    climate_preferences: Tuple[ClimateTag, ...] = ()
    activity_preferences: Tuple[ActivityTag, ...] = ()
    accommodation_styles: Tuple[StayStyle, ...] = ()
    special_notes: Optional[str] = None


@dataclass(frozen=True)
class DurationRange:
    min_days: int
    max_days: int

    def __post_init__(self) -> None:
        if self.min_days < 1 or self.min_days > self.max_days:
            raise CatalogError(f"invalid ideal duration {self.min_days}-{self.max_days} days")


@dataclass(frozen=True)
class AccommodationOption:
    name: str
    style: StayStyle
    nightly_rate: float
    description: str

    def __post_init__(self) -> None:
        if self.nightly_rate <= 0:
            raise CatalogError(f"nightly rate for {self.name!r} must be positive")


@dataclass(frozen=True)
class ExperienceOption:
    name: str
    category: ActivityTag
    description: str


@dataclass(frozen=True)
class Destination:
    id: str
    name: str
    country: str
    description: str
    ideal_seasons: Tuple[str, ...]
    climate: Tuple[ClimateTag, ...]
    activity_highlights: Tuple[ActivityTag, ...]
    budget_tier: BudgetTier
    duration: DurationRange
    accommodations: Tuple[AccommodationOption, ...]
    experiences: Tuple[ExperienceOption, ...]
    travel_tips: Tuple[str, ...] = ()
    country_code: Optional[str] = None


@dataclass(frozen=True)
class AccommodationItem:
    name: str
    style: StayStyle
    total_cost_estimate: float
    description: str
    status: ReservationStatus


@dataclass(frozen=True)
class ExperienceItem:
    name: str
    day: int
    description: str
    status: ReservationStatus


@dataclass(frozen=True)
class TravelPlan:
    stay_length: int
    accommodations: List[AccommodationItem]
    experiences: List[ExperienceItem]
    notes: List[str]
    total_trip_estimate: int


@dataclass(frozen=True)
class ProposedBooking:
    destination: Destination
    confidence: int
    matched_reasons: List[str]
    travel_plan: TravelPlan


@dataclass
class Recommendation:
    proposals: List[ProposedBooking]
    generated_at: str
    fallback: bool = False
