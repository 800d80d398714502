"""Scoring helpers for destinations."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import List, Optional

from travel_planner.core.models import BudgetTier, Destination, TravelDates, TravelerProfile, TravelPace

PACE_POINTS = 10
CLIMATE_POINTS = 8
ACTIVITY_POINTS = 6
BUDGET_MATCH_POINTS = 12
BUDGET_STRETCH_POINTS = 6
STAY_STYLE_POINTS = 5

BUDGET_BAND_LIMITS = ((200, BudgetTier.BUDGET), (400, BudgetTier.MODERATE))

SECONDS_PER_DAY = 24 * 60 * 60


@dataclass
class DestinationScore:
    score: int = 0
    reasons: List[str] = field(default_factory=list)


def _parse_date(value: Optional[str]) -> Optional[datetime]:
    if not value:
        return None
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def trip_length(dates: TravelDates, default: int = 5) -> int:
    """Whole days between start and end, or ``default`` for empty or inverted ranges."""
    start = _parse_date(dates.start)
    end = _parse_date(dates.end)
    if start is None or end is None:
        return default
    days = math.floor((end - start).total_seconds() / SECONDS_PER_DAY + 0.5)
    return days if days > 0 else default


def budget_band(budget_per_person: float) -> BudgetTier:
    for limit, tier in BUDGET_BAND_LIMITS:
        if budget_per_person <= limit:
            return tier
    return BudgetTier.LUXURY


def is_budget_stretch(destination_tier: BudgetTier, traveler_band: BudgetTier) -> bool:
    # Only an upward step counts; cheaper destinations earn nothing.
    return destination_tier.rank == traveler_band.rank + 1


def pace_fits(pace: TravelPace, destination: Destination, days: int) -> bool:
    if pace is TravelPace.RELAXED:
        return destination.duration.max_days >= days
    if pace is TravelPace.FAST_PACED:
        return destination.duration.min_days <= days
    return True


def score_destination(
    profile: TravelerProfile,
    destination: Destination,
    *,
    default_trip_length: int = 5,
) -> DestinationScore:
    result = DestinationScore()
    days = trip_length(profile.travel_dates, default_trip_length)

    if pace_fits(profile.travel_pace, destination, days):
        result.score += PACE_POINTS

    climates = [tag for tag in profile.climate_preferences if tag in destination.climate]
    if climates:
        result.score += len(climates) * CLIMATE_POINTS
        names = ", ".join(tag.value for tag in climates)
        result.reasons.append(f"Matches your climate preference for {names} escapes.")

    activities = [tag for tag in profile.activity_preferences if tag in destination.activity_highlights]
    if activities:
        result.score += len(activities) * ACTIVITY_POINTS
        names = ", ".join(tag.value for tag in activities)
        result.reasons.append(f"Offers standout {names} experiences you requested.")

    band = budget_band(profile.budget_per_person)
    if destination.budget_tier is band:
        result.score += BUDGET_MATCH_POINTS
        result.reasons.append("Aligned with the budget level you indicated.")
    elif is_budget_stretch(destination.budget_tier, band):
        result.score += BUDGET_STRETCH_POINTS
        result.reasons.append("Slight stretch on budget but still within a manageable range.")

    stay = next(
        (option for option in destination.accommodations if option.style in profile.accommodation_styles),
        None,
    )
    if stay is not None:
        result.score += STAY_STYLE_POINTS
        result.reasons.append(f"Includes {stay.style.value} stays that suit your style.")

    return result
