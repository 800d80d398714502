from __future__ import annotations

import pytest

from conftest import build_profile
from travel_planner.core.config import PricingConfig
from travel_planner.core.models import ActivityTag, ReservationStatus, StayStyle, TravelDates
from travel_planner.modules.itinerary.builder import build_travel_plan
from travel_planner.modules.lodging.selection import select_accommodations


def test_bali_plan_matches_preferences(catalog, profile):
    plan = build_travel_plan(profile, catalog.get("bali"))

    assert plan.stay_length == 8
    assert [(a.name, a.status, a.total_cost_estimate) for a in plan.accommodations] == [
        ("Ayana Resort & Spa", ReservationStatus.RESERVED, 320 * 8 * 2),
        ("Desa Seni Village Resort", ReservationStatus.REQUESTED, 210 * 8 * 2),
    ]
    assert [(e.name, e.day, e.status) for e in plan.experiences] == [
        ("Sunrise Trek up Mount Batur", 1, ReservationStatus.RESERVED),
        ("Private Balinese Cooking Workshop", 2, ReservationStatus.RESERVED),
    ]
    # first stay + 2 experiences * 180 * 2 travelers + 0.35 * (300 + 120) * 8 nights * 2
    assert plan.total_trip_estimate == 5120 + 720 + 2352


def test_stay_length_never_below_ideal_minimum(catalog):
    profile = build_profile(travel_dates=TravelDates(start="2025-05-01", end="2025-05-03"))
    for destination in catalog:
        plan = build_travel_plan(profile, destination)
        assert plan.stay_length == max(2, destination.duration.min_days)


def test_degenerate_range_uses_default_trip_length(catalog):
    profile = build_profile(travel_dates=TravelDates(start="2025-05-01", end="2025-05-01"))

    assert build_travel_plan(profile, catalog.get("lisbon")).stay_length == 5
    assert build_travel_plan(profile, catalog.get("bali")).stay_length == 6


def test_unmatched_styles_fall_back_to_every_stay_requested(catalog):
    profile = build_profile(accommodation_styles=(StayStyle.VILLA,))
    items = select_accommodations(profile, catalog.get("banff"), 5)

    assert [item.name for item in items] == ["Fairmont Banff Springs", "Moose Hotel & Suites"]
    assert all(item.status is ReservationStatus.REQUESTED for item in items)


def test_only_first_preferred_stay_is_reserved(catalog):
    profile = build_profile(accommodation_styles=(StayStyle.HOTEL,))
    items = select_accommodations(profile, catalog.get("banff"), 5)

    assert [item.status for item in items] == [ReservationStatus.RESERVED, ReservationStatus.REQUESTED]
    assert items[0].total_cost_estimate == 390 * 5 * 2


def test_unmatched_activities_sample_first_two_experiences(catalog):
    profile = build_profile(activity_preferences=(ActivityTag.NIGHTLIFE,))
    plan = build_travel_plan(profile, catalog.get("kyoto"))

    assert [(e.name, e.day, e.status) for e in plan.experiences] == [
        ("Private Tea Ceremony in Gion", 1, ReservationStatus.REQUESTED),
        ("Kaiseki Tasting with Chef's Counter", 2, ReservationStatus.REQUESTED),
    ]


def test_total_charges_first_fallback_stay_and_no_sampled_experiences(budget_catalog):
    profile = build_profile(
        traveler_count=1,
        budget_per_person=1000,
        activity_preferences=(),
        accommodation_styles=(),
        travel_dates=TravelDates(start="2025-05-01", end="2025-05-01"),
    )
    plan = build_travel_plan(profile, budget_catalog.get("alpha"))

    assert plan.stay_length == 5
    assert plan.total_trip_estimate == 100 * 5 + round(0.35 * 1120 * 5)


def test_notes_include_departure_city_and_special_notes(catalog):
    profile = build_profile(departure_city="Chicago", special_notes="Vegetarian meals please.")
    notes = build_travel_plan(profile, catalog.get("lisbon")).notes

    assert notes == [
        "Flights from Chicago will be monitored for best fares.",
        "Transfers and daily support arranged by the on-ground concierge partner.",
        "Vegetarian meals please.",
    ]


@pytest.mark.parametrize("special_notes", [None, ""])
def test_missing_special_notes_are_skipped(catalog, special_notes):
    profile = build_profile(special_notes=special_notes)

    assert len(build_travel_plan(profile, catalog.get("lisbon")).notes) == 2


def test_pricing_config_drives_estimate(catalog, profile):
    pricing = PricingConfig(experience_cost=0, daily_spend_ratio=0)
    plan = build_travel_plan(profile, catalog.get("bali"), pricing)

    assert plan.total_trip_estimate == 5120


@pytest.mark.parametrize("special_notes", ["   ", "  window seat  "])
def test_special_notes_are_kept_verbatim(catalog, special_notes):
    profile = build_profile(special_notes=special_notes)

    assert build_travel_plan(profile, catalog.get("lisbon")).notes[-1] == special_notes
