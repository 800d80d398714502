"""Export helpers for recommendation outputs."""

from __future__ import annotations

from typing import Any, Dict, List

from travel_planner.core.models import (
    AccommodationItem,
    Destination,
    ExperienceItem,
    ProposedBooking,
    Recommendation,
    TravelPlan,
)


def serialize_destination(dest: Destination) -> Dict[str, Any]:
    return {
        "id": dest.id,
        "name": dest.name,
        "country": dest.country,
        "countryCode": dest.country_code,
        "description": dest.description,
        "idealSeasons": list(dest.ideal_seasons),
        "climate": [tag.value for tag in dest.climate],
        "activityHighlights": [tag.value for tag in dest.activity_highlights],
        "budgetLevel": dest.budget_tier.value,
        "durationIdeal": {
            "minDays": dest.duration.min_days,
            "maxDays": dest.duration.max_days,
        },
        "accommodations": [
            {
                "name": stay.name,
                "style": stay.style.value,
                "nightlyRate": stay.nightly_rate,
                "blurb": stay.description,
            }
            for stay in dest.accommodations
        ],
        "experiences": [
            {
                "name": experience.name,
                "category": experience.category.value,
                "summary": experience.description,
            }
            for experience in dest.experiences
        ],
        "travelTips": list(dest.travel_tips),
    }


def _serialize_accommodation(item: AccommodationItem) -> Dict[str, Any]:
    return {
        "name": item.name,
        "style": item.style.value,
        "totalCostEstimate": item.total_cost_estimate,
        "blurb": item.description,
        "status": item.status.value,
    }


def _serialize_experience(item: ExperienceItem) -> Dict[str, Any]:
    return {
        "name": item.name,
        "day": item.day,
        "summary": item.description,
        "status": item.status.value,
    }


def _serialize_plan(plan: TravelPlan) -> Dict[str, Any]:
    return {
        "stayLength": plan.stay_length,
        "accommodations": [_serialize_accommodation(a) for a in plan.accommodations],
        "experiences": [_serialize_experience(e) for e in plan.experiences],
        "notes": list(plan.notes),
        "totalTripEstimate": plan.total_trip_estimate,
    }


def serialize_proposal(proposal: ProposedBooking) -> Dict[str, Any]:
    return {
        "destination": serialize_destination(proposal.destination),
        "confidence": proposal.confidence,
        "matchedReasons": list(proposal.matched_reasons),
        "travelPlan": _serialize_plan(proposal.travel_plan),
    }


def serialize_proposals(proposals: List[ProposedBooking]) -> List[Dict[str, Any]]:
    return [serialize_proposal(p) for p in proposals]


def serialize_recommendation(result: Recommendation) -> Dict[str, Any]:
    return {
        "proposals": serialize_proposals(result.proposals),
        "timestamp": result.generated_at,
    }
