"""Pipeline step wiring."""

from __future__ import annotations

import logging
from typing import List

from travel_planner.core.config import PROPOSAL_LIMIT, PlannerConfig
from travel_planner.core.models import ProposedBooking, TravelerProfile
from travel_planner.modules.destinations.catalog import DestinationCatalog
from travel_planner.modules.destinations.scoring import score_destination
from travel_planner.modules.itinerary.builder import build_travel_plan

LOG = logging.getLogger(__name__)

EXPLORATORY_REASON = "Curated as an exploratory option based on travel industry popularity."


def score_catalog(
    profile: TravelerProfile,
    catalog: DestinationCatalog,
    config: PlannerConfig,
) -> List[ProposedBooking]:
    proposals: List[ProposedBooking] = []
    for destination in catalog:
        scored = score_destination(
            profile,
            destination,
            default_trip_length=config.pricing.default_trip_length,
        )
        LOG.debug("scored %s: %d (%s)", destination.id, scored.score, "; ".join(scored.reasons) or "no reasons")
        proposals.append(
            ProposedBooking(
                destination=destination,
                confidence=min(config.confidence_cap, scored.score),
                matched_reasons=scored.reasons,
                travel_plan=build_travel_plan(profile, destination, config.pricing),
            )
        )
    return proposals


def ranked_matches(
    profile: TravelerProfile,
    catalog: DestinationCatalog,
    config: PlannerConfig,
) -> List[ProposedBooking]:
    positive = [proposal for proposal in score_catalog(profile, catalog, config) if proposal.confidence > 0]
    # sorted() is stable, so ties keep catalog order.
    ranked = sorted(positive, key=lambda proposal: proposal.confidence, reverse=True)
    return ranked[: min(config.max_proposals, PROPOSAL_LIMIT)]


def exploratory_picks(
    profile: TravelerProfile,
    catalog: DestinationCatalog,
    config: PlannerConfig,
) -> List[ProposedBooking]:
    return [
        ProposedBooking(
            destination=destination,
            confidence=config.fallback_confidence,
            matched_reasons=[EXPLORATORY_REASON],
            travel_plan=build_travel_plan(profile, destination, config.pricing),
        )
        for destination in catalog.head(config.fallback_count)
    ]


PROPOSAL_STRATEGIES = (ranked_matches, exploratory_picks)
