"""Recommendation orchestrator over the destination catalog."""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from travel_planner.core.config import PlannerConfig, load_planner_config
from travel_planner.core.models import ProposedBooking, Recommendation, TravelerProfile
from travel_planner.core.normalization import utc_timestamp
from travel_planner.core.selection import select_first
from travel_planner.modules.destinations.catalog import DestinationCatalog, default_catalog
from travel_planner.pipeline.results import StepReport
from travel_planner.pipeline.steps import PROPOSAL_STRATEGIES

LOG = logging.getLogger(__name__)


class Orchestrator:
    def __init__(
        self,
        catalog: Optional[DestinationCatalog] = None,
        config: Optional[PlannerConfig] = None,
    ) -> None:
        self.catalog = catalog if catalog is not None else default_catalog()
        self.config = config or load_planner_config()

    def select(self, profile: TravelerProfile) -> Tuple[StepReport, List[ProposedBooking]]:
        strategy, proposals = select_first(PROPOSAL_STRATEGIES, profile, self.catalog, self.config)
        for proposal in proposals:
            LOG.debug("proposal %s confidence=%s", proposal.destination.id, proposal.confidence)
        if strategy == "exploratory_picks":
            LOG.info("no destination scored above zero; using %d exploratory picks", len(proposals))
        report = StepReport(
            name=strategy or "empty",
            ok=bool(proposals),
            destination_ids=[proposal.destination.id for proposal in proposals],
            message=None if proposals else "catalog is empty",
        )
        return report, proposals

    def recommend(self, profile: TravelerProfile) -> List[ProposedBooking]:
        _, proposals = self.select(profile)
        return proposals

    def run(self, profile: TravelerProfile) -> Recommendation:
        report, proposals = self.select(profile)
        return Recommendation(
            proposals=proposals,
            generated_at=utc_timestamp(),
            fallback=report.fallback,
        )
