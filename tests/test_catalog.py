from __future__ import annotations

import pytest

from conftest import budget_record
from travel_planner.core.errors import CatalogError, DestinationNotFoundError
from travel_planner.core.models import BudgetTier
from travel_planner.modules.destinations.catalog import DestinationCatalog


def test_default_catalog_order_and_codes(catalog):
    assert [d.id for d in catalog] == ["bali", "lisbon", "banff", "kyoto", "costa-rica", "iceland"]
    assert catalog.get("costa-rica").country_code == "CR"
    assert catalog.get("kyoto").budget_tier is BudgetTier.LUXURY


def test_default_catalog_invariants(catalog):
    for destination in catalog:
        assert destination.duration.min_days <= destination.duration.max_days
        assert all(stay.nightly_rate > 0 for stay in destination.accommodations)


def test_head_returns_catalog_prefix(catalog):
    assert [d.id for d in catalog.head(2)] == ["bali", "lisbon"]
    assert catalog.head(0) == []


def test_unknown_destination_raises(catalog):
    with pytest.raises(DestinationNotFoundError):
        catalog.get("atlantis")


def test_duplicate_ids_rejected():
    with pytest.raises(CatalogError):
        DestinationCatalog.from_records([budget_record("alpha"), budget_record("alpha")])


@pytest.mark.parametrize(
    "overrides",
    [
        {"duration": {"min_days": 5, "max_days": 3}},
        {"budget_tier": "premium"},
        {"climate": ["arctic"]},
        {"accommodations": [{"name": "Free", "style": "hotel", "nightly_rate": 0}]},
    ],
)
def test_invalid_records_rejected(overrides):
    with pytest.raises(CatalogError):
        DestinationCatalog.from_records([budget_record("alpha", **overrides)])


def test_missing_field_rejected():
    record = budget_record("alpha")
    del record["budget_tier"]

    with pytest.raises(CatalogError):
        DestinationCatalog.from_records([record])
