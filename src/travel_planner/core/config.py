"""Configuration helpers for planner defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Optional

PROPOSAL_LIMIT = 3


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        return default
    return value if value > 0 else default


@dataclass(frozen=True)
class PricingConfig:
    experience_cost: float = 180.0
    daily_spend_buffer: float = 120.0
    daily_spend_ratio: float = 0.35
    default_trip_length: int = 5


@dataclass(frozen=True)
class PlannerConfig:
    max_proposals: int = PROPOSAL_LIMIT
    fallback_count: int = 2
    fallback_confidence: int = 45
    confidence_cap: int = 100
    pricing: PricingConfig = field(default_factory=PricingConfig)


def load_planner_config() -> PlannerConfig:
    """Planner defaults; ``TRAVEL_PLANNER_MAX_PROPOSALS`` may lower the proposal count, never raise it."""
    requested = _env_int("TRAVEL_PLANNER_MAX_PROPOSALS", PROPOSAL_LIMIT)
    return PlannerConfig(max_proposals=min(requested, PROPOSAL_LIMIT))


def resolve_log_level(value: Optional[str] = None) -> str:
    raw = (value or os.getenv("TRAVEL_PLANNER_LOG_LEVEL", "WARNING")).strip().upper()
    if raw in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
        return raw
    return "WARNING"
