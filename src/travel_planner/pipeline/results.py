"""Per-run diagnostics for the recommendation pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass
class StepReport:
    name: str
    ok: bool
    destination_ids: List[str] = field(default_factory=list)
    message: Optional[str] = None

    @property
    def fallback(self) -> bool:
        return self.name == "exploratory_picks"
