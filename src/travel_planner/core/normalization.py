"""Response metadata and timestamp helpers."""

from __future__ import annotations

import os
from datetime import datetime, timezone
from typing import Dict, Optional

DEFAULT_LOCALE = os.getenv("TRAVEL_PLANNER_LOCALE", "en-US")
DEFAULT_CURRENCY = os.getenv("TRAVEL_PLANNER_CURRENCY", "USD")


def utc_timestamp(moment: Optional[datetime] = None) -> str:
    """ISO-8601 timestamp in UTC with a trailing ``Z``."""
    moment = moment or datetime.now(timezone.utc)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_meta() -> Dict[str, str]:
    return {
        "locale": DEFAULT_LOCALE.strip() or "en-US",
        "currency": DEFAULT_CURRENCY.strip().upper() or "USD",
        "date_format": "YYYY-MM-DD",
        "timestamp_format": "YYYY-MM-DDTHH:mm:ss.sssZ",
    }
