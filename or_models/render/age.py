"""Human-readable model age ("3 days", "~2 mns", "~1 yr")."""

from __future__ import annotations

import math
import time
from typing import Optional

SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 60 * 60
SECONDS_PER_DAY = 24 * SECONDS_PER_HOUR
UNKNOWN_AGE = "Unknown"


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}{'s' if count > 1 else ''}"


def human_age(created: int, now: Optional[float] = None) -> str:
    """Bucket the time since ``created`` (Unix seconds) into a short label.

    ``0`` means unknown. Buckets: >= 365 days -> ``~N yr``, >= 30 days ->
    ``~N mn``, >= 1 day -> ``N day``, >= 1 hour -> ``N hr``, otherwise
    ``N min`` (``<1 min`` below a minute). Units take an ``s`` when N > 1.
    """
    if not created:
        return UNKNOWN_AGE
    current = time.time() if now is None else now
    delta_seconds = current - created
    delta_days = delta_seconds / SECONDS_PER_DAY
    if delta_days >= 365:
        return "~" + _plural(math.floor(delta_days / 365), "yr")
    if delta_days >= 30:
        return "~" + _plural(math.floor(delta_days / 30), "mn")
    if delta_days >= 1:
        return _plural(math.floor(delta_days), "day")
    hours = math.floor(delta_seconds / SECONDS_PER_HOUR)
    if hours >= 1:
        return _plural(hours, "hr")
    minutes = math.floor(delta_seconds / SECONDS_PER_MINUTE)
    if minutes < 1:
        return "<1 min"
    return _plural(minutes, "min")


__all__ = ["human_age", "UNKNOWN_AGE"]
