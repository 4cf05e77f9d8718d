"""Common types and helpers shared across models."""

import math
from datetime import UTC, date, datetime
from typing import TypeAlias

LocationId: TypeAlias = str


def utc_now() -> datetime:
    return datetime.now(UTC)


def utc_now_iso() -> str:
    return utc_now().isoformat()


def local_today() -> date:
    """Calendar date of the caller's wall clock."""
    return datetime.now().date()


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(math.copysign(math.floor(abs(value) + 0.5), value))
