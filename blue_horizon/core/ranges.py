"""
Range token resolution for trend queries
"""

from dataclasses import dataclass
from datetime import timedelta
from typing import Dict, List

from .exceptions import InvalidRangeError


@dataclass(frozen=True)
class RangeSpec:
    """Resolved parameters for a symbolic range token"""
    token: str
    span: timedelta
    min_real_samples: int
    target_sample_count: int
    interval: timedelta

    @property
    def span_millis(self) -> int:
        return int(self.span.total_seconds() * 1000)

    @property
    def interval_millis(self) -> int:
        return int(self.interval.total_seconds() * 1000)


DEFAULT_RANGE = "24h"

RANGE_TABLE: Dict[str, RangeSpec] = {
    "24h": RangeSpec(
        token="24h",
        span=timedelta(hours=24),
        min_real_samples=12,     # at least 12 hours of data
        target_sample_count=24,  # hourly
        interval=timedelta(hours=1),
    ),
    "7d": RangeSpec(
        token="7d",
        span=timedelta(days=7),
        min_real_samples=14,     # at least 2 days of data
        target_sample_count=28,  # 6-hour intervals
        interval=timedelta(hours=6),
    ),
    "30d": RangeSpec(
        token="30d",
        span=timedelta(days=30),
        min_real_samples=15,     # at least half a month
        target_sample_count=30,  # daily
        interval=timedelta(days=1),
    ),
}

SUPPORTED_RANGES: List[str] = list(RANGE_TABLE)


def is_valid_range(token: str) -> bool:
    return token in RANGE_TABLE


def resolve_range(token: str, strict: bool = True) -> RangeSpec:
    """
    Map a range token to its RangeSpec.

    Unknown tokens raise InvalidRangeError, or resolve to the 24h row
    when strict is False.
    """
    spec = RANGE_TABLE.get(token)
    if spec is None:
        if strict:
            raise InvalidRangeError(token)
        return RANGE_TABLE[DEFAULT_RANGE]
    return spec
