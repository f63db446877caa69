"""
Synthetic water-quality series used for mock output and gap filling
"""

import math
import random
from datetime import datetime
from typing import Any, Dict, List, Optional

from .ranges import RangeSpec
from .timeutil import ensure_utc, to_iso, utc_now


def _noise(rng, amplitude: float) -> float:
    return rng.uniform(-amplitude, amplitude)


def synthesize_point(index: int, timestamp: datetime, rng=random) -> Dict[str, Any]:
    """
    Build one synthetic reading for tick `index`.

    Slow sine/cosine waves give a diurnal shape, uniform noise keeps
    consecutive series from looking identical.
    """
    return {
        't': to_iso(timestamp),
        'ph': round(7.0 + 0.3 * math.sin(index / 12) + _noise(rng, 0.05), 2),
        'ntu': round(max(0.0, 1.5 + 0.5 * math.cos(index / 8) + _noise(rng, 0.1)), 2),
        'tds': round(250 + 20 * math.sin(index / 6) + _noise(rng, 2.5)),
        'temp': round(22 + 3 * math.sin(index / 24) + _noise(rng, 0.5), 2),
        'do': round(8.0 + 1.0 * math.cos(index / 16) + _noise(rng, 0.15), 2),
    }


def generate_series(
    range_spec: RangeSpec,
    now: Optional[datetime] = None,
    rng=None,
) -> List[Dict[str, Any]]:
    """
    Generate `target_sample_count` evenly spaced points ending at `now`.

    Args:
        range_spec: Resolved range parameters
        now: End of the series (defaults to the current UTC time)
        rng: Random source with a `uniform(a, b)` method

    Returns:
        Chronologically ordered list of data points
    """
    end = ensure_utc(now) if now is not None else utc_now()
    rng = rng or random
    count = range_spec.target_sample_count

    series = []
    for i in range(count):
        timestamp = end - (count - 1 - i) * range_spec.interval
        series.append(synthesize_point(i, timestamp, rng))
    return series
