"""
Summary statistics over a completed trend series
"""

import math
from typing import Any, Dict, List, Optional, Sequence

PARAMETERS = ('ph', 'ntu', 'tds', 'temp', 'do')

# Percent change between the first and last third that counts as a trend
TREND_THRESHOLD_PERCENT = 5.0


def round2(value: float) -> float:
    return round(value, 2)


def fill_missing(value: Optional[float], default: float = 0.0) -> float:
    """
    Missing-value policy for readings on the wire.

    A null reading is reported as 0 rather than dropped, which keeps every
    chart point complete for existing consumers.
    """
    if value is None:
        return default
    return value


def is_valid_number(value: Any) -> bool:
    if value is None or isinstance(value, bool):
        return False
    if not isinstance(value, (int, float)):
        return False
    return not math.isnan(value)


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values)


def classify_trend(values: Sequence[float]) -> str:
    """
    Compare the average of the first third of `values` with the last third.

    Returns 'increasing' or 'decreasing' when they differ by more than
    TREND_THRESHOLD_PERCENT, otherwise 'stable'. Fewer than three values
    give empty thirds and are 'stable'. A zero first-third average is
    'stable' if the last third is zero too, 'increasing' otherwise.
    """
    third = len(values) // 3
    if third == 0:
        return 'stable'

    first_avg = _mean(values[:third])
    last_avg = _mean(values[-third:])

    if first_avg == 0:
        return 'stable' if last_avg == 0 else 'increasing'

    change = (last_avg - first_avg) / first_avg * 100
    if abs(change) > TREND_THRESHOLD_PERCENT:
        return 'increasing' if change > 0 else 'decreasing'
    return 'stable'


def calculate_summary_stats(points: List[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """
    Summarize a chronologically ordered series of data points.

    Null and non-numeric values are ignored; a parameter without a single
    valid value is left out of `parameters`. An empty series yields None.
    """
    if not points:
        return None

    stats: Dict[str, Any] = {
        'totalReadings': len(points),
        'timeRange': {
            'start': points[0]['t'],
            'end': points[-1]['t'],
        },
        'parameters': {},
    }

    for param in PARAMETERS:
        values = [p.get(param) for p in points]
        values = [v for v in values if is_valid_number(v)]
        if not values:
            continue

        current = points[-1].get(param)
        if not is_valid_number(current):
            current = fill_missing(None)
        stats['parameters'][param] = {
            'current': round2(current),
            'min': round2(min(values)),
            'max': round2(max(values)),
            'avg': round2(_mean(values)),
            'trend': classify_trend(values),
        }

    return stats
