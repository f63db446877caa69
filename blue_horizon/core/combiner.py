"""
Merging real sensor samples with synthetic filler into one trend series
"""

import logging
from datetime import datetime
from typing import Any, Dict, List, NamedTuple, Optional, Sequence

from ..schemas.trend import Sample
from .ranges import RangeSpec
from .statistics import PARAMETERS, calculate_summary_stats, fill_missing, round2
from .synthesizer import generate_series
from .timeutil import to_iso

logger = logging.getLogger(__name__)

# Weight of the synthetic value when blending filler toward the baseline
SYNTHETIC_WEIGHT = 0.7

DEFAULT_BASELINE: Dict[str, float] = {
    'ph': 7.2,
    'ntu': 1.5,
    'tds': 250,
    'temp': 22,
    'do': 8.5,
}

# Sample attribute behind each wire parameter
SAMPLE_FIELDS: Dict[str, str] = {
    'ph': 'ph',
    'ntu': 'turbidity',
    'tds': 'tds',
    'temp': 'temperature',
    'do': 'dissolved_oxygen',
}

INTEGER_PARAMETERS = ('tds',)


class CombinedSeries(NamedTuple):
    data: List[Dict[str, Any]]
    summary: Optional[Dict[str, Any]]
    data_source: str
    note: str
    # Leading points of data that came from the source, not synthesis
    real_count: int = 0


def _round_param(param: str, value: float):
    if param in INTEGER_PARAMETERS:
        return round(value)
    return round2(value)


def sample_to_point(sample: Sample) -> Dict[str, Any]:
    """Convert a sample to a data point, keeping missing readings as None."""
    point: Dict[str, Any] = {'t': to_iso(sample.timestamp)}
    for param, field in SAMPLE_FIELDS.items():
        value = getattr(sample, field)
        point[param] = None if value is None else _round_param(param, value)
    return point


def fill_point(point: Dict[str, Any]) -> Dict[str, Any]:
    """Apply the missing-value policy to every parameter of a data point."""
    filled = {'t': point['t']}
    for param in PARAMETERS:
        filled[param] = _round_param(param, fill_missing(point.get(param)))
    return filled


def format_sample(sample: Sample) -> Dict[str, Any]:
    """Wire format of a real sample: rounded values, missing readings as 0."""
    return fill_point(sample_to_point(sample))


def blend_value(synthetic: float, baseline: float, synthetic_weight: float = SYNTHETIC_WEIGHT) -> float:
    return synthetic * synthetic_weight + baseline * (1 - synthetic_weight)


def default_baseline() -> Dict[str, float]:
    return dict(DEFAULT_BASELINE)


def baseline_from(samples: Sequence[Sample]) -> Dict[str, float]:
    """
    Baseline that filler values are pulled toward.

    Uses the latest sample's readings; fields that are missing or zero on
    it keep the default baseline value.
    """
    baseline = default_baseline()
    if not samples:
        return baseline

    latest = samples[-1]
    for param, field in SAMPLE_FIELDS.items():
        value = getattr(latest, field)
        if value:
            baseline[param] = value
    return baseline


def build_filler(
    real_samples: Sequence[Sample],
    range_spec: RangeSpec,
    now: Optional[datetime] = None,
    rng=None,
) -> List[Dict[str, Any]]:
    """
    Synthetic points that complete a sparse real series.

    Filler starts one interval after the last real sample (or keeps the
    generated timestamps ending at now when there are no real samples) and
    is blended toward the baseline.
    """
    needed = max(0, range_spec.target_sample_count - len(real_samples))
    if needed == 0:
        return []

    baseline = baseline_from(real_samples)
    candidates = generate_series(range_spec, now=now, rng=rng)[:needed]
    last_real = real_samples[-1].timestamp if real_samples else None

    filler = []
    for index, candidate in enumerate(candidates):
        if last_real is not None:
            t = to_iso(last_real + (index + 1) * range_spec.interval)
        else:
            t = candidate['t']
        point = {'t': t}
        for param in PARAMETERS:
            point[param] = _round_param(param, blend_value(candidate[param], baseline[param]))
        filler.append(point)
    return filler


def mock_series(range_spec: RangeSpec, note: str, now: Optional[datetime] = None, rng=None) -> CombinedSeries:
    data = generate_series(range_spec, now=now, rng=rng)
    return CombinedSeries(data, calculate_summary_stats(data), 'mock', note)


def combine_series(
    real_samples: Optional[Sequence[Sample]],
    range_spec: RangeSpec,
    now: Optional[datetime] = None,
    rng=None,
    source_name: str = "database",
) -> CombinedSeries:
    """
    Decide between mock, database and hybrid output and build the series.

    Args:
        real_samples: Samples ordered by time, or None when no data source
            is configured
        range_spec: Resolved range parameters
        now: Reference time for synthetic points
        rng: Random source for synthetic noise
        source_name: Name of the data source, used in the note

    Returns:
        CombinedSeries with the wire data, summary, data source and note
    """
    if real_samples is None:
        return mock_series(range_spec, "Using mock data - data source not configured", now=now, rng=rng)

    real_points = [sample_to_point(s) for s in real_samples]

    if len(real_samples) >= range_spec.min_real_samples:
        logger.info(f"Using real data ({len(real_samples)} points)")
        series = real_points
        data_source = 'database'
        note = f"Real data from {source_name} ({len(real_samples)} readings)"
    else:
        logger.info(
            f"Insufficient real data ({len(real_samples)}/{range_spec.min_real_samples}), "
            f"using hybrid approach"
        )
        filler = build_filler(real_samples, range_spec, now=now, rng=rng)
        series = real_points + filler
        data_source = 'hybrid'
        note = f"Hybrid data: {len(real_samples)} real readings + {len(filler)} simulated"

    # Statistics skip readings that were missing at the source
    summary = calculate_summary_stats(series)
    data = [fill_point(p) for p in series]
    return CombinedSeries(data, summary, data_source, note, len(real_samples))
