"""
Tests for mock / database / hybrid series selection and gap filling
"""

from datetime import timedelta

import pytest

from blue_horizon.core.combiner import (
    DEFAULT_BASELINE,
    baseline_from,
    blend_value,
    build_filler,
    combine_series,
    format_sample,
)
from blue_horizon.core.ranges import RangeSpec, resolve_range
from blue_horizon.core.synthesizer import generate_series
from blue_horizon.core.timeutil import parse_iso, to_iso
from blue_horizon.schemas.trend import Sample

from .utils.sample_generator import generate_samples


def test_format_sample_rounds_and_fills(fixed_now):
    sample = Sample(
        timestamp=fixed_now,
        ph=7.123,
        turbidity=None,
        tds=249.6,
        temperature=21.456,
        dissolved_oxygen=None,
    )
    assert format_sample(sample) == {
        't': to_iso(fixed_now),
        'ph': 7.12,
        'ntu': 0,
        'tds': 250,
        'temp': 21.46,
        'do': 0,
    }


def test_no_source_is_mock(fixed_now):
    spec = resolve_range("24h")
    combined = combine_series(None, spec, now=fixed_now)
    assert combined.data_source == 'mock'
    assert len(combined.data) == 24
    assert combined.summary['totalReadings'] == 24


@pytest.mark.parametrize("token", ["24h", "7d", "30d"])
def test_enough_real_samples_is_database(token, fixed_now):
    spec = resolve_range(token)
    samples = generate_samples(spec.min_real_samples, end=fixed_now)
    combined = combine_series(samples, spec, now=fixed_now, source_name="Supabase")

    assert combined.data_source == 'database'
    assert combined.data == [format_sample(s) for s in samples]
    assert combined.note == f"Real data from Supabase ({spec.min_real_samples} readings)"


@pytest.mark.parametrize("count", [0, 1, 3, 11])
def test_hybrid_length(count, fixed_now):
    spec = resolve_range("24h")
    samples = generate_samples(count, end=fixed_now - timedelta(hours=30))
    combined = combine_series(samples, spec, now=fixed_now)

    assert combined.data_source == 'hybrid'
    assert len(combined.data) == count + (spec.target_sample_count - count)
    assert combined.note == f"Hybrid data: {count} real readings + {24 - count} simulated"
    assert combined.data[:count] == [format_sample(s) for s in samples]


def test_hybrid_length_when_min_exceeds_target(fixed_now):
    # a range where the real count is short of the minimum but over the target
    spec = resolve_range("24h")
    spec = RangeSpec(
        token="custom", span=spec.span, min_real_samples=40,
        target_sample_count=24, interval=spec.interval,
    )
    samples = generate_samples(30, end=fixed_now)
    combined = combine_series(samples, spec, now=fixed_now)
    assert combined.data_source == 'hybrid'
    assert len(combined.data) == 30
    assert combined.note == "Hybrid data: 30 real readings + 0 simulated"


def test_filler_follows_last_real_sample(fixed_now):
    spec = resolve_range("7d")
    last_real = fixed_now - timedelta(days=3)
    samples = generate_samples(5, end=last_real, interval=timedelta(hours=6))
    filler = build_filler(samples, spec, now=fixed_now)

    assert len(filler) == 23
    times = [parse_iso(p['t']) for p in filler]
    assert times[0] == last_real + spec.interval
    for earlier, later in zip(times, times[1:]):
        assert later - earlier == spec.interval
    assert all(t > last_real for t in times)


def test_filler_without_real_samples_ends_now(fixed_now):
    spec = resolve_range("24h")
    filler = build_filler([], spec, now=fixed_now)
    assert len(filler) == 24
    assert filler[-1]['t'] == to_iso(fixed_now)


def test_filler_without_real_samples_blends_toward_default_baseline(fixed_now, midpoint_rng):
    spec = resolve_range("24h")
    raw = generate_series(spec, now=fixed_now, rng=midpoint_rng)
    filler = build_filler([], spec, now=fixed_now, rng=midpoint_rng)

    assert len(filler) == len(raw)
    for synthetic, blended in zip(raw, filler):
        assert blended['t'] == synthetic['t']
        for param, base in DEFAULT_BASELINE.items():
            low, high = sorted((synthetic[param], base))
            assert low - 0.01 <= blended[param] <= high + 0.01
            assert blended[param] == pytest.approx(0.7 * synthetic[param] + 0.3 * base, abs=0.5 if param == 'tds' else 0.006)


def test_filler_blends_toward_baseline(fixed_now, midpoint_rng):
    spec = resolve_range("24h")
    samples = [Sample(timestamp=fixed_now - timedelta(hours=2), ph=8.0, turbidity=3.0,
                      tds=400, temperature=30.0, dissolved_oxygen=6.0)]
    raw = generate_series(spec, now=fixed_now, rng=midpoint_rng)
    filler = build_filler(samples, spec, now=fixed_now, rng=midpoint_rng)
    baseline = {'ph': 8.0, 'ntu': 3.0, 'tds': 400, 'temp': 30.0, 'do': 6.0}

    for synthetic, blended in zip(raw, filler):
        for param, base in baseline.items():
            low, high = sorted((synthetic[param], base))
            assert low - 0.01 <= blended[param] <= high + 0.01
            assert blended[param] == pytest.approx(0.7 * synthetic[param] + 0.3 * base, abs=0.5 if param == 'tds' else 0.006)
        assert isinstance(blended['tds'], int)


def test_blend_bounds_with_random_noise(fixed_now):
    spec = resolve_range("30d")
    samples = generate_samples(4, end=fixed_now - timedelta(days=20), interval=timedelta(days=1))
    baseline = baseline_from(samples)
    for point in build_filler(samples, spec, now=fixed_now):
        # synthetic values stay inside the wave + noise bands
        assert 0.7 * 6.65 + 0.3 * baseline['ph'] - 0.01 <= point['ph'] <= 0.7 * 7.35 + 0.3 * baseline['ph'] + 0.01
        assert 0.7 * 227 + 0.3 * baseline['tds'] - 1 <= point['tds'] <= 0.7 * 273 + 0.3 * baseline['tds'] + 1


def test_blend_value():
    assert blend_value(10.0, 0.0) == pytest.approx(7.0)
    assert blend_value(0.0, 10.0) == pytest.approx(3.0)
    assert blend_value(5.0, 5.0) == pytest.approx(5.0)


def test_baseline_defaults():
    assert baseline_from([]) == DEFAULT_BASELINE


def test_baseline_uses_latest_sample(fixed_now):
    samples = [
        Sample(timestamp=fixed_now - timedelta(hours=1), ph=6.0, turbidity=4.0, tds=100,
               temperature=10.0, dissolved_oxygen=5.0),
        Sample(timestamp=fixed_now, ph=7.7, turbidity=0, tds=None,
               temperature=25.0, dissolved_oxygen=7.5),
    ]
    assert baseline_from(samples) == {
        'ph': 7.7,
        'ntu': DEFAULT_BASELINE['ntu'],
        'tds': DEFAULT_BASELINE['tds'],
        'temp': 25.0,
        'do': 7.5,
    }


def test_all_null_ph_is_left_out_of_summary(fixed_now):
    spec = resolve_range("24h")
    samples = generate_samples(15, end=fixed_now, missing=['ph'])
    combined = combine_series(samples, spec, now=fixed_now)

    assert combined.data_source == 'database'
    assert all(p['ph'] == 0 for p in combined.data)
    assert 'ph' not in combined.summary['parameters']
    assert 'ntu' in combined.summary['parameters']
    assert 'tds' in combined.summary['parameters']


def test_summary_ignores_missing_readings(fixed_now):
    spec = resolve_range("24h")
    samples = [
        Sample(timestamp=fixed_now - timedelta(hours=15 - i), ph=7.0 if i % 2 else None,
               turbidity=1.0, tds=250, temperature=20.0, dissolved_oxygen=8.0)
        for i in range(15)
    ]
    combined = combine_series(samples, spec, now=fixed_now)
    assert combined.summary['parameters']['ph']['min'] == 7.0
    assert combined.summary['parameters']['ph']['avg'] == 7.0


def test_real_count_marks_source_points(fixed_now):
    spec = resolve_range("24h")
    assert combine_series(None, spec, now=fixed_now).real_count == 0

    samples = generate_samples(3, end=fixed_now - timedelta(hours=1))
    combined = combine_series(samples, spec, now=fixed_now)
    assert combined.data_source == 'hybrid'
    assert combined.real_count == 3
    assert combined.data[combined.real_count - 1] == format_sample(samples[-1])


def test_non_finite_readings_are_missing(fixed_now):
    sample = Sample(timestamp=fixed_now, ph=float('inf'), turbidity=1.2,
                    tds=float('nan'), temperature=float('-inf'), dissolved_oxygen=8.0)
    assert sample.ph is None
    assert sample.tds is None
    assert sample.temperature is None
    assert format_sample(sample) == {
        't': to_iso(fixed_now), 'ph': 0, 'ntu': 1.2, 'tds': 0, 'temp': 0, 'do': 8.0,
    }
