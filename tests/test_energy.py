"""Tests for trapezoidal energy integration over power series.

- test_two_samples_one_hour: (2 kW, 4 kW) over one hour is 3 kWh.
- test_constant_power: constant v over [from, to] is v * hours.
- test_*_returns_zero: empty, single sample, zero-width and out-of-range cases.
- test_additive_split: [from, mid] + [mid, to] == [from, to].
- test_rejects_inverted_range: from > to is a caller error.
"""

import pandas as pd
import pytest

from sitetariffs import exceptions, ingest
from sitetariffs.energy import accumulated_energy

from conftest import TZ

H = pd.Timedelta(hours=1)


def _series(t0, points):
    """Build a series from (hours offset, value) pairs."""
    return ingest.from_samples([(t0 + h * H, v) for h, v in points], tz=TZ)


def test_two_samples_one_hour(day):
    s = _series(day, [(0, 2.0), (1, 4.0)])
    assert accumulated_energy(s, day, day + H) == pytest.approx(3.0)


def test_constant_power(day):
    s = _series(day, [(h, 1.5) for h in range(10)])
    start = day + pd.Timedelta(minutes=30)
    end = day + pd.Timedelta(hours=5, minutes=15)
    assert accumulated_energy(s, start, end) == pytest.approx(1.5 * 4.75)


def test_empty_series_returns_zero(day):
    assert accumulated_energy(ingest.empty_series(TZ), day, day + H) == 0.0


def test_single_sample_returns_zero(day):
    s = _series(day, [(0, 5.0)])
    assert accumulated_energy(s, day - H, day + H) == 0.0


def test_zero_width_range_returns_zero(day):
    s = _series(day, [(0, 2.0), (1, 4.0)])
    mid = day + pd.Timedelta(minutes=30)
    assert accumulated_energy(s, mid, mid) == 0.0


def test_series_before_range_returns_zero(day):
    s = _series(day, [(0, 2.0), (1, 2.0), (2, 2.0)])
    assert accumulated_energy(s, day + 3 * H, day + 4 * H) == 0.0


def test_series_after_range_returns_zero(day):
    s = _series(day, [(5, 2.0), (6, 2.0)])
    assert accumulated_energy(s, day, day + H) == 0.0


def test_no_implicit_sample_before_first(day):
    """Nothing is integrated between `from` and the first sample."""
    s = _series(day, [(2, 3.0), (3, 3.0)])
    assert accumulated_energy(s, day, day + 3 * H) == pytest.approx(3.0)


def test_bounding_sample_before_from(day):
    """The segment crossing `from` is clipped but keeps its endpoint average."""
    s = _series(day, [(0, 2.0), (2, 4.0)])
    assert accumulated_energy(s, day + H, day + 2 * H) == pytest.approx(3.0)


def test_duplicate_timestamps(day):
    s = _series(day, [(0, 0.0), (1, 2.0), (1, 4.0), (2, 4.0)])
    assert accumulated_energy(s, day, day + 2 * H) == pytest.approx(1.0 + 4.0)


@pytest.mark.parametrize("mid_minutes", [0, 20, 60, 95, 150, 240])
def test_additive_split(day, mid_minutes):
    s = _series(day, [(0, 1.0), (0.5, 3.0), (1.25, 0.5), (2, 6.0), (4, 2.0)])
    start, end = day, day + 4 * H
    mid = start + pd.Timedelta(minutes=mid_minutes)
    whole = accumulated_energy(s, start, end)
    parts = accumulated_energy(s, start, mid) + accumulated_energy(s, mid, end)
    assert parts == pytest.approx(whole)


def test_naive_bounds_use_series_timezone(day, naive_morning):
    s = _series(day, [(h, 2.0) for h in range(24)])
    assert accumulated_energy(s, day, naive_morning) == pytest.approx(10.0)


def test_rejects_inverted_range(day):
    s = _series(day, [(0, 2.0), (1, 4.0)])
    with pytest.raises(exceptions.RangeError):
        accumulated_energy(s, day + H, day)
