from __future__ import annotations
import numpy as np
import pandas as pd

from . import exceptions, utils
from .types import TimeSeries


def accumulated_energy(series: TimeSeries, start, end) -> float:
    """
    Energy between `start` and `end`, reading the series as power over time.

    Trapezoidal rule over consecutive samples, each segment clipped to
    [start, end]. Result is in value-unit × hours (kWh for a kW series).

    The integration starts at the last sample not after `start`. Without such
    a bounding sample it starts at the first sample: nothing before the first
    sample is integrated. It stops with the first sample at or after `end`.
    """
    idx = pd.DatetimeIndex(series.index)
    tz = idx.tz
    t0 = utils.timestamp_ns(utils.to_timestamp(start, tz))
    t1 = utils.timestamp_ns(utils.to_timestamp(end, tz))
    exceptions.require(t0 <= t1, f"start {start} is after end {end}", exceptions.RangeError)
    if len(series) < 2 or t0 == t1:
        return 0.0

    ts = utils.index_ns(idx)
    vals = series.to_numpy(dtype=float)

    # previous sample: last one not after start, if any
    prev = int(np.searchsorted(ts, t0, side="right")) - 1
    if prev < 0:
        prev = 0
    # last sample: first one at or after end, else the tail
    last = min(int(np.searchsorted(ts, t1, side="left")), len(ts) - 1)
    if last <= prev:
        return 0.0

    t = ts[prev : last + 1]
    v = vals[prev : last + 1]

    seg_start = np.maximum(t[:-1], t0)
    seg_end = np.minimum(t[1:], t1)
    hours = np.clip(seg_end - seg_start, 0, None) / 3.6e12
    return float(np.sum((v[:-1] + v[1:]) / 2.0 * hours))
