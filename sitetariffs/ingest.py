from __future__ import annotations
import numpy as np
import pandas as pd
from typing import Iterable, Optional, Sequence, Tuple, cast
from zoneinfo import ZoneInfo

from . import canon, utils, validate
from .schema import Rate
from .types import Sample, TimeSeries


def empty_series(tz: str = canon.DEFAULT_TZ) -> TimeSeries:
    """
    Return an empty TimeSeries with the correct tz-aware index and name.
    """
    idx = pd.DatetimeIndex([], tz=ZoneInfo(tz), name=canon.INDEX_NAME)
    return TimeSeries(np.array([], dtype=float), index=idx, name=canon.VALUE_NAME)


def _build(idx: pd.DatetimeIndex, values, tz: Optional[str]) -> TimeSeries:
    idx = utils.ensure_tz_aware_index(idx, tz).rename(canon.INDEX_NAME)
    out = TimeSeries(np.asarray(values, dtype=float), index=idx, name=canon.VALUE_NAME)
    # stable: equal timestamps keep their input order
    out = cast(TimeSeries, out.sort_index(kind="stable"))
    validate.assert_series(out)
    return out


def from_samples(
    samples: Iterable[Sample | Tuple[object, float]],
    *,
    tz: Optional[str] = None,
) -> TimeSeries:
    """
    Build a TimeSeries from (timestamp, value) pairs or Sample objects.

    Naive timestamps are localised to `tz` (default canon.DEFAULT_TZ).
    """
    pairs = [
        (s.timestamp, s.value) if isinstance(s, Sample) else (s[0], s[1])
        for s in samples
    ]
    if not pairs:
        return empty_series(tz or canon.DEFAULT_TZ)
    stamps, values = zip(*pairs)
    stamps = [utils.to_timestamp(t, tz) for t in stamps]
    idx = pd.DatetimeIndex(pd.to_datetime(stamps, utc=True)).tz_convert(
        tz or stamps[0].tz
    )
    return _build(idx, values, tz)


def from_rates(rates: Sequence[Rate], *, tz: Optional[str] = None) -> TimeSeries:
    """
    Sample each rate at its start: the rate table becomes a point series
    interpolated linearly between slot starts.
    """
    if not rates:
        return empty_series(tz or canon.DEFAULT_TZ)
    return from_samples(((r.start, r.value) for r in rates), tz=tz)


def _auto_rename(df: pd.DataFrame) -> pd.DataFrame:
    new = df.copy()

    # 1) Datetime index wins; otherwise look for a timestamp column
    if not isinstance(new.index, pd.DatetimeIndex):
        cols = {c.lower(): c for c in new.columns}
        tcol = next((cols[k] for k in canon.COMMON_TIMESTAMP_NAMES if k in cols), None)
        if tcol is None:
            raise ValueError(
                "No timestamp column found and index is not datetime. "
                f"Expected one of: {', '.join(canon.COMMON_TIMESTAMP_NAMES)}."
            )
        new = new.set_index(pd.DatetimeIndex(pd.to_datetime(new[tcol]))).drop(
            columns=[tcol]
        )

    # 2) Value column
    if canon.VALUE_NAME not in new.columns:
        cols = {c.lower(): c for c in new.columns}
        vcol = next((cols[k] for k in canon.COMMON_VALUE_NAMES if k in cols), None)
        if vcol is None:
            raise ValueError(
                "No value column found. "
                f"Expected one of: {', '.join(canon.COMMON_VALUE_NAMES)}."
            )
        new = new.rename(columns={vcol: canon.VALUE_NAME})
    return new


def from_dataframe(df: pd.DataFrame, *, tz: Optional[str] = None) -> TimeSeries:
    """
    Parse a DataFrame with a timestamp (index or column) and a value column
    and normalise to a TimeSeries.
    """
    df = _auto_rename(df)
    return _build(pd.DatetimeIndex(df.index), df[canon.VALUE_NAME].to_numpy(), tz)
