# sitetariffs/utils.py
from __future__ import annotations
import numpy as np
import pandas as pd
from zoneinfo import ZoneInfo
from typing import Optional, Union
from datetime import tzinfo

from . import canon


def _zone(tz: Union[str, tzinfo]) -> tzinfo:
    return ZoneInfo(tz) if isinstance(tz, str) else tz


def to_timestamp(ts, tz: Union[str, tzinfo, None] = None) -> pd.Timestamp:
    """
    Normalise a datetime-like to a tz-aware Timestamp.

    Naive values are localised to `tz` (default: canon.DEFAULT_TZ); aware
    values are converted to `tz` when given, else kept as is.
    """
    ts = pd.Timestamp(ts)
    if ts.tz is None:
        return ts.tz_localize(_zone(tz or canon.DEFAULT_TZ))
    return ts.tz_convert(_zone(tz)) if tz else ts


def beginning_of_day(ts, tz: Union[str, tzinfo, None] = None) -> pd.Timestamp:
    """
    Local midnight of the day containing `ts`.

    Where a DST change skips midnight the day starts at the first valid wall
    time; a repeated midnight resolves to its first (DST) occurrence.
    """
    local = to_timestamp(ts, tz)
    return local.tz_localize(None).normalize().tz_localize(
        local.tz, nonexistent="shift_forward", ambiguous=True
    )


def ensure_tz_aware_index(idx: pd.DatetimeIndex, tz: Optional[str]) -> pd.DatetimeIndex:
    idx = pd.DatetimeIndex(idx)
    if idx.tz is None:
        return idx.tz_localize(ZoneInfo(tz or canon.DEFAULT_TZ))
    return idx.tz_convert(ZoneInfo(tz)) if tz else idx


def index_ns(idx: pd.DatetimeIndex) -> np.ndarray:
    """Index as int64 nanoseconds since epoch (UTC)."""
    return pd.DatetimeIndex(idx).as_unit("ns").asi8


def timestamp_ns(ts: pd.Timestamp) -> int:
    return int(ts.as_unit("ns").value)
