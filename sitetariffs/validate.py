from __future__ import annotations
import numpy as np
import pandas as pd
from typing import cast

from . import canon, exceptions


def assert_series(s: pd.Series) -> None:
    if not isinstance(s.index, pd.DatetimeIndex):
        raise exceptions.SeriesError("Index must be a DatetimeIndex.")
    if s.index.name != canon.INDEX_NAME:
        raise exceptions.SeriesError(f"Index must be '{canon.INDEX_NAME}'.")
    tz_index = cast(pd.DatetimeIndex, s.index)
    if tz_index.tz is None:
        raise exceptions.SeriesError("Index must be tz-aware.")
    if not s.index.is_monotonic_increasing:
        raise exceptions.SeriesError("Timestamps must be non-decreasing.")
    if s.dtype.kind not in "fi":
        raise exceptions.SeriesError(f"Values must be numeric, got {s.dtype}.")
    if len(s) and not np.isfinite(s.to_numpy(dtype=float)).all():
        raise exceptions.SeriesError("Values must be finite; NaN or inf detected.")
