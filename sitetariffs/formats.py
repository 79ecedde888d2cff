from __future__ import annotations

from typing import List, Sequence

from . import canon, validate
from .schema import Rate
from .types import RateRecord, SampleRecord, TimeSeries


def series_to_records(s: TimeSeries) -> List[SampleRecord]:
    """
    Convert a TimeSeries into JSON-ready records:
      [{"ts": "<iso8601>", "val": <float>}, ...]
    """
    validate.assert_series(s)
    return [
        {canon.INDEX_NAME: ts.isoformat(), canon.VALUE_NAME: float(v)}  # type: ignore[misc]
        for ts, v in s.items()
    ]


def rates_to_records(rates: Sequence[Rate]) -> List[RateRecord]:
    return [
        {
            "start": r.start.isoformat(),
            "end": r.end.isoformat(),
            "value": float(r.value),
        }
        for r in rates
    ]
