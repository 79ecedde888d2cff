from datetime import datetime

import pytz

from sitetariffs import formats, ingest
from sitetariffs.schema import Rate


def test_series_to_records():
    tz = pytz.timezone("Europe/Berlin")
    s = ingest.from_samples(
        [(tz.localize(datetime(2025, 1, 1, 12)), 1.5), (tz.localize(datetime(2025, 1, 1, 13)), 2)]
    )
    assert formats.series_to_records(s) == [
        {"ts": "2025-01-01T12:00:00+01:00", "val": 1.5},
        {"ts": "2025-01-01T13:00:00+01:00", "val": 2.0},
    ]


def test_rates_to_records():
    tz = pytz.timezone("Europe/Berlin")
    r = Rate(
        start=tz.localize(datetime(2025, 1, 1, 0)),
        end=tz.localize(datetime(2025, 1, 1, 1)),
        value=0.3,
    )
    assert formats.rates_to_records([r]) == [
        {"start": "2025-01-01T00:00:00+01:00", "end": "2025-01-01T01:00:00+01:00", "value": 0.3}
    ]
