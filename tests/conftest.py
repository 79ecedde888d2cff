from datetime import datetime

import pandas as pd
import pytest

from sitetariffs import ingest
from sitetariffs.schema import Rate
from sitetariffs.tariffs import RateTable

TZ = "Europe/Berlin"


def hourly_rates(day: pd.Timestamp, value, hours: int = 24) -> list[Rate]:
    """One rate per hour from `day`; `value` is a constant or a callable of the hour."""
    out = []
    for h in range(hours):
        start = day + pd.Timedelta(hours=h)
        v = value(h) if callable(value) else value
        out.append(
            Rate(
                start=start.to_pydatetime(),
                end=(start + pd.Timedelta(hours=1)).to_pydatetime(),
                value=v,
            )
        )
    return out


@pytest.fixture
def day():
    return pd.Timestamp("2025-06-01", tz=TZ)


@pytest.fixture
def now(day):
    return day + pd.Timedelta(hours=5)


@pytest.fixture
def solar_flat(day):
    # 2 kW all day → 10 kWh between midnight and 05:00
    return ingest.from_samples(
        [(day + pd.Timedelta(hours=h), 2.0) for h in range(24)], tz=TZ
    )


@pytest.fixture
def rate_table(day):
    return RateTable(
        {
            "grid": hourly_rates(day, 0.30),
            "feedin": hourly_rates(day, 0.08),
            "co2": hourly_rates(day, 400.0),
            "solar": hourly_rates(day, 2.0),
        }
    )


@pytest.fixture
def naive_morning():
    return datetime(2025, 6, 1, 5, 0)
