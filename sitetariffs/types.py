from __future__ import annotations
from typing import TypedDict, List, Optional
from dataclasses import dataclass

import pandas as pd


# Canon series
class TimeSeries(pd.Series):
    """
    Piecewise-linear function of time.

    Expected:
      - DatetimeIndex named 'ts', tz-aware, non-decreasing
      - float values named 'val' (kW, price or intensity)

    Never mutated in place; operations return a new series.
    """

    @property
    def _constructor(self):
        return TimeSeries

    @property
    def _constructor_expanddim(self):
        return pd.DataFrame

    def samples(self) -> List["Sample"]:
        return [Sample(ts, float(v)) for ts, v in self.items()]


@dataclass(frozen=True)
class Sample:
    timestamp: pd.Timestamp
    value: float


## Live site power (kW)
@dataclass(frozen=True)
class GreenShareInput:
    pv_power: float
    battery_power: float  # positive = discharging


@dataclass(frozen=True)
class ConsumptionInterval:
    power_from: float
    power_to: float  # >= power_from, not enforced


@dataclass(frozen=True)
class SitePower:
    pv_power: float
    battery_power: float
    home_power: float
    charge_power: float = 0.0  # sum over all loadpoints

    @property
    def green(self) -> GreenShareInput:
        return GreenShareInput(self.pv_power, self.battery_power)

    def home_interval(self) -> ConsumptionInterval:
        return ConsumptionInterval(0.0, self.home_power)

    def loadpoints_interval(self) -> ConsumptionInterval:
        return ConsumptionInterval(
            self.home_power, self.home_power + self.charge_power
        )


## Tariffs
@dataclass(frozen=True)
class TariffQuote:
    grid: Optional[float] = None
    feed_in: Optional[float] = None
    co2: Optional[float] = None
    solar: Optional[float] = None


## Forecast adjustment
@dataclass(frozen=True)
class ForecastAdjustment:
    original_forecast: TimeSeries
    forecasted_today: float  # until now
    measured_today: float  # until now
    scale: float
    adjusted_forecast: TimeSeries


# JSON payloads
class SampleRecord(TypedDict):
    ts: str
    val: float


class RateRecord(TypedDict):
    start: str
    end: str
    value: float


class SolarDetails(TypedDict):
    solar: List[SampleRecord]
    forecastedToday: float
    yieldToday: float


class ForecastPayload(TypedDict, total=False):
    co2: List[RateRecord]
    feedin: List[RateRecord]
    grid: List[RateRecord]
    solar: List[SampleRecord]
    adjusted: SolarDetails

