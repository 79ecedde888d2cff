from __future__ import annotations
import logging
import math
import pandas as pd
from typing import Optional, cast

from . import canon, utils
from .energy import accumulated_energy
from .types import ForecastAdjustment, TimeSeries

_LOGGER = logging.getLogger(__name__)


def scale_series(series: TimeSeries, factor: float) -> TimeSeries:
    """New series with every value multiplied by factor; timestamps unchanged."""
    out = cast(TimeSeries, series.astype(float) * float(factor))
    out.name = canon.VALUE_NAME
    return out


def adjust_forecast(
    forecast: Optional[TimeSeries],
    measured_today: float,
    now,
    *,
    tz: Optional[str] = None,
    min_energy: float = 0.0,
) -> Optional[ForecastAdjustment]:
    """
    Rescale a solar power forecast by today's measured vs forecasted yield.

    forecasted_today integrates the forecast from local midnight until now.
    The whole forecast is multiplied by measured_today / forecasted_today,
    assuming the forecast error is uniform over the rest of the day.

    Returns None (no adjustment) if the forecast is empty, if measured_today
    is not a finite number, or if either energy is at or below min_energy.
    """
    if forecast is None or forecast.empty:
        return None
    if not math.isfinite(measured_today):
        _LOGGER.debug("skipping forecast adjustment: measured %r", measured_today)
        return None

    now = utils.to_timestamp(now, tz or pd.DatetimeIndex(forecast.index).tz)
    forecasted_today = accumulated_energy(forecast, utils.beginning_of_day(now), now)

    if forecasted_today <= min_energy or measured_today <= min_energy:
        _LOGGER.debug(
            "skipping forecast adjustment: forecasted %.3f, measured %.3f (min %.3f)",
            forecasted_today,
            measured_today,
            min_energy,
        )
        return None

    scale = measured_today / forecasted_today
    return ForecastAdjustment(
        original_forecast=forecast,
        forecasted_today=forecasted_today,
        measured_today=float(measured_today),
        scale=scale,
        adjusted_forecast=scale_series(forecast, scale),
    )
