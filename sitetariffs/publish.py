from __future__ import annotations
import logging
from typing import Any, Callable, Optional, cast

from . import canon, formats, ingest, tariffs, utils
from .config import SiteConfig, default_config
from .forecast import adjust_forecast
from .greenshare import site_green_shares
from .tariffs import TariffProvider
from .types import ForecastPayload, SitePower, SolarDetails, TariffQuote

_LOGGER = logging.getLogger(__name__)

Sink = Callable[[str, Any], None]


def build_forecast_payload(
    provider: Optional[TariffProvider],
    measured_today: float,
    now,
    config: Optional[SiteConfig] = None,
) -> ForecastPayload:
    """
    Forecast payload: raw co2/feed-in/grid rates, the solar power forecast
    and, when computable, the adjusted solar forecast.

    Empty entries are left out.
    """
    cfg = (config or default_config()).validate()
    now = utils.to_timestamp(now, cfg.timezone)

    payload: dict[str, Any] = {}
    for usage in (canon.CO2, canon.FEED_IN, canon.GRID):
        rates = tariffs.forecast(provider, usage)
        if rates:
            payload[usage] = formats.rates_to_records(rates)

    solar = ingest.from_rates(tariffs.forecast(provider, canon.SOLAR), tz=cfg.timezone)
    if not solar.empty:
        payload[canon.SOLAR] = formats.series_to_records(solar)

    adj = adjust_forecast(
        solar,
        measured_today,
        now,
        tz=cfg.timezone,
        min_energy=cfg.min_adjust_energy_kwh,
    )
    if adj is not None:
        details: SolarDetails = {
            "solar": formats.series_to_records(adj.adjusted_forecast),
            "forecastedToday": adj.forecasted_today,
            "yieldToday": adj.measured_today,
        }
        payload["adjusted"] = details

    return cast(ForecastPayload, payload)


def publish_tariffs(
    sink: Sink,
    provider: Optional[TariffProvider],
    power: SitePower,
    measured_today: float,
    now,
    config: Optional[SiteConfig] = None,
) -> None:
    """
    Publish green shares, current tariffs, blended price/co2 per consumption
    band and the forecast payload for one cycle.

    Values that cannot be determined are not published. A naive `now` is
    read in the configured timezone; all values of the cycle use that instant.
    """
    cfg = (config or default_config()).validate()
    now = utils.to_timestamp(now, cfg.timezone)

    share_home, share_loadpoints = site_green_shares(power)
    sink(canon.GREEN_SHARE_HOME, share_home)
    sink(canon.GREEN_SHARE_LOADPOINTS, share_loadpoints)

    quote: TariffQuote = tariffs.read_quote(provider, now)
    for usage, value in (
        (canon.GRID, quote.grid),
        (canon.FEED_IN, quote.feed_in),
        (canon.CO2, quote.co2),
        (canon.SOLAR, quote.solar),
    ):
        if value is not None:
            sink(canon.TARIFF_KEYS[usage], value)

    for key, value in (
        (canon.TARIFF_PRICE_HOME, tariffs.effective_price(share_home, quote)),
        (canon.TARIFF_CO2_HOME, tariffs.effective_co2(share_home, quote)),
        (canon.TARIFF_PRICE_LOADPOINTS, tariffs.effective_price(share_loadpoints, quote)),
        (canon.TARIFF_CO2_LOADPOINTS, tariffs.effective_co2(share_loadpoints, quote)),
    ):
        if value is None:
            _LOGGER.debug("%s not published: tariff unavailable", key)
            continue
        sink(key, value)

    sink(canon.FORECAST, build_forecast_payload(provider, measured_today, now, cfg))
