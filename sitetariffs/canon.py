from __future__ import annotations
from typing import Final, Dict, Literal

INDEX_NAME: Final[str] = "ts"
VALUE_NAME: Final[str] = "val"
DEFAULT_TZ: Final[str] = "Europe/Berlin"
COMMON_TIMESTAMP_NAMES = ("ts", "timestamp", "time", "start", "datetime")
COMMON_VALUE_NAMES = ("val", "value", "price", "power", "kw")

Usage = Literal["grid", "feedin", "co2", "solar"]

GRID: Final[Usage] = "grid"
FEED_IN: Final[Usage] = "feedin"
CO2: Final[Usage] = "co2"
SOLAR: Final[Usage] = "solar"
USAGES: Final[tuple[Usage, ...]] = (GRID, FEED_IN, CO2, SOLAR)

# Published keys
GREEN_SHARE_HOME: Final[str] = "greenShareHome"
GREEN_SHARE_LOADPOINTS: Final[str] = "greenShareLoadpoints"
TARIFF_PRICE_HOME: Final[str] = "tariffPriceHome"
TARIFF_CO2_HOME: Final[str] = "tariffCo2Home"
TARIFF_PRICE_LOADPOINTS: Final[str] = "tariffPriceLoadpoints"
TARIFF_CO2_LOADPOINTS: Final[str] = "tariffCo2Loadpoints"
FORECAST: Final[str] = "forecast"

# usage kind → key of its current value
TARIFF_KEYS: Dict[str, str] = {
    GRID: "tariffGrid",
    FEED_IN: "tariffFeedIn",
    CO2: "tariffCo2",
    SOLAR: "tariffSolar",
}
