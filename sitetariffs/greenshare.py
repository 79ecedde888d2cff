from __future__ import annotations
from typing import Tuple

from .types import ConsumptionInterval, GreenShareInput, SitePower


def green_share(
    power_from: float, power_to: float, pv_power: float, battery_power: float
) -> float:
    """
    Share of the consumption between power_from and power_to that is covered
    by green power (PV production plus battery discharge).

    Consumption below power_from gets the available green power first; only
    the excess counts for the [power_from, power_to] band.

    A band without width has no consumption to measure: it is fully green
    (1.0) if any green power is left over, else 0.0. An inverted band
    (power_to < power_from) follows the same rule.
    """
    green_power = max(0.0, pv_power) + max(0.0, battery_power)
    green_available = max(0.0, green_power - power_from)

    band = power_to - power_from
    if band <= 0:
        return 1.0 if green_available > 0 else 0.0

    return min(green_available, band) / band


def interval_green_share(
    interval: ConsumptionInterval, green: GreenShareInput
) -> float:
    return green_share(
        interval.power_from, interval.power_to, green.pv_power, green.battery_power
    )


def site_green_shares(power: SitePower) -> Tuple[float, float]:
    """Return (home, loadpoints) green shares for one power snapshot."""
    home = interval_green_share(power.home_interval(), power.green)
    loadpoints = interval_green_share(power.loadpoints_interval(), power.green)
    return home, loadpoints
