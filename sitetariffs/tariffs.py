from __future__ import annotations
import logging
from typing import Dict, Mapping, Optional, Protocol, Sequence

import numpy as np
import pandas as pd

from . import canon, exceptions, utils
from .schema import Rate, RatePlan
from .types import TariffQuote

_LOGGER = logging.getLogger(__name__)


class TariffProvider(Protocol):
    def rates(self, usage: canon.Usage) -> Sequence[Rate]:
        """Known rates for a usage kind; raise TariffUnavailableError if none."""
        ...


class RateTable:
    """In-memory provider: fixed rates per usage kind."""

    def __init__(self, rates: Optional[Mapping[str, Sequence[Rate]]] = None) -> None:
        self._rates: Dict[str, list[Rate]] = {
            usage: sorted(rr, key=lambda r: r.start) for usage, rr in (rates or {}).items()
        }

    @classmethod
    def from_plan(cls, plan: RatePlan) -> "RateTable":
        return cls({usage: getattr(plan, usage) for usage in canon.USAGES})

    def rates(self, usage: canon.Usage) -> Sequence[Rate]:
        if usage not in self._rates:
            raise exceptions.TariffUnavailableError(f"No '{usage}' tariff configured.")
        return self._rates[usage]


def rate_at(rates: Sequence[Rate], when) -> Rate:
    """Return the rate whose [start, end) contains `when`."""
    when = utils.to_timestamp(when)
    if not rates:
        raise exceptions.TariffUnavailableError("No rates available.")

    ns = utils.index_ns(pd.DatetimeIndex(pd.to_datetime([r.start for r in rates], utc=True)))
    # candidates sorted by start; last start <= when
    order = np.argsort(ns, kind="stable")
    pos = int(np.searchsorted(ns[order], utils.timestamp_ns(when), side="right")) - 1
    if pos >= 0:
        r = rates[int(order[pos])]
        if when < pd.Timestamp(r.end):
            return r
    raise exceptions.TariffUnavailableError(f"No rate covers {when.isoformat()}.")


def _rates_or_empty(provider: Optional[TariffProvider], usage: canon.Usage) -> Sequence[Rate]:
    if provider is None:
        return []
    try:
        return provider.rates(usage)
    except exceptions.TariffUnavailableError as err:
        _LOGGER.debug("%s tariff unavailable: %s", usage, err)
        return []


def current_value(
    provider: Optional[TariffProvider], usage: canon.Usage, when
) -> Optional[float]:
    """Current value of a tariff, or None when it cannot be determined."""
    rates = _rates_or_empty(provider, usage)
    try:
        return float(rate_at(rates, when).value)
    except exceptions.TariffUnavailableError as err:
        _LOGGER.debug("no current %s value: %s", usage, err)
        return None


def forecast(provider: Optional[TariffProvider], usage: canon.Usage) -> list[Rate]:
    """All known rates of a tariff ordered by start, empty when unavailable."""
    return sorted(_rates_or_empty(provider, usage), key=lambda r: r.start)


def read_quote(provider: Optional[TariffProvider], when) -> TariffQuote:
    """Snapshot of all current tariff values."""
    return TariffQuote(
        grid=current_value(provider, canon.GRID, when),
        feed_in=current_value(provider, canon.FEED_IN, when),
        co2=current_value(provider, canon.CO2, when),
        solar=current_value(provider, canon.SOLAR, when),
    )


# ------------------ blended values ------------------


def effective_price(green_share: float, quote: TariffQuote) -> Optional[float]:
    """
    Price of consumption mixing grid import and self-generated energy.

    Self-generated energy is valued at the feed-in price it would otherwise
    have earned. Needs the grid price; a missing feed-in price counts as 0.
    """
    if quote.grid is None:
        return None
    feed_in = quote.feed_in if quote.feed_in is not None else 0.0
    return quote.grid * (1 - green_share) + feed_in * green_share


def effective_co2(green_share: float, quote: TariffQuote) -> Optional[float]:
    """CO2 intensity of consumption; only the grid-imported part emits."""
    if quote.co2 is None:
        return None
    return quote.co2 * (1 - green_share)
