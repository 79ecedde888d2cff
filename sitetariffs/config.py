from __future__ import annotations

from dataclasses import dataclass
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from . import canon, exceptions


@dataclass
class SiteConfig:
    timezone: str = canon.DEFAULT_TZ  # local day boundary for "today"

    # Forecast adjustment is skipped while forecasted or measured energy is at
    # or below this. 0.0 is the plain "must be positive" rule.
    min_adjust_energy_kwh: float = 0.0

    def validate(self) -> "SiteConfig":
        try:
            ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as err:
            raise exceptions.ConfigError(f"Unknown timezone '{self.timezone}'.") from err
        exceptions.require(
            self.min_adjust_energy_kwh >= 0,
            "min_adjust_energy_kwh must not be negative.",
            exceptions.ConfigError,
        )
        return self


def default_config() -> SiteConfig:
    return SiteConfig()
