from __future__ import annotations
from datetime import datetime
from pydantic import BaseModel, model_validator


class Rate(BaseModel):
    """One tariff slot: `value` applies within [start, end)."""

    start: datetime
    end: datetime
    value: float

    @model_validator(mode="after")
    def _check_slot(self) -> "Rate":
        if self.start.tzinfo is None or self.end.tzinfo is None:
            raise ValueError("Rate start/end must be tz-aware")
        if self.end <= self.start:
            raise ValueError(f"Rate end must be after start: {self.start} .. {self.end}")
        return self


class RatePlan(BaseModel):
    """Rates per usage kind, e.g. loaded from a provider response."""

    grid: list[Rate] = []
    feedin: list[Rate] = []
    co2: list[Rate] = []
    solar: list[Rate] = []
