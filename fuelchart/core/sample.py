# fuelchart/core/sample.py
from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date, datetime
from numbers import Real

from .exceptions import InvalidSample


@dataclass(frozen=True, slots=True)
class Sample:
    """One observation: a day-precision timestamp, a series key and a non-negative value."""

    timestamp: date
    series_key: str
    value: float

    def __post_init__(self) -> None:
        if isinstance(self.timestamp, datetime) or not isinstance(self.timestamp, date):
            raise InvalidSample("Sample.timestamp must be a datetime.date (day precision).")

        if not isinstance(self.series_key, str) or not self.series_key.strip():
            raise InvalidSample("Sample.series_key must be a non-empty string.")

        if isinstance(self.value, bool) or not isinstance(self.value, Real):
            raise InvalidSample(f"Sample.value must be a real number, got {type(self.value).__name__}.")
        value = float(self.value)
        if not math.isfinite(value):
            raise InvalidSample("Sample.value must be finite.")
        if value < 0:
            raise InvalidSample(f"Sample.value must be non-negative, got {value}.")

        object.__setattr__(self, "value", value)
