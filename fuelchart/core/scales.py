# fuelchart/core/scales.py
"""
Data-to-pixel mapping.

Two immutable, monotonic, invertible linear scales:
- TimeScale: calendar dates -> pixel x
- LinearScale: values -> pixel y (range usually inverted, since pixel y grows downward)

Times are handled internally as fractional days since the Unix epoch, so
that inverting a pixel position yields sub-day precision
(numpy.datetime64 with millisecond resolution).
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any

import numpy as np

from .dataset import Dataset
from .exceptions import EmptyDatasetError, InvalidScale


_EPOCH = np.datetime64("1970-01-01", "D")
_MS_PER_DAY = 86_400_000

TimeLike = date | datetime | np.datetime64


def to_days(value: Any) -> Any:
    """Fractional days since the epoch for a date, datetime or datetime64 (scalar or array)."""
    if isinstance(value, np.ndarray):
        if not np.issubdtype(value.dtype, np.datetime64):
            raise TypeError(f"expected a datetime64 array, got dtype {value.dtype}")
        return (value - _EPOCH) / np.timedelta64(1, "D")
    if isinstance(value, np.datetime64):
        t = value
    elif isinstance(value, datetime):
        t = np.datetime64(value.replace(tzinfo=None), "ms")
    elif isinstance(value, date):
        t = np.datetime64(value, "D")
    else:
        raise TypeError(f"expected a date, datetime or datetime64, got {type(value).__name__}")
    return float((t - _EPOCH) / np.timedelta64(1, "D"))


def from_days(days: float) -> np.datetime64:
    return _EPOCH + np.timedelta64(int(round(days * _MS_PER_DAY)), "ms")


def _interpolate(x, d0: float, d1: float, r0: float, r1: float):
    if d0 == d1:
        # Single-point domain: everything collapses onto the range start.
        if isinstance(x, np.ndarray):
            return np.full(x.shape, r0, dtype=np.float64)
        return r0
    out = r0 + (x - d0) / (d1 - d0) * (r1 - r0)
    return out if isinstance(out, np.ndarray) else float(out)


def _check_range(rng: tuple[float, float]) -> tuple[float, float]:
    r0, r1 = float(rng[0]), float(rng[1])
    if not (math.isfinite(r0) and math.isfinite(r1)):
        raise InvalidScale(f"range must be finite, got {rng!r}")
    return r0, r1


def tick_increment(start: float, stop: float, count: int) -> float:
    """Step of 1, 2 or 5 times a power of ten giving roughly `count` ticks."""
    step = (stop - start) / max(count, 1)
    power = math.floor(math.log10(step))
    error = step / 10 ** power
    if error >= math.sqrt(50):
        factor = 10
    elif error >= math.sqrt(10):
        factor = 5
    elif error >= math.sqrt(2):
        factor = 2
    else:
        factor = 1
    return factor * 10 ** power


@dataclass(frozen=True, slots=True)
class LinearScale:
    """Linear map from `domain` to `range`; invertible when the domain is non-degenerate."""

    domain: tuple[float, float]
    range: tuple[float, float]

    def __post_init__(self) -> None:
        d0, d1 = float(self.domain[0]), float(self.domain[1])
        if not (math.isfinite(d0) and math.isfinite(d1)):
            raise InvalidScale(f"LinearScale.domain must be finite, got {self.domain!r}")
        if d1 < d0:
            raise InvalidScale(f"LinearScale.domain must be ascending, got {self.domain!r}")
        object.__setattr__(self, "domain", (d0, d1))
        object.__setattr__(self, "range", _check_range(self.range))

    def __call__(self, value):
        x = np.asarray(value, dtype=np.float64) if isinstance(value, (list, tuple, np.ndarray)) else float(value)
        return _interpolate(x, *self.domain, *self.range)

    def invert(self, pixel: float) -> float:
        r0, r1 = self.range
        if r0 == r1:
            return self.domain[0]
        return float(_interpolate(float(pixel), r0, r1, *self.domain))

    def ticks(self, count: int = 10) -> np.ndarray:
        d0, d1 = self.domain
        if d0 == d1 or count <= 0:
            return np.array([d0])
        inc = tick_increment(d0, d1, count)
        lo = math.ceil(d0 / inc)
        hi = math.floor(d1 / inc)
        return np.arange(lo, hi + 1, dtype=np.float64) * inc


@dataclass(frozen=True, slots=True)
class TimeScale:
    """Linear map from a calendar date interval to `range`."""

    domain: tuple[date, date]
    range: tuple[float, float]

    _d0: float = field(init=False, repr=False, compare=False)
    _d1: float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        start, end = self.domain
        for d in (start, end):
            if isinstance(d, datetime) or not isinstance(d, date):
                raise InvalidScale("TimeScale.domain must be a pair of datetime.date values.")
        if end < start:
            raise InvalidScale(f"TimeScale.domain must be ascending, got {start} > {end}")
        object.__setattr__(self, "domain", (start, end))
        object.__setattr__(self, "range", _check_range(self.range))
        object.__setattr__(self, "_d0", to_days(start))
        object.__setattr__(self, "_d1", to_days(end))

    def __call__(self, value):
        return _interpolate(to_days(value), self._d0, self._d1, *self.range)

    def invert(self, pixel: float) -> np.datetime64:
        """Date at `pixel`; positions outside the range (or NaN) clamp to the domain ends."""
        r0, r1 = self.range
        if r0 == r1 or self._d0 == self._d1:
            return from_days(self._d0)
        px = float(pixel)
        if math.isnan(px):
            px = r0
        px = min(max(px, min(r0, r1)), max(r0, r1))
        return from_days(_interpolate(px, r0, r1, self._d0, self._d1))

    def year_ticks(self) -> list[date]:
        """Every January 1st inside the domain."""
        start, end = self.domain
        out = []
        for year in range(start.year, end.year + 1):
            tick = date(year, 1, 1)
            if start <= tick <= end:
                out.append(tick)
        return out


@dataclass(frozen=True, slots=True)
class ScaleMapping:
    """The pair of scales for one chart: x is time, y is value (inverted)."""

    x: TimeScale
    y: LinearScale

    @property
    def width(self) -> float:
        return self.x.range[1] - self.x.range[0]

    @property
    def height(self) -> float:
        return self.y.range[0] - self.y.range[1]

    def point(self, timestamp: TimeLike, value: float) -> tuple[float, float]:
        return self.x(timestamp), self.y(value)


def compute_domains(dataset: Dataset) -> tuple[tuple[date, date], tuple[float, float]]:
    """
    Domain extents of a dataset.

    Returns ((min date, max date), (0.0, max value)). The value domain is
    pinned to zero so that lines read as growth from zero.
    """
    if dataset.is_empty:
        raise EmptyDatasetError("cannot compute domains of an empty dataset")
    return (dataset.t_start, dataset.t_end), (0.0, dataset.value_max)


def build_scales(
    time_range: tuple[date, date],
    value_range: tuple[float, float],
    pixel_width: float,
    pixel_height: float,
) -> ScaleMapping:
    if not (pixel_width > 0 and pixel_height > 0):
        raise InvalidScale(f"pixel size must be positive, got {pixel_width}x{pixel_height}")
    return ScaleMapping(
        x=TimeScale(domain=tuple(time_range), range=(0.0, float(pixel_width))),
        y=LinearScale(domain=tuple(value_range), range=(float(pixel_height), 0.0)),
    )
