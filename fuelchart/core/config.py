# fuelchart/core/config.py
from __future__ import annotations

import math
from dataclasses import dataclass, field

from .exceptions import InvalidConfig
from .palette import TABLEAU10


def _check_non_negative(owner: str, name: str, value: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
        raise InvalidConfig(f"{owner}.{name} must be a finite number.")
    if value < 0:
        raise InvalidConfig(f"{owner}.{name} must be non-negative, got {value}.")
    return float(value)


@dataclass(frozen=True, slots=True)
class Margin:
    top: float = 70
    right: float = 200
    bottom: float = 40
    left: float = 80

    def __post_init__(self) -> None:
        for name in ("top", "right", "bottom", "left"):
            object.__setattr__(self, name, _check_non_negative("Margin", name, getattr(self, name)))


@dataclass(frozen=True, slots=True)
class ChartConfig:
    """
    Layout and labelling of the chart.

    - width / height: outer size of the drawing, margins included
    - margin: space around the plot area (axes, labels and title live there)
    - tooltip_offset_x / tooltip_offset_y: tooltip position relative to the hovered point
    - value_tick_count: approximate number of value-axis ticks (and gridlines)
    """
    width: float = 1500
    height: float = 500
    margin: Margin = field(default_factory=Margin)
    title: str = "Tracking Singapore's Shift Away from Conventional Fuel Cars"
    source: str = "Source: Land Transport Authority (LTA)"
    tooltip_offset_x: float = 100
    tooltip_offset_y: float = 50
    palette: tuple[str, ...] = TABLEAU10
    value_tick_count: int = 10

    def __post_init__(self) -> None:
        if not isinstance(self.margin, Margin):
            raise InvalidConfig("ChartConfig.margin must be a Margin instance.")
        for name in ("width", "height"):
            object.__setattr__(self, name, _check_non_negative("ChartConfig", name, getattr(self, name)))
        if self.inner_width <= 0 or self.inner_height <= 0:
            raise InvalidConfig(
                f"Plot area is empty: {self.inner_width}x{self.inner_height} after margins."
            )
        for name in ("tooltip_offset_x", "tooltip_offset_y"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value):
                raise InvalidConfig(f"ChartConfig.{name} must be a finite number.")
        if not self.palette:
            raise InvalidConfig("ChartConfig.palette must contain at least one color.")
        object.__setattr__(self, "palette", tuple(self.palette))
        if isinstance(self.value_tick_count, bool) or not isinstance(self.value_tick_count, int) \
                or self.value_tick_count <= 0:
            raise InvalidConfig("ChartConfig.value_tick_count must be a positive integer.")

    @property
    def inner_width(self) -> float:
        return self.width - self.margin.left - self.margin.right

    @property
    def inner_height(self) -> float:
        return self.height - self.margin.top - self.margin.bottom
