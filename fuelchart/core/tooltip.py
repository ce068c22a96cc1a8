# fuelchart/core/tooltip.py
"""
Pointer -> tooltip resolution.

Handlers are pure functions of the pointer position and the immutable
Dataset / ScaleMapping: calling them twice with the same input gives the
same TooltipState, and the last call wins.
"""
from __future__ import annotations

import html
from dataclasses import dataclass
from datetime import date
from typing import Sequence

import numpy as np

from .dataset import Dataset
from .exceptions import EmptyDatasetError
from .formatting import format_count, format_month
from .sample import Sample
from .scales import ScaleMapping, TimeLike, to_days


@dataclass(frozen=True, slots=True)
class TooltipState:
    """What the rendering side shows for one pointer position."""

    visible: bool
    guide_x: float | None = None
    html: str = ""
    left: float | None = None
    top: float | None = None
    day: date | None = None
    samples: tuple[Sample, ...] = ()


HIDDEN = TooltipState(visible=False)


def nearest_sample_date(dataset: Dataset, target: TimeLike) -> date:
    """
    Date of the dataset closest to `target`.

    Left bisection over the sorted unique dates; the insertion index is
    clamped so that targets outside the data snap to the first or last date.
    On an exact tie the earlier date wins.
    """
    dates = dataset.unique_dates
    if dates.size == 0:
        raise EmptyDatasetError("cannot look up a date in an empty dataset")
    if dates.size == 1:
        return dates[0].item()

    days = to_days(dates)
    t = to_days(target)
    i = int(np.searchsorted(days, t, side="left"))
    i = min(max(i, 1), dates.size - 1)

    d0, d1 = days[i - 1], days[i]
    k = i if (t - d0) > (d1 - t) else i - 1
    return dates[k].item()


def format_tooltip_html(day: date, samples: Sequence[Sample]) -> str:
    parts = [f"<strong>{html.escape(format_month(day))}</strong><br>"]
    for s in samples:
        parts.append(f"<strong>{html.escape(s.series_key)}:</strong> {format_count(s.value)}<br>")
    return "".join(parts)


def pointer_move(
    pointer_x: float,
    dataset: Dataset,
    scales: ScaleMapping,
    *,
    offset_x: float = 100,
    offset_y: float = 50,
) -> TooltipState:
    """
    Resolve a horizontal pointer offset (plot-area pixels) to a tooltip.

    The guide line sits on the resolved date; the tooltip is placed relative
    to the first sample of that date.
    """
    target = scales.x.invert(pointer_x)
    day = nearest_sample_date(dataset, target)
    samples = dataset.samples_on_date(day)

    x_pos = scales.x(day)
    y_pos = scales.y(samples[0].value)
    return TooltipState(
        visible=True,
        guide_x=x_pos,
        html=format_tooltip_html(day, samples),
        left=x_pos + offset_x,
        top=y_pos + offset_y,
        day=day,
        samples=samples,
    )


def pointer_leave() -> TooltipState:
    return HIDDEN
