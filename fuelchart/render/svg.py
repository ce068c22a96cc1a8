# fuelchart/render/svg.py
from __future__ import annotations

import logging
from html import escape
from os import PathLike
from pathlib import Path
from typing import Sequence

from fuelchart.core import ChartModel, Sample, ScaleMapping
from fuelchart.core.formatting import format_thousands, format_year


logger = logging.getLogger(__name__)

GRID_COLOR = "#e0e0e0"
GUIDE_COLOR = "#999"
FONT = "sans-serif"


def _n(value: float) -> str:
    """Compact coordinate: at most two decimals, no trailing zeros."""
    return f"{round(float(value), 2):g}"


def line_path(samples: Sequence[Sample], scales: ScaleMapping) -> str:
    """SVG path data through the samples, e.g. 'M0,390L10.5,200'."""
    points = [f"{_n(scales.x(s.timestamp))},{_n(scales.y(s.value))}" for s in samples]
    return ("M" + "L".join(points)) if points else ""


def _x_axis(model: ChartModel) -> list[str]:
    x = model.scales.x
    width = model.scales.width
    out = [
        f'<g class="x-axis" transform="translate(0,{_n(model.config.inner_height)})" '
        f'font-size="10" font-family="{FONT}" text-anchor="middle">',
        f'<path class="domain" stroke="currentColor" d="M0,6V0H{_n(width)}V6"/>',
    ]
    for tick in x.year_ticks():
        out.append(
            f'<g class="tick" transform="translate({_n(x(tick))},0)">'
            f'<line stroke="currentColor" y2="6"/>'
            f'<text fill="currentColor" y="9" dy="0.71em">{format_year(tick)}</text></g>'
        )
    out.append("</g>")
    return out


def _y_axis(model: ChartModel) -> list[str]:
    y = model.scales.y
    out = [
        f'<g class="y-axis" font-size="10" font-family="{FONT}" text-anchor="end">',
        f'<path class="domain" stroke="currentColor" d="M-6,{_n(y.range[0])}H0V{_n(y.range[1])}H-6"/>',
    ]
    for tick in y.ticks(model.config.value_tick_count):
        out.append(
            f'<g class="tick" transform="translate(0,{_n(y(tick))})">'
            f'<line stroke="currentColor" x2="-6"/>'
            f'<text fill="currentColor" x="-9" dy="0.32em">{format_thousands(tick)}</text></g>'
        )
    out.append("</g>")
    return out


def _grid(model: ChartModel) -> list[str]:
    y = model.scales.y
    width = _n(model.scales.width)
    return [
        f'<line class="y-grid" x1="0" x2="{width}" y1="{_n(y(t))}" y2="{_n(y(t))}" '
        f'stroke="{GRID_COLOR}" stroke-width="0.5"/>'
        for t in y.ticks(model.config.value_tick_count)
    ]


def _series(model: ChartModel) -> list[str]:
    colors = model.colors()
    out = ['<g class="series">']
    for key, samples in model.groups.items():
        out.append(
            f'<path class="line" data-key="{escape(key)}" fill="none" stroke="{colors(key)}" '
            f'stroke-width="1.5" d="{line_path(samples, model.scales)}"/>'
        )
    out.append("</g>")

    # End-of-line labels
    out.append('<g class="labels">')
    for key, samples in model.groups.items():
        x, y = model.scales.point(samples[-1].timestamp, samples[-1].value)
        out.append(
            f'<text x="{_n(x)}" y="{_n(y)}" dx="8" dy="4" font-size="12px" font-weight="500" '
            f'fill="{colors(key)}" font-family="{FONT}">{escape(key)}</text>'
        )
    out.append("</g>")
    return out


def render_svg(model: ChartModel) -> str:
    """Static SVG drawing of the chart (axes, gridlines, lines, labels, title, source)."""
    cfg = model.config
    m = cfg.margin
    parts = [
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{_n(cfg.width)}" height="{_n(cfg.height)}" '
        f'viewBox="0 0 {_n(cfg.width)} {_n(cfg.height)}">',
        f'<g transform="translate({_n(m.left)},{_n(m.top)})">',
        f'<line class="vertical-line" stroke="{GUIDE_COLOR}" stroke-width="1" stroke-dasharray="4" '
        f'opacity="0" pointer-events="none" x1="0" x2="0" y1="0" y2="{_n(cfg.inner_height)}"/>',
    ]
    parts += _x_axis(model)
    parts += _y_axis(model)
    parts += _grid(model)
    parts += _series(model)
    parts += [
        f'<rect class="listening-rect" width="{_n(cfg.inner_width)}" height="{_n(cfg.inner_height)}" '
        f'fill="none" pointer-events="all"/>',
        f'<text class="chart-title" x="{_n(cfg.inner_width / 2)}" y="{_n(m.top - 100)}" '
        f'text-anchor="middle" font-size="24px" font-weight="bold" font-family="{FONT}">'
        f"{escape(cfg.title)}</text>",
        f'<text class="chart-source" x="{_n(cfg.inner_width)}" y="{_n(cfg.inner_height + m.bottom - 3)}" '
        f'text-anchor="end" font-size="12px" font-style="italic" font-family="{FONT}">'
        f"{escape(cfg.source)}</text>",
        "</g>",
        "</svg>",
    ]
    return "\n".join(parts) + "\n"


def write_svg(path: str | PathLike[str], model: ChartModel) -> Path:
    out = Path(path)
    out.write_text(render_svg(model), encoding="utf-8")
    logger.info("Wrote chart (%d series) to %s", len(model.groups), out)
    return out
