# fuelchart/core/formatting.py
from __future__ import annotations

from datetime import date
from decimal import ROUND_HALF_UP, Decimal


def format_year(d: date) -> str:
    return d.strftime("%Y")


def format_month(d: date) -> str:
    """Short month and year, e.g. 'Mar 2021'."""
    return d.strftime("%b %Y")


def format_thousands(value: float) -> str:
    """Value axis label: thousands rounded half-up, e.g. 12500 -> '13k'."""
    k = (Decimal(repr(float(value))) / 1000).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
    if k == 0:
        k = Decimal(0)  # no '-0k'
    return f"{k}k"


def format_count(value: float) -> str:
    """Thousands separators, at most three decimals: 1234 -> '1,234', 0.5 -> '0.5'."""
    if float(value).is_integer():
        return f"{int(value):,}"
    return f"{value:,.3f}".rstrip("0").rstrip(".")
