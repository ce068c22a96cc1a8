# fuelchart/core/parse.py
from __future__ import annotations

import math
import re
from datetime import date, datetime
from numbers import Real
from typing import Any, Iterable, Mapping

from .dataset import Dataset
from .exceptions import InvalidDataset, InvalidSample, ParseError
from .metadata import DatasetMeta
from .sample import Sample


DATE_FORMAT = "%Y-%m-%d"

DATE_COLUMN = "month"
KEY_COLUMN = "fuel_type"
VALUE_COLUMN = "number"

# Plain decimal / scientific notation only: no "nan", "inf", "1_000", "0x10".
_NUMBER_RE = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")


def parse_date(text: Any, *, row: int | None = None, column: str | None = None) -> date:
    """Parse a `YYYY-MM-DD` string into a calendar date."""
    if not isinstance(text, str):
        raise ParseError(f"expected a date string, got {text!r}", row=row, column=column)
    try:
        return datetime.strptime(text, DATE_FORMAT).date()
    except ValueError as e:
        raise ParseError(
            f"{column or 'date'} {text!r} does not match {DATE_FORMAT}", row=row, column=column
        ) from e


def parse_number(text: Any, *, row: int | None = None, column: str | None = None) -> float:
    """
    Convert a numeric string to a float.

    Surrounding whitespace is ignored. Empty, non-numeric, non-finite and
    negative inputs are rejected.
    """
    if isinstance(text, Real) and not isinstance(text, bool):
        value = float(text)
    elif isinstance(text, str) and _NUMBER_RE.match(text.strip()):
        value = float(text.strip())
    else:
        raise ParseError(f"{column or 'value'} {text!r} is not numeric", row=row, column=column)

    if not math.isfinite(value):
        raise ParseError(f"{column or 'value'} {text!r} is not finite", row=row, column=column)
    if value < 0:
        raise ParseError(f"{column or 'value'} {text!r} is negative", row=row, column=column)
    return value


def _field(raw: Mapping[str, Any], column: str, row: int) -> Any:
    try:
        return raw[column]
    except KeyError as e:
        raise ParseError(f"missing column '{column}'", row=row, column=column) from e


def load(
    rows: Iterable[Mapping[str, Any]],
    *,
    date_column: str = DATE_COLUMN,
    key_column: str = KEY_COLUMN,
    value_column: str = VALUE_COLUMN,
    meta: DatasetMeta | None = None,
) -> Dataset:
    """
    Parse raw rows into a Dataset.

    All-or-nothing: the first bad row raises ParseError and no Dataset is built.
    Row numbers in errors are 0-based positions in `rows`.
    """
    samples: list[Sample] = []
    for i, raw in enumerate(rows):
        if not isinstance(raw, Mapping):
            raise ParseError(f"expected a mapping, got {type(raw).__name__}", row=i)

        ts = parse_date(_field(raw, date_column, i), row=i, column=date_column)
        value = parse_number(_field(raw, value_column, i), row=i, column=value_column)
        key = _field(raw, key_column, i)
        try:
            samples.append(Sample(timestamp=ts, series_key=key, value=value))
        except InvalidSample as e:
            raise ParseError(str(e), row=i, column=key_column) from e

    try:
        return Dataset(samples=samples, meta=meta if meta is not None else DatasetMeta())
    except InvalidDataset as e:
        raise ParseError(str(e)) from e
