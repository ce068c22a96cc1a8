# fuelchart/core/exceptions.py
from __future__ import annotations


class ChartError(Exception):
    """Base error for all chart-domain exceptions."""


# ---- Load errors ----
class ParseError(ChartError, ValueError):
    """Raised when a raw row has an unparsable date or number (or lacks a column)."""

    def __init__(self, message: str, *, row: int | None = None, column: str | None = None) -> None:
        if row is not None:
            message = f"row {row}: {message}"
        super().__init__(message)
        self.row = row
        self.column = column


class EmptyDatasetError(ChartError):
    """Raised when domains, scales or lookups are requested on an empty dataset."""


# ---- Validation / construction errors ----
class InvalidSample(ChartError):
    """Raised when a Sample is constructed with invalid inputs."""


class InvalidDataset(ChartError):
    """Raised when a Dataset / DatasetMeta is constructed with invalid inputs."""


class InvalidScale(ChartError):
    """Raised when a scale is built from a non-finite domain or an empty range."""


class InvalidConfig(ChartError):
    """Raised when a ChartConfig / Margin is constructed with invalid inputs."""


# ---- Lookup errors (also behave like KeyError for dict-like APIs) ----
class SeriesNotFound(ChartError, KeyError):
    """Raised when a requested series key is not present."""
