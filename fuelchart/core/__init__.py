# fuelchart/core/__init__.py
"""
Core domain objects for fuelchart.

This module defines the rendering-agnostic chart model:
- Sample: one (date, series key, value) observation
- Dataset: ordered samples, grouped per series on demand
- TimeScale / LinearScale / ScaleMapping: data-to-pixel mapping
- ChartModel: dataset + scales + series groups + pointer lookup

The core layer is independent from file formats and drawing surfaces.
"""

from .sample import Sample
from .dataset import Dataset, group_by_series, samples_on_date
from .metadata import DatasetMeta
from .parse import load, parse_date, parse_number
from .scales import TimeScale, LinearScale, ScaleMapping, compute_domains, build_scales
from .tooltip import TooltipState, nearest_sample_date, pointer_move, pointer_leave
from .palette import OrdinalColors, TABLEAU10
from .config import ChartConfig, Margin
from .model import ChartModel
from .exceptions import (
    ChartError,
    ParseError,
    EmptyDatasetError,
    InvalidSample,
    InvalidDataset,
    InvalidScale,
    InvalidConfig,
    SeriesNotFound,
)


__all__ = [
    # data
    "Sample",
    "Dataset",
    "DatasetMeta",

    # operations
    "load",
    "parse_date",
    "parse_number",
    "compute_domains",
    "build_scales",
    "group_by_series",
    "nearest_sample_date",
    "samples_on_date",
    "pointer_move",
    "pointer_leave",

    # scales / model
    "TimeScale",
    "LinearScale",
    "ScaleMapping",
    "TooltipState",
    "ChartModel",

    # config
    "ChartConfig",
    "Margin",
    "OrdinalColors",
    "TABLEAU10",

    # exceptions
    "ChartError",
    "ParseError",
    "EmptyDatasetError",
    "InvalidSample",
    "InvalidDataset",
    "InvalidScale",
    "InvalidConfig",
    "SeriesNotFound",
]
