# fuelchart/io/load.py
from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path

from fuelchart.io.csv_reader import read_csv_rows
from fuelchart.core import ChartConfig, ChartModel, Dataset, DatasetMeta, load


logger = logging.getLogger(__name__)


def load_csv(path: str | PathLike[str], *, description: str | None = None, **columns: str) -> Dataset:
    rows = read_csv_rows(path)
    ds = load(
        rows,
        meta=DatasetMeta(description=description, source=str(path)),
        **columns,
    )
    logger.info("Loaded %d samples (%d series) from %s", len(ds), len(ds.series_keys), Path(path).name)
    return ds


def load_chart(
    path: str | PathLike[str],
    config: ChartConfig | None = None,
    **columns: str,
) -> ChartModel:
    return ChartModel.build(load_csv(path, **columns), config)
