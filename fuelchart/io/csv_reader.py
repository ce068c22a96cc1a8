# fuelchart/io/csv_reader.py
from __future__ import annotations

import logging
from os import PathLike

import pandas as pd


logger = logging.getLogger(__name__)


def read_csv_rows(path: str | PathLike[str]) -> list[dict[str, str]]:
    """Read a CSV file into a list of row mappings (header -> cell text).

    pandas reads every cell as text, and empty cells come back as empty
    strings rather than NaN, so the core parser decides what is and is not
    a number. I/O errors propagate.
    """
    frame = pd.read_csv(path, dtype=str, keep_default_na=False)
    logger.debug("Read %d rows with columns %s from %s", len(frame), list(frame.columns), path)
    return frame.to_dict(orient="records")
