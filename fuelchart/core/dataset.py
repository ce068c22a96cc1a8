# fuelchart/core/dataset.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Iterable, Iterator, Sequence, overload

import numpy as np

from .exceptions import InvalidDataset, SeriesNotFound
from .metadata import DatasetMeta
from .sample import Sample


@dataclass(frozen=True, slots=True)
class Dataset:
    """
    Dataset = ordered sequence of Samples, as loaded.

    Design goals:
    - sequence-like access: ds[0], len(ds), iteration in load order
    - safe + predictable: immutable, validated, per-series chronological order
    - numpy views for vectorised work: ds.timestamps (datetime64[D]), ds.values (float64)

    No global ordering is required: samples of different series may be
    interleaved in any way, as long as each series on its own never goes
    back in time.
    """
    samples: Sequence[Sample] = field(default_factory=tuple, repr=False)
    meta: DatasetMeta = field(default_factory=DatasetMeta, repr=False)

    timestamps: np.ndarray = field(init=False, repr=False, compare=False)
    values: np.ndarray = field(init=False, repr=False, compare=False)
    unique_dates: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if isinstance(self.samples, (str, bytes)) or not isinstance(self.samples, Iterable):
            raise InvalidDataset("Dataset.samples must be an iterable of Sample instances.")
        if not isinstance(self.meta, DatasetMeta):
            raise InvalidDataset("Dataset.meta must be a DatasetMeta instance.")

        normalized = tuple(self.samples)
        last_seen: dict[str, date] = {}
        for idx, s in enumerate(normalized):
            if not isinstance(s, Sample):
                raise InvalidDataset(f"Dataset.samples[{idx}] is not a Sample instance.")
            prev = last_seen.get(s.series_key)
            # Bisection and line drawing rely on this.
            if prev is not None and s.timestamp < prev:
                raise InvalidDataset(
                    f"Series '{s.series_key}' goes back in time at index {idx}: "
                    f"{s.timestamp.isoformat()} after {prev.isoformat()}."
                )
            last_seen[s.series_key] = s.timestamp

        timestamps = np.array([s.timestamp for s in normalized], dtype="datetime64[D]")
        values = np.array([s.value for s in normalized], dtype=np.float64)

        object.__setattr__(self, "samples", normalized)
        object.__setattr__(self, "timestamps", timestamps)
        object.__setattr__(self, "values", values)
        object.__setattr__(self, "unique_dates", np.unique(timestamps))

    # ---- sequence-like API ----
    def __len__(self) -> int:
        return len(self.samples)

    def __iter__(self) -> Iterator[Sample]:
        return iter(self.samples)

    @overload
    def __getitem__(self, index: int) -> Sample: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[Sample, ...]: ...

    def __getitem__(self, index):
        return self.samples[index]

    def __contains__(self, item: object) -> bool:
        return item in self.samples

    @property
    def n(self) -> int:
        return len(self.samples)

    @property
    def is_empty(self) -> bool:
        return not self.samples

    # ---- derived bounds ----
    @property
    def t_start(self) -> date | None:
        return None if self.is_empty else self.unique_dates[0].item()

    @property
    def t_end(self) -> date | None:
        return None if self.is_empty else self.unique_dates[-1].item()

    @property
    def value_max(self) -> float | None:
        return None if self.is_empty else float(self.values.max())

    # ---- series ----
    @property
    def series_keys(self) -> tuple[str, ...]:
        """Series keys in first-seen order."""
        return tuple(dict.fromkeys(s.series_key for s in self.samples))

    def group_by_series(self) -> dict[str, tuple[Sample, ...]]:
        groups: dict[str, list[Sample]] = {}
        for s in self.samples:
            groups.setdefault(s.series_key, []).append(s)
        return {key: tuple(items) for key, items in groups.items()}

    def series(self, key: str) -> tuple[Sample, ...]:
        out = tuple(s for s in self.samples if s.series_key == key)
        if not out:
            raise SeriesNotFound(key)
        return out

    def samples_on_date(self, day: date) -> tuple[Sample, ...]:
        """All samples stamped exactly `day`, in dataset order."""
        target = np.datetime64(day, "D")
        (idx,) = np.nonzero(self.timestamps == target)
        return tuple(self.samples[i] for i in idx)


def group_by_series(dataset: Dataset) -> dict[str, tuple[Sample, ...]]:
    """Group samples by series key: first-seen key order, chronological within a key."""
    return dataset.group_by_series()


def samples_on_date(dataset: Dataset, day: date) -> tuple[Sample, ...]:
    """Samples whose timestamp equals `day` exactly; empty tuple when there are none."""
    return dataset.samples_on_date(day)
