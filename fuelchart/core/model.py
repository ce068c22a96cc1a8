# fuelchart/core/model.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from .config import ChartConfig
from .dataset import Dataset
from .exceptions import InvalidDataset
from .palette import OrdinalColors
from .parse import load
from .sample import Sample
from .scales import ScaleMapping, build_scales, compute_domains
from .tooltip import TooltipState, pointer_leave, pointer_move


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ChartModel:
    """
    Everything needed to draw the chart and answer pointer queries.

    Built once from a Dataset; never mutated. Rendering code receives the
    model explicitly instead of sharing scale objects.
    """
    dataset: Dataset
    scales: ScaleMapping = field(repr=False)
    groups: dict[str, tuple[Sample, ...]] = field(repr=False)
    config: ChartConfig = field(default_factory=ChartConfig, repr=False)

    def __post_init__(self) -> None:
        if not isinstance(self.dataset, Dataset):
            raise InvalidDataset("ChartModel.dataset must be a Dataset instance.")

    @classmethod
    def build(cls, dataset: Dataset, config: ChartConfig | None = None) -> "ChartModel":
        config = config if config is not None else ChartConfig()
        time_range, value_range = compute_domains(dataset)
        logger.debug("Domains: time=%s..%s value=%s..%s", *time_range, *value_range)

        scales = build_scales(time_range, value_range, config.inner_width, config.inner_height)
        groups = dataset.group_by_series()
        logger.info("Built chart model: %d samples, %d series", len(dataset), len(groups))
        return cls(dataset=dataset, scales=scales, groups=groups, config=config)

    @classmethod
    def from_rows(
        cls,
        rows: Iterable[Mapping[str, Any]],
        config: ChartConfig | None = None,
        **columns: str,
    ) -> "ChartModel":
        return cls.build(load(rows, **columns), config)

    @property
    def series_keys(self) -> tuple[str, ...]:
        return tuple(self.groups)

    def colors(self) -> OrdinalColors:
        return OrdinalColors(self.series_keys, palette=self.config.palette)

    def on_pointer_move(self, pointer_x: float) -> TooltipState:
        state = pointer_move(
            pointer_x,
            self.dataset,
            self.scales,
            offset_x=self.config.tooltip_offset_x,
            offset_y=self.config.tooltip_offset_y,
        )
        logger.debug("Pointer at x=%.1f -> %s (%d samples)", pointer_x, state.day, len(state.samples))
        return state

    def on_pointer_leave(self) -> TooltipState:
        return pointer_leave()
