# fuelchart/core/palette.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable


TABLEAU10: tuple[str, ...] = (
    "#4e79a7",
    "#f28e2c",
    "#e15759",
    "#76b7b2",
    "#59a14f",
    "#edc949",
    "#af7aa1",
    "#ff9da7",
    "#9c755f",
    "#bab0ab",
)


@dataclass(slots=True)
class OrdinalColors:
    """
    Stable first-come color assignment.

    Keys given at construction are assigned in order; keys seen later are
    appended on first lookup. Past the end of the palette, colors cycle.
    """

    keys: Iterable[str] = ()
    palette: tuple[str, ...] = TABLEAU10
    _index: dict[str, int] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        if not self.palette:
            raise ValueError("palette must contain at least one color")
        self.palette = tuple(self.palette)
        for key in self.keys:
            self._index.setdefault(key, len(self._index))
        self.keys = tuple(self._index)

    def __call__(self, key: str) -> str:
        if key not in self._index:
            self._index[key] = len(self._index)
            self.keys = tuple(self._index)
        return self.palette[self._index[key] % len(self.palette)]

    def mapping(self) -> dict[str, str]:
        return {key: self(key) for key in self._index}
