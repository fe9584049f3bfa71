# SPDX-License-Identifier: AGPL-3.0-only
#
# Copyright (c) 2026 Asciigraph Contributors
#
# This file is part of Asciigraph.
#
# Asciigraph is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, version 3 only.
#
# Asciigraph is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.
# See the GNU Affero General Public License for more details.

from dataclasses import dataclass
from enum import StrEnum, auto
from fractions import Fraction

from asciigraph.number import Number, to_fraction

# Data


@dataclass(frozen=True, slots=True)
class Entry1D:
    label: str
    value: Fraction


@dataclass(frozen=True, slots=True)
class Point2D:
    x: int
    y: int
    glyph: str


@dataclass(frozen=True, slots=True)
class NoData:
    pass


@dataclass(frozen=True, slots=True)
class Data1D:
    entries: tuple[Entry1D, ...]

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def values(self) -> list[Fraction]:
        return [e.value for e in self.entries]


@dataclass(frozen=True, slots=True)
class Data2D:
    points: tuple[Point2D, ...]
    x_labels: tuple[str | None, ...]
    y_labels: tuple[str | None, ...]

    def __len__(self) -> int:
        return len(self.x_labels)


GraphData = NoData | Data1D | Data2D


# Skip range


class SkipRangeKind(StrEnum):
    DISABLED = auto()
    AUTOMATIC = auto()
    MANUAL = auto()


@dataclass(frozen=True, slots=True)
class SkipRange:
    """
    Which band of values a 1-D plot may leave out of its linear scale.

    - disabled: never split the plot
    - automatic: split when one gap between values dominates the range
    - manual: always leave out [start, end] (ignored with a warning when the
      band does not fit inside the y range)

    Only plots taller than 18 rows are ever split.
    """

    kind: SkipRangeKind = SkipRangeKind.AUTOMATIC
    start: Fraction | None = None
    end: Fraction | None = None

    @staticmethod
    def disabled() -> "SkipRange":
        return SkipRange(SkipRangeKind.DISABLED)

    @staticmethod
    def automatic() -> "SkipRange":
        return SkipRange(SkipRangeKind.AUTOMATIC)

    @staticmethod
    def manual(start: Number, end: Number) -> "SkipRange":
        return SkipRange(SkipRangeKind.MANUAL, to_fraction(start), to_fraction(end))


# Labeled intervals


@dataclass(frozen=True, slots=True)
class LabeledInterval:
    """
    `<───label───>` annotation under the plot.

    `start` and `end` are inclusive data indices and may lie outside the data;
    the plot columns are derived with `place` when the graph is drawn.
    """

    start: int
    end: int
    label: str

    def is_valid(self) -> bool:
        return self.end >= self.start

    def place(self, plot_width: int, data_len: int) -> "PlacedInterval":
        if data_len <= 0:
            return PlacedInterval(self.label, self.start, self.end)
        return PlacedInterval(
            label=self.label,
            plot_start=self.start * plot_width // data_len,
            plot_end=self.end * plot_width // data_len,
        )


@dataclass(frozen=True, slots=True)
class PlacedInterval:
    """A labeled interval in plot columns. Columns may fall outside the plot."""

    label: str
    plot_start: int
    plot_end: int
