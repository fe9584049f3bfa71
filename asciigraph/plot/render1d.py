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

import math
from collections.abc import Sequence
from dataclasses import dataclass
from fractions import Fraction

from asciigraph.canvas import Alignment, Canvas
from asciigraph.plot.axis import x_label_rows, y_label_column
from asciigraph.plot.layout import SkipPlan, YRange
from asciigraph.plot.style import FULL_BLOCK, QUARTER_BLOCKS, SEPARATOR, PlotStyle
from asciigraph.plot.types import Entry1D

Border = tuple[bool, bool, bool, bool]

FULL_BORDER: Border = (True, True, True, True)
UPPER_BORDER: Border = (True, False, True, True)
LOWER_BORDER: Border = (False, True, True, True)


@dataclass(frozen=True, slots=True)
class PlotBody:
    """Plot area with its axes. `plot_left` is the canvas column of the first plot column."""

    canvas: Canvas
    plot_left: int
    plot_width: int


def sample_columns(entries: Sequence[Entry1D], width: int) -> list[Entry1D]:
    n = len(entries)
    return [entries[x * n // width] for x in range(width)]


def plot_bars(
    values: Sequence[Fraction],
    rng: YRange,
    height: int,
    *,
    show_overflow: bool = True,
    overflow_char: str = "^",
) -> Canvas:
    """
    One bar per column at quarter-cell resolution.

    A value above `rng.y_max` fills the whole column and, when `show_overflow`
    is set, puts `overflow_char` in the top row instead of a block.
    """
    width = len(values)
    cells = [[" "] * width for _ in range(height)]
    span = rng.span

    for x, value in enumerate(values):
        if value > rng.y_max:
            for y in range(height):
                cells[y][x] = FULL_BLOCK
            if show_overflow and height:
                cells[0][x] = overflow_char
            continue

        quarters = math.floor((rng.y_max - value) * 4 * height / span)
        top, fraction = divmod(quarters, 4)

        if top >= height:
            continue

        cells[top][x] = QUARTER_BLOCKS[fraction]
        for y in range(top + 1, height):
            cells[y][x] = FULL_BLOCK

    if height == 0:
        return Canvas(width, 0)
    return Canvas.from_grid(cells)


def y_axis_labels(rng: YRange, height: int, style: PlotStyle, offset: int = 0) -> list[str | None]:
    """Label every `style.y_label_interval`-th row (starting at `offset`) with its exact value."""
    step = rng.span / height
    interval = max(1, style.y_label_interval)
    return [
        style.y_label_formatter(rng.y_max - row * step) if row % interval == offset % interval else None
        for row in range(height)
    ]


def render_panel(
    values: Sequence[Fraction],
    rng: YRange,
    height: int,
    style: PlotStyle,
    *,
    borders: Border = FULL_BORDER,
    show_overflow: bool = True,
    label_offset: int = 0,
) -> Canvas:
    """Bordered bars with the y labels on their left."""
    bars = plot_bars(values, rng, height, show_overflow=show_overflow, overflow_char=style.overflow_char)
    panel = bars.paint(style.primary_color).add_border(borders)

    labels = y_label_column(y_axis_labels(rng, height, style, label_offset))
    labels = labels.add_padding((int(borders[0]), int(borders[1]), 0, 0))

    return labels.merge_horizontally(panel)


def x_label_candidates(
    entries: Sequence[Entry1D],
    width: int,
    style: PlotStyle,
    block_width: int | None = None,
) -> list[tuple[int, str]]:
    step = max(1, style.x_label_interval)
    if block_width:
        step = -(-step // block_width) * block_width

    n = len(entries)
    out: list[tuple[int, str]] = []
    last_index = -1

    for x in range(0, width, step):
        index = x * n // width
        if index == last_index:
            continue
        last_index = index
        out.append((x, entries[index].label))

    return out


def render_1d(
    entries: Sequence[Entry1D],
    width: int,
    height: int,
    rng: YRange,
    plan: SkipPlan | None,
    style: PlotStyle,
    *,
    block_width: int | None = None,
) -> PlotBody:
    """Bars (split around `plan` when given), y labels and x labels."""
    columns = [e.value for e in sample_columns(entries, width)]

    if plan is None:
        body = render_panel(columns, rng, height, style)
    else:
        upper = render_panel(columns, plan.upper, plan.upper_height, style, borders=UPPER_BORDER)
        lower = render_panel(
            columns,
            plan.lower,
            plan.lower_height,
            style,
            borders=LOWER_BORDER,
            show_overflow=False,
            label_offset=1,
        )
        separator = Canvas.from_text(SEPARATOR * (width + 2))
        body = upper.merge_vertically(separator, Alignment.LAST).merge_vertically(lower, Alignment.LAST)

    plot_left = body.width - width - 1

    x_labels = x_label_rows(x_label_candidates(entries, width, style, block_width), width, style.x_label_margin)
    if x_labels.height:
        body = body.merge_vertically(x_labels.add_padding((0, 0, plot_left, 1)), Alignment.FIRST)

    return PlotBody(canvas=body, plot_left=plot_left, plot_width=width)
