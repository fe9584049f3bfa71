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

from collections.abc import Sequence

from asciigraph.canvas import Alignment, Canvas
from asciigraph.plot.axis import x_label_rows, y_label_column
from asciigraph.plot.render1d import FULL_BORDER, PlotBody
from asciigraph.plot.style import PlotStyle
from asciigraph.plot.types import Data2D, Point2D

# (top-left, top-right, bottom-left, bottom-right) -> glyph; all-off stays blank
QUADRANTS: dict[tuple[bool, bool, bool, bool], str] = {
    (True, True, True, True): "█",
    (True, True, True, False): "▛",
    (True, True, False, True): "▜",
    (True, True, False, False): "▀",
    (True, False, True, True): "▙",
    (True, False, True, False): "▌",
    (True, False, False, True): "▚",
    (True, False, False, False): "▘",
    (False, True, True, True): "▟",
    (False, True, True, False): "▞",
    (False, True, False, True): "▐",
    (False, True, False, False): "▝",
    (False, False, True, True): "▄",
    (False, False, True, False): "▖",
    (False, False, False, True): "▗",
}


def pack_quadrants(bitmap: Sequence[Sequence[bool]], width: int, height: int) -> list[Point2D]:
    """
    Turn a `2*height` x `2*width` bitmap (rows of columns) into one quadrant
    glyph per cell.
    """
    if len(bitmap) != height * 2 or any(len(row) != width * 2 for row in bitmap):
        raise ValueError(f"bitmap must be {height * 2} rows of {width * 2} pixels")

    points: list[Point2D] = []

    for y in range(height):
        top, bottom = bitmap[y * 2], bitmap[y * 2 + 1]
        for x in range(width):
            key = (bool(top[x * 2]), bool(top[x * 2 + 1]), bool(bottom[x * 2]), bool(bottom[x * 2 + 1]))
            glyph = QUADRANTS.get(key)
            if glyph is not None:
                points.append(Point2D(x, y, glyph))

    return points


def plot_points(points: Sequence[Point2D], width: int, height: int) -> Canvas:
    """Blit every glyph at its cell, no scaling. Out-of-range points are a caller bug."""
    cells = [[" "] * width for _ in range(height)]

    for p in points:
        if not (0 <= p.x < width and 0 <= p.y < height):
            raise ValueError(f"point ({p.x}, {p.y}) is outside a {width}x{height} plot")
        cells[p.y][p.x] = " " if p.glyph == "\n" else p.glyph

    if height == 0:
        return Canvas(width, 0)
    return Canvas.from_grid(cells)


def x_label_candidates_2d(x_labels: Sequence[str | None], style: PlotStyle) -> list[tuple[int, str]]:
    out: list[tuple[int, str]] = []
    last = None

    for x, label in enumerate(x_labels):
        if not label:
            continue
        if last is not None and x - last < style.x_label_interval:
            continue
        out.append((x, label))
        last = x

    return out


def render_2d(data: Data2D, style: PlotStyle) -> PlotBody:
    width, height = len(data.x_labels), len(data.y_labels)

    panel = plot_points(data.points, width, height).paint(style.primary_color).add_border(FULL_BORDER)
    labels = y_label_column(data.y_labels).add_padding((1, 1, 0, 0))
    body = labels.merge_horizontally(panel)

    plot_left = body.width - width - 1

    x_labels = x_label_rows(x_label_candidates_2d(data.x_labels, style), width, style.x_label_margin)
    if x_labels.height:
        body = body.merge_vertically(x_labels.add_padding((0, 0, plot_left, 1)), Alignment.FIRST)

    return PlotBody(canvas=body, plot_left=plot_left, plot_width=width)
