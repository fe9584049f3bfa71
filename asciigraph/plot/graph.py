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

import logging
from collections.abc import Sequence
from fractions import Fraction
from typing import Any

from asciigraph.canvas import Alignment, Canvas
from asciigraph.color import Color, ColorMode
from asciigraph.number import Number, NumberFormatter, format_number, to_fraction
from asciigraph.plot.errors import GraphConfigError
from asciigraph.plot.interval import draw_labeled_intervals
from asciigraph.plot.layout import downsample, infer_y_range, plan_skip, pretty_snap
from asciigraph.plot.render1d import PlotBody, render_1d
from asciigraph.plot.render2d import pack_quadrants, render_2d
from asciigraph.plot.style import OVERFLOW, PlotStyle
from asciigraph.plot.title import TitleRenderer, boxed_title, plain_title
from asciigraph.plot.types import (
    Data1D,
    Data2D,
    Entry1D,
    GraphData,
    LabeledInterval,
    NoData,
    Point2D,
    SkipRange,
)
from asciigraph.plot.validate import validate_graph

log = logging.getLogger(__name__)

MIN_PLOT_SIZE = 3


class Graph:
    """
    Plot configuration.

    Configure with the `set_*` methods (they return the graph, so calls chain),
    check with `validate()`, then call `draw()` once or as often as needed:
    drawing only reads the configuration.

        g = Graph().set_1d_data([3, 1, 4, 1, 5]).set_plot_height(10).set_title("pi")
        print(g.draw())

    Layout, top to bottom: title, y axis label, plot with y labels on the left
    and x labels below, x axis label, labeled intervals; then paddings around
    everything.
    """

    def __init__(self, plot_width: int = 80, plot_height: int = 28) -> None:
        self.data: GraphData = NoData()
        self.plot_width = plot_width
        self.plot_height = plot_height
        self.block_width: int | None = None

        self.x_label_interval = 8
        self.x_label_margin = 2
        self.y_label_margin = 2
        self.paddings: tuple[int, int, int, int] = (0, 0, 0, 0)

        self.y_min: Fraction | None = None
        self.y_max: Fraction | None = None
        self.pretty_y: Fraction | None = Fraction(1, 2)
        self.skip_range = SkipRange.automatic()

        self.title: str | None = None
        self.title_color: Color | None = None
        self.big_title = False
        self.title_renderer: TitleRenderer = boxed_title
        self.x_axis_label: str | None = None
        self.y_axis_label: str | None = None
        self.labeled_intervals: list[LabeledInterval] = []

        self.color_mode = ColorMode.none()
        self.primary_color: Color | None = None
        self.overflow_char = OVERFLOW
        self.y_label_formatter: NumberFormatter = format_number
        self.quiet = False

    # Data

    def set_1d_data(self, values: Sequence[Number]) -> "Graph":
        """Bars labeled with their index ("0", "1", ...)."""
        self.data = Data1D(tuple(Entry1D(str(i), to_fraction(v)) for i, v in enumerate(values)))
        return self

    def set_1d_labeled_data(self, pairs: Sequence[tuple[str, Number]]) -> "Graph":
        self.data = Data1D(tuple(Entry1D(str(label), to_fraction(v)) for label, v in pairs))
        return self

    def set_2d_data(
        self,
        points: Sequence[tuple[int, int, str]],
        x_labels: Sequence[str | None],
        y_labels: Sequence[str | None],
    ) -> "Graph":
        """
        Put `glyph` at column x, row y (row 0 is the top) for every (x, y, glyph).
        The plot becomes `len(x_labels)` columns by `len(y_labels)` rows.
        """
        self.plot_width = len(x_labels)
        self.plot_height = len(y_labels)
        self.data = Data2D(
            points=tuple(Point2D(int(x), int(y), str(glyph)) for x, y, glyph in points),
            x_labels=tuple(x_labels),
            y_labels=tuple(y_labels),
        )
        return self

    def set_2d_data_high_resolution(
        self,
        bitmap: Sequence[Sequence[bool]],
        x_labels: Sequence[str | None],
        y_labels: Sequence[str | None],
    ) -> "Graph":
        """
        Like `set_2d_data` with twice the resolution: `bitmap` has `2 * len(y_labels)`
        rows of `2 * len(x_labels)` dots, drawn with quadrant block glyphs.
        """
        points = pack_quadrants(bitmap, len(x_labels), len(y_labels))
        self.plot_width = len(x_labels)
        self.plot_height = len(y_labels)
        self.data = Data2D(points=tuple(points), x_labels=tuple(x_labels), y_labels=tuple(y_labels))
        return self

    # Range

    def set_y_min(self, y_min: Number) -> "Graph":
        self.y_min = to_fraction(y_min)
        return self

    def set_y_max(self, y_max: Number) -> "Graph":
        self.y_max = to_fraction(y_max)
        return self

    def set_y_range(self, y_min: Number, y_max: Number) -> "Graph":
        self.y_min = to_fraction(y_min)
        self.y_max = to_fraction(y_max)
        return self

    def set_pretty_y(self, granularity: Number | None) -> "Graph":
        """
        Snap inferred y bounds so the y labels are multiples of `granularity`.
        None turns snapping off. Explicit `y_min` / `y_max` are never snapped.
        """
        self.pretty_y = None if granularity is None else to_fraction(granularity)
        return self

    def set_skip_range(self, skip_range: SkipRange) -> "Graph":
        self.skip_range = skip_range
        return self

    # Layout

    def set_plot_width(self, plot_width: int) -> "Graph":
        self.plot_width = plot_width
        return self

    def set_plot_height(self, plot_height: int) -> "Graph":
        self.plot_height = plot_height
        return self

    def set_block_width(self, block_width: int | None) -> "Graph":
        """Make every 1-D bar `block_width` columns wide (overrides `plot_width`)."""
        self.block_width = block_width
        return self

    def set_x_label_interval(self, interval: int) -> "Graph":
        self.x_label_interval = interval
        return self

    def set_x_label_margin(self, margin: int) -> "Graph":
        self.x_label_margin = margin
        return self

    def set_y_label_margin(self, margin: int) -> "Graph":
        """Blank rows between two y labels."""
        self.y_label_margin = margin
        return self

    def set_paddings(self, paddings: Sequence[int]) -> "Graph":
        """top, bottom, left, right"""
        top, bottom, left, right = paddings
        self.paddings = (top, bottom, left, right)
        return self

    def set_padding_top(self, padding: int) -> "Graph":
        self.paddings = (padding,) + self.paddings[1:]
        return self

    def set_padding_bottom(self, padding: int) -> "Graph":
        self.paddings = self.paddings[:1] + (padding,) + self.paddings[2:]
        return self

    def set_padding_left(self, padding: int) -> "Graph":
        self.paddings = self.paddings[:2] + (padding,) + self.paddings[3:]
        return self

    def set_padding_right(self, padding: int) -> "Graph":
        self.paddings = self.paddings[:3] + (padding,)
        return self

    # Text

    def set_title(self, title: str | None) -> "Graph":
        self.title = title
        return self

    def set_title_color(self, color: Color | None) -> "Graph":
        self.title_color = color
        return self

    def set_big_title(self, big_title: bool, renderer: TitleRenderer | None = None) -> "Graph":
        self.big_title = big_title
        if renderer is not None:
            self.title_renderer = renderer
        return self

    def set_x_axis_label(self, label: str | None) -> "Graph":
        self.x_axis_label = label
        return self

    def set_y_axis_label(self, label: str | None) -> "Graph":
        self.y_axis_label = label
        return self

    def add_labeled_interval(self, start: int, end: int, label: str) -> "Graph":
        """`start` and `end` are inclusive data indices (columns for 2-D data)."""
        self.labeled_intervals.append(LabeledInterval(start, end, label))
        return self

    def set_y_label_formatter(self, formatter: NumberFormatter) -> "Graph":
        self.y_label_formatter = formatter
        return self

    # Colors

    def set_color_mode(self, color_mode: ColorMode) -> "Graph":
        self.color_mode = color_mode
        return self

    def set_primary_color(self, color: Color | None) -> "Graph":
        self.primary_color = color
        return self

    def set_overflow_char(self, char: str) -> "Graph":
        self.overflow_char = char
        return self

    def set_quiet(self, quiet: bool) -> "Graph":
        """Log geometry adjustments at DEBUG instead of WARNING."""
        self.quiet = quiet
        return self

    # Drawing

    def validate(self) -> list[GraphConfigError]:
        return validate_graph(self)

    def render(self) -> Canvas:
        errors = self.validate()
        if errors:
            raise errors[0]

        style = PlotStyle(
            x_label_interval=self.x_label_interval,
            x_label_margin=self.x_label_margin,
            y_label_margin=self.y_label_margin,
            overflow_char=self.overflow_char,
            primary_color=self.primary_color,
            y_label_formatter=self.y_label_formatter,
        )

        if isinstance(self.data, Data1D):
            body = self._render_1d(self.data, style)
            data_len = len(self.data)
        else:
            assert isinstance(self.data, Data2D)
            body = render_2d(self.data, style)
            data_len = len(self.data)

        return self._decorate(body, data_len)

    def draw(self) -> str:
        return self.render().to_text(self.color_mode)

    def __str__(self) -> str:
        return self.draw()

    def _warn(self, msg: str, *args: Any) -> None:
        log.log(logging.DEBUG if self.quiet else logging.WARNING, msg, *args)

    def _render_1d(self, data: Data1D, style: PlotStyle) -> PlotBody:
        entries = list(data.entries)
        width = self.block_width * len(entries) if self.block_width else self.plot_width
        height = self.plot_height

        if width < MIN_PLOT_SIZE:
            self._warn("plot width %d is too small; using %d", width, MIN_PLOT_SIZE)
            width = MIN_PLOT_SIZE

        if height < MIN_PLOT_SIZE:
            self._warn("plot height %d is too small; using %d", height, MIN_PLOT_SIZE)
            height = MIN_PLOT_SIZE

        if len(entries) > width * 2:
            if width % 2:
                self._warn("odd plot width %d is not supported when downsampling; using %d", width, width + 1)
                width += 1
            entries = downsample(entries, width)

        values = [e.value for e in entries]
        rng = infer_y_range(values, self.y_min, self.y_max, warn=self._warn)
        plan = plan_skip(values, rng, self.skip_range, height, warn=self._warn)

        if plan is None:
            rng = pretty_snap(rng, self.pretty_y, height)

        return render_1d(entries, width, height, rng, plan, style, block_width=self.block_width)

    def _decorate(self, body: PlotBody, data_len: int) -> Canvas:
        canvas = body.canvas
        footer = Canvas.empty()

        if self.x_axis_label:
            footer = Canvas.from_text(self.x_axis_label, Alignment.LAST)

        if self.labeled_intervals:
            placed = [i.place(body.plot_width, data_len) for i in self.labeled_intervals]
            overlay = draw_labeled_intervals(placed, body.plot_width)

            if overlay.height:
                right = canvas.width - body.plot_left - body.plot_width
                # as wide as the body, so right alignment keeps it under the plot
                footer = footer.merge_vertically(overlay.add_padding((0, 0, body.plot_left, right)), Alignment.LAST)

        canvas = canvas.merge_vertically(footer, Alignment.LAST)

        if self.y_axis_label:
            canvas = Canvas.from_text(self.y_axis_label).merge_vertically(canvas, Alignment.FIRST)

        if self.title:
            render_title = self.title_renderer if self.big_title else plain_title
            title = render_title(self.title).paint(self.title_color)
            canvas = title.merge_vertically(canvas, Alignment.CENTER)

        return canvas.add_padding(self.paddings)
