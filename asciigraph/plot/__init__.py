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

from asciigraph.plot.errors import AsciiGraphError, GraphConfigError, NoDataError
from asciigraph.plot.graph import Graph
from asciigraph.plot.interval import draw_labeled_intervals, render_interval
from asciigraph.plot.layout import SkipPlan, YRange, downsample, infer_y_range, plan_skip, pretty_snap
from asciigraph.plot.style import PlotStyle
from asciigraph.plot.title import TitleRenderer, boxed_title, plain_title
from asciigraph.plot.types import (
    Data1D,
    Data2D,
    Entry1D,
    GraphData,
    LabeledInterval,
    NoData,
    PlacedInterval,
    Point2D,
    SkipRange,
    SkipRangeKind,
)
from asciigraph.plot.validate import validate_graph

__all__ = [
    "AsciiGraphError",
    "Data1D",
    "Data2D",
    "Entry1D",
    "Graph",
    "GraphConfigError",
    "GraphData",
    "LabeledInterval",
    "NoData",
    "NoDataError",
    "PlacedInterval",
    "PlotStyle",
    "Point2D",
    "SkipPlan",
    "SkipRange",
    "SkipRangeKind",
    "TitleRenderer",
    "YRange",
    "boxed_title",
    "downsample",
    "draw_labeled_intervals",
    "infer_y_range",
    "plain_title",
    "plan_skip",
    "pretty_snap",
    "render_interval",
    "validate_graph",
]
