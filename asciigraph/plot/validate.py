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

from typing import TYPE_CHECKING

from asciigraph.plot.errors import GraphConfigError, NoDataError
from asciigraph.plot.types import Data1D, Data2D, NoData

if TYPE_CHECKING:
    from asciigraph.plot.graph import Graph


def _validate_2d(data: Data2D, plot_width: int, plot_height: int) -> list[GraphConfigError]:
    errors: list[GraphConfigError] = []

    if len(data.x_labels) != plot_width:
        errors.append(
            GraphConfigError(
                f"2-D data has {len(data.x_labels)} x labels but the plot is {plot_width} columns wide",
                code="label_length_mismatch",
                details={"x_labels": len(data.x_labels), "plot_width": plot_width},
            )
        )

    if len(data.y_labels) != plot_height:
        errors.append(
            GraphConfigError(
                f"2-D data has {len(data.y_labels)} y labels but the plot is {plot_height} rows tall",
                code="label_length_mismatch",
                details={"y_labels": len(data.y_labels), "plot_height": plot_height},
            )
        )

    for p in data.points:
        if not (0 <= p.x < len(data.x_labels) and 0 <= p.y < len(data.y_labels)):
            errors.append(
                GraphConfigError(
                    f"2-D point ({p.x}, {p.y}) is outside the {len(data.x_labels)}x{len(data.y_labels)} plot",
                    code="coordinate_out_of_range",
                    details={"x": p.x, "y": p.y},
                )
            )

    return errors


def validate_graph(graph: "Graph") -> list[GraphConfigError]:
    """
    Every reason `graph` cannot be drawn, in a stable order.
    An empty list means `graph.draw()` will succeed.
    """
    errors: list[GraphConfigError] = []
    data = graph.data

    if isinstance(data, NoData):
        errors.append(NoDataError())
    elif isinstance(data, Data1D) and len(data) == 0:
        errors.append(GraphConfigError("1-D data is empty", code="empty_data"))
    elif isinstance(data, Data2D):
        errors.extend(_validate_2d(data, graph.plot_width, graph.plot_height))

    for name in ("plot_width", "plot_height"):
        value = getattr(graph, name)
        if value < 0:
            errors.append(
                GraphConfigError(f"{name} must not be negative, got {value}", code="invalid_dimension")
            )

    if graph.block_width is not None and graph.block_width <= 0:
        errors.append(
            GraphConfigError(f"block_width must be positive, got {graph.block_width}", code="invalid_dimension")
        )

    if graph.y_min is not None and graph.y_max is not None and graph.y_min > graph.y_max:
        errors.append(
            GraphConfigError(
                f"y_min ({graph.y_min}) is greater than y_max ({graph.y_max})",
                code="invalid_y_range",
                details={"y_min": str(graph.y_min), "y_max": str(graph.y_max)},
            )
        )

    for interval in graph.labeled_intervals:
        if not interval.is_valid():
            errors.append(
                GraphConfigError(
                    f"Interval {interval.label!r} ends ({interval.end}) before it starts ({interval.start})",
                    code="invalid_interval",
                    details={"start": interval.start, "end": interval.end, "label": interval.label},
                )
            )

    return errors
