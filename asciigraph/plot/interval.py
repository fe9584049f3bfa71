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

from asciigraph.canvas import Canvas
from asciigraph.plot.types import PlacedInterval

DASH = "─"
HEAD = "<"
TAIL = ">"
ELLIPSIS = "..."


def _clean(label: str) -> str:
    # control characters (newlines included) would break the row
    return "".join(c if c >= " " else " " for c in label)


def render_interval(length: int, label: str, *, left_head: bool = True, right_head: bool = True) -> str:
    """
    Draw an interval `length` columns wide.

    - room for the whole label: `<──label──>`
    - long label (> 8 chars) in more than 7 columns: `<─lab...─>`
    - otherwise, more than one column: `<────>`
    - otherwise: nothing

    A side without a head is cut off by the plot edge; a shortened label keeps
    the end that is still visible.
    """
    label = _clean(label)
    heads = int(left_head) + int(right_head)

    if length >= len(label) + heads + 2:
        rem = length - len(label) - heads
        left = rem // 2
        body = DASH * left + label + DASH * (rem - left)

    elif len(label) > 8 and length > 7:
        keep = length - heads - 2 - len(ELLIPSIS)

        if right_head and not left_head:
            text = ELLIPSIS + label[len(label) - keep :]
        else:
            text = label[:keep] + ELLIPSIS

        body = DASH + text + DASH

    elif length > 1:
        body = DASH * (length - heads)

    else:
        return ""

    return (HEAD if left_head else "") + body + (TAIL if right_head else "")


def visible_span(interval: PlacedInterval, width: int) -> tuple[int, int] | None:
    """Columns of `interval` inside [0, width), or None when it is entirely off the plot."""
    if interval.plot_end < 0 or interval.plot_start >= width or interval.plot_end < interval.plot_start:
        return None
    return (max(0, interval.plot_start), min(width - 1, interval.plot_end))


def render_placed(interval: PlacedInterval, width: int) -> tuple[int, str] | None:
    span = visible_span(interval, width)
    if span is None:
        return None

    start, end = span
    text = render_interval(
        end - start + 1,
        interval.label,
        left_head=interval.plot_start >= 0,
        right_head=interval.plot_end < width,
    )
    return (start, text) if text else None


def draw_labeled_intervals(intervals: Sequence[PlacedInterval], width: int) -> Canvas:
    """
    Stack intervals into as few rows as possible (first fit, in the given order).

    Intervals that are off the plot or too small to draw take no room.
    Returns a `width`-wide canvas with one row per lane (possibly none).
    """
    masks: list[list[bool]] = []
    lanes: list[list[tuple[int, str]]] = []

    for interval in intervals:
        rendered = render_placed(interval, width)
        if rendered is None:
            continue

        start, text = rendered
        end = start + len(text)

        for mask, lane in zip(masks, lanes):
            if not any(mask[start:end]):
                mask[start:end] = [True] * (end - start)
                lane.append(rendered)
                break
        else:
            mask = [False] * width
            mask[start:end] = [True] * (end - start)
            masks.append(mask)
            lanes.append([rendered])

    result = Canvas(width, len(lanes))

    for row, lane in enumerate(lanes):
        for start, text in lane:
            result = result.blit(Canvas.from_text(text), start, row)

    return result
