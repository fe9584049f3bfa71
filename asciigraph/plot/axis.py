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

from asciigraph.canvas import BLANK, Canvas


def _clean(text: str) -> str:
    return "".join(c if c >= " " else " " for c in text)


def y_label_column(labels: Sequence[str | None]) -> Canvas:
    """
    One right-aligned label per plot row (None leaves the row blank),
    followed by a one-column gap before the plot border.
    """
    texts = [_clean(label) if label else "" for label in labels]
    width = max((len(t) for t in texts), default=0) + 1

    return Canvas.from_grid([list(t.rjust(width - 1)) + [BLANK] for t in texts])


def x_label_rows(candidates: Sequence[tuple[int, str]], width: int, margin: int) -> Canvas:
    """
    Place x labels left to right, alternating between two rows so neighbours
    don't collide. A label is dropped when it would run past `width` or when
    neither row is free at its column. Unused rows are left out, so the result
    is 0, 1 or 2 rows tall.
    """
    next_free = [0, 0]
    preferred = 0
    rows: list[list[str]] = [[BLANK] * width, [BLANK] * width]
    used = [False, False]

    for x, label in sorted(candidates, key=lambda c: c[0]):
        label = _clean(label)

        if not label or x < 0 or x + len(label) > width:
            continue

        for row in (preferred, 1 - preferred):
            if x >= next_free[row]:
                rows[row][x : x + len(label)] = list(label)
                next_free[row] = x + len(label) + margin
                used[row] = True
                preferred = 1 - row
                break

    kept = [row for row, is_used in zip(rows, used) if is_used]
    if not kept:
        return Canvas(width, 0)
    return Canvas.from_grid(kept)
