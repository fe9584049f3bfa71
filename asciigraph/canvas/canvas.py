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
from enum import StrEnum, auto

from asciigraph.color import Color, ColorMode, apply_colors, split_visible

BLANK = " "

Border = tuple[bool, bool, bool, bool]
Padding = tuple[int, int, int, int]


class Alignment(StrEnum):
    FIRST = auto()  # left / top
    LAST = auto()  # right / bottom
    CENTER = auto()


def split_margin(diff: int, alignment: Alignment) -> tuple[int, int]:
    """Split `diff` blank cells into (before, after). On an odd centered split `before` gets the extra one."""
    if alignment == Alignment.FIRST:
        return (0, diff)
    if alignment == Alignment.LAST:
        return (diff, 0)
    return (diff // 2 + diff % 2, diff // 2)


class Canvas:
    """
    Fixed-size rectangular grid of display cells.

    Every cell holds one visible glyph and an optional color. A cell that came
    from already-colored terminal text may also carry the raw escape sequences
    in front of its glyph, so it still occupies exactly one column.

    Canvases are values: every transform returns a new Canvas.
    """

    __slots__ = ("_width", "_height", "_cells", "_colors")

    def __init__(self, width: int = 0, height: int = 0) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"Canvas size must be non-negative, got {width}x{height}")
        self._width = width
        self._height = height
        self._cells: list[list[str]] = [[BLANK] * width for _ in range(height)]
        self._colors: list[list[Color | None]] = [[None] * width for _ in range(height)]

    # Construction

    @staticmethod
    def empty() -> "Canvas":
        return Canvas(0, 0)

    @staticmethod
    def from_grid(
        cells: Sequence[Sequence[str]],
        colors: Sequence[Sequence[Color | None]] | None = None,
    ) -> "Canvas":
        """
        Build a canvas from rows of cells. All rows must have the same length,
        and `colors`, when given, must have exactly the same shape.
        """
        height = len(cells)
        width = len(cells[0]) if height else 0

        for y, row in enumerate(cells):
            if len(row) != width:
                raise ValueError(f"Row {y} has {len(row)} cells, expected {width}")

        if colors is not None:
            if len(colors) != height or any(len(row) != width for row in colors):
                raise ValueError("Color grid does not match the cell grid")

        out = Canvas.__new__(Canvas)
        out._width = width
        out._height = height
        out._cells = [list(row) for row in cells]
        out._colors = [list(row) for row in colors] if colors is not None else [[None] * width for _ in range(height)]
        return out

    @staticmethod
    def from_text(
        text: str,
        alignment: Alignment = Alignment.FIRST,
        color_mode: ColorMode | None = None,
    ) -> "Canvas":
        """
        Split `text` on line breaks and pad every line to the widest one.

        With a terminal color mode, the ANSI color sequences already present in
        `text` do not count towards the width of a line. Text colored in html
        mode is measured as-is (tags included); see `ColorMode`.
        """
        if not text:
            return Canvas.empty()

        color_mode = color_mode or ColorMode.none()
        rows: list[list[str]] = []

        for raw in text.split("\n"):
            raw = raw.rstrip("\r")
            rows.append(split_visible(raw) if color_mode.is_terminal else list(raw))

        width = max(len(row) for row in rows)
        padded: list[list[str]] = []

        for row in rows:
            before, after = split_margin(width - len(row), alignment)
            padded.append([BLANK] * before + row + [BLANK] * after)

        return Canvas.from_grid(padded)

    # Accessors

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def is_empty(self) -> bool:
        return self._width == 0 or self._height == 0

    def get(self, x: int, y: int) -> str:
        return self._cells[y][x]

    def color_at(self, x: int, y: int) -> Color | None:
        return self._colors[y][x]

    def row(self, y: int) -> str:
        return "".join(self._cells[y])

    def is_valid(self) -> bool:
        """Rectangle invariant: `height` rows of exactly `width` cells, colors of the same shape."""
        return (
            len(self._cells) == self._height
            and len(self._colors) == self._height
            and all(len(row) == self._width for row in self._cells)
            and all(len(row) == self._width for row in self._colors)
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Canvas):
            return NotImplemented
        return self._cells == other._cells and self._colors == other._colors

    def __repr__(self) -> str:
        return f"Canvas({self._width}x{self._height})"

    def __str__(self) -> str:
        return self.to_text()

    # Transforms

    def _copy(self) -> "Canvas":
        return Canvas.from_grid(self._cells, self._colors)

    def crop(self, x: int, y: int, w: int, h: int) -> "Canvas":
        if x < 0 or y < 0 or x > self._width or y > self._height:
            raise ValueError(f"crop origin ({x}, {y}) is outside a {self._width}x{self._height} canvas")

        w = min(w, self._width - x)
        h = min(h, self._height - y)

        cells = [row[x : x + w] for row in self._cells[y : y + h]]
        colors = [row[x : x + w] for row in self._colors[y : y + h]]
        out = Canvas.from_grid(cells, colors)
        # rows of zero width still count
        out._width = w
        out._height = h
        return out

    def blit(self, other: "Canvas", x: int, y: int, transparent: str | None = None) -> "Canvas":
        """
        Copy `other` onto this canvas with its top-left corner at (x, y).
        Cells equal to `transparent` are skipped; whatever falls outside is clipped.
        To blit only part of `other`, crop it first.
        """
        out = self._copy()

        if x < 0 or y < 0 or x >= self._width or y >= self._height:
            return out

        for yy in range(y, min(self._height, y + other._height)):
            for xx in range(x, min(self._width, x + other._width)):
                c = other._cells[yy - y][xx - x]

                if transparent is not None and c == transparent:
                    continue

                out._cells[yy][xx] = c
                out._colors[yy][xx] = other._colors[yy - y][xx - x]

        return out

    def merge_vertically(self, other: "Canvas", alignment: Alignment = Alignment.FIRST) -> "Canvas":
        """Stack `other` below this canvas, padding the narrower one per `alignment`."""
        if other.is_empty():
            return self._copy()
        if self.is_empty():
            return other._copy()

        width = max(self._width, other._width)
        top = self._pad_columns(*split_margin(width - self._width, alignment))
        bottom = other._pad_columns(*split_margin(width - other._width, alignment))

        return Canvas.from_grid(top._cells + bottom._cells, top._colors + bottom._colors)

    def merge_horizontally(self, other: "Canvas", alignment: Alignment = Alignment.FIRST) -> "Canvas":
        """Place `other` to the right of this canvas, padding the shorter one per `alignment`."""
        if other.is_empty():
            return self._copy()
        if self.is_empty():
            return other._copy()

        height = max(self._height, other._height)
        left = self.add_padding(split_margin(height - self._height, alignment) + (0, 0))
        right = other.add_padding(split_margin(height - other._height, alignment) + (0, 0))

        cells = [lrow + rrow for lrow, rrow in zip(left._cells, right._cells)]
        colors = [lrow + rrow for lrow, rrow in zip(left._colors, right._colors)]
        return Canvas.from_grid(cells, colors)

    def _pad_columns(self, left: int, right: int) -> "Canvas":
        return self.add_padding((0, 0, left, right))

    def add_padding(self, paddings: Sequence[int]) -> "Canvas":
        """paddings: (top, bottom, left, right)"""
        top, bottom, left, right = paddings
        width = self._width + left + right

        cells = [[BLANK] * width for _ in range(top)]
        colors: list[list[Color | None]] = [[None] * width for _ in range(top)]

        for row, crow in zip(self._cells, self._colors):
            cells.append([BLANK] * left + row + [BLANK] * right)
            colors.append([None] * left + crow + [None] * right)

        cells.extend([BLANK] * width for _ in range(bottom))
        colors.extend([None] * width for _ in range(bottom))

        out = Canvas.from_grid(cells, colors)
        out._width = width
        return out

    def add_border(self, borders: Sequence[bool]) -> "Canvas":
        """
        borders: (top, bottom, left, right)

        Corners get a rounded corner glyph only where both adjacent sides are drawn.
        """
        top, bottom, left, right = (bool(b) for b in borders)
        out = self.add_padding((int(top), int(bottom), int(left), int(right)))
        w, h = out._width, out._height

        if w == 0 or h == 0:
            return out

        if top:
            out._cells[0] = ["─"] * w
        if bottom:
            out._cells[h - 1] = ["─"] * w
        if left:
            for row in out._cells:
                row[0] = "│"
        if right:
            for row in out._cells:
                row[w - 1] = "│"

        if top and left:
            out._cells[0][0] = "╭"
        if top and right:
            out._cells[0][w - 1] = "╮"
        if bottom and left:
            out._cells[h - 1][0] = "╰"
        if bottom and right:
            out._cells[h - 1][w - 1] = "╯"

        return out

    def paint(self, color: Color | None, *, skip_blank: bool = True) -> "Canvas":
        """Return a copy with every (non-blank) cell set to `color`."""
        out = self._copy()

        for cells, colors in zip(out._cells, out._colors):
            for i, c in enumerate(cells):
                if skip_blank and c == BLANK:
                    continue
                colors[i] = color

        return out

    # Serialization

    def to_text(self, color_mode: ColorMode | None = None) -> str:
        color_mode = color_mode or ColorMode.none()
        return "\n".join(apply_colors(cells, colors, color_mode) for cells, colors in zip(self._cells, self._colors))
