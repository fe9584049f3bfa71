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

from asciigraph.color.types import Color, ColorMode

ESC = "\x1b"

# scanner states
_IDLE = 0
_SAW_ESC = 1
_SAW_BRACKET = 2
_SAW_DIGIT = 3


def apply_colors(cells: Sequence[str], colors: Sequence[Color | None], color_mode: ColorMode) -> str:
    """
    Join `cells` into one string, wrapping every run of equally-colored cells
    in the start/end markers of `color_mode`.

    `cells` is usually a plain string (one cell per character) or a row of a
    Canvas. Markers are emitted only where the color changes, never nested,
    and an open run is always closed at the end.
    """
    if len(cells) != len(colors):
        raise ValueError(f"apply_colors: {len(cells)} cells but {len(colors)} colors")

    if color_mode.is_none:
        return "".join(cells)

    out: list[str] = []
    current: Color | None = None

    for cell, color in zip(cells, colors):
        if color != current:
            if current is not None:
                out.append(color_mode.end_marker())
            if color is not None:
                out.append(color_mode.start_marker(color))
            current = color
        out.append(cell)

    if current is not None:
        out.append(color_mode.end_marker())

    return "".join(out)


def split_visible(text: str) -> list[str]:
    """
    Split `text` into visible cells, gluing ANSI SGR color sequences
    (`ESC [ 3x ... m` / `ESC [ 4x ... m`) onto the cell that follows them.
    Sequences trailing the last visible character are glued onto that character.

    Anything that starts like an escape sequence but does not finish like one
    is kept as ordinary visible characters.
    """
    cells: list[str] = []
    prefix = ""
    pending: list[str] = []
    state = _IDLE
    i = 0

    while i < len(text):
        ch = text[i]

        if state == _IDLE:
            if ch == ESC:
                pending = [ch]
                state = _SAW_ESC
            else:
                cells.append(prefix + ch)
                prefix = ""
            i += 1
            continue

        if state == _SAW_ESC and ch == "[":
            pending.append(ch)
            state = _SAW_BRACKET
            i += 1
            continue

        if state == _SAW_BRACKET and ch in "34":
            pending.append(ch)
            state = _SAW_DIGIT
            i += 1
            continue

        if state == _SAW_DIGIT:
            if ch == "m":
                prefix += "".join(pending) + ch
                pending = []
                state = _IDLE
                i += 1
                continue
            if ch.isdigit() or ch == ";":
                pending.append(ch)
                i += 1
                continue

        # not a color sequence after all: what was consumed is visible, re-read `ch`
        for consumed in pending:
            cells.append(prefix + consumed)
            prefix = ""
        pending = []
        state = _IDLE

    for consumed in pending:
        cells.append(prefix + consumed)
        prefix = ""

    if prefix and cells:
        cells[-1] += prefix

    return cells


def count_visible_chars(text: str) -> int:
    """Number of characters of `text` that take up a cell on a terminal."""
    return len(split_visible(text))
