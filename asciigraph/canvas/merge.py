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

from asciigraph.canvas.canvas import Alignment, Canvas
from asciigraph.color import ColorMode


def merge_horiz(
    str1: str,
    str2: str,
    color_mode: ColorMode | None = None,
    alignment: Alignment = Alignment.FIRST,
    margin: int = 0,
) -> str:
    """
    Merge two rendered drawings side by side, `margin` blank columns apart.

    `color_mode` is the mode both strings were rendered with, so that embedded
    color sequences are not counted as columns. Both inputs must use the same
    mode; mixing modes is not supported. Use `ColorMode.none()` for plain text.
    """
    left = Canvas.from_text(str1, Alignment.FIRST, color_mode)
    right = Canvas.from_text(str2, Alignment.FIRST, color_mode)

    if not left.is_empty() and not right.is_empty():
        left = left.add_padding((0, 0, 0, margin))

    # the cells already carry their colors
    return left.merge_horizontally(right, alignment).to_text()


def merge_vert(
    str1: str,
    str2: str,
    color_mode: ColorMode | None = None,
    alignment: Alignment = Alignment.FIRST,
    margin: int = 0,
) -> str:
    """
    Stack two rendered drawings, `margin` blank rows apart.

    See `merge_horiz` for the meaning of `color_mode`.
    """
    top = Canvas.from_text(str1, Alignment.FIRST, color_mode)
    bottom = Canvas.from_text(str2, Alignment.FIRST, color_mode)

    if not top.is_empty() and not bottom.is_empty():
        top = top.add_padding((0, margin, 0, 0))

    return top.merge_vertically(bottom, alignment).to_text()
