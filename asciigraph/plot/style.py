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

from dataclasses import dataclass, field

from asciigraph.color import Color
from asciigraph.number import NumberFormatter, format_number

FULL_BLOCK = "█"
OVERFLOW = "^"
SEPARATOR = "~"

# glyph for a cell filled from the bottom: 4/4, 3/4, 2/4, 1/4
QUARTER_BLOCKS = ("█", "▆", "▄", "▂")


@dataclass(frozen=True, slots=True)
class PlotStyle:
    """Rendering knobs shared by the 1-D and 2-D renderers."""

    x_label_interval: int = 8
    x_label_margin: int = 2
    y_label_margin: int = 2
    overflow_char: str = OVERFLOW
    primary_color: Color | None = None
    y_label_formatter: NumberFormatter = field(default=format_number)

    @property
    def y_label_interval(self) -> int:
        return self.y_label_margin + 1
