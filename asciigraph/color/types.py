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

from dataclasses import dataclass
from enum import StrEnum, auto

# Palette


class Color(StrEnum):
    BLACK = auto()
    DARK = auto()
    GRAY = auto()
    LIGHTGRAY = auto()
    WHITE = auto()
    RED = auto()
    GREEN = auto()
    BLUE = auto()
    BROWN = auto()
    SLATEBLUE = auto()
    SEAGREEN = auto()
    AQUA = auto()
    EMERALD = auto()
    VIOLET = auto()
    TURQUOISE = auto()
    PINK = auto()
    GRASSGREEN = auto()
    GOLD = auto()

    @property
    def rgb(self) -> tuple[int, int, int]:
        return _RGB[self]

    @staticmethod
    def parse(name: str) -> "Color":
        """Case-insensitive lookup by name. Raises ValueError on unknown names."""
        try:
            return Color(name.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown color name: {name!r}") from None


_RGB: dict[Color, tuple[int, int, int]] = {
    Color.BLACK: (0, 0, 0),
    Color.DARK: (64, 64, 64),
    Color.GRAY: (128, 128, 128),
    Color.LIGHTGRAY: (192, 192, 192),
    Color.WHITE: (255, 255, 255),
    Color.RED: (192, 32, 32),
    Color.GREEN: (32, 192, 32),
    Color.BLUE: (32, 32, 192),
    Color.BROWN: (192, 128, 32),
    Color.SLATEBLUE: (64, 64, 192),
    Color.SEAGREEN: (32, 192, 192),
    Color.AQUA: (64, 192, 255),
    Color.EMERALD: (64, 192, 64),
    Color.VIOLET: (192, 64, 255),
    Color.TURQUOISE: (64, 255, 192),
    Color.PINK: (255, 64, 192),
    Color.GRASSGREEN: (192, 255, 64),
    Color.GOLD: (255, 192, 64),
}


# Color modes


class ColorModeKind(StrEnum):
    NONE = auto()
    HTML = auto()
    TERMINAL = auto()
    TERMINAL_BACKGROUND = auto()


@dataclass(frozen=True, slots=True)
class ColorMode:
    """
    How per-cell colors are turned into control sequences.

    - none: colors are dropped
    - html: `<span class="{prefix}{color}">...</span>`
    - terminal: 24-bit ANSI SGR foreground (`ESC[38;2;r;g;bm` ... `ESC[39m`)
    - terminal_background: 24-bit ANSI SGR background (`ESC[48;2;r;g;bm` ... `ESC[49m`)

    Only the terminal modes can be re-measured by `count_visible_chars`.
    Text rendered in html mode is measured as plain text, tags included, so
    two html-colored drawings cannot be merged reliably.
    """

    kind: ColorModeKind = ColorModeKind.NONE
    prefix: str = ""

    @staticmethod
    def none() -> "ColorMode":
        return ColorMode(ColorModeKind.NONE)

    @staticmethod
    def html(prefix: str = "") -> "ColorMode":
        return ColorMode(ColorModeKind.HTML, prefix)

    @staticmethod
    def terminal() -> "ColorMode":
        return ColorMode(ColorModeKind.TERMINAL)

    @staticmethod
    def terminal_background() -> "ColorMode":
        return ColorMode(ColorModeKind.TERMINAL_BACKGROUND)

    @property
    def is_none(self) -> bool:
        return self.kind == ColorModeKind.NONE

    @property
    def is_terminal(self) -> bool:
        return self.kind in (ColorModeKind.TERMINAL, ColorModeKind.TERMINAL_BACKGROUND)

    def start_marker(self, color: Color) -> str:
        if self.kind == ColorModeKind.HTML:
            return f'<span class="{self.prefix}{color.value}">'
        if self.kind == ColorModeKind.TERMINAL:
            r, g, b = color.rgb
            return f"\x1b[38;2;{r};{g};{b}m"
        if self.kind == ColorModeKind.TERMINAL_BACKGROUND:
            r, g, b = color.rgb
            return f"\x1b[48;2;{r};{g};{b}m"
        return ""

    def end_marker(self) -> str:
        if self.kind == ColorModeKind.HTML:
            return "</span>"
        if self.kind == ColorModeKind.TERMINAL:
            return "\x1b[39m"
        if self.kind == ColorModeKind.TERMINAL_BACKGROUND:
            return "\x1b[49m"
        return ""
