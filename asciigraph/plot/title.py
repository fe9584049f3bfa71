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

from typing import Protocol

from asciigraph.canvas import Alignment, Canvas


class TitleRenderer(Protocol):
    """Turns a title into a canvas. Used for big titles."""

    def __call__(self, title: str) -> Canvas: ...


def plain_title(title: str) -> Canvas:
    """Each line of the title centered over the others."""
    return Canvas.from_text(title, Alignment.CENTER)


def boxed_title(title: str) -> Canvas:
    """
    The title inside a rounded box:

        ╭───────╮
        │ Title │
        ╰───────╯
    """
    text = plain_title(title)
    if text.is_empty():
        return text
    return text.add_padding((0, 0, 1, 1)).add_border((True, True, True, True))
