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

from asciigraph.cli.exitcodes import EXIT_OK
from asciigraph.color import ColorMode
from asciigraph.config import GraphConfigLoader


def color_mode_from_arg(name: str | None, html_prefix: str = "") -> ColorMode | None:
    """Map a `--color` choice to a ColorMode; None keeps the config file's mode."""
    if name is None:
        return None
    if name == "terminal":
        return ColorMode.terminal()
    if name == "terminal-bg":
        return ColorMode.terminal_background()
    if name == "html":
        return ColorMode.html(html_prefix)
    return ColorMode.none()


def run(*, config: str, color: str | None = None, html_prefix: str = "") -> int:
    graph = GraphConfigLoader().load(config)

    color_mode = color_mode_from_arg(color, html_prefix)
    if color_mode is not None:
        graph.set_color_mode(color_mode)

    print(graph.draw())
    return EXIT_OK
