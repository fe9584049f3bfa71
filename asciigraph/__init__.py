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

from asciigraph._version import __version__
from asciigraph.canvas import Alignment, Canvas, merge_horiz, merge_vert
from asciigraph.color import Color, ColorMode, count_visible_chars
from asciigraph.number import format_number
from asciigraph.plot import (
    AsciiGraphError,
    Graph,
    GraphConfigError,
    NoDataError,
    SkipRange,
)

__all__ = [
    "Alignment",
    "AsciiGraphError",
    "Canvas",
    "Color",
    "ColorMode",
    "Graph",
    "GraphConfigError",
    "NoDataError",
    "SkipRange",
    "__version__",
    "count_visible_chars",
    "format_number",
    "merge_horiz",
    "merge_vert",
]
