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

import sys
from pathlib import Path

from asciigraph.canvas import Alignment, merge_horiz, merge_vert
from asciigraph.cli.exitcodes import EXIT_CONFIG_ERROR, EXIT_OK
from asciigraph.cli.render import color_mode_from_arg


def _read(path: str) -> str | None:
    p = Path(path)
    if not p.is_file():
        print(f"asciigraph: error: file does not exist: {p}", file=sys.stderr)
        return None
    return p.read_text(encoding="utf-8").rstrip("\n")


def run(
    *,
    first: str,
    second: str,
    horizontal: bool = False,
    margin: int = 0,
    align: str = "first",
    color: str | None = None,
    html_prefix: str = "",
) -> int:
    a = _read(first)
    b = _read(second)
    if a is None or b is None:
        return EXIT_CONFIG_ERROR

    merge = merge_horiz if horizontal else merge_vert
    color_mode = color_mode_from_arg(color, html_prefix)
    print(merge(a, b, alignment=Alignment(align), margin=margin, color_mode=color_mode))
    return EXIT_OK
