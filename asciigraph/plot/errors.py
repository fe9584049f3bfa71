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

from collections.abc import Mapping
from typing import Any


class AsciiGraphError(Exception):
    """
    Base class for all asciigraph errors.

    These errors describe bad input (configuration, data, config files),
    not crashes inside the renderer.
    """

    code: str
    message: str
    details: Mapping[str, Any] | None = None

    def __init__(
        self,
        message: str,
        code: str = "asciigraph_error",
        details: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class GraphConfigError(AsciiGraphError):
    """Raised (or reported by `Graph.validate`) when a graph configuration cannot be drawn."""

    pass


class NoDataError(GraphConfigError):
    """Raised when `draw` is called before any data was set."""

    def __init__(self, message: str = "There is nothing to draw: no data was set.") -> None:
        super().__init__(message, code="no_data")
