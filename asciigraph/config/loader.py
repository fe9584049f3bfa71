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

import json
import logging
import math
from collections.abc import Mapping
from decimal import Decimal
from fractions import Fraction
from pathlib import Path
from typing import Any

import yaml

from asciigraph.color import Color, ColorMode
from asciigraph.number import to_fraction
from asciigraph.plot.errors import AsciiGraphError
from asciigraph.plot.graph import Graph
from asciigraph.plot.types import SkipRange

log = logging.getLogger(__name__)


class ConfigLoadError(AsciiGraphError):
    """
    A config file could not be turned into a Graph.

    `field` names the offending key (None for file-level problems); `expected`
    and `got` describe the value that was rejected.
    """

    def __init__(
        self,
        code: str,
        message: str,
        *,
        field: str | None = None,
        expected: str | None = None,
        got: Any = None,
        details: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(message, code=code, details=details)
        self.field = field
        self.expected = expected
        self.got = got


_COLOR_MODES = {
    "none": ColorMode.none,
    "terminal": ColorMode.terminal,
    "terminal_background": ColorMode.terminal_background,
    "terminal-bg": ColorMode.terminal_background,
}


def _type_name(value: Any) -> str:
    return "null" if value is None else type(value).__name__


def _type_error(field: str, expected: str, got: Any) -> ConfigLoadError:
    return ConfigLoadError(
        code="type_error",
        message=f"'{field}' must be {expected}, got {_type_name(got)}.",
        field=field,
        expected=expected,
        got=got,
    )


def _arity_error(field: str, expected: str, got: Any) -> ConfigLoadError:
    return ConfigLoadError(
        code="arity_error",
        message=f"'{field}' must be {expected}.",
        field=field,
        expected=expected,
        got=got,
    )


def parse_number(value: Any, field: str = "value") -> Fraction:
    """
    Numbers and numeric strings become exact fractions; a string that does not
    parse as a number is 0. Anything else (bools included) is a type error.
    Finite floats are read from their shortest repr, so 0.1 is exactly 1/10.
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal, Fraction, str)):
        raise _type_error(field, "a number or numeric string", value)
    if isinstance(value, float) and math.isfinite(value):
        return to_fraction(repr(value))
    return to_fraction(value)


def _count(field: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise _type_error(field, "a non-negative integer", value)
    return value


def _text(field: str, value: Any) -> str:
    if not isinstance(value, str):
        raise _type_error(field, "a string", value)
    return value


def _list(field: str, value: Any) -> list[Any]:
    if not isinstance(value, list):
        raise _type_error(field, "an array", value)
    return value


def _labels(field: str, value: Any) -> list[str | None]:
    return [None if label is None else str(label) for label in _list(field, value)]


def _color(field: str, value: Any) -> Color:
    try:
        return Color.parse(_text(field, value))
    except ValueError:
        raise ConfigLoadError(
            code="invalid_color",
            message=f"'{field}' is not a known color: {value!r}.",
            field=field,
            expected="one of " + ", ".join(c.value for c in Color),
            got=value,
        ) from None


def _pairs(field: str, value: Any) -> list[tuple[str, Fraction]]:
    out: list[tuple[str, Fraction]] = []
    for item in _list(field, value):
        if not isinstance(item, list) or len(item) != 2:
            raise _arity_error(field, "an array of [label, value] pairs", item)
        out.append((str(item[0]), parse_number(item[1], field)))
    return out


def _points(field: str, value: Any) -> list[tuple[int, int, str]]:
    out: list[tuple[int, int, str]] = []
    for item in _list(field, value):
        if not isinstance(item, list) or len(item) != 3:
            raise _arity_error(field, "an array of [x, y, glyph] triples", item)
        x, y, glyph = item
        if isinstance(x, bool) or not isinstance(x, int) or isinstance(y, bool) or not isinstance(y, int):
            raise _type_error(field, "integer coordinates", item)
        out.append((x, y, str(glyph)))
    return out


def _intervals(field: str, value: Any) -> list[tuple[int, int, str]]:
    out: list[tuple[int, int, str]] = []
    for item in _list(field, value):
        # [start, end, label] or {start, end, label}
        if isinstance(item, dict):
            item = [item.get("start"), item.get("end"), item.get("label", "")]
        if not isinstance(item, list) or len(item) != 3:
            raise _arity_error(field, "an array of [start, end, label] triples", item)
        start, end, label = item
        if isinstance(start, bool) or not isinstance(start, int) or isinstance(end, bool) or not isinstance(end, int):
            raise _type_error(field, "integer start and end", item)
        out.append((start, end, str(label)))
    return out


def graph_from_mapping(data: Any) -> Graph:
    """
    Build a Graph from parsed JSON/YAML.

    The root is either an object of settings or an array (read as `1d_data`).
    Unknown keys and mistyped values raise ConfigLoadError; a string that should
    be a number but cannot be parsed becomes 0. `2d_data` sizes the plot from its
    label arrays, so it wins over `plot_width` / `plot_height` wherever they appear.
    """
    graph = Graph()

    if isinstance(data, list):
        return graph.set_1d_data([parse_number(v, "1d_data") for v in data])

    if not isinstance(data, dict):
        raise ConfigLoadError(
            code="invalid_root",
            message="Config root must be an object or an array of numbers.",
            expected="object or array",
            got=_type_name(data),
        )

    color_mode: str | None = None
    html_prefix = ""
    grid: tuple[list[tuple[int, int, str]], list[str | None], list[str | None]] | None = None

    for key, value in data.items():
        match key:
            case "1d_data":
                graph.set_1d_data([parse_number(v, key) for v in _list(key, value)])
                grid = None
            case "1d_labeled_data":
                graph.set_1d_labeled_data(_pairs(key, value))
                grid = None
            case "2d_data":
                if not isinstance(value, dict):
                    raise _type_error(key, "an object with data, x_labels and y_labels", value)
                grid = (
                    _points(f"{key}.data", value.get("data", [])),
                    _labels(f"{key}.x_labels", value.get("x_labels")),
                    _labels(f"{key}.y_labels", value.get("y_labels")),
                )
            case "y_min":
                graph.set_y_min(parse_number(value, key))
            case "y_max":
                graph.set_y_max(parse_number(value, key))
            case "y_range":
                bounds = _list(key, value)
                if len(bounds) != 2:
                    raise _arity_error(key, "an array of 2 numbers", value)
                graph.set_y_range(parse_number(bounds[0], key), parse_number(bounds[1], key))
            case "pretty_y":
                graph.set_pretty_y(None if value is None else parse_number(value, key))
            case "plot_width":
                graph.set_plot_width(_count(key, value))
            case "plot_height":
                graph.set_plot_height(_count(key, value))
            case "block_width":
                graph.set_block_width(_count(key, value))
            case "x_label_interval":
                graph.set_x_label_interval(_count(key, value))
            case "x_label_margin":
                graph.set_x_label_margin(_count(key, value))
            case "y_label_margin":
                graph.set_y_label_margin(_count(key, value))
            case "paddings":
                paddings = _list(key, value)
                if len(paddings) != 4:
                    raise _arity_error(key, "an array of 4 integers (top, bottom, left, right)", value)
                graph.set_paddings([_count(key, p) for p in paddings])
            case "title":
                graph.set_title(_text(key, value))
            case "x_axis_label":
                graph.set_x_axis_label(_text(key, value))
            case "y_axis_label":
                graph.set_y_axis_label(_text(key, value))
            case "big_title":
                if not isinstance(value, bool):
                    raise _type_error(key, "a boolean", value)
                graph.set_big_title(value)
            case "skip_range":
                if value is None:
                    graph.set_skip_range(SkipRange.disabled())
                else:
                    bounds = _list(key, value)
                    if len(bounds) != 2:
                        raise _arity_error(key, "an array of 2 numbers or null", value)
                    graph.set_skip_range(SkipRange.manual(parse_number(bounds[0], key), parse_number(bounds[1], key)))
            case "labeled_intervals":
                for start, end, label in _intervals(key, value):
                    graph.add_labeled_interval(start, end, label)
            case "color_mode":
                color_mode = _text(key, value).strip().lower()
            case "html_prefix":
                html_prefix = _text(key, value)
            case "primary_color":
                graph.set_primary_color(_color(key, value))
            case "title_color":
                graph.set_title_color(_color(key, value))
            case _:
                raise ConfigLoadError(
                    code="unknown_field",
                    message=f"Unknown config key: {key!r}.",
                    field=str(key),
                    got=value,
                )

    if grid is not None:
        graph.set_2d_data(*grid)

    if color_mode == "html":
        graph.set_color_mode(ColorMode.html(html_prefix))
    elif color_mode is not None:
        if color_mode not in _COLOR_MODES:
            raise ConfigLoadError(
                code="invalid_color_mode",
                message=f"Unknown color mode: {color_mode!r}.",
                field="color_mode",
                expected="none, terminal, terminal_background or html",
                got=color_mode,
            )
        graph.set_color_mode(_COLOR_MODES[color_mode]())

    return graph


class GraphConfigLoader:
    """
    Loads a Graph from a .json / .yaml / .yml config file.
    Files with another extension are tried as JSON, then as YAML.
    """

    def load(self, path: Path) -> Graph:
        if not isinstance(path, Path):
            path = Path(path)

        if not path.exists():
            raise ConfigLoadError(code="config_not_found", message=f"Config file does not exist: {path}")

        log.debug("loading graph config from %s", path)
        return graph_from_mapping(self._read_config_file(path))

    def loads(self, raw: str, fmt: str = "json") -> Graph:
        """Parse config text; `fmt` is "json" or "yaml"."""
        if fmt == "yaml":
            return graph_from_mapping(self._parse_yaml(raw))
        return graph_from_mapping(self._parse_json(raw))

    def _read_config_file(self, path: Path) -> Any:
        suffix = path.suffix.lower()
        raw = path.read_text(encoding="utf-8")

        if suffix == ".json":
            return self._parse_json(raw, path)

        if suffix in (".yaml", ".yml"):
            return self._parse_yaml(raw, path)

        # Unknown extension: try JSON then YAML
        try:
            return json.loads(raw, parse_float=Decimal)
        except json.JSONDecodeError:
            return self._parse_yaml(raw, path)

    def _parse_json(self, raw: str, path: Path | None = None) -> Any:
        try:
            return json.loads(raw, parse_float=Decimal)
        except json.JSONDecodeError as e:
            raise ConfigLoadError(
                code="invalid_json",
                message=f"Invalid JSON: {e.msg} (line {e.lineno}, column {e.colno})",
                details={"path": str(path) if path else None, "line": e.lineno, "column": e.colno},
            ) from e

    def _parse_yaml(self, raw: str, path: Path | None = None) -> Any:
        try:
            return yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise ConfigLoadError(
                code="invalid_yaml",
                message=f"Invalid YAML: {e}",
                details={"path": str(path) if path else None},
            ) from e
