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

import logging
import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace
from fractions import Fraction

from asciigraph.plot.types import Entry1D, SkipRange, SkipRangeKind

log = logging.getLogger(__name__)

Warn = Callable[..., None]

# plots at most this tall are never split
SKIP_MIN_HEIGHT = 18

# automatic skip: range / largest gap must be below this
SKIP_DOMINANCE = 3

# the gap is shrunk by 1/16 of the neighbouring sub-range on each side
SKIP_PAD_DIVISOR = 16

# pretty snapping is skipped when it would change the span by less than 1%
# (jitter on ranges that are already round) or more than double it
SNAP_CLOSE_ENOUGH = Fraction(99, 100)
SNAP_MAX_GROWTH = Fraction(1, 2)


@dataclass(frozen=True, slots=True)
class YRange:
    y_min: Fraction
    y_max: Fraction
    inferred_min: bool = True
    inferred_max: bool = True

    @property
    def span(self) -> Fraction:
        return self.y_max - self.y_min


@dataclass(frozen=True, slots=True)
class SkipPlan:
    """A 1-D plot split in two around [skip_from, skip_to]."""

    skip_from: Fraction
    skip_to: Fraction
    upper: YRange
    lower: YRange
    upper_height: int
    lower_height: int


# Downsampling


def downsample(entries: Sequence[Entry1D], width: int) -> list[Entry1D]:
    """
    Reduce `entries` to `width` entries: `width // 2` equal index buckets,
    each contributing its minimum and its maximum in their original order.
    `width` must be even.
    """
    if width % 2:
        raise ValueError(f"downsample needs an even width, got {width}")

    n = len(entries)
    half = width // 2
    out: list[Entry1D] = []

    for i in range(half):
        bucket = entries[i * n // half : (i + 1) * n // half]
        if not bucket:
            continue

        lo = min(range(len(bucket)), key=lambda k: bucket[k].value)
        hi = max(range(len(bucket)), key=lambda k: bucket[k].value)

        first, second = (lo, hi) if lo <= hi else (hi, lo)
        out.append(bucket[first])
        out.append(bucket[second])

    return out


# Range inference


def infer_y_range(
    values: Sequence[Fraction],
    y_min: Fraction | None,
    y_max: Fraction | None,
    *,
    warn: Warn = log.warning,
) -> YRange:
    """
    Fill in whichever of `y_min` / `y_max` is missing so the range covers the data.
    A range of zero height is widened by one unit.
    """
    data_min = min(values)
    data_max = max(values)

    if y_min is None and y_max is None:
        lo, hi = data_min, data_max
        if lo == hi:
            lo, hi = lo - 1, hi + 1
        return YRange(lo, hi, True, True)

    if y_min is None:
        assert y_max is not None
        lo = data_min if data_min < y_max else y_max - 1
        return YRange(lo, y_max, True, False)

    if y_max is None:
        hi = data_max if data_max > y_min else y_min + 1
        return YRange(y_min, hi, False, True)

    if y_min == y_max:
        warn("y_min == y_max == %s leaves no room to plot; widening y_max by 1", y_min)
        return YRange(y_min, y_max + 1, False, False)

    return YRange(y_min, y_max, False, False)


def _round_nearest(value: Fraction) -> int:
    return math.floor(value + Fraction(1, 2))


def pretty_snap(rng: YRange, granularity: Fraction | None, height: int) -> YRange:
    """
    Move inferred bounds so that every row of the plot sits on a multiple of
    `granularity`: y_min becomes a multiple of it, the span a multiple of
    `granularity * height`. Explicit bounds are never touched.
    """
    if granularity is None or granularity <= 0 or height <= 0:
        return rng
    if not (rng.inferred_min and rng.inferred_max):
        return rng

    lo = _round_nearest(rng.y_min / granularity) * granularity
    if lo > rng.y_min:
        lo -= granularity

    unit = granularity * height
    steps = max(1, _round_nearest((rng.y_max - lo) / unit))
    if lo + steps * unit < rng.y_max:
        steps += 1

    snapped_span = steps * unit
    ratio = rng.span / snapped_span

    if ratio >= SNAP_CLOSE_ENOUGH:
        log.debug("pretty snap skipped: [%s, %s] is already round enough", rng.y_min, rng.y_max)
        return rng

    if ratio < SNAP_MAX_GROWTH:
        log.debug("pretty snap skipped: span %s would grow to %s", rng.span, snapped_span)
        return rng

    return replace(rng, y_min=lo, y_max=lo + snapped_span)


# Skip ranges


def largest_gap(sorted_values: Sequence[Fraction]) -> tuple[Fraction, Fraction] | None:
    """The pair of value-adjacent data points that are furthest apart."""
    best: tuple[Fraction, Fraction] | None = None
    best_diff = Fraction(0)

    for a, b in zip(sorted_values, sorted_values[1:]):
        if b - a > best_diff:
            best_diff = b - a
            best = (a, b)

    return best


def _split_heights(total: int, below: int, above: int) -> tuple[int, int]:
    # out of 6 parts, the side holding clearly more points gets 4
    if below * 2 >= above * 3:
        upper_parts = 2
    elif above * 2 >= below * 3:
        upper_parts = 4
    else:
        upper_parts = 3

    upper = total * upper_parts // 6
    return upper, total - upper


def plan_skip(
    values: Sequence[Fraction],
    rng: YRange,
    policy: SkipRange,
    height: int,
    *,
    warn: Warn = log.warning,
) -> SkipPlan | None:
    """
    Decide whether (and where) to split a 1-D plot of `height` rows.
    Returns None when the plot should be drawn in one piece.
    """
    if policy.kind == SkipRangeKind.DISABLED or height <= SKIP_MIN_HEIGHT or len(values) < 2:
        return None

    ordered = sorted(values)
    data_min, data_max = ordered[0], ordered[-1]

    if policy.kind == SkipRangeKind.AUTOMATIC:
        gap = largest_gap(ordered)
        if gap is None:
            return None

        a, b = gap
        max_diff = b - a

        if rng.span / max_diff >= SKIP_DOMINANCE:
            return None

        pad_low = (a - data_min) / SKIP_PAD_DIVISOR or max_diff / SKIP_PAD_DIVISOR
        pad_high = (data_max - b) / SKIP_PAD_DIVISOR or max_diff / SKIP_PAD_DIVISOR

        skip_from = a + pad_low
        skip_to = b - pad_high
        lower_min = data_min - pad_low if rng.inferred_min else rng.y_min
        upper_max = data_max + pad_high if rng.inferred_max else rng.y_max
        below = sum(1 for v in values if v <= a)
        above = sum(1 for v in values if v >= b)
        report: Warn = log.debug

    else:
        assert policy.start is not None and policy.end is not None
        skip_from, skip_to = policy.start, policy.end

        if skip_from >= skip_to:
            warn("Ignoring skip range [%s, %s]: start must be below end", skip_from, skip_to)
            return None

        lower_min = rng.y_min
        upper_max = rng.y_max
        below = sum(1 for v in values if v < skip_from)
        above = sum(1 for v in values if v > skip_to)
        report = warn

    if skip_from < rng.y_min or skip_to > rng.y_max or not (lower_min < skip_from < skip_to < upper_max):
        report(
            "Ignoring skip range [%s, %s]: it does not fit inside the y range [%s, %s]",
            skip_from,
            skip_to,
            rng.y_min,
            rng.y_max,
        )
        return None

    upper_height, lower_height = _split_heights(height - 1, below, above)

    return SkipPlan(
        skip_from=skip_from,
        skip_to=skip_to,
        upper=YRange(skip_to, upper_max, False, False),
        lower=YRange(lower_min, skip_from, False, False),
        upper_height=upper_height,
        lower_height=lower_height,
    )
