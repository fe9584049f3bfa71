from fractions import Fraction

import pytest
from asciigraph.plot.layout import (
    YRange,
    downsample,
    infer_y_range,
    largest_gap,
    plan_skip,
    pretty_snap,
)
from asciigraph.plot.render1d import y_axis_labels
from asciigraph.plot.style import PlotStyle
from asciigraph.plot.types import Entry1D, SkipRange

# Helpers


def entries(values: list[int]) -> list[Entry1D]:
    return [Entry1D(str(i), Fraction(v)) for i, v in enumerate(values)]


def fr(values: list[int]) -> list[Fraction]:
    return [Fraction(v) for v in values]


class Collect:
    def __init__(self) -> None:
        self.messages: list[str] = []

    def __call__(self, msg: str, *args) -> None:
        self.messages.append(msg % args)


class TestDownsample:
    def test_keeps_extremes(self):
        values = [i % 7 for i in range(100)]
        values[53] = 500
        values[77] = -20

        out = downsample(entries(values), 10)

        assert len(out) == 10
        kept = [e.value for e in out]
        assert 500 in kept
        assert -20 in kept

    def test_keeps_original_order(self):
        out = downsample(entries([i % 5 for i in range(60)]), 8)
        indices = [int(e.label) for e in out]
        assert indices == sorted(indices)

    def test_odd_width(self):
        with pytest.raises(ValueError):
            downsample(entries(list(range(30))), 7)


class TestInferYRange:
    def test_both_inferred(self):
        rng = infer_y_range(fr([1, 5, 3]), None, None)
        assert (rng.y_min, rng.y_max) == (1, 5)
        assert rng.inferred_min and rng.inferred_max

    def test_flat_data_is_widened(self):
        rng = infer_y_range(fr([2, 2]), None, None)
        assert (rng.y_min, rng.y_max) == (1, 3)

    def test_explicit_min(self):
        rng = infer_y_range(fr([1, 5]), Fraction(0), None)
        assert rng == YRange(Fraction(0), Fraction(5), False, True)

    def test_explicit_max_below_data(self):
        rng = infer_y_range(fr([1, 5]), None, Fraction(0))
        assert (rng.y_min, rng.y_max) == (-1, 0)

    def test_equal_bounds_warn(self):
        warn = Collect()
        rng = infer_y_range(fr([1]), Fraction(2), Fraction(2), warn=warn)
        assert (rng.y_min, rng.y_max) == (2, 3)
        assert len(warn.messages) == 1


class TestPrettySnap:
    def test_snaps_inferred_range(self):
        rng = YRange(Fraction(3, 10), Fraction(97, 10))
        snapped = pretty_snap(rng, Fraction(1, 2), 10)
        assert (snapped.y_min, snapped.y_max) == (0, 10)

    def test_snapped_range_covers_data(self):
        for lo, hi in [(Fraction(3, 10), Fraction(97, 10)), (Fraction(-13, 4), Fraction(41, 3)), (Fraction(1), Fraction(4))]:
            snapped = pretty_snap(YRange(lo, hi), Fraction(1, 2), 7)
            assert snapped.y_min <= lo
            assert snapped.y_max >= hi

    def test_round_range_is_kept(self):
        rng = YRange(Fraction(0), Fraction(10))
        assert pretty_snap(rng, Fraction(1, 2), 10) == rng

    def test_explicit_bounds_are_kept(self):
        rng = YRange(Fraction(3, 10), Fraction(97, 10), inferred_min=False)
        assert pretty_snap(rng, Fraction(1, 2), 10) == rng

    def test_no_snap_when_span_would_more_than_double(self):
        rng = YRange(Fraction(0), Fraction(1))
        assert pretty_snap(rng, Fraction(1, 2), 10) == rng

    def test_disabled(self):
        rng = YRange(Fraction(3, 10), Fraction(97, 10))
        assert pretty_snap(rng, None, 10) == rng


def test_largest_gap():
    assert largest_gap(fr([1, 2, 10, 11])) == (2, 10)
    assert largest_gap(fr([4])) is None


class TestPlanSkip:
    VALUES = fr([1, 2, 3, 100, 101])
    RANGE = YRange(Fraction(1), Fraction(101))

    def test_automatic(self):
        plan = plan_skip(self.VALUES, self.RANGE, SkipRange.automatic(), 20)

        assert plan is not None
        assert plan.skip_from == Fraction(25, 8)
        assert plan.skip_to == Fraction(1599, 16)
        # 3 points below the gap, 2 above: 2 of 6 parts for the upper plot
        assert (plan.upper_height, plan.lower_height) == (6, 13)
        assert plan.lower.y_max == plan.skip_from
        assert plan.upper.y_min == plan.skip_to

    def test_skip_stays_inside_range(self):
        plan = plan_skip(self.VALUES, self.RANGE, SkipRange.automatic(), 30)
        assert plan is not None
        assert self.RANGE.y_min <= plan.skip_from < plan.skip_to <= self.RANGE.y_max

    def test_short_plots_are_never_split(self):
        assert plan_skip(self.VALUES, self.RANGE, SkipRange.automatic(), 18) is None

    def test_disabled(self):
        assert plan_skip(self.VALUES, self.RANGE, SkipRange.disabled(), 40) is None

    def test_no_dominant_gap(self):
        assert plan_skip(fr([1, 2, 3, 4]), YRange(Fraction(1), Fraction(4)), SkipRange.automatic(), 40) is None

    def test_gap_outside_explicit_range_is_discarded(self):
        values = fr([0, 1, 1, 0, 2, 0, 1, 2, 0, 0, 0, 1, 0, 1000])
        rng = YRange(Fraction(-1), Fraction(3), False, False)
        assert plan_skip(values, rng, SkipRange.automatic(), 20) is None

    def test_manual(self):
        plan = plan_skip(self.VALUES, self.RANGE, SkipRange.manual(10, 90), 20)

        assert plan is not None
        assert (plan.skip_from, plan.skip_to) == (10, 90)
        assert plan.upper == YRange(Fraction(90), Fraction(101), False, False)
        assert plan.lower == YRange(Fraction(1), Fraction(10), False, False)
        assert plan.upper_height + plan.lower_height == 19

    def test_manual_outside_range_warns(self):
        warn = Collect()
        assert plan_skip(self.VALUES, self.RANGE, SkipRange.manual(0, 50), 20, warn=warn) is None
        assert len(warn.messages) == 1

    def test_manual_reversed_warns(self):
        warn = Collect()
        assert plan_skip(self.VALUES, self.RANGE, SkipRange.manual(50, 10), 20, warn=warn) is None
        assert "start must be below end" in warn.messages[0]


def test_y_labels_decrease_monotonically():
    labels = y_axis_labels(YRange(Fraction(-1), Fraction(3)), 20, PlotStyle())
    values = [Fraction(label) for label in labels if label is not None]

    assert labels[0] == "3"
    assert len(values) == 7
    assert all(a > b for a, b in zip(values, values[1:]))


def test_y_labels_follow_margin():
    labels = y_axis_labels(YRange(Fraction(0), Fraction(10)), 10, PlotStyle(y_label_margin=0))
    assert all(label is not None for label in labels)
