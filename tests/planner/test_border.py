"""Tests for planner.border: plan_border."""

from __future__ import annotations

import pytest

from gaugeshift.conversion.gauge import EdgeKind
from gaugeshift.distribution.cycles import Cycle
from gaugeshift.errors import MissingInputError
from gaugeshift.planner.border import plan_border
from gaugeshift.planner.pickup import OVERFLOW_MESSAGE
from gaugeshift.utilities.types import Gauge, GaugeRatio

_MAIN = Gauge(stitches_per_10cm=20, rows_per_10cm=28)
_BORDER = Gauge(stitches_per_10cm=24, rows_per_10cm=32)


class TestStitchEdge:
    def test_counts(self):
        plan = plan_border(100, _MAIN, _BORDER, EdgeKind.STITCH)
        assert plan.border_stitches == 120
        assert plan.length_cm == pytest.approx(50)
        assert plan.ratio == GaugeRatio(5, 6)

    def test_no_row_plan(self):
        assert plan_border(100, _MAIN, _BORDER, EdgeKind.STITCH).pickup is None

    def test_summary(self):
        plan = plan_border(100, _MAIN, _BORDER, EdgeKind.STITCH)
        assert plan.summary == (
            "Pick up 120 border stitches along 100 stitches (6 for every 5 stitches)"
        )


class TestRowEdge:
    def test_counts(self):
        plan = plan_border(100, _MAIN, _BORDER, EdgeKind.ROW)
        assert plan.border_stitches == 86
        assert plan.ratio == GaugeRatio(50, 43)

    def test_row_plan(self):
        plan = plan_border(100, _MAIN, _BORDER, EdgeKind.ROW)
        assert plan.pickup is not None
        assert plan.pickup.total_stitches == 86
        assert plan.pickup.cycle == Cycle(cycle_items=43, cycle_slots=50, repeats=2)

    def test_border_denser_than_rows_has_no_plan(self):
        main = Gauge(stitches_per_10cm=20, rows_per_10cm=20)
        border = Gauge(stitches_per_10cm=30, rows_per_10cm=40)
        plan = plan_border(40, main, border, EdgeKind.ROW)
        assert plan.border_stitches == 60
        assert plan.pickup is None
        assert plan.note == OVERFLOW_MESSAGE

    def test_border_denser_than_rows_with_overflow(self):
        main = Gauge(stitches_per_10cm=20, rows_per_10cm=20)
        border = Gauge(stitches_per_10cm=30, rows_per_10cm=40)
        plan = plan_border(40, main, border, EdgeKind.ROW, allow_overflow=True)
        assert plan.pickup is not None
        assert plan.pickup.cycle == Cycle(cycle_items=3, cycle_slots=2, repeats=20)

    def test_summary_mentions_rows(self):
        plan = plan_border(100, _MAIN, _BORDER, EdgeKind.ROW)
        assert plan.summary.endswith("(43 for every 50 rows)")

    def test_no_note_when_planned(self):
        assert plan_border(100, _MAIN, _BORDER, EdgeKind.ROW).note is None

    def test_stitch_edge_has_no_note(self):
        assert plan_border(100, _MAIN, _BORDER, EdgeKind.STITCH).note is None


class TestEqualCounts:
    """One border stitch for every row: allowed only with overflow, as in plan_edge."""

    _MAIN = Gauge(stitches_per_10cm=20, rows_per_10cm=20)
    _BORDER = Gauge(stitches_per_10cm=20, rows_per_10cm=30)

    def test_border_stitches_equal_rows(self):
        plan = plan_border(40, self._MAIN, self._BORDER, EdgeKind.ROW)
        assert plan.length_cm == pytest.approx(20)
        assert plan.border_stitches == 40
        assert plan.ratio == GaugeRatio(1, 1)

    def test_no_plan_without_overflow(self):
        plan = plan_border(40, self._MAIN, self._BORDER, EdgeKind.ROW, allow_overflow=False)
        assert plan.pickup is None
        assert plan.note == OVERFLOW_MESSAGE

    def test_one_per_row_with_overflow(self):
        plan = plan_border(40, self._MAIN, self._BORDER, EdgeKind.ROW, allow_overflow=True)
        assert plan.note is None
        assert plan.pickup is not None
        assert plan.pickup.cycle == Cycle(cycle_items=1, cycle_slots=1, repeats=40)
        assert plan.pickup.placement == (1,) * 40


class TestErrors:
    def test_missing_count(self):
        with pytest.raises(MissingInputError):
            plan_border(0, _MAIN, _BORDER, EdgeKind.ROW)
