"""
Pick-up planning along an edge.

plan_edge() spreads a stitch count across the rows of an edge and describes
its shortest repeat. plan_pickup() first converts a pattern's "pick up N
stitches over M rows" to the knitter's gauge, then plans the edge.

Overflow policy: on a vertical edge you cannot pick up more than one stitch
per row, so a count that reaches the row count is rejected unless
``allow_overflow`` is set, in which case some rows receive two or more.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional

from gaugeshift.config.settings import Settings, get_settings
from gaugeshift.conversion.gauge import AdjustedPickupRatio, adjusted_pickup_ratio, pickup_count
from gaugeshift.distribution.cycles import Cycle, cycle_placement, expand_cycle, reduce_cycle
from gaugeshift.distribution.runs import Run, find_runs, run_histogram
from gaugeshift.errors import InvalidRelationshipError, MissingInputError
from gaugeshift.utilities.types import Gauge
from gaugeshift.writer.templates import render_repeat_note
from gaugeshift.writer.writer import RunDescription, describe_runs

logger = logging.getLogger(__name__)

OVERFLOW_MESSAGE = (
    "The calculated pick-up count exceeds your row count. This would mean picking "
    "up more than one stitch per row, which isn't possible for vertical edges."
)


@dataclass(frozen=True)
class EdgePlan:
    """
    How to pick up ``total_stitches`` along ``total_rows`` rows.

    Attributes:
        total_stitches: Stitches to pick up along the whole edge.
        total_rows: Rows along the edge.
        cycle: Shortest repeat of the placement.
        placement: Stitches per row along the whole edge.
        repeat: Description (runs, text, markers) of one cycle.
        histogram: Run shapes of the whole edge and how often each occurs.
    """

    total_stitches: int
    total_rows: int
    cycle: Cycle
    placement: tuple[int, ...]
    repeat: RunDescription
    histogram: MappingProxyType[Run, int]

    @property
    def summary(self) -> str:
        return f"Pick up {self.total_stitches} stitches over {self.total_rows} rows"

    @property
    def repeat_note(self) -> str:
        return render_repeat_note(self.cycle.repeats)


@dataclass(frozen=True)
class PickupPlan:
    """Outcome of plan_pickup(): the gauge-adjusted rate and the edge plan."""

    pattern_stitches: int
    pattern_rows: int
    adjusted: AdjustedPickupRatio
    edge: EdgePlan


def plan_edge(
    total_stitches: int,
    total_rows: int,
    *,
    allow_overflow: Optional[bool] = None,
    settings: Optional[Settings] = None,
) -> EdgePlan:
    """
    Distribute ``total_stitches`` across ``total_rows`` and describe the repeat.

    Args:
        total_stitches: Stitches to pick up.
        total_rows: Rows along the edge.
        allow_overflow: Permit total_stitches >= total_rows. Defaults to the
            ``pickup.allow_overflow`` setting.
        settings: Settings for the repeat description. Defaults to
            get_settings().

    Raises:
        MissingInputError: If total_rows is not positive.
        InvalidRelationshipError: If the count reaches the row count and
            overflow is not allowed, or if the count is below 1.
    """
    if settings is None:
        settings = get_settings()
    if allow_overflow is None:
        allow_overflow = settings.allow_overflow

    if not total_rows or total_rows < 1:
        raise MissingInputError("Please enter the total rows along your edge.")
    if total_stitches >= total_rows and not allow_overflow:
        raise InvalidRelationshipError(OVERFLOW_MESSAGE)
    if total_stitches < 1:
        raise InvalidRelationshipError(
            "The calculated pick-up count is too low. Please check your gauge values."
        )

    cycle = reduce_cycle(total_stitches, total_rows)
    placement = expand_cycle(cycle)
    logger.debug(
        "edge %d/%d reduces to %d/%d x%d",
        total_stitches,
        total_rows,
        cycle.cycle_items,
        cycle.cycle_slots,
        cycle.repeats,
    )
    return EdgePlan(
        total_stitches=total_stitches,
        total_rows=total_rows,
        cycle=cycle,
        placement=tuple(placement),
        repeat=describe_runs(cycle_placement(cycle), settings=settings),
        histogram=MappingProxyType(run_histogram(find_runs(placement))),
    )


def plan_pickup(
    pattern_stitches: int,
    pattern_rows: int,
    total_rows: int,
    personal: Gauge,
    pattern: Gauge,
    *,
    allow_overflow: Optional[bool] = None,
    settings: Optional[Settings] = None,
) -> PickupPlan:
    """
    Convert a pattern's pick-up instruction to the knitter's gauge and plan the edge.

    Args:
        pattern_stitches: N in the pattern's "pick up N sts over M rows".
        pattern_rows: M in the same instruction.
        total_rows: Rows along the knitter's own edge.
        personal: The knitter's gauge.
        pattern: The pattern's gauge.
        allow_overflow: See plan_edge().
        settings: See plan_edge().

    Raises:
        MissingInputError: If the pattern instruction or the row count is missing.
        InvalidRelationshipError: See plan_edge().
    """
    if not (pattern_stitches and pattern_rows) or min(pattern_stitches, pattern_rows) <= 0:
        raise MissingInputError(
            "Please enter the pattern's pick-up instruction (stitches per rows)."
        )
    if not total_rows or total_rows < 1:
        raise MissingInputError("Please enter the total rows along your edge.")

    adjusted = adjusted_pickup_ratio(pattern_stitches, pattern_rows, personal, pattern)
    total_stitches = pickup_count(total_rows, adjusted.ratio)
    logger.debug(
        "pattern rate %d/%d adjusts to %.3f stitches per row; %d over %d rows",
        pattern_stitches,
        pattern_rows,
        adjusted.ratio,
        total_stitches,
        total_rows,
    )
    edge = plan_edge(
        total_stitches,
        total_rows,
        allow_overflow=allow_overflow,
        settings=settings,
    )
    return PickupPlan(
        pattern_stitches=pattern_stitches,
        pattern_rows=pattern_rows,
        adjusted=adjusted,
        edge=edge,
    )
