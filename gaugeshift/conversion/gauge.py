"""
Gauge conversion between a pattern's gauge and the knitter's own.

Gauges are stitches (horizontal) or rows (vertical) per 10cm. A tighter
gauge (more stitches per 10cm) makes every printed size come out smaller, so
the knitter needs to follow a larger size, and vice versa.

All functions are pure. Zero or negative inputs raise MissingInputError,
since in practice they mean an empty form field.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from gaugeshift.errors import MissingInputError
from gaugeshift.utilities.rounding import round_half_up
from gaugeshift.utilities.types import Gauge


class EdgeKind(str, Enum):
    """Which way an edge runs relative to the main fabric's knitting."""

    STITCH = "stitch"  # cast-on / bind-off edge, measured in stitches
    ROW = "row"  # side edge, measured in rows


@dataclass(frozen=True)
class AdjustedPickupRatio:
    """
    A pattern's "pick up N stitches over M rows" converted to the knitter's gauge.

    Attributes:
        raw_stitches: N scaled by personal/pattern horizontal gauge.
        raw_rows: M scaled by personal/pattern vertical gauge.
        ratio: raw_stitches / raw_rows, stitches per row of edge.
    """

    raw_stitches: float
    raw_rows: float
    ratio: float


def _require_positive(**values: float) -> None:
    """Raise MissingInputError naming the first value that is missing, zero or negative."""
    for name, value in values.items():
        if not value or value <= 0:
            raise MissingInputError(f"{name.replace('_', ' ')} must be a positive number.")


def gauge_ratio(personal_gauge: float, pattern_gauge: float) -> float:
    """Personal over pattern gauge: > 1 means the knitter works tighter."""
    _require_positive(personal_gauge=personal_gauge, pattern_gauge=pattern_gauge)
    return personal_gauge / pattern_gauge


def target_pattern_measurement(
    personal_gauge: float, pattern_gauge: float, desired_measurement: float
) -> float:
    """The printed measurement to look for so the knitted piece comes out at ``desired``."""
    _require_positive(desired_measurement=desired_measurement)
    return desired_measurement * gauge_ratio(personal_gauge, pattern_gauge)


def actual_measurement(
    personal_gauge: float, pattern_gauge: float, pattern_measurement: float
) -> float:
    """What a printed measurement actually comes out at when knitted at ``personal_gauge``.

    Inverse of target_pattern_measurement.
    """
    _require_positive(
        personal_gauge=personal_gauge,
        pattern_gauge=pattern_gauge,
        pattern_measurement=pattern_measurement,
    )
    return pattern_measurement * (pattern_gauge / personal_gauge)


def adjusted_pickup_ratio(
    pattern_stitches: int,
    pattern_rows: int,
    personal: Gauge,
    pattern: Gauge,
) -> AdjustedPickupRatio:
    """
    Convert a pattern's pick-up rate to the knitter's gauge.

    Args:
        pattern_stitches: Stitches the pattern says to pick up (N).
        pattern_rows: Rows the pattern picks them up over (M).
        personal: The knitter's gauge.
        pattern: The pattern's gauge.

    Returns:
        The adjusted stitch and row counts and their ratio.
    """
    _require_positive(pattern_stitches=pattern_stitches, pattern_rows=pattern_rows)
    raw_stitches = pattern_stitches * (personal.stitches_per_10cm / pattern.stitches_per_10cm)
    raw_rows = pattern_rows * (personal.rows_per_10cm / pattern.rows_per_10cm)
    return AdjustedPickupRatio(
        raw_stitches=raw_stitches,
        raw_rows=raw_rows,
        ratio=raw_stitches / raw_rows,
    )


def pickup_count(total_rows: int, ratio: float) -> int:
    """
    Stitches to pick up along ``total_rows`` rows at ``ratio`` stitches per row.

    Rounded half-up, so 0.5 of a stitch counts as one.
    """
    _require_positive(total_rows=total_rows)
    return round_half_up(total_rows * ratio)


def edge_length_cm(count: float, main_gauge: Gauge, edge: EdgeKind) -> float:
    """
    Physical length in cm of an edge of ``count`` stitches or rows.

    A STITCH edge is measured at the main fabric's horizontal gauge, a ROW
    edge at its vertical gauge.

    Raises:
        MissingInputError: If count is not positive.
    """
    _require_positive(count=count)
    density = main_gauge.stitches_per_10cm if edge is EdgeKind.STITCH else main_gauge.rows_per_10cm
    return (count / density) * 10


def border_stitch_count(
    main_count: int,
    main_gauge: Gauge,
    border_gauge: Gauge,
    edge: EdgeKind,
) -> int:
    """
    Border stitches to pick up along an edge of the main fabric.

    A STITCH edge is ``main_count`` stitches long at the main horizontal
    gauge; a ROW edge is ``main_count`` rows long at the main vertical gauge.
    The border needs as many of its own stitches as fit that length.
    """
    length_cm = edge_length_cm(main_count, main_gauge, edge)
    return round_half_up(length_cm * border_gauge.stitches_per_10cm / 10)
