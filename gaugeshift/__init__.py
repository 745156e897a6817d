"""
gaugeshift: adapt knitting patterns to your own gauge.

The even-distribution engine (distribute, reduce_cycle, describe_runs,
simplify_ratio) is re-exported here together with the planners built on it.
"""

from gaugeshift.conversion.gauge import (
    AdjustedPickupRatio,
    EdgeKind,
    actual_measurement,
    adjusted_pickup_ratio,
    border_stitch_count,
    target_pattern_measurement,
)
from gaugeshift.distribution import (
    Cycle,
    Run,
    distribute,
    expand_runs,
    find_runs,
    reduce_cycle,
)
from gaugeshift.errors import (
    DegenerateRatioError,
    GaugeShiftError,
    InvalidRelationshipError,
    MissingInputError,
)
from gaugeshift.planner import (
    BorderPlan,
    EdgePlan,
    PatternSize,
    PickupPlan,
    SizeRecommendation,
    analyze_sizes,
    plan_border,
    plan_edge,
    plan_pickup,
)
from gaugeshift.utilities import Gauge, GaugeRatio, gcd, simplify_ratio
from gaugeshift.writer import RunDescription, describe_runs

__all__ = [
    # types
    "AdjustedPickupRatio",
    "BorderPlan",
    "Cycle",
    "EdgeKind",
    "EdgePlan",
    "Gauge",
    "GaugeRatio",
    "PatternSize",
    "PickupPlan",
    "Run",
    "RunDescription",
    "SizeRecommendation",
    # errors
    "GaugeShiftError",
    "MissingInputError",
    "InvalidRelationshipError",
    "DegenerateRatioError",
    # core engine
    "distribute",
    "reduce_cycle",
    "find_runs",
    "expand_runs",
    "describe_runs",
    "gcd",
    "simplify_ratio",
    # conversions
    "target_pattern_measurement",
    "actual_measurement",
    "adjusted_pickup_ratio",
    "border_stitch_count",
    # planners
    "analyze_sizes",
    "plan_pickup",
    "plan_edge",
    "plan_border",
]
