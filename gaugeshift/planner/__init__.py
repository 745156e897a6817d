"""
Planners: the knitter-facing operations built on the distribution engine.
"""

from .border import BorderPlan, plan_border
from .pickup import EdgePlan, PickupPlan, plan_edge, plan_pickup
from .sizing import (
    GaugeComparison,
    MatchQuality,
    PatternSize,
    SizeAnalysis,
    SizeMatch,
    SizeRecommendation,
    analyze_sizes,
    classify_match,
    compare_gauges,
    find_closest_size,
)

__all__ = [
    # border
    "BorderPlan",
    "plan_border",
    # pickup
    "EdgePlan",
    "PickupPlan",
    "plan_edge",
    "plan_pickup",
    # sizing
    "GaugeComparison",
    "MatchQuality",
    "PatternSize",
    "SizeAnalysis",
    "SizeMatch",
    "SizeRecommendation",
    "analyze_sizes",
    "classify_match",
    "compare_gauges",
    "find_closest_size",
]
