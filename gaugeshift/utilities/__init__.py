"""
Shared utilities for gaugeshift.

Provides the deterministic primitives used by the distribution engine and the
gauge conversions: the Gauge type, half-up rounding, and ratio reduction.
"""

from .ratios import gcd, simplify_ratio
from .rounding import round_half_up, round_half_up_to
from .types import Gauge, GaugeRatio

__all__ = [
    # types
    "Gauge",
    "GaugeRatio",
    # rounding
    "round_half_up",
    "round_half_up_to",
    # ratios
    "gcd",
    "simplify_ratio",
]
