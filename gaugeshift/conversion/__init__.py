"""
Gauge conversion: measurements, pick-up rates, and border stitch counts.
"""

from .gauge import (
    AdjustedPickupRatio,
    EdgeKind,
    actual_measurement,
    adjusted_pickup_ratio,
    border_stitch_count,
    edge_length_cm,
    gauge_ratio,
    pickup_count,
    target_pattern_measurement,
)

__all__ = [
    "AdjustedPickupRatio",
    "EdgeKind",
    "actual_measurement",
    "adjusted_pickup_ratio",
    "border_stitch_count",
    "edge_length_cm",
    "gauge_ratio",
    "pickup_count",
    "target_pattern_measurement",
]
