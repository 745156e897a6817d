"""
Core type definitions for the shared utilities layer.

All types are frozen dataclasses with fail-fast validation in __post_init__.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Gauge:
    """
    Knitting gauge: stitch and row density per 10cm.

    Both values must be strictly positive. Gauges are immutable after
    construction and safe to share across modules.
    """

    stitches_per_10cm: float
    rows_per_10cm: float

    def __post_init__(self) -> None:
        if self.stitches_per_10cm <= 0:
            raise ValueError(f"stitches_per_10cm must be positive, got {self.stitches_per_10cm}")
        if self.rows_per_10cm <= 0:
            raise ValueError(f"rows_per_10cm must be positive, got {self.rows_per_10cm}")


@dataclass(frozen=True)
class GaugeRatio:
    """
    A proportion in lowest terms, e.g. 3:4 for "3 stitches for every 4 rows".

    ``a`` and ``b`` are non-negative, not both zero, and coprime.
    """

    a: int
    b: int

    def __post_init__(self) -> None:
        if self.a < 0 or self.b < 0:
            raise ValueError(f"ratio terms must be >= 0, got {self.a}:{self.b}")
        if self.a == 0 and self.b == 0:
            raise ValueError("ratio terms must not both be zero")

    def __str__(self) -> str:
        return f"{self.a}:{self.b}"
