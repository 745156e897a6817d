"""
Half-up rounding.

Python's built-in ``round`` uses banker's rounding (``round(2.5) == 2``).
Knitting arithmetic in this package always rounds halves up, so that
``round_half_up(2.5) == 3`` and ``round_half_up(-2.5) == -2``.
"""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, with halves rounded towards +infinity."""
    return math.floor(value + 0.5)


def round_half_up_to(value: float, decimals: int) -> float:
    """Round to ``decimals`` places, with halves rounded up (display precision)."""
    if decimals < 0:
        raise ValueError(f"decimals must be >= 0, got {decimals}")
    scale = 10**decimals
    return round_half_up(value * scale) / scale
