"""
Rational reduction: greatest common divisor and ratio simplification.

Inputs may be floats (form values, computed stitch counts); they are rounded
half-up to integers before any divisibility arithmetic.
"""

from __future__ import annotations

import math

from gaugeshift.errors import DegenerateRatioError

from .rounding import round_half_up
from .types import GaugeRatio


def gcd(a: float, b: float) -> int:
    """
    Greatest common divisor of the rounded magnitudes of ``a`` and ``b``.

    ``gcd(a, 0) == abs(round(a))``. ``gcd(0, 0) == 0``, which is useless as a
    divisor; callers that divide by the result must guard against it.
    """
    return math.gcd(abs(round_half_up(a)), abs(round_half_up(b)))


def simplify_ratio(a: float, b: float) -> GaugeRatio:
    """
    Reduce ``a:b`` to lowest terms.

    Raises:
        DegenerateRatioError: If both inputs round to zero.
    """
    divisor = gcd(a, b)
    if divisor == 0:
        raise DegenerateRatioError(f"Cannot simplify the ratio {a}:{b}; both values are zero.")
    return GaugeRatio(a=round_half_up(abs(a) / divisor), b=round_half_up(abs(b) / divisor))
