"""
Error taxonomy for gaugeshift.

Every error carries a ``detail`` string that is safe to show to the knitter
as-is. None of them are fatal: the caller corrects the input and tries again.

Precondition violations inside the pure distribution core (negative counts,
zero slots, malformed runs) are plain ``ValueError`` and are not part of this
hierarchy; they indicate a programming error rather than bad user input.
"""

from __future__ import annotations


class GaugeShiftError(Exception):
    """Base class for all user-facing gaugeshift errors.

    Attributes:
        detail: Human-readable description of the problem.
    """

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class MissingInputError(GaugeShiftError):
    """A required numeric value is zero, empty, or non-numeric."""


class InvalidRelationshipError(GaugeShiftError):
    """Inputs are individually valid but contradict each other.

    The usual case is a pick-up count that reaches the number of rows on a
    vertical edge, which would need more than one stitch per row.
    """


class DegenerateRatioError(MissingInputError):
    """Both operands of a GCD or ratio simplification are zero."""
