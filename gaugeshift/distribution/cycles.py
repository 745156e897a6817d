"""
Repeat-cycle reduction.

Because distribute() is defined by proportional cumulative rounding, the
placement for (items, slots) is always ``repeats`` back-to-back copies of the
placement for (items / g, slots / g), where g = gcd(items, slots). Knitters
memorise the short cycle and repeat it instead of following a long sequence.
"""

from __future__ import annotations

from dataclasses import dataclass

from gaugeshift.errors import DegenerateRatioError
from gaugeshift.utilities.ratios import gcd

from .placement import distribute


@dataclass(frozen=True)
class Cycle:
    """
    The shortest repeating unit of a distribution.

    Attributes:
        cycle_items: Items placed per cycle.
        cycle_slots: Slots covered per cycle (>= 1).
        repeats: How many times the cycle is worked (>= 1).
    """

    cycle_items: int
    cycle_slots: int
    repeats: int

    def __post_init__(self) -> None:
        if self.cycle_items < 0:
            raise ValueError(f"cycle_items must be >= 0, got {self.cycle_items}")
        if self.cycle_slots < 1:
            raise ValueError(f"cycle_slots must be >= 1, got {self.cycle_slots}")
        if self.repeats < 1:
            raise ValueError(f"repeats must be >= 1, got {self.repeats}")

    @property
    def items(self) -> int:
        return self.cycle_items * self.repeats

    @property
    def slots(self) -> int:
        return self.cycle_slots * self.repeats

    @property
    def cycle_skips(self) -> int:
        """Slots left empty per cycle (only meaningful when items <= slots)."""
        return max(self.cycle_slots - self.cycle_items, 0)


def reduce_cycle(items: int, slots: int) -> Cycle:
    """
    Reduce (items, slots) to its minimal repeating cycle.

    Raises:
        DegenerateRatioError: If items and slots are both 0.
        ValueError: If items < 0 or slots < 1.
    """
    if items == 0 and slots == 0:
        raise DegenerateRatioError("Cannot find a repeat for 0 items over 0 slots.")
    if items < 0:
        raise ValueError(f"items must be >= 0, got {items}")
    if slots < 1:
        raise ValueError(f"slots must be >= 1, got {slots}")

    g = gcd(items, slots)
    return Cycle(cycle_items=items // g, cycle_slots=slots // g, repeats=g)


def cycle_placement(cycle: Cycle) -> list[int]:
    """Placement for a single repeat of the cycle."""
    return distribute(cycle.cycle_items, cycle.cycle_slots)


def expand_cycle(cycle: Cycle) -> list[int]:
    """Placement for the whole edge: the cycle placement repeated ``repeats`` times."""
    return cycle_placement(cycle) * cycle.repeats
