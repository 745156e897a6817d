"""
Even distribution: place N items across M slots as evenly as possible.

Slot k (1-indexed) receives however many items bring the running total up to
round(k * items / slots). Every step re-anchors to the exact cumulative
fraction, so rounding error never accumulates and the total is always exact.

This is the classic "N into M" spacing. For a pick-up edge the items are
stitches and the slots are rows; a placement of [0, 1, 0, 1] reads "skip a
row, pick up one, skip a row, pick up one".
"""

from __future__ import annotations

from collections.abc import Sequence


def _cumulative_target(k: int, items: int, slots: int) -> int:
    # round_half_up(k * items / slots), kept in integers
    return (2 * k * items + slots) // (2 * slots)


def distribute(items: int, slots: int) -> list[int]:
    """
    Spread ``items`` across ``slots`` with maximal evenness.

    Args:
        items: Number of items to place (>= 0).
        slots: Number of slots available (>= 1).

    Returns:
        A list of length ``slots`` whose entries sum to ``items``. Any two
        entries differ by at most 1.

    Raises:
        ValueError: If slots < 1 or items < 0.
    """
    if slots < 1:
        raise ValueError(f"slots must be >= 1, got {slots}")
    if items < 0:
        raise ValueError(f"items must be >= 0, got {items}")

    placement: list[int] = []
    placed = 0
    for k in range(1, slots + 1):
        expected = _cumulative_target(k, items, slots)
        placement.append(expected - placed)
        placed = expected
    return placement


def to_pickup_flags(placement: Sequence[int]) -> list[bool]:
    """
    Convert a 0/1 placement into per-row pick-up flags.

    Raises:
        ValueError: If any slot holds more than one item.
    """
    flags: list[bool] = []
    for index, count in enumerate(placement):
        if count not in (0, 1):
            raise ValueError(
                f"slot {index} holds {count} items; pick-up flags need 0 or 1 per slot"
            )
        flags.append(count == 1)
    return flags


def from_pickup_flags(flags: Sequence[bool]) -> list[int]:
    """Convert per-row pick-up flags into a 0/1 placement."""
    return [1 if flag else 0 for flag in flags]
