"""
Run-length description of a placement.

A run is a maximal stretch of consecutive slots holding the same count.
Runs partition the placement: expanding them in order rebuilds it exactly,
and two neighbouring runs never share a value.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass


@dataclass(frozen=True)
class Run:
    """``length`` consecutive slots that each hold ``value`` items."""

    value: int
    length: int

    def __post_init__(self) -> None:
        if self.value < 0:
            raise ValueError(f"value must be >= 0, got {self.value}")
        if self.length < 1:
            raise ValueError(f"length must be >= 1, got {self.length}")


def find_runs(sequence: Sequence[int]) -> list[Run]:
    """Compress a placement into its maximal equal-value runs. Empty in, empty out."""
    runs: list[Run] = []
    i = 0
    while i < len(sequence):
        value = sequence[i]
        start = i
        while i < len(sequence) and sequence[i] == value:
            i += 1
        runs.append(Run(value=value, length=i - start))
    return runs


def expand_runs(runs: Iterable[Run]) -> list[int]:
    """Rebuild the placement a list of runs describes."""
    sequence: list[int] = []
    for run in runs:
        sequence.extend([run.value] * run.length)
    return sequence


def run_histogram(runs: Iterable[Run]) -> dict[Run, int]:
    """
    Count how often each run shape occurs, in first-seen order.

    For example the runs of [0, 1, 0, 0, 1, 0, 1] give
    {Run(0, 1): 2, Run(1, 1): 3, Run(0, 2): 1}.
    """
    counts: dict[Run, int] = {}
    for run in runs:
        counts[run] = counts.get(run, 0) + 1
    return counts
