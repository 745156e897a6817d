"""
Describer: a placement's runs, its instruction text, and its marker row, in
one value.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Optional

from gaugeshift.config.settings import Settings, get_settings
from gaugeshift.distribution.runs import Run, find_runs
from gaugeshift.writer.templates import render_markers, render_runs


@dataclass(frozen=True)
class RunDescription:
    """Everything needed to show a placement to the knitter."""

    runs: tuple[Run, ...]
    text: str
    markers: tuple[str, ...]

    @property
    def length(self) -> int:
        """Number of slots described."""
        return sum(run.length for run in self.runs)


def describe_runs(sequence: Sequence[int], settings: Optional[Settings] = None) -> RunDescription:
    """
    Describe a placement as runs, instruction text, and per-slot markers.

    Parameters
    ----------
    sequence:
        A placement, typically one repeat from cycle_placement().
    settings:
        Settings supplying the separator and marker glyphs. Defaults to
        get_settings().
    """
    if settings is None:
        settings = get_settings()
    runs = find_runs(sequence)
    return RunDescription(
        runs=tuple(runs),
        text=render_runs(runs, separator=settings.separator),
        markers=tuple(render_markers(sequence, glyphs=settings.markers)),
    )
