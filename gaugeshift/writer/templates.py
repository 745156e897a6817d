"""
Instruction prose templates.

render_runs turns the runs of one repeat into the sentence a knitter reads
("skip 1 → pick up 1 → skip 2 → pick up 1"). render_markers draws the same
placement one glyph per row.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from gaugeshift.config.settings import MarkerGlyphs, get_settings
from gaugeshift.distribution.runs import Run


def pluralize(word: str, count: int) -> str:
    """Append "s" to ``word`` unless ``count`` is exactly 1."""
    return word if count == 1 else f"{word}s"


def render_single_run(run: Run) -> str:
    """Sentence for a placement made of one run only."""
    rows = f"{run.length} {pluralize('row', run.length)}"
    if run.value == 0:
        return f"Skip {rows}"
    return f"Pick up {run.value} from each of {rows}"


def render_run_fragment(run: Run) -> str:
    """Fragment for one run inside a multi-run instruction."""
    if run.value == 0:
        return f"skip {run.length}"
    if run.length == 1:
        return f"pick up {run.value}"
    return f"pick up {run.value} × {run.length} {pluralize('row', run.length)}"


def render_runs(runs: Sequence[Run], separator: Optional[str] = None) -> str:
    """
    Render runs as a pick-up instruction.

    Parameters
    ----------
    runs:
        Runs from find_runs(); an empty list renders as an empty string.
    separator:
        Joins multi-run fragments. Defaults to the configured separator.
    """
    if not runs:
        return ""
    if len(runs) == 1:
        return render_single_run(runs[0])
    if separator is None:
        separator = get_settings().separator
    return separator.join(render_run_fragment(run) for run in runs)


def render_repeat_note(repeats: int) -> str:
    """How many times to work one cycle, e.g. "Repeat this 2 times"."""
    return f"Repeat this {repeats} {pluralize('time', repeats)}"


def render_markers(sequence: Sequence[int], glyphs: Optional[MarkerGlyphs] = None) -> list[str]:
    """One marker per slot: empty dot for a skip, filled dot for a pick-up, annotated for 2+."""
    if glyphs is None:
        glyphs = get_settings().markers
    return [glyphs.for_count(count) for count in sequence]
