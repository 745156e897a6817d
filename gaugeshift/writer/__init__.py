from .templates import (
    pluralize,
    render_markers,
    render_repeat_note,
    render_run_fragment,
    render_runs,
    render_single_run,
)
from .writer import RunDescription, describe_runs

__all__ = [
    "RunDescription",
    "describe_runs",
    "pluralize",
    "render_markers",
    "render_repeat_note",
    "render_run_fragment",
    "render_runs",
    "render_single_run",
]
