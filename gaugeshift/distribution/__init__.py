"""
Even-distribution engine: placement, repeat cycles, and run-length runs.
"""

from .cycles import Cycle, cycle_placement, expand_cycle, reduce_cycle
from .placement import distribute, from_pickup_flags, to_pickup_flags
from .runs import Run, expand_runs, find_runs, run_histogram

__all__ = [
    # types
    "Cycle",
    "Run",
    # placement
    "distribute",
    "to_pickup_flags",
    "from_pickup_flags",
    # cycles
    "reduce_cycle",
    "cycle_placement",
    "expand_cycle",
    # runs
    "find_runs",
    "expand_runs",
    "run_histogram",
]
