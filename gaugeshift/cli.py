"""
Command-line front end.

    gaugeshift size   --personal 22 --pattern 20 --desired 100 --size S=90 --size M=100
    gaugeshift pickup --personal 24x32 --pattern 20x28 --stitches 18 --rows 20 --total-rows 120
    gaugeshift border --main 20x28 --border 24x32 --count 120 --edge row

Input presence and positivity are checked by argparse before any
calculation. GaugeShiftError messages and problems loading a --config file
are printed to stderr and the command exits with status 2.
"""

from __future__ import annotations

import argparse
import logging
import math
import os
import sys
from collections.abc import Sequence
from typing import Optional

from gaugeshift.config.settings import Settings, get_settings, load_settings
from gaugeshift.conversion.gauge import EdgeKind
from gaugeshift.errors import GaugeShiftError
from gaugeshift.planner.border import BorderPlan, plan_border
from gaugeshift.planner.pickup import EdgePlan, PickupPlan, plan_pickup
from gaugeshift.planner.sizing import (
    GaugeComparison,
    MatchQuality,
    PatternSize,
    SizeRecommendation,
    analyze_sizes,
)
from gaugeshift.utilities.types import Gauge

logger = logging.getLogger(__name__)

_LOG_FORMAT = "[%(levelname)s][%(name)s] %(message)s"


# ── Argument types ─────────────────────────────────────────────────────────────


def _positive_float(text: str) -> float:
    try:
        value = float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{text!r} is not a number") from None
    if not math.isfinite(value):
        raise argparse.ArgumentTypeError(f"{text!r} is not a number")
    if value <= 0:
        raise argparse.ArgumentTypeError(f"{text!r} must be greater than zero")
    return value


def _positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{text!r} is not a whole number") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"{text!r} must be greater than zero")
    return value


def _gauge(text: str) -> Gauge:
    """Parse "STITCHESxROWS" per 10cm, e.g. "22x30"."""
    parts = text.lower().split("x")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"{text!r} is not a gauge; use STITCHESxROWS, e.g. 22x30")
    return Gauge(stitches_per_10cm=_positive_float(parts[0]), rows_per_10cm=_positive_float(parts[1]))


def _size(text: str) -> PatternSize:
    """Parse "NAME=MEASUREMENT", e.g. "M=96"."""
    name, sep, measurement = text.partition("=")
    if not sep or not name.strip():
        raise argparse.ArgumentTypeError(f"{text!r} is not a size; use NAME=MEASUREMENT, e.g. M=96")
    return PatternSize(name=name.strip(), measurement_cm=_positive_float(measurement))


# ── Report formatting ──────────────────────────────────────────────────────────


def _num(value: float, decimals: int = 1) -> str:
    """Format to ``decimals`` places, dropping trailing zeros ("96.50" → "96.5", "100.0" → "100")."""
    text = f"{value:.{decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return "0" if text == "-0" else text


def format_size_report(rec: SizeRecommendation, decimals: int = 1) -> str:
    best = rec.best_match

    def num(value: float) -> str:
        return _num(value, decimals)

    if rec.comparison is GaugeComparison.TIGHTER:
        gauge_line = (
            f"Your gauge is tighter than the pattern "
            f"({rec.gauge_difference_percent}% more stitches per 10cm)."
        )
    elif rec.comparison is GaugeComparison.LOOSER:
        gauge_line = (
            f"Your gauge is looser than the pattern "
            f"({rec.gauge_difference_percent}% fewer stitches per 10cm)."
        )
    else:
        gauge_line = "Your gauge matches the pattern gauge closely."

    actual = f"This will give you approximately {num(best.actual_measurement)}cm"
    gap = num(abs(best.difference_from_desired))
    if rec.match_quality is MatchQuality.CLOSE:
        match_line = f"{actual}, which is very close to your target!"
    elif rec.match_quality is MatchQuality.LARGER:
        match_line = f"{actual}, which is {gap}cm larger than your target."
    else:
        match_line = f"{actual}, which is {gap}cm smaller than your target."

    lines = [
        f"Knit size {best.name}",
        "",
        gauge_line,
        f"To achieve your desired {num(rec.desired_measurement)}cm measurement, you should "
        f"follow size {best.name} ({num(best.pattern_measurement)}cm in the pattern).",
        match_line,
        "",
        "All sizes with your gauge:",
    ]
    for size in rec.all_sizes:
        mark = " ✓" if size is best else ""
        diff = size.difference_from_desired
        diff_text = f"+{num(diff)}cm" if diff > 0 else f"{num(diff)}cm"
        lines.append(
            f"  {size.name}{mark}: {num(size.pattern_measurement)}cm → "
            f"{num(size.actual_measurement)}cm ({diff_text})"
        )
    return "\n".join(lines)


def format_edge_plan(plan: EdgePlan) -> str:
    repeat = plan.repeat
    return "\n".join(
        [
            plan.summary,
            "",
            "Pattern to repeat:",
            f"  {repeat.text}",
            f"  {plan.repeat_note}",
            "",
            f"One repeat ({plan.cycle.cycle_slots} rows):",
            f"  {' '.join(repeat.markers)}",
        ]
    )


def format_pickup_report(plan: PickupPlan) -> str:
    return "\n".join(
        [
            format_edge_plan(plan.edge),
            "",
            f"(Pattern says {plan.pattern_stitches} per {plan.pattern_rows} rows "
            f"→ adjusted for your gauge)",
        ]
    )


def format_border_report(plan: BorderPlan) -> str:
    lines = [plan.summary, f"Edge length: {plan.length_cm:.1f}cm"]
    if plan.pickup is not None:
        lines += ["", format_edge_plan(plan.pickup)]
    elif plan.note:
        lines += ["", plan.note]
    return "\n".join(lines)


# ── Commands ───────────────────────────────────────────────────────────────────


def _run_size(args: argparse.Namespace, settings: Settings) -> str:
    rec = analyze_sizes(args.personal, args.pattern, args.desired, args.size, settings=settings)
    return format_size_report(rec, decimals=settings.measurement_decimals)


def _run_pickup(args: argparse.Namespace, settings: Settings) -> str:
    plan = plan_pickup(
        args.stitches,
        args.rows,
        args.total_rows,
        args.personal,
        args.pattern,
        allow_overflow=args.allow_overflow,
        settings=settings,
    )
    return format_pickup_report(plan)


def _run_border(args: argparse.Namespace, settings: Settings) -> str:
    plan = plan_border(
        args.count,
        args.main,
        args.border,
        EdgeKind(args.edge),
        allow_overflow=args.allow_overflow,
        settings=settings,
    )
    return format_border_report(plan)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gaugeshift",
        description="Adapt a knitting pattern to your own gauge.",
    )
    parser.add_argument("--config", help="YAML settings file to use instead of the defaults")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output")
    sub = parser.add_subparsers(dest="command", required=True)

    size = sub.add_parser("size", help="choose which printed size to follow")
    size.add_argument("--personal", type=_positive_float, required=True,
                      help="your stitches per 10cm")
    size.add_argument("--pattern", type=_positive_float, required=True,
                      help="the pattern's stitches per 10cm")
    size.add_argument("--desired", type=_positive_float, required=True,
                      help="finished measurement you want, in cm")
    size.add_argument("--size", type=_size, action="append", required=True,
                      help="a printed size as NAME=CM; repeat for each size")
    size.set_defaults(handler=_run_size)

    pickup = sub.add_parser("pickup", help="convert a pick-up instruction to your gauge")
    pickup.add_argument("--personal", type=_gauge, required=True,
                        help="your gauge as STITCHESxROWS per 10cm")
    pickup.add_argument("--pattern", type=_gauge, required=True,
                        help="the pattern's gauge as STITCHESxROWS per 10cm")
    pickup.add_argument("--stitches", type=_positive_int, required=True,
                        help="stitches the pattern picks up")
    pickup.add_argument("--rows", type=_positive_int, required=True,
                        help="rows the pattern picks them up over")
    pickup.add_argument("--total-rows", type=_positive_int, required=True,
                        help="rows along your edge")
    pickup.add_argument("--allow-overflow", action="store_true", default=None,
                        help="allow more than one stitch per row")
    pickup.set_defaults(handler=_run_pickup)

    border = sub.add_parser("border", help="pick up a border knitted at a different gauge")
    border.add_argument("--main", type=_gauge, required=True,
                        help="main fabric gauge as STITCHESxROWS per 10cm")
    border.add_argument("--border", type=_gauge, required=True,
                        help="border fabric gauge as STITCHESxROWS per 10cm")
    border.add_argument("--count", type=_positive_int, required=True,
                        help="stitches or rows along the main fabric edge")
    border.add_argument("--edge", choices=[e.value for e in EdgeKind], required=True,
                        help="stitch edge (cast-on/bind-off) or row edge (side)")
    border.add_argument("--allow-overflow", action="store_true", default=None,
                        help="allow more than one stitch per row")
    border.set_defaults(handler=_run_border)
    return parser


def _configure_logging(verbose: bool) -> None:
    level_name = os.getenv("GAUGESHIFT_LOG_LEVEL", "DEBUG" if verbose else "WARNING").upper()
    level = getattr(logging, level_name, logging.WARNING)
    logging.basicConfig(level=level, format=_LOG_FORMAT)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        settings = load_settings(args.config) if args.config else get_settings()
    except (FileNotFoundError, ValueError) as exc:
        logger.debug("could not load settings: %s", exc)
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        output = args.handler(args, settings)
    except GaugeShiftError as exc:
        logger.debug("command %s failed: %s", args.command, exc.detail)
        print(f"error: {exc.detail}", file=sys.stderr)
        return 2
    print(output)
    return 0
