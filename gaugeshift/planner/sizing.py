"""
Size selection: which printed size to follow at the knitter's gauge.

Each printed size is converted to what it would actually measure when
knitted at the knitter's gauge; the recommended size is the one whose
actual measurement lands nearest the desired measurement.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from gaugeshift.config.settings import Settings, get_settings
from gaugeshift.conversion.gauge import (
    actual_measurement,
    gauge_ratio,
    target_pattern_measurement,
)
from gaugeshift.errors import MissingInputError
from gaugeshift.utilities.rounding import round_half_up, round_half_up_to

logger = logging.getLogger(__name__)


class GaugeComparison(str, Enum):
    """How the knitter's gauge compares to the pattern's."""

    TIGHTER = "tighter"
    LOOSER = "looser"
    MATCHES = "matches"


class MatchQuality(str, Enum):
    """How the recommended size's actual measurement compares to the target."""

    CLOSE = "close"
    LARGER = "larger"
    SMALLER = "smaller"


@dataclass(frozen=True)
class PatternSize:
    """A size as printed in the pattern, e.g. PatternSize("M", 96.0)."""

    name: str
    measurement_cm: float

    @property
    def is_complete(self) -> bool:
        return bool(self.name.strip()) and self.measurement_cm > 0


@dataclass(frozen=True)
class SizeMatch:
    """A printed size and its distance from a target pattern measurement."""

    size: PatternSize
    difference: float


@dataclass(frozen=True)
class SizeAnalysis:
    """
    One printed size evaluated at the knitter's gauge.

    ``actual_measurement`` and ``difference_from_desired`` are rounded to
    display precision; a positive difference means the piece comes out larger
    than desired.
    """

    name: str
    pattern_measurement: float
    actual_measurement: float
    difference_from_desired: float


@dataclass(frozen=True)
class SizeRecommendation:
    """Outcome of analyze_sizes()."""

    desired_measurement: float
    target_pattern_measurement: float
    gauge_ratio: float
    comparison: GaugeComparison
    best_match: SizeAnalysis
    match_quality: MatchQuality
    all_sizes: tuple[SizeAnalysis, ...]

    @property
    def gauge_difference_percent(self) -> int:
        """Whole-number percentage by which the gauges differ (always >= 0)."""
        return round_half_up(abs(self.gauge_ratio - 1) * 100)


def compare_gauges(ratio: float, settings: Optional[Settings] = None) -> GaugeComparison:
    if settings is None:
        settings = get_settings()
    if ratio > settings.tighter_above:
        return GaugeComparison.TIGHTER
    if ratio < settings.looser_below:
        return GaugeComparison.LOOSER
    return GaugeComparison.MATCHES


def classify_match(difference: float, settings: Optional[Settings] = None) -> MatchQuality:
    if settings is None:
        settings = get_settings()
    if abs(difference) <= settings.close_within_cm:
        return MatchQuality.CLOSE
    return MatchQuality.LARGER if difference > 0 else MatchQuality.SMALLER


def find_closest_size(target: float, sizes: Sequence[PatternSize]) -> Optional[SizeMatch]:
    """
    The printed size whose measurement is nearest ``target``.

    Sizes without a measurement are ignored. On a tie the earlier size wins.
    Returns None if ``target`` is not positive or no size has a measurement.
    """
    if not target or target <= 0:
        return None
    closest: Optional[SizeMatch] = None
    for size in sizes:
        if not size.measurement_cm:
            continue
        diff = abs(size.measurement_cm - target)
        if closest is None or diff < closest.difference:
            closest = SizeMatch(size=size, difference=diff)
    return closest


def analyze_sizes(
    personal_gauge: float,
    pattern_gauge: float,
    desired_measurement: float,
    sizes: Sequence[PatternSize],
    settings: Optional[Settings] = None,
) -> SizeRecommendation:
    """
    Evaluate every printed size at the knitter's gauge and recommend one.

    Args:
        personal_gauge: The knitter's stitches per 10cm.
        pattern_gauge: The pattern's stitches per 10cm.
        desired_measurement: Finished measurement wanted, in cm.
        sizes: Printed sizes; incomplete entries (no name or no measurement)
            are skipped.
        settings: Display precision and comparison thresholds.

    Returns:
        A SizeRecommendation. The best match is the first size with the
        smallest absolute (rounded) difference from the desired measurement.

    Raises:
        MissingInputError: If a gauge or the desired measurement is missing,
            or no size is complete.
    """
    if settings is None:
        settings = get_settings()
    if not (personal_gauge and pattern_gauge and desired_measurement) or min(
        personal_gauge, pattern_gauge, desired_measurement
    ) <= 0:
        raise MissingInputError(
            "Please fill in your gauge, pattern gauge, and desired measurement."
        )
    complete = [size for size in sizes if size.is_complete]
    if not complete:
        raise MissingInputError("Please add at least one pattern size with a name and measurement.")

    decimals = settings.measurement_decimals
    analyzed: list[SizeAnalysis] = []
    for size in complete:
        actual = actual_measurement(personal_gauge, pattern_gauge, size.measurement_cm)
        analyzed.append(
            SizeAnalysis(
                name=size.name.strip(),
                pattern_measurement=size.measurement_cm,
                actual_measurement=round_half_up_to(actual, decimals),
                difference_from_desired=round_half_up_to(actual - desired_measurement, decimals),
            )
        )

    best = analyzed[0]
    for candidate in analyzed[1:]:
        if abs(candidate.difference_from_desired) < abs(best.difference_from_desired):
            best = candidate

    ratio = round_half_up_to(gauge_ratio(personal_gauge, pattern_gauge), settings.ratio_decimals)
    target = target_pattern_measurement(personal_gauge, pattern_gauge, desired_measurement)
    logger.debug(
        "recommending size %s for %s cm (gauge ratio %s, %d sizes)",
        best.name,
        desired_measurement,
        ratio,
        len(analyzed),
    )
    return SizeRecommendation(
        desired_measurement=desired_measurement,
        target_pattern_measurement=round_half_up_to(target, decimals),
        gauge_ratio=ratio,
        comparison=compare_gauges(ratio, settings),
        best_match=best,
        match_quality=classify_match(best.difference_from_desired, settings),
        all_sizes=tuple(analyzed),
    )
