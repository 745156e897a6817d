"""
Border planning: pick up a border knitted at its own gauge along the main fabric.

The edge's physical length is measured at the main fabric's gauge, then
filled with as many border stitches as fit. Along a row edge the border
stitches are also spread across the main fabric's rows.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from gaugeshift.config.settings import Settings, get_settings
from gaugeshift.conversion.gauge import EdgeKind, border_stitch_count, edge_length_cm
from gaugeshift.planner.pickup import OVERFLOW_MESSAGE, EdgePlan, plan_edge
from gaugeshift.utilities.ratios import simplify_ratio
from gaugeshift.utilities.types import Gauge, GaugeRatio

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BorderPlan:
    """
    Attributes:
        edge: Which kind of main-fabric edge the border is picked up along.
        main_count: Stitches (STITCH edge) or rows (ROW edge) along the edge.
        length_cm: Physical length of the edge.
        border_stitches: Border stitches to pick up.
        ratio: main_count : border_stitches in lowest terms.
        pickup: Row-by-row plan for ROW edges; None for STITCH edges or when
            the border needs at least one stitch per row and overflow is off.
        note: Why a ROW edge has no row-by-row plan, or None.
    """

    edge: EdgeKind
    main_count: int
    length_cm: float
    border_stitches: int
    ratio: GaugeRatio
    pickup: Optional[EdgePlan]
    note: Optional[str] = None

    @property
    def summary(self) -> str:
        unit = "stitches" if self.edge is EdgeKind.STITCH else "rows"
        return (
            f"Pick up {self.border_stitches} border stitches along {self.main_count} {unit} "
            f"({self.ratio.b} for every {self.ratio.a} {unit})"
        )


def plan_border(
    main_count: int,
    main_gauge: Gauge,
    border_gauge: Gauge,
    edge: EdgeKind,
    *,
    allow_overflow: Optional[bool] = None,
    settings: Optional[Settings] = None,
) -> BorderPlan:
    """
    Compute the border pick-up for an edge of the main fabric.

    Along a ROW edge the border stitches are spread across the main rows
    when there are fewer of them than rows, or when overflow is allowed.
    Otherwise the plan carries the reason in ``note`` instead of a pickup.

    Raises:
        MissingInputError: If main_count is not positive.
    """
    if settings is None:
        settings = get_settings()
    if allow_overflow is None:
        allow_overflow = settings.allow_overflow

    length = edge_length_cm(main_count, main_gauge, edge)
    border_stitches = border_stitch_count(main_count, main_gauge, border_gauge, edge)
    ratio = simplify_ratio(main_count, border_stitches)

    pickup: Optional[EdgePlan] = None
    note: Optional[str] = None
    if edge is EdgeKind.ROW and border_stitches >= 1:
        if border_stitches < main_count or allow_overflow:
            pickup = plan_edge(
                border_stitches,
                main_count,
                allow_overflow=allow_overflow,
                settings=settings,
            )
        else:
            note = OVERFLOW_MESSAGE
            logger.info("no row plan for %d border stitches over %d rows", border_stitches, main_count)
    logger.debug(
        "%s edge of %d: %.1f cm, %d border stitches", edge.value, main_count, length, border_stitches
    )
    return BorderPlan(
        edge=edge,
        main_count=main_count,
        length_cm=length,
        border_stitches=border_stitches,
        ratio=ratio,
        pickup=pickup,
        note=note,
    )
