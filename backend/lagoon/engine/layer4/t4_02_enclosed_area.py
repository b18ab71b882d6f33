"""T4.02 — Enclosed Area.

Area = trench cells + interior cells, i.e. everything not outside the loop.
"""

from __future__ import annotations

import logging

from lagoon.engine.context import CellState, LagoonContext
from lagoon.engine.errors import DegeneratePathError
from lagoon.engine.registry import Layer, transform
from lagoon.utils.rasterizer import count_cells

logger = logging.getLogger(__name__)


@transform(
    id="T4.02",
    layer=Layer.MEASURE,
    dependencies=["T4.01"],
    description="Count boundary and interior cells as the enclosed area",
)
def enclosed_area(ctx: LagoonContext) -> None:
    if not ctx.segments:
        raise DegeneratePathError("No trench segments were dug; nothing encloses an area")

    ctx.boundary_cells = count_cells(ctx.cells, CellState.BOUNDARY)
    ctx.interior_cells = count_cells(ctx.cells, CellState.INTERIOR)
    ctx.area = ctx.boundary_cells + ctx.interior_cells
    logger.info(
        "Lagoon area %d (%d trench + %d interior) on a %d×%d grid",
        ctx.area,
        ctx.boundary_cells,
        ctx.interior_cells,
        ctx.width,
        ctx.height,
    )
