"""T3.01 — Interior Flood Fill.

Breadth-first fill from the grid center (or the configured seed), turning
every background cell reachable without crossing a trench into interior.

Precondition: the trench forms one simple closed loop around the seed.
T0.02 checks closure; T4.01 catches a seed that landed outside the loop.
"""

from __future__ import annotations

import logging

from lagoon.engine.context import CellState, LagoonContext
from lagoon.engine.registry import Layer, transform
from lagoon.utils.flood_fill import center_seed, flood_fill as fill_from_seed

logger = logging.getLogger(__name__)


@transform(
    id="T3.01",
    layer=Layer.FILL,
    dependencies=["T2.01", "T0.02"],
    description="Flood-fill the lagoon interior from the seed cell",
)
def flood_fill(ctx: LagoonContext) -> None:
    if ctx.cells is None:
        raise ValueError("Grid has not been rasterized")

    seed = ctx.config.seed or center_seed(ctx.width, ctx.height)
    ctx.seed = seed
    sx, sy = seed
    ctx.seed_on_trench = bool(
        0 <= sx < ctx.width and 0 <= sy < ctx.height and ctx.cells[sy, sx] == CellState.BOUNDARY
    )
    if ctx.seed_on_trench:
        logger.warning("Fill seed %s sits on a trench; no interior will be filled", seed)

    ctx.interior_cells = fill_from_seed(ctx.cells, seed)
    logger.debug("Filled %d interior cells from seed %s", ctx.interior_cells, seed)
