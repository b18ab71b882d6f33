"""T1.02 — Grid Budget.

Fail before allocation when the bounding box is too large to rasterize.
"""

from __future__ import annotations

from lagoon.engine.context import LagoonContext
from lagoon.engine.errors import GridTooLargeError
from lagoon.engine.registry import Layer, transform


@transform(
    id="T1.02",
    layer=Layer.NORMALIZATION,
    dependencies=["T1.01"],
    description="Reject grids larger than the configured cell budget",
)
def grid_budget(ctx: LagoonContext) -> None:
    limit = ctx.config.max_grid_cells
    if ctx.total_cells > limit:
        raise GridTooLargeError(
            f"Grid {ctx.width}×{ctx.height} = {ctx.total_cells} cells exceeds the limit of {limit}"
        )
