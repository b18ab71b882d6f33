"""T2.01 — Trench Rasterization.

Allocate the width×height grid and paint every cell that lies on a trench
segment as boundary, carrying the segment's color.
"""

from __future__ import annotations

from lagoon.engine.context import CellState, LagoonContext
from lagoon.engine.registry import Layer, transform
from lagoon.utils.rasterizer import count_cells, rasterize_segments


@transform(
    id="T2.01",
    layer=Layer.RASTER,
    dependencies=["T1.02"],
    description="Paint trench segments onto the cell grid",
)
def trench_raster(ctx: LagoonContext) -> None:
    ctx.cells, ctx.cell_colors = rasterize_segments(ctx.segments, ctx.width, ctx.height)
    ctx.boundary_cells = count_cells(ctx.cells, CellState.BOUNDARY)
    ctx.interior_cells = 0
