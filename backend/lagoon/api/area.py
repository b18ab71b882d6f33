"""POST /api/area — full pipeline, enclosed area."""

from __future__ import annotations

import time

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool

from lagoon.config import Settings
from lagoon.dependencies import get_settings
from lagoon.engine.pipeline import dig_lagoon
from lagoon.models.requests import AreaRequest
from lagoon.models.responses import AreaResponse
from lagoon.utils.rasterizer import grid_to_text

router = APIRouter()


@router.post("/area", response_model=AreaResponse)
async def area(req: AreaRequest, settings: Settings = Depends(get_settings)) -> AreaResponse:
    start = time.perf_counter()
    config = req.pipeline_config(settings.pipeline_config())
    # The fill is CPU-bound; keep it off the event loop
    ctx = await run_in_threadpool(dig_lagoon, req.to_instructions(), config)
    elapsed = (time.perf_counter() - start) * 1000

    ascii_grid = None
    if req.include_grid and ctx.cells is not None:
        ascii_grid = await run_in_threadpool(grid_to_text, ctx.cells)

    return AreaResponse(
        area=ctx.area,
        width=ctx.width,
        height=ctx.height,
        boundary_cells=ctx.boundary_cells,
        interior_cells=ctx.interior_cells,
        segments=ctx.num_segments,
        loop_closed=ctx.loop_closed,
        fill_leaked=ctx.fill_leaked,
        seed_on_trench=ctx.seed_on_trench,
        seed=ctx.seed,
        processing_time_ms=round(elapsed, 2),
        transforms_completed=len(ctx.completed_transforms),
        transforms_failed=len(ctx.errors),
        errors=ctx.errors,
        skipped=ctx.skipped,
        ascii_grid=ascii_grid,
    )
