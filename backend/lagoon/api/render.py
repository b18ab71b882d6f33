"""POST /api/render — classified grid as a PNG image."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import Response

from lagoon.config import Settings
from lagoon.dependencies import get_settings
from lagoon.engine.pipeline import dig_lagoon
from lagoon.models.requests import RenderRequest
from lagoon.utils.export import grid_to_png

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/render")
async def render(req: RenderRequest, settings: Settings = Depends(get_settings)) -> Response:
    config = req.pipeline_config(settings.pipeline_config())
    # The fill is CPU-bound; keep it off the event loop
    ctx = await run_in_threadpool(dig_lagoon, req.to_instructions(), config)

    # The fill must have run for the image to mean anything
    if "T3.01" not in ctx.completed_transforms:
        logger.warning("Render refused: %s", ctx.errors)
        raise HTTPException(status_code=422, detail={"errors": ctx.errors, "skipped": ctx.skipped})

    png = await run_in_threadpool(
        grid_to_png,
        ctx.cells,
        ctx.cell_colors,
        fill_color=settings.fill_rgb,
        background_color=settings.background_rgb,
        scale=req.scale,
    )
    headers = {"X-Lagoon-Area": str(ctx.area)} if ctx.area is not None else {}
    return Response(content=png, media_type="image/png", headers=headers)
