"""T1.01 — Origin Normalization.

Translate every coordinate by (-min_x, -min_y) so the bounding box's minimum
corner is (0, 0) and cells can be addressed by array index. Segments, the
four bound fields, origin and cursor all move together.
"""

from __future__ import annotations

import logging

from lagoon.engine.context import LagoonContext
from lagoon.engine.registry import Layer, transform

logger = logging.getLogger(__name__)


@transform(
    id="T1.01",
    layer=Layer.NORMALIZATION,
    dependencies=["T0.01"],
    description="Shift the path so the bounding box starts at the origin",
)
def origin_normalize(ctx: LagoonContext) -> None:
    dx, dy = -ctx.min_x, -ctx.min_y

    for segment in ctx.segments:
        segment.shift(dx, dy)

    ctx.min_x += dx
    ctx.max_x += dx
    ctx.min_y += dy
    ctx.max_y += dy
    ctx.origin = (ctx.origin[0] + dx, ctx.origin[1] + dy)
    ctx.cursor = (ctx.cursor[0] + dx, ctx.cursor[1] + dy)
    ctx.shift = (ctx.shift[0] + dx, ctx.shift[1] + dy)

    ctx.width = ctx.max_x - ctx.min_x + 1
    ctx.height = ctx.max_y - ctx.min_y + 1
    logger.debug("Normalized by (%d, %d); grid %d×%d", dx, dy, ctx.width, ctx.height)
