"""T0.01 — Trench Path Builder.

Walk the dig cursor through the instructions, emitting one segment per
instruction and tracking the running bounding box of the whole path.
Input is assumed valid; the decoder rejects bad directions and lengths.
"""

from __future__ import annotations

import logging

from lagoon.engine.context import DigInstruction, LagoonContext, TrenchSegment
from lagoon.engine.registry import Layer, transform

logger = logging.getLogger(__name__)


def dig_trench(cursor: tuple[int, int], instruction: DigInstruction) -> TrenchSegment:
    """Segment from ``cursor`` to the point ``length`` cells along the dig direction."""
    dx, dy = instruction.direction.offset
    end = (cursor[0] + dx * instruction.length, cursor[1] + dy * instruction.length)
    return TrenchSegment.between(cursor, end, instruction.color)


@transform(
    id="T0.01",
    layer=Layer.PATH,
    description="Dig one trench segment per instruction and track path bounds",
)
def dig_trenches(ctx: LagoonContext) -> None:
    ctx.cursor = ctx.origin
    ctx.segments = []
    # Seed the bounds with the origin so an empty path still spans one cell
    ctx.min_x = ctx.max_x = ctx.origin[0]
    ctx.min_y = ctx.max_y = ctx.origin[1]

    for instruction in ctx.instructions:
        segment = dig_trench(ctx.cursor, instruction)
        ctx.segments.append(segment)
        ctx.cursor = segment.end

        ctx.min_x = min(ctx.min_x, segment.min_x)
        ctx.max_x = max(ctx.max_x, segment.max_x)
        ctx.min_y = min(ctx.min_y, segment.min_y)
        ctx.max_y = max(ctx.max_y, segment.max_y)

    ctx.width = ctx.max_x - ctx.min_x + 1
    ctx.height = ctx.max_y - ctx.min_y + 1
    logger.debug(
        "Dug %d trenches; raw bounds %s, %d×%d",
        len(ctx.segments),
        ctx.bounds,
        ctx.width,
        ctx.height,
    )
