"""T0.02 — Loop Closure.

The fill seeds from the grid center and trusts the boundary to enclose it.
Check that the path actually returns to where digging started.
"""

from __future__ import annotations

import logging

from lagoon.engine.context import LagoonContext
from lagoon.engine.errors import OpenLoopError
from lagoon.engine.registry import Layer, transform

logger = logging.getLogger(__name__)


@transform(
    id="T0.02",
    layer=Layer.PATH,
    dependencies=["T0.01"],
    description="Verify the trench path returns to its origin",
)
def loop_closure(ctx: LagoonContext) -> None:
    ctx.loop_closed = ctx.cursor == ctx.origin
    if ctx.loop_closed:
        return

    message = f"Trench path ends at {ctx.cursor}, not at its origin {ctx.origin}"
    if ctx.config.require_closed_loop:
        raise OpenLoopError(message)
    logger.warning("%s; fill results may leak", message)
