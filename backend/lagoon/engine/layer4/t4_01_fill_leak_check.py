"""T4.01 — Fill Leak Check.

Every grid-edge cell that is not trench lies outside the loop, so a fill
started inside the loop can never reach the edge. If it did, the seed was
outside the loop or the loop has a gap.
"""

from __future__ import annotations

from lagoon.engine.context import LagoonContext
from lagoon.engine.errors import FillLeakError
from lagoon.engine.registry import Layer, transform
from lagoon.utils.flood_fill import interior_touches_border


@transform(
    id="T4.01",
    layer=Layer.MEASURE,
    dependencies=["T3.01"],
    description="Detect fills that escaped the trench loop",
)
def fill_leak_check(ctx: LagoonContext) -> None:
    # No trench to leak through; T4.02 reports the empty path
    if not ctx.segments:
        return
    ctx.fill_leaked = interior_touches_border(ctx.cells)
    if ctx.fill_leaked and ctx.config.check_fill_leak:
        raise FillLeakError(
            f"Fill from seed {ctx.seed} reached the grid edge; "
            "the seed is outside the loop or the loop is not sealed"
        )
