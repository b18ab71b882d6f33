"""Pipeline orchestrator — runs transforms in dependency order, gating on failed dependencies."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable

from lagoon.engine.config import PipelineConfig
from lagoon.engine.context import DigInstruction, LagoonContext
from lagoon.engine.errors import PipelineError
from lagoon.engine.registry import Layer, TransformRegistry, TransformSpec, load_transforms

logger = logging.getLogger(__name__)


class Pipeline:
    """Orchestrates the transform pipeline."""

    def __init__(
        self,
        registry: TransformRegistry | None = None,
        config: PipelineConfig | None = None,
    ) -> None:
        self.registry = registry or load_transforms()
        self.config = config

    def run(self, ctx: LagoonContext) -> LagoonContext:
        """Run the full pipeline on the given context."""
        start = time.perf_counter()
        if self.config is not None:
            ctx.config = self.config
        # A reused context must not be gated by an earlier run's outcome
        ctx.completed_transforms.clear()
        ctx.errors.clear()
        ctx.skipped.clear()

        ordered = self.registry.resolve_order()
        logger.info(
            "Pipeline: %d transforms queued for %d instructions",
            len(ordered),
            len(ctx.instructions),
        )

        for spec in ordered:
            self._run_spec(ctx, spec)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d/%d transforms in %.0fms (area=%s)",
            len(ctx.completed_transforms),
            len(ordered),
            total,
            ctx.area,
        )
        return ctx

    def run_layer(self, ctx: LagoonContext, layer: Layer) -> LagoonContext:
        """Run only transforms in a specific layer."""
        if self.config is not None:
            ctx.config = self.config
        for spec in self.registry.get_layer(layer):
            self._run_spec(ctx, spec)
        return ctx

    def _run_spec(self, ctx: LagoonContext, spec: TransformSpec) -> None:
        blocker = self._blocked_by(ctx, spec)
        if blocker is not None:
            ctx.skipped[spec.id] = blocker
            logger.debug("  %s skipped: dependency %s did not complete", spec.id, blocker)
            return

        t0 = time.perf_counter()
        try:
            spec.fn(ctx)
            ctx.completed_transforms.add(spec.id)
            elapsed = (time.perf_counter() - t0) * 1000
            logger.debug("  %s completed in %.1fms", spec.id, elapsed)
        except Exception as e:
            ctx.errors[spec.id] = str(e)
            logger.warning("  %s FAILED: %s", spec.id, e)

    @staticmethod
    def _blocked_by(ctx: LagoonContext, spec: TransformSpec) -> str | None:
        """First dependency that failed or was skipped, if any."""
        for dep in spec.dependencies:
            if dep in ctx.errors or dep in ctx.skipped:
                return dep
        return None


def create_pipeline(config: PipelineConfig | None = None) -> Pipeline:
    """Factory function for creating a pipeline instance."""
    return Pipeline(config=config)


def dig_lagoon(
    instructions: Iterable[DigInstruction],
    config: PipelineConfig | None = None,
) -> LagoonContext:
    """Run every stage over ``instructions`` and return the populated context.

    Failures are recorded on the context, never raised.
    """
    ctx = LagoonContext(instructions=list(instructions))
    return create_pipeline(config).run(ctx)


def enclosed_area(
    instructions: Iterable[DigInstruction],
    config: PipelineConfig | None = None,
) -> int:
    """Total enclosed cell count (boundary + interior).

    Raises:
        PipelineError: when any stage failed or no area was measured.
    """
    ctx = dig_lagoon(instructions, config)
    if not ctx.ok:
        raise PipelineError(ctx.errors, ctx.skipped)
    return ctx.area
