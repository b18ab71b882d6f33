"""Tests for Layer 3 transforms — interior flood fill."""

import pytest

import lagoon.engine.layer3.t3_01_flood_fill

from lagoon.engine.config import PipelineConfig
from lagoon.engine.context import CellState, LagoonContext
from lagoon.engine.pipeline import Pipeline
from lagoon.engine.registry import Layer, get_registry
from lagoon.utils.flood_fill import unsealed_cells
from lagoon.utils.rasterizer import count_cells, grid_to_text
from tests.conftest import CANONICAL_INSTRUCTIONS, rectangle


def _fill(ctx: LagoonContext) -> LagoonContext:
    pipeline = Pipeline()
    for layer in (Layer.PATH, Layer.NORMALIZATION, Layer.RASTER, Layer.FILL):
        pipeline.run_layer(ctx, layer)
    return ctx


def test_layer3_registers_1_transform():
    reg = get_registry()
    layer3 = reg.get_layer(Layer.FILL)
    assert [s.id for s in layer3] == ["T3.01"]


def test_canonical_fill_from_center(canonical_ctx):
    ctx = _fill(canonical_ctx)

    assert ctx.seed == (3, 5)
    assert ctx.interior_cells == 24
    assert ctx.seed_on_trench is False
    assert grid_to_text(ctx.cells).splitlines()[5] == "###~###"


def test_fill_leaves_no_unsealed_interior(canonical_ctx):
    ctx = _fill(canonical_ctx)
    assert unsealed_cells(ctx.cells) == []


def test_fill_does_not_touch_boundary(canonical_ctx):
    ctx = _fill(canonical_ctx)
    assert count_cells(ctx.cells, CellState.BOUNDARY) == 38


def test_fill_skipped_when_loop_open():
    ctx = _fill(LagoonContext(instructions=CANONICAL_INSTRUCTIONS[:-1]))
    assert "T0.02" in ctx.errors
    assert ctx.skipped["T3.01"] == "T0.02"
    assert count_cells(ctx.cells, CellState.INTERIOR) == 0


def test_seed_on_trench_fills_nothing():
    ctx = LagoonContext(instructions=rectangle(2, 2))
    ctx = _fill(ctx)
    assert ctx.seed == (1, 1)
    assert ctx.interior_cells == 0
    assert ctx.seed_on_trench is True


def test_configured_seed_is_used(canonical_ctx):
    canonical_ctx.config = PipelineConfig(seed=(1, 1))
    ctx = _fill(canonical_ctx)
    assert ctx.seed == (1, 1)
    assert ctx.interior_cells == 24


def test_seed_outside_grid_fails(canonical_ctx):
    canonical_ctx.config = PipelineConfig(seed=(40, 40))
    ctx = _fill(canonical_ctx)
    assert "T3.01" in ctx.errors
    assert "outside" in ctx.errors["T3.01"]


@pytest.mark.parametrize("width, height", [(3, 3), (10, 4), (2, 7)])
def test_fill_rectangle_interior(width, height):
    ctx = _fill(LagoonContext(instructions=rectangle(width, height)))
    assert ctx.interior_cells == (width - 2) * (height - 2)


def test_seed_on_trench_of_enclosing_loop_is_recorded(canonical_ctx):
    canonical_ctx.config = PipelineConfig(seed=(0, 0))
    ctx = _fill(canonical_ctx)
    assert ctx.seed_on_trench is True
    assert ctx.interior_cells == 0
    assert "T3.01" not in ctx.errors
