"""Tests for the pipeline orchestrator."""

import pytest

from lagoon.engine.config import PipelineConfig
from lagoon.engine.context import LagoonContext
from lagoon.engine.errors import PipelineError
from lagoon.engine.pipeline import Pipeline, dig_lagoon, enclosed_area
from lagoon.engine.registry import Layer, TransformRegistry, TransformSpec
from tests.conftest import CANONICAL_INSTRUCTIONS, rectangle


def test_pipeline_runs_transforms():
    reg = TransformRegistry()
    results = []

    def t1(ctx: LagoonContext) -> None:
        results.append("t1")

    def t2(ctx: LagoonContext) -> None:
        results.append("t2")

    reg.register(TransformSpec(id="T0.01", layer=Layer.PATH, fn=t1))
    reg.register(TransformSpec(id="T0.02", layer=Layer.PATH, fn=t2, dependencies=["T0.01"]))

    pipeline = Pipeline(registry=reg)
    ctx = LagoonContext()
    pipeline.run(ctx)

    assert results == ["t1", "t2"]
    assert "T0.01" in ctx.completed_transforms
    assert "T0.02" in ctx.completed_transforms


def test_pipeline_handles_errors():
    reg = TransformRegistry()

    def fail(ctx: LagoonContext) -> None:
        raise ValueError("test error")

    reg.register(TransformSpec(id="T0.01", layer=Layer.PATH, fn=fail))

    pipeline = Pipeline(registry=reg)
    ctx = LagoonContext()
    pipeline.run(ctx)

    assert "T0.01" in ctx.errors
    assert "test error" in ctx.errors["T0.01"]


def test_pipeline_skips_dependents_of_failed_transform():
    reg = TransformRegistry()
    ran = []

    def fail(ctx: LagoonContext) -> None:
        raise ValueError("boom")

    def downstream(ctx: LagoonContext) -> None:
        ran.append("downstream")

    def independent(ctx: LagoonContext) -> None:
        ran.append("independent")

    reg.register(TransformSpec(id="T0.01", layer=Layer.PATH, fn=fail))
    reg.register(TransformSpec(id="T1.01", layer=Layer.NORMALIZATION, fn=downstream, dependencies=["T0.01"]))
    reg.register(TransformSpec(id="T2.01", layer=Layer.RASTER, fn=downstream, dependencies=["T1.01"]))
    reg.register(TransformSpec(id="T0.02", layer=Layer.PATH, fn=independent))

    ctx = Pipeline(registry=reg).run(LagoonContext())

    assert ran == ["independent"]
    assert ctx.skipped == {"T1.01": "T0.01", "T2.01": "T1.01"}


def test_pipeline_config_is_applied_to_context():
    config = PipelineConfig(require_closed_loop=False)
    ctx = Pipeline(registry=TransformRegistry(), config=config).run(LagoonContext())
    assert ctx.config is config


def test_run_layer_only_runs_that_layer(canonical_ctx):
    pipeline = Pipeline()
    pipeline.run_layer(canonical_ctx, Layer.PATH)
    assert canonical_ctx.completed_transforms == {"T0.01", "T0.02"}
    assert canonical_ctx.cells is None


def test_dig_lagoon_canonical():
    ctx = dig_lagoon(CANONICAL_INSTRUCTIONS)
    assert ctx.ok
    assert ctx.area == 62
    assert not ctx.errors
    assert not ctx.skipped


def test_enclosed_area_rectangle():
    assert enclosed_area(rectangle(5, 4)) == 20


def test_enclosed_area_raises_on_empty_path():
    with pytest.raises(PipelineError) as exc_info:
        enclosed_area([])
    assert "T4.02" in exc_info.value.errors


def test_enclosed_area_raises_on_open_loop():
    with pytest.raises(PipelineError) as exc_info:
        enclosed_area(CANONICAL_INSTRUCTIONS[:-1])
    assert "T0.02" in exc_info.value.errors
    assert exc_info.value.skipped["T3.01"] == "T0.02"


def test_rerun_clears_previous_outcome():
    reg = TransformRegistry()
    attempts = []

    def flaky(ctx: LagoonContext) -> None:
        attempts.append(1)
        if len(attempts) == 1:
            raise ValueError("first attempt fails")

    def downstream(ctx: LagoonContext) -> None:
        pass

    reg.register(TransformSpec(id="T0.01", layer=Layer.PATH, fn=flaky))
    reg.register(TransformSpec(id="T1.01", layer=Layer.NORMALIZATION, fn=downstream, dependencies=["T0.01"]))
    pipeline = Pipeline(registry=reg)

    ctx = pipeline.run(LagoonContext())
    assert "T0.01" in ctx.errors
    assert ctx.skipped == {"T1.01": "T0.01"}

    pipeline.run(ctx)
    assert ctx.errors == {}
    assert ctx.skipped == {}
    assert ctx.completed_transforms == {"T0.01", "T1.01"}
