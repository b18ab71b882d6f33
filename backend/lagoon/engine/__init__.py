"""Lavaduct lagoon trench-and-fill engine."""

from lagoon.engine.registry import transform, Layer, get_registry, load_transforms
from lagoon.engine.context import (
    CellState,
    Color,
    DigInstruction,
    Direction,
    LagoonContext,
    TrenchSegment,
)
from lagoon.engine.config import PipelineConfig
from lagoon.engine.pipeline import Pipeline, dig_lagoon, enclosed_area

__all__ = [
    "transform",
    "Layer",
    "get_registry",
    "load_transforms",
    "CellState",
    "Color",
    "DigInstruction",
    "Direction",
    "LagoonContext",
    "TrenchSegment",
    "PipelineConfig",
    "Pipeline",
    "dig_lagoon",
    "enclosed_area",
]
