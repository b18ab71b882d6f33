"""Shared test fixtures."""

from __future__ import annotations

import pytest

from lagoon.engine.context import Color, DigInstruction, Direction, LagoonContext


def _dig(direction: str, length: int, color: int) -> DigInstruction:
    return DigInstruction(Direction(direction), length, Color.from_int(color))


# 14-instruction sample loop: 7 wide, 10 tall, 38 trench cells, area 62
CANONICAL_INSTRUCTIONS = [
    _dig("R", 6, 0x70C710),
    _dig("D", 5, 0x0DC571),
    _dig("L", 2, 0x5713F0),
    _dig("D", 2, 0xD2C081),
    _dig("R", 2, 0x59C680),
    _dig("D", 2, 0x411B91),
    _dig("L", 5, 0x8CEEE2),
    _dig("U", 2, 0xCAA173),
    _dig("L", 1, 0x1B58A2),
    _dig("U", 2, 0xCAA171),
    _dig("R", 2, 0x7807D2),
    _dig("U", 3, 0xA77FA3),
    _dig("L", 2, 0x015232),
    _dig("U", 2, 0x7A21E3),
]

CANONICAL_JSON = [
    {"direction": i.direction.value, "length": i.length, "color": i.color.to_hex()}
    for i in CANONICAL_INSTRUCTIONS
]


def rectangle(width: int, height: int, color: int = 0x336699) -> list[DigInstruction]:
    """Clockwise perimeter of a width×height block of cells."""
    return [
        _dig("R", width - 1, color),
        _dig("D", height - 1, color),
        _dig("L", width - 1, color),
        _dig("U", height - 1, color),
    ]


@pytest.fixture
def canonical_instructions() -> list[DigInstruction]:
    return list(CANONICAL_INSTRUCTIONS)


@pytest.fixture
def canonical_ctx() -> LagoonContext:
    return LagoonContext(instructions=list(CANONICAL_INSTRUCTIONS))


@pytest.fixture
def negative_square_ctx() -> LagoonContext:
    """3×3 loop dug up and to the left of the origin, so raw bounds are negative."""
    return LagoonContext(
        instructions=[
            _dig("L", 2, 0xFF0000),
            _dig("U", 2, 0x00FF00),
            _dig("R", 2, 0x0000FF),
            _dig("D", 2, 0x123456),
        ]
    )
