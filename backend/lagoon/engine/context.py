"""LagoonContext — the single mutable state object flowing through all transforms.

Per-instruction results → TrenchSegment
Whole-path results → LagoonContext.* (bounds, grid, area, etc.)
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray

from lagoon.engine.config import PipelineConfig


class Direction(str, enum.Enum):
    UP = "U"
    DOWN = "D"
    LEFT = "L"
    RIGHT = "R"

    @property
    def offset(self) -> tuple[int, int]:
        """Unit step as (dx, dy). y grows downward, matching row-major grids."""
        return _OFFSETS[self]


_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}


@dataclass(frozen=True)
class Color:
    red: int
    green: int
    blue: int

    @classmethod
    def from_int(cls, value: int) -> Color:
        """Decode a packed 0xRRGGBB value."""
        return cls(
            red=(value & 0xFF0000) >> 16,
            green=(value & 0x00FF00) >> 8,
            blue=value & 0x0000FF,
        )

    @classmethod
    def from_hex(cls, value: str) -> Color:
        """Decode a ``#rrggbb`` string."""
        if not value.startswith("#") or len(value) != 7:
            raise ValueError(f"Expected '#rrggbb' color, got {value!r}")
        return cls.from_int(int(value[1:], 16))

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.red, self.green, self.blue)

    def to_hex(self) -> str:
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"


BLACK = Color(0, 0, 0)


@dataclass(frozen=True)
class DigInstruction:
    direction: Direction
    length: int
    color: Color = BLACK


class CellState(enum.IntEnum):
    BACKGROUND = 0
    BOUNDARY = 1
    INTERIOR = 2


@dataclass
class TrenchSegment:
    """One straight horizontal or vertical stretch of the loop's perimeter."""

    start: tuple[int, int]
    end: tuple[int, int]
    min_x: int
    max_x: int
    min_y: int
    max_y: int
    color: Color = BLACK

    @classmethod
    def between(cls, start: tuple[int, int], end: tuple[int, int], color: Color) -> TrenchSegment:
        return cls(
            start=start,
            end=end,
            min_x=min(start[0], end[0]),
            max_x=max(start[0], end[0]),
            min_y=min(start[1], end[1]),
            max_y=max(start[1], end[1]),
            color=color,
        )

    def shift(self, dx: int, dy: int) -> None:
        self.start = (self.start[0] + dx, self.start[1] + dy)
        self.end = (self.end[0] + dx, self.end[1] + dy)
        self.min_x += dx
        self.max_x += dx
        self.min_y += dy
        self.max_y += dy

    @property
    def is_vertical(self) -> bool:
        return self.start[0] == self.end[0]

    @property
    def is_horizontal(self) -> bool:
        return self.start[1] == self.end[1]

    @property
    def length(self) -> int:
        return (self.max_x - self.min_x) + (self.max_y - self.min_y)


@dataclass
class LagoonContext:
    """Shared state flowing through the entire pipeline."""

    # Decoded dig instructions, in order
    instructions: list[DigInstruction] = field(default_factory=list)
    # One segment per instruction
    segments: list[TrenchSegment] = field(default_factory=list)
    # Where digging starts, and where the cursor ended up
    origin: tuple[int, int] = (0, 0)
    cursor: tuple[int, int] = (0, 0)

    # --- Bounds (raw after Layer 0, origin-anchored after Layer 1) ---
    min_x: int = 0
    max_x: int = 0
    min_y: int = 0
    max_y: int = 0
    width: int = 0
    height: int = 0
    # Translation applied by normalization: grid = raw + shift
    shift: tuple[int, int] = (0, 0)
    loop_closed: bool | None = None

    # --- Grid (populated by Layers 2 and 3) ---
    # Cell states, shape (height, width), indexed [y, x]
    cells: NDArray[np.int8] | None = None
    # Boundary colors, shape (height, width, 3)
    cell_colors: NDArray[np.uint8] | None = None
    seed: tuple[int, int] | None = None
    # Seed landed on a trench cell, so the fill converted nothing
    seed_on_trench: bool = False
    boundary_cells: int = 0
    interior_cells: int = 0

    # --- Measurement ---
    fill_leaked: bool = False
    # None until measured; distinguishes "degenerate" from "zero area"
    area: int | None = None

    # --- Pipeline metadata ---
    config: PipelineConfig = field(default_factory=PipelineConfig)
    completed_transforms: set[str] = field(default_factory=set)
    errors: dict[str, str] = field(default_factory=dict)
    skipped: dict[str, str] = field(default_factory=dict)

    @property
    def num_segments(self) -> int:
        return len(self.segments)

    @property
    def bounds(self) -> tuple[int, int, int, int]:
        """(min_x, min_y, max_x, max_y)"""
        return (self.min_x, self.min_y, self.max_x, self.max_y)

    @property
    def total_cells(self) -> int:
        return self.width * self.height

    @property
    def ok(self) -> bool:
        return self.area is not None and not self.errors
