"""Rasterization utilities — trench segments to cell grid, grid to text."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

import numpy as np
from numpy.typing import NDArray

from lagoon.engine.context import CellState

if TYPE_CHECKING:
    from lagoon.engine.context import TrenchSegment

# Text glyphs per cell state
_GLYPHS = {
    CellState.BACKGROUND: ".",
    CellState.BOUNDARY: "#",
    CellState.INTERIOR: "~",
}


def make_grid(width: int, height: int) -> tuple[NDArray[np.int8], NDArray[np.uint8]]:
    """Allocate an all-background state grid and a zeroed color buffer.

    Returns:
        (cells, colors) with shapes (height, width) and (height, width, 3).
    """
    if width <= 0 or height <= 0:
        raise ValueError(f"Grid dimensions must be positive, got {width}×{height}")
    cells = np.full((height, width), CellState.BACKGROUND, dtype=np.int8)
    colors = np.zeros((height, width, 3), dtype=np.uint8)
    return cells, colors


def absolute_range(a: int, b: int) -> range:
    """Inclusive range between two values, regardless of their order."""
    lo, hi = (a, b) if a <= b else (b, a)
    return range(lo, hi + 1)


def paint_segment(
    cells: NDArray[np.int8],
    colors: NDArray[np.uint8],
    segment: TrenchSegment,
) -> int:
    """Mark every cell on ``segment`` as boundary with its color.

    The painted span is taken from the endpoints, not the dig direction.
    Returns the number of cells painted.
    """
    rgb = segment.color.as_tuple()
    if segment.is_vertical:
        x = segment.start[0]
        ys = absolute_range(segment.start[1], segment.end[1])
        cells[ys.start : ys.stop, x] = CellState.BOUNDARY
        colors[ys.start : ys.stop, x] = rgb
        return len(ys)
    if segment.is_horizontal:
        y = segment.start[1]
        xs = absolute_range(segment.start[0], segment.end[0])
        cells[y, xs.start : xs.stop] = CellState.BOUNDARY
        colors[y, xs.start : xs.stop] = rgb
        return len(xs)
    raise ValueError(f"Segment {segment.start}->{segment.end} is neither horizontal nor vertical")


def rasterize_segments(
    segments: Iterable[TrenchSegment],
    width: int,
    height: int,
) -> tuple[NDArray[np.int8], NDArray[np.uint8]]:
    """Allocate a grid and paint all segments onto it. Last write wins on overlaps."""
    cells, colors = make_grid(width, height)
    for segment in segments:
        paint_segment(cells, colors, segment)
    return cells, colors


def count_cells(cells: NDArray[np.int8], state: CellState) -> int:
    return int(np.count_nonzero(cells == state))


def grid_to_text(cells: NDArray[np.int8]) -> str:
    """Convert a state grid to text: ``#`` boundary, ``~`` interior, ``.`` background."""
    rows = []
    for row in cells.tolist():
        rows.append("".join(_GLYPHS[cell] for cell in row))
    return "\n".join(rows)
