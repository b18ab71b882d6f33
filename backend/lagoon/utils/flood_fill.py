"""Breadth-first flood fill and post-fill seal checks on a cell grid."""

from __future__ import annotations

from collections import deque

import numpy as np
from numpy.typing import NDArray

from lagoon.engine.context import CellState

_BACKGROUND = int(CellState.BACKGROUND)
_INTERIOR = int(CellState.INTERIOR)


def center_seed(width: int, height: int) -> tuple[int, int]:
    return (width // 2, height // 2)


def flood_fill(cells: NDArray[np.int8], seed: tuple[int, int]) -> int:
    """BFS flood fill from ``seed``, turning reachable background cells interior.

    Boundary cells stop the fill. Neighbours are north, south, east and west.
    The walk runs over a flat bytearray copy indexed by ``y * width + x`` and
    is written back into ``cells`` at the end. Cells are marked when enqueued,
    so each one is queued at most once.

    Returns the number of cells converted.
    """
    height, width = cells.shape
    sx, sy = seed
    if not (0 <= sx < width and 0 <= sy < height):
        raise ValueError(f"Seed {seed} lies outside the {width}×{height} grid")

    start = sy * width + sx
    buf = bytearray(cells.astype(np.uint8).tobytes())
    if buf[start] != _BACKGROUND:
        return 0

    bg, fill = _BACKGROUND, _INTERIOR
    last_row = len(buf) - width
    last_col = width - 1
    buf[start] = fill
    filled = 1
    queue: deque[int] = deque([start])
    pop, push = queue.popleft, queue.append
    while queue:
        i = pop()
        col = i % width
        if i >= width and buf[i - width] == bg:
            buf[i - width] = fill
            push(i - width)
            filled += 1
        if i < last_row and buf[i + width] == bg:
            buf[i + width] = fill
            push(i + width)
            filled += 1
        if col < last_col and buf[i + 1] == bg:
            buf[i + 1] = fill
            push(i + 1)
            filled += 1
        if col > 0 and buf[i - 1] == bg:
            buf[i - 1] = fill
            push(i - 1)
            filled += 1

    cells[:, :] = np.frombuffer(bytes(buf), dtype=np.int8).reshape(height, width)
    return filled


def interior_touches_border(cells: NDArray[np.int8]) -> bool:
    """True if any interior cell lies on the outer rows or columns."""
    interior = cells == CellState.INTERIOR
    return bool(
        interior[0, :].any()
        or interior[-1, :].any()
        or interior[:, 0].any()
        or interior[:, -1].any()
    )


def unsealed_cells(cells: NDArray[np.int8]) -> list[tuple[int, int]]:
    """Interior cells with a background 4-neighbour, as (x, y).

    Empty after any completed fill.
    """
    background = cells == CellState.BACKGROUND
    near_background = np.zeros_like(background)
    near_background[1:, :] |= background[:-1, :]
    near_background[:-1, :] |= background[1:, :]
    near_background[:, 1:] |= background[:, :-1]
    near_background[:, :-1] |= background[:, 1:]
    ys, xs = np.nonzero((cells == CellState.INTERIOR) & near_background)
    return list(zip(xs.tolist(), ys.tolist()))
