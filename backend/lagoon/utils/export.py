"""Classified grid → pixels. Boundary cells keep their trench color exactly."""

from __future__ import annotations

import io

import numpy as np
from numpy.typing import NDArray
from PIL import Image

from lagoon.engine.context import CellState, Color

# Defaults match the reference renders: red lagoon on white ground
DEFAULT_FILL_COLOR = Color.from_int(0xFF0000)
DEFAULT_BACKGROUND_COLOR = Color.from_int(0xFFFFFF)


def grid_to_rgb(
    cells: NDArray[np.int8],
    cell_colors: NDArray[np.uint8],
    fill_color: Color = DEFAULT_FILL_COLOR,
    background_color: Color = DEFAULT_BACKGROUND_COLOR,
) -> NDArray[np.uint8]:
    """Map every cell to an RGB pixel.

    Returns:
        uint8 array of shape (height, width, 3).
    """
    if cell_colors.shape[:2] != cells.shape:
        raise ValueError(
            f"Color buffer {cell_colors.shape[:2]} does not match grid {cells.shape}"
        )
    rgb = np.empty((*cells.shape, 3), dtype=np.uint8)
    rgb[:] = background_color.as_tuple()
    rgb[cells == CellState.INTERIOR] = fill_color.as_tuple()
    boundary = cells == CellState.BOUNDARY
    rgb[boundary] = cell_colors[boundary]
    return rgb


def cell_color(
    cells: NDArray[np.int8],
    cell_colors: NDArray[np.uint8],
    x: int,
    y: int,
    fill_color: Color = DEFAULT_FILL_COLOR,
    background_color: Color = DEFAULT_BACKGROUND_COLOR,
) -> Color:
    """Resolved color of a single cell."""
    state = cells[y, x]
    if state == CellState.BOUNDARY:
        r, g, b = (int(v) for v in cell_colors[y, x])
        return Color(r, g, b)
    if state == CellState.INTERIOR:
        return fill_color
    return background_color


def grid_to_png(
    cells: NDArray[np.int8],
    cell_colors: NDArray[np.uint8],
    fill_color: Color = DEFAULT_FILL_COLOR,
    background_color: Color = DEFAULT_BACKGROUND_COLOR,
    scale: int = 1,
) -> bytes:
    """Encode the classified grid as PNG bytes, one cell per ``scale``×``scale`` pixels."""
    if scale < 1:
        raise ValueError(f"scale must be >= 1, got {scale}")
    rgb = grid_to_rgb(cells, cell_colors, fill_color, background_color)
    img = Image.fromarray(rgb)
    if scale > 1:
        height, width = cells.shape
        img = img.resize((width * scale, height * scale), Image.Resampling.NEAREST)
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()
