"""Pipeline configuration — controls the hardening checks around the fill."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PipelineConfig:
    """Controls which precondition checks run and how the fill is seeded."""

    # Refuse to fill when the path does not return to its origin
    require_closed_loop: bool = True

    # Refuse to report an area when the fill reached the grid border
    check_fill_leak: bool = True

    # Upper bound on width × height before allocating the grid.
    # The fill walks cells in pure Python, so the default keeps a
    # worst-case request to seconds rather than minutes.
    max_grid_cells: int = 4_000_000

    # Fill seed as (x, y) in normalized grid space; None = grid center
    seed: tuple[int, int] | None = None
