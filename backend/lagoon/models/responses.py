"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    transforms_registered: int = 0


class AreaResponse(BaseModel):
    # None when the pipeline could not measure (see errors)
    area: int | None = None
    width: int = 0
    height: int = 0
    boundary_cells: int = 0
    interior_cells: int = 0
    segments: int = 0
    loop_closed: bool | None = None
    fill_leaked: bool = False
    seed_on_trench: bool = False
    seed: tuple[int, int] | None = None
    processing_time_ms: float = 0.0
    transforms_completed: int = 0
    transforms_failed: int = 0
    errors: dict[str, str] = Field(default_factory=dict)
    skipped: dict[str, str] = Field(default_factory=dict)
    ascii_grid: str | None = None
