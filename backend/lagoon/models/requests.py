"""API request models. These are the instruction decoder: bad input stops here."""

from __future__ import annotations

from pydantic import BaseModel, Field

from lagoon.engine.config import PipelineConfig
from lagoon.engine.context import Color, DigInstruction, Direction


class DigInstructionModel(BaseModel):
    direction: Direction = Field(..., description="U, D, L or R")
    length: int = Field(..., gt=0, description="Trench length in cells")
    color: str = Field(
        default="#000000",
        pattern=r"^#[0-9a-fA-F]{6}$",
        description="Trench color as #rrggbb",
    )

    def to_instruction(self) -> DigInstruction:
        return DigInstruction(
            direction=self.direction,
            length=self.length,
            color=Color.from_hex(self.color),
        )


class AreaRequest(BaseModel):
    instructions: list[DigInstructionModel] = Field(
        default_factory=list,
        description="Dig instructions in order",
    )
    seed: tuple[int, int] | None = Field(
        default=None,
        description="Fill seed (x, y) in normalized grid space; default is the grid center",
    )
    require_closed_loop: bool | None = Field(
        default=None,
        description="Override the server's loop-closure setting",
    )
    include_grid: bool = Field(default=False, description="Return the ASCII grid")

    def to_instructions(self) -> list[DigInstruction]:
        return [i.to_instruction() for i in self.instructions]

    def pipeline_config(self, base: PipelineConfig) -> PipelineConfig:
        return PipelineConfig(
            require_closed_loop=(
                base.require_closed_loop
                if self.require_closed_loop is None
                else self.require_closed_loop
            ),
            check_fill_leak=base.check_fill_leak,
            max_grid_cells=base.max_grid_cells,
            seed=self.seed,
        )


class RenderRequest(AreaRequest):
    scale: int = Field(default=1, ge=1, le=32, description="Pixels per cell edge")
