"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from lagoon.engine.config import PipelineConfig
from lagoon.engine.context import Color


class Settings(BaseSettings):
    lagoon_env: str = "development"
    lagoon_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Render palette
    fill_color: str = "#ff0000"
    background_color: str = "#ffffff"

    # Pipeline guards
    max_grid_cells: int = 4_000_000
    require_closed_loop: bool = True
    check_fill_leak: bool = True

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def pipeline_config(self) -> PipelineConfig:
        return PipelineConfig(
            require_closed_loop=self.require_closed_loop,
            check_fill_leak=self.check_fill_leak,
            max_grid_cells=self.max_grid_cells,
        )

    @property
    def fill_rgb(self) -> Color:
        return Color.from_hex(self.fill_color)

    @property
    def background_rgb(self) -> Color:
        return Color.from_hex(self.background_color)


settings = Settings()
