"""FastAPI dependency injection."""

from __future__ import annotations

from lagoon.config import Settings, settings


def get_settings() -> Settings:
    return settings
