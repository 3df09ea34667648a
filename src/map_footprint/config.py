"""
Application settings.

Values come from ``MAP_FOOTPRINT_*`` environment variables with defaults
suitable for local use. ``get_settings()`` caches the result for the process.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from pydantic import BaseModel, Field

from map_footprint.reference.geometry import DEFAULT_TILE_SIZE

ENV_PREFIX = "MAP_FOOTPRINT_"


def _env(key: str, default: str) -> str:
    return os.getenv(f"{ENV_PREFIX}{key}", default).strip()


class Settings(BaseModel):
    """Runtime configuration."""

    model_config = {"frozen": True}

    app_name: str = "map-footprint"
    app_env: str = "development"
    debug: bool = False
    log_level: str = "INFO"
    logs_dir: Path | None = None

    viewport_width: float = Field(default=1024, gt=0)
    viewport_height: float = Field(default=768, gt=0)
    tile_size: int = Field(default=DEFAULT_TILE_SIZE, gt=0)

    @classmethod
    def from_env(cls) -> Settings:
        """
        Build settings from the environment.

        Raw strings are handed to pydantic for coercion, so a malformed value
        raises ``ValidationError`` naming the offending field.
        """
        logs_dir = _env("LOGS_DIR", "")
        return cls.model_validate(
            {
                "app_name": _env("APP_NAME", "map-footprint"),
                "app_env": _env("APP_ENV", "development"),
                "debug": _env("DEBUG", "false").lower() in ("1", "true", "yes"),
                "log_level": _env("LOG_LEVEL", "INFO").upper(),
                "logs_dir": Path(logs_dir).expanduser().resolve() if logs_dir else None,
                "viewport_width": _env("VIEWPORT_WIDTH", "1024"),
                "viewport_height": _env("VIEWPORT_HEIGHT", "768"),
                "tile_size": _env("TILE_SIZE", str(DEFAULT_TILE_SIZE)),
            }
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Process-wide settings, read from the environment once."""
    return Settings.from_env()
