"""Application configuration using Pydantic settings."""

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Project root directory
BASE_DIR = Path(__file__).resolve().parent.parent

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=os.path.join(BASE_DIR, ".env"),
        env_file_encoding="utf-8",
        env_prefix="PATHFINDER_",
        case_sensitive=False,
    )

    # Application
    app_name: str = "Pathfinder Lab"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # CORS - comma-separated list of allowed origins
    cors_origins: str = "http://localhost:3000,http://localhost:8080,http://127.0.0.1:5500"

    # Grids
    default_grid_size: int = 10
    max_grid_size: int = 100
    maze_seed: Optional[int] = None  # fixed seed for reproducible mazes
    max_stored_grids: int = 1000  # oldest grid is evicted past this

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and check the log level name."""
        level = v.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("default_grid_size")
    @classmethod
    def validate_default_grid_size(cls, v: int) -> int:
        """Default size must be usable for maze generation."""
        if v < 2:
            raise ValueError("PATHFINDER_DEFAULT_GRID_SIZE must be at least 2")
        return v

    @field_validator("max_stored_grids")
    @classmethod
    def validate_max_stored_grids(cls, v: int) -> int:
        if v < 1:
            raise ValueError("PATHFINDER_MAX_STORED_GRIDS must be at least 1")
        return v

    @property
    def cors_origins_list(self) -> list[str]:
        """Get CORS origins as a list."""
        if self.debug:
            return ["*"]
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
