"""Runtime settings, read from BUILDLAB_* environment variables or .env."""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BuildLabSettings(BaseSettings):
    """Form choices, copy bounds and server options."""
    building_types: list[str] = Field(
        default_factory=lambda: ["Residential", "Commercial"]
    )
    min_copies: int = 1
    max_copies: int = 10
    default_copies: int = 1

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = True

    model_config = SettingsConfigDict(
        env_prefix="BUILDLAB_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @model_validator(mode="after")
    def _validate_copy_bounds(self) -> BuildLabSettings:
        if self.min_copies < 1:
            raise ValueError("min_copies must be at least 1")
        if self.max_copies < self.min_copies:
            raise ValueError("max_copies must be >= min_copies")
        if not self.min_copies <= self.default_copies <= self.max_copies:
            raise ValueError("default_copies must lie between min_copies and max_copies")
        return self


@lru_cache
def get_settings() -> BuildLabSettings:
    return BuildLabSettings()
