"""Configuration management using Pydantic Settings."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="NETINFLUENCE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Input files
    unweighted_file: Path = Path("data/unweighted_network.csv")
    weighted_file: Path = Path("data/weighted_network.csv")

    # CSV layout
    csv_delimiter: str = Field(default=",", min_length=1, max_length=1)
    csv_has_header: bool = True

    # Presentation
    score_precision: int = Field(default=2, ge=0, le=10)

    # Logging
    log_level: str = "WARNING"
    log_format: Literal["json", "console"] = "console"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept log levels in any case."""
        return str(v).strip().upper()

    def input_file(self, weighted: bool) -> Path:
        """Return the default input file for the given graph mode."""
        return self.weighted_file if weighted else self.unweighted_file


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
