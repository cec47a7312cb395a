"""
Application settings and configuration management.
"""

from __future__ import annotations

from typing import Annotated, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

from tubeformat import __version__
from tubeformat.formats.ranking import (
    DEFAULT_AUDIO_ENCODING_RANKS,
    DEFAULT_VIDEO_ENCODING_RANKS,
    RankingPolicy,
)
from tubeformat.models.selection import FormatFilter


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = Field(default="tubeformat")
    app_version: str = Field(default=__version__)
    debug: bool = Field(default=False)
    log_level: str = Field(default="INFO")

    # Selection defaults
    default_quality: str = Field(default="highest")
    default_filter: Optional[FormatFilter] = Field(default=None)

    # Ranking policy (worst first)
    audio_encoding_ranks: Annotated[list[str], NoDecode] = Field(
        default=list(DEFAULT_AUDIO_ENCODING_RANKS)
    )
    video_encoding_ranks: Annotated[list[str], NoDecode] = Field(
        default=list(DEFAULT_VIDEO_ENCODING_RANKS)
    )

    @field_validator("audio_encoding_ranks", "video_encoding_ranks", mode="before")
    @classmethod
    def parse_encoding_ranks(cls, v: str | list[str]) -> list[str]:
        """Parse codec ranks from comma-separated string or list."""
        if isinstance(v, str):
            return [name.strip() for name in v.split(",") if name.strip()]
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Invalid log level: {v}")
        return v.upper()

    @field_validator("default_filter", mode="before")
    @classmethod
    def empty_filter_is_none(cls, v: object) -> object:
        """Treat an empty filter setting as no filter."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def ranking_policy(self) -> RankingPolicy:
        """Build the ranking policy described by these settings."""
        return RankingPolicy(
            audio_encoding_ranks=tuple(self.audio_encoding_ranks),
            video_encoding_ranks=tuple(self.video_encoding_ranks),
        )

    model_config = SettingsConfigDict(
        env_prefix="TUBEFORMAT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


def get_settings() -> Settings:
    """Get application settings."""
    return Settings()
