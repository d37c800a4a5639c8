"""
Configuration for room_footprint package.

Uses pydantic-settings for environment variable management.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class FootprintConfig(BaseSettings):
    """Numeric thresholds used by the point set and hull builder."""

    model_config = SettingsConfigDict(
        env_prefix="ROOM_FOOTPRINT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Point deduplication
    duplicate_distance_sq: float = Field(
        default=1e-5,
        description="Squared distance under which two points are the same",
        gt=0,
    )

    # Hull construction
    orientation_epsilon: float = Field(
        default=0.0,
        description="Turns with orientation at or below this are popped",
        ge=0,
    )


@lru_cache
def get_config() -> FootprintConfig:
    """Get cached configuration instance."""
    return FootprintConfig()
