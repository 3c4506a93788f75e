"""
Application Configuration

Uses Pydantic Settings for type-safe configuration.
Values come from the environment or a local .env file.
"""

from pydantic import ConfigDict, Field, field_validator
from pydantic_settings import BaseSettings

from trailflyby.shared.constants import (
    DEFAULT_CAMERA_PRESET,
    DEFAULT_MAX_PLAYBACK_POINTS,
    DEFAULT_SMOOTHING_RADIUS,
    CameraPresetId,
)


class Settings(BaseSettings):
    """Application settings with validation."""

    # === Core ===
    log_level: str = Field(default="INFO", description="Logging level")

    # === Playback ===
    max_playback_points: int = Field(
        default=DEFAULT_MAX_PLAYBACK_POINTS,
        ge=2,
        description="Upper bound on resampled points per flyby"
    )
    smoothing_radius: int = Field(
        default=DEFAULT_SMOOTHING_RADIUS,
        ge=0,
        description="Half-width of the path smoothing window (0 = off)"
    )
    default_camera_preset: CameraPresetId = Field(
        default=DEFAULT_CAMERA_PRESET,
        description="Preset used when a post does not choose one"
    )

    # === Uploads ===
    max_gpx_size_bytes: int = Field(
        default=20 * 1024 * 1024,  # 20MB
        gt=0,
        description="Largest GPX file the CLI will read"
    )

    @field_validator('log_level')
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept 'debug', 'Info', ... as well as upper case."""
        return v.upper()

    @field_validator('default_camera_preset', mode='before')
    @classmethod
    def parse_camera_preset(cls, v):
        """Allow ' Chase ' style values from the environment."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    model_config = ConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
