"""
GPX-related schemas.

Pydantic models handed to the post generator and the upload validator.
Serialized with camelCase aliases, which is what the front matter expects:

    summary.model_dump(by_alias=True)
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TrackSummary(BaseModel):
    """Aggregate statistics for one parsed track."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    point_count: int = Field(ge=2, alias="points")

    # Coordinates (6 dp)
    start_lat: float = Field(alias="startLat")
    start_lon: float = Field(alias="startLng")
    center_lat: float = Field(alias="centerLat")
    center_lon: float = Field(alias="centerLng")

    # Metrics
    distance_miles: float = Field(ge=0, alias="distanceMiles")
    elevation_gain_feet: int = Field(ge=0, alias="elevationGainFeet")
    min_elevation_m: Optional[int] = Field(default=None, alias="minElevationMeters")
    max_elevation_m: Optional[int] = Field(default=None, alias="maxElevationMeters")

    # Timing (only when the file carries timestamps)
    elapsed_seconds: Optional[int] = Field(default=None, ge=0, alias="elapsedSeconds")
    elapsed_formatted: Optional[str] = Field(default=None, alias="elapsedHms")
    avg_speed_mph: Optional[float] = Field(default=None, alias="avgMph")
    avg_pace_min_per_mile: Optional[float] = Field(default=None, alias="avgPaceMinPerMile")


class AnalysisResult(BaseModel):
    """Structured outcome of analyzing an uploaded GPX file."""

    ok: bool
    error: Optional[str] = None
    summary: Optional[TrackSummary] = None
