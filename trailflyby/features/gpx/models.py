"""
Track point models.

Plain frozen dataclasses, no external imports.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class TrackPoint:
    """A single recorded location sample."""
    latitude: float
    longitude: float
    elevation_m: Optional[float] = None
    timestamp_ms: Optional[int] = None


@dataclass(frozen=True)
class PlaybackPoint(TrackPoint):
    """
    Track point annotated with distance along the route.

    Used for the cumulative-distance sequence fed to the resampler and for
    the resampled/smoothed points handed to the renderer.
    """
    distance_from_start_m: float = 0.0
