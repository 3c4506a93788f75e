"""
Unified constants for track processing and flyby playback.

Single source of truth for units and playback limits.
"""

from enum import Enum


# Earth radius in meters (mean radius, same value the renderer uses)
EARTH_RADIUS_M = 6_371_000.0

# Unit conversions
METERS_PER_MILE = 1609.344
FEET_PER_METER = 3.28084

# Playback defaults
DEFAULT_MAX_PLAYBACK_POINTS = 1800
DEFAULT_SMOOTHING_RADIUS = 2

# Minimum span between bracketing points when interpolating (meters)
MIN_INTERPOLATION_SPAN_M = 0.0001

# Route files must carry this extension
GPX_EXTENSION = ".gpx"

# Point tag families, scanned in this order
TRACK_POINT_TAG = "trkpt"
ROUTE_POINT_TAG = "rtept"
POINT_TAG_FAMILIES = (TRACK_POINT_TAG, ROUTE_POINT_TAG)


class CameraPresetId(str, Enum):
    """
    Named camera behaviours understood by the flyby renderer.

    Values are persisted in saved post configurations - do not rename.
    """
    CINEMATIC = "cinematic"
    BALANCED = "balanced"
    CHASE = "chase"


DEFAULT_CAMERA_PRESET = CameraPresetId.BALANCED
