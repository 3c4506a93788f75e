"""
Shared utilities (NOT business logic).

Usage:
    from trailflyby.shared import haversine_meters, shortest_angle_diff
    from trailflyby.shared.formatters import format_duration
"""
from .geo import (
    to_radians,
    to_degrees,
    clamp,
    lerp,
    haversine_meters,
    initial_bearing_degrees,
    shortest_angle_diff,
    normalize_bearing,
)
from .formatters import (
    round_half_up,
    meters_to_miles,
    meters_to_feet,
    format_duration,
    format_distance_miles,
    format_elevation_feet,
    format_pace,
)
from .constants import (
    EARTH_RADIUS_M,
    METERS_PER_MILE,
    FEET_PER_METER,
    DEFAULT_MAX_PLAYBACK_POINTS,
    DEFAULT_SMOOTHING_RADIUS,
    CameraPresetId,
    DEFAULT_CAMERA_PRESET,
)

__all__ = [
    # geo
    "to_radians",
    "to_degrees",
    "clamp",
    "lerp",
    "haversine_meters",
    "initial_bearing_degrees",
    "shortest_angle_diff",
    "normalize_bearing",
    # formatters
    "round_half_up",
    "meters_to_miles",
    "meters_to_feet",
    "format_duration",
    "format_distance_miles",
    "format_elevation_feet",
    "format_pace",
    # constants
    "EARTH_RADIUS_M",
    "METERS_PER_MILE",
    "FEET_PER_METER",
    "DEFAULT_MAX_PLAYBACK_POINTS",
    "DEFAULT_SMOOTHING_RADIUS",
    "CameraPresetId",
    "DEFAULT_CAMERA_PRESET",
]
