"""
Geographic utility functions.

This is the SINGLE SOURCE OF TRUTH for geographic calculations.
DO NOT duplicate these functions elsewhere.

All functions are pure: coordinates in degrees, distances in meters.
"""
import math

from .constants import EARTH_RADIUS_M


def to_radians(degrees: float) -> float:
    """Convert degrees to radians."""
    return degrees * math.pi / 180


def to_degrees(radians: float) -> float:
    """Convert radians to degrees."""
    return radians * 180 / math.pi


def clamp(value: float, lower: float, upper: float) -> float:
    """
    Saturate value into [lower, upper].

    If lower > upper the result is upper (min is applied last).
    """
    return min(max(value, lower), upper)


def lerp(a: float, b: float, t: float) -> float:
    """
    Linear interpolation between a and b.

    Not bounded: t outside [0, 1] extrapolates. Clamp t first if needed.
    """
    return a + (b - a) * t


def haversine_meters(
    lat1: float, lon1: float,
    lat2: float, lon2: float
) -> float:
    """
    Calculate great-circle distance between two points.

    Args:
        lat1, lon1: First point coordinates (degrees)
        lat2, lon2: Second point coordinates (degrees)

    Returns:
        Distance in meters
    """
    delta_lat = to_radians(lat2 - lat1)
    delta_lon = to_radians(lon2 - lon1)

    a = (
        math.sin(delta_lat / 2) ** 2 +
        math.cos(to_radians(lat1)) * math.cos(to_radians(lat2)) *
        math.sin(delta_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))

    return EARTH_RADIUS_M * c


def initial_bearing_degrees(
    lat1: float, lon1: float,
    lat2: float, lon2: float
) -> float:
    """
    Forward azimuth from point 1 towards point 2.

    Returns:
        Bearing in degrees, 0 = north, clockwise, in [0, 360)
    """
    phi1 = to_radians(lat1)
    phi2 = to_radians(lat2)
    delta_lambda = to_radians(lon2 - lon1)

    y = math.sin(delta_lambda) * math.cos(phi2)
    x = (
        math.cos(phi1) * math.sin(phi2) -
        math.sin(phi1) * math.cos(phi2) * math.cos(delta_lambda)
    )

    bearing = (to_degrees(math.atan2(y, x)) + 360) % 360
    # -0.0 and float rounding can land exactly on 360
    return 0.0 if bearing >= 360 else bearing


def shortest_angle_diff(from_deg: float, to_deg: float) -> float:
    """
    Signed smallest rotation from one heading to another.

    Used when animating bearings so 359 -> 1 turns by +2, not -358.

    Example:
        >>> shortest_angle_diff(350, 10)
        20
        >>> shortest_angle_diff(10, 350)
        -20

    Returns:
        Difference in degrees, in (-180, 180]; a half turn is +180
    """
    diff = ((to_deg - from_deg + 540) % 360) - 180
    return 180 if diff == -180 else diff


def normalize_bearing(degrees: float) -> float:
    """Wrap any angle into [0, 360)."""
    wrapped = degrees % 360
    return 0.0 if wrapped >= 360 else wrapped
