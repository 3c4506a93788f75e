"""
Track Summarizer

Aggregate statistics for a parsed track: distance, ascent, elevation
range, elapsed time and average pace.

This is the SINGLE SOURCE OF TRUTH for track statistics - the analyze
endpoint, asset upload and post generation all read this summary.
"""

from typing import List, Optional, Sequence, Tuple

from trailflyby.shared.formatters import (
    format_duration,
    meters_to_feet,
    meters_to_miles,
    round_half_up,
)
from trailflyby.shared.geo import haversine_meters
from .exceptions import InsufficientPointsError
from .models import TrackPoint
from .schemas import TrackSummary

COORDINATE_DECIMALS = 6
MILES_DECIMALS = 2


def calculate_distance_m(points: Sequence[TrackPoint]) -> float:
    """Sum of great-circle distances between consecutive points."""
    total = 0.0

    for i in range(1, len(points)):
        prev, curr = points[i - 1], points[i]
        total += haversine_meters(
            prev.latitude, prev.longitude,
            curr.latitude, curr.longitude
        )

    return total


def calculate_ascent_m(points: Sequence[TrackPoint]) -> float:
    """
    Total positive elevation change.

    Only pairs where both points carry elevation count; descents and
    gaps contribute nothing, so the result is never negative.
    """
    ascent = 0.0

    for i in range(1, len(points)):
        prev_ele = points[i - 1].elevation_m
        curr_ele = points[i].elevation_m
        if prev_ele is None or curr_ele is None:
            continue
        if curr_ele > prev_ele:
            ascent += curr_ele - prev_ele

    return ascent


def elevation_range_m(points: Sequence[TrackPoint]) -> Tuple[Optional[float], Optional[float]]:
    """
    Min/max elevation over points that have one.

    Returns:
        (min, max), or (None, None) when fewer than 2 points carry elevation
    """
    elevations = [p.elevation_m for p in points if p.elevation_m is not None]
    if len(elevations) < 2:
        return None, None
    return min(elevations), max(elevations)


def elapsed_seconds(points: Sequence[TrackPoint]) -> Optional[int]:
    """
    Time between the first and last timestamped points, in sequence order.

    Not sorted chronologically: an out-of-order file yields whatever its
    first and last stamps give, floored at zero.

    Returns:
        Whole seconds, or None when fewer than 2 points carry a timestamp
    """
    stamps = [p.timestamp_ms for p in points if p.timestamp_ms is not None]
    if len(stamps) < 2:
        return None
    return max(0, int(round_half_up((stamps[-1] - stamps[0]) / 1000)))


def summarize_track(points: Sequence[TrackPoint]) -> TrackSummary:
    """
    Build the summary for a parsed track.

    Args:
        points: Parsed track points (at least 2)

    Returns:
        TrackSummary with rounded display values

    Raises:
        InsufficientPointsError: If fewer than 2 points given
    """
    if len(points) < 2:
        raise InsufficientPointsError()

    distance_m = calculate_distance_m(points)
    ascent_m = calculate_ascent_m(points)
    min_ele, max_ele = elevation_range_m(points)
    elapsed = elapsed_seconds(points)

    distance_miles = round_half_up(meters_to_miles(distance_m), MILES_DECIMALS)

    avg_speed_mph: Optional[float] = None
    avg_pace: Optional[float] = None
    if elapsed and distance_miles > 0:
        hours = elapsed / 3600
        avg_speed_mph = round_half_up(distance_miles / hours, MILES_DECIMALS)
        avg_pace = round_half_up(hours * 60 / distance_miles, MILES_DECIMALS)

    latitudes: List[float] = [p.latitude for p in points]
    longitudes: List[float] = [p.longitude for p in points]

    return TrackSummary(
        point_count=len(points),
        start_lat=round_half_up(points[0].latitude, COORDINATE_DECIMALS),
        start_lon=round_half_up(points[0].longitude, COORDINATE_DECIMALS),
        center_lat=round_half_up(sum(latitudes) / len(latitudes), COORDINATE_DECIMALS),
        center_lon=round_half_up(sum(longitudes) / len(longitudes), COORDINATE_DECIMALS),
        distance_miles=distance_miles,
        elevation_gain_feet=int(round_half_up(meters_to_feet(ascent_m))),
        min_elevation_m=int(round_half_up(min_ele)) if min_ele is not None else None,
        max_elevation_m=int(round_half_up(max_ele)) if max_ele is not None else None,
        elapsed_seconds=elapsed,
        elapsed_formatted=format_duration(elapsed),
        avg_speed_mph=avg_speed_mph,
        avg_pace_min_per_mile=avg_pace,
    )
