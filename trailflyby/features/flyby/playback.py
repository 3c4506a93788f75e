"""
Playback path construction.

Turns a raw track of arbitrary density into the bounded, evenly spaced
and lightly smoothed point list the flyby renderer animates along.

Pipeline:
    annotate_distances -> build_playback_points -> smooth_playback_points
"""

from dataclasses import dataclass, replace
from typing import List, Sequence

from trailflyby.features.gpx.models import PlaybackPoint, TrackPoint
from trailflyby.shared.constants import (
    DEFAULT_MAX_PLAYBACK_POINTS,
    DEFAULT_SMOOTHING_RADIUS,
    MIN_INTERPOLATION_SPAN_M,
)
from trailflyby.shared.geo import clamp, haversine_meters, lerp


@dataclass(frozen=True)
class InterpolatedPosition:
    """Position at a distance along the path."""
    lat: float
    lon: float
    index: int  # lower bracketing point


def annotate_distances(points: Sequence[TrackPoint]) -> List[PlaybackPoint]:
    """Attach cumulative great-circle distance (meters) to each point."""
    result: List[PlaybackPoint] = []
    cumulative = 0.0

    for i, point in enumerate(points):
        if i > 0:
            prev = points[i - 1]
            cumulative += haversine_meters(
                prev.latitude, prev.longitude,
                point.latitude, point.longitude
            )

        result.append(PlaybackPoint(
            latitude=point.latitude,
            longitude=point.longitude,
            elevation_m=point.elevation_m,
            timestamp_ms=point.timestamp_ms,
            distance_from_start_m=cumulative,
        ))

    return result


def find_distance_index(points: Sequence[PlaybackPoint], target_m: float) -> int:
    """
    Smallest index whose cumulative distance is >= target.

    Returns the last index when no point reaches the target. Ties resolve
    to the first qualifying index; resampled output depends on this.
    """
    low = 0
    high = len(points) - 1

    while low < high:
        mid = (low + high) // 2
        if points[mid].distance_from_start_m < target_m:
            low = mid + 1
        else:
            high = mid

    return low


def interpolate_point_at_distance(
    points: Sequence[PlaybackPoint],
    target_m: float
) -> InterpolatedPosition:
    """
    Linearly interpolate lat/lon at a distance along the path.

    Args:
        points: Distance-annotated points
        target_m: Distance from start; clamped to the path length

    Returns:
        InterpolatedPosition; (0, 0, 0) for an empty path
    """
    if not points:
        return InterpolatedPosition(lat=0.0, lon=0.0, index=0)
    if len(points) == 1:
        return InterpolatedPosition(lat=points[0].latitude, lon=points[0].longitude, index=0)

    max_distance = points[-1].distance_from_start_m
    target = clamp(target_m, 0, max(max_distance, 0))

    right_index = int(clamp(find_distance_index(points, target), 1, len(points) - 1))
    left_index = right_index - 1
    left = points[left_index]
    right = points[right_index]

    span = max(
        right.distance_from_start_m - left.distance_from_start_m,
        MIN_INTERPOLATION_SPAN_M
    )
    t = clamp((target - left.distance_from_start_m) / span, 0, 1)

    return InterpolatedPosition(
        lat=lerp(left.latitude, right.latitude, t),
        lon=lerp(left.longitude, right.longitude, t),
        index=left_index,
    )


def build_playback_points(
    points: Sequence[PlaybackPoint],
    max_points: int = DEFAULT_MAX_PLAYBACK_POINTS
) -> List[PlaybackPoint]:
    """
    Resample a path to at most max_points evenly spaced points.

    Paths already within the limit come back unchanged. Otherwise each
    output point sits at i * total / (max_points - 1) along the path;
    lat/lon are interpolated, elevation and time are carried over from
    the lower bracketing source point.

    Args:
        points: Distance-annotated points
        max_points: Upper bound on output length (>= 2)

    Returns:
        Resampled points; first and last coincide with the source ends
    """
    if max_points < 2:
        raise ValueError("max_points must be >= 2")

    if len(points) <= 2 or len(points) <= max_points:
        return list(points)

    total_distance = max(points[-1].distance_from_start_m, 1)
    interval = total_distance / (max_points - 1)

    sampled: List[PlaybackPoint] = []
    for i in range(max_points):
        target = min(total_distance, i * interval)
        position = interpolate_point_at_distance(points, target)
        nearest = points[position.index]
        sampled.append(replace(
            nearest,
            latitude=position.lat,
            longitude=position.lon,
            distance_from_start_m=target,
        ))

    return sampled


def smooth_playback_points(
    points: Sequence[PlaybackPoint],
    radius: int = DEFAULT_SMOOTHING_RADIUS
) -> List[PlaybackPoint]:
    """
    Triangular-weighted moving average over lat/lon.

    Weight for offset j is radius + 1 - |j|. Window indices past either
    end are clamped onto the end point, so samples near the ends lean
    towards them. First and last points are never moved.

    Args:
        points: Playback points
        radius: Half-width of the window; 0 disables smoothing

    Returns:
        Smoothed points (input unchanged for short paths)
    """
    if len(points) <= 4 or radius <= 0:
        return list(points)

    last = len(points) - 1
    smoothed: List[PlaybackPoint] = [points[0]]

    for i in range(1, last):
        lat_sum = 0.0
        lon_sum = 0.0
        weight_sum = 0
        for j in range(-radius, radius + 1):
            idx = int(clamp(i + j, 0, last))
            weight = radius + 1 - abs(j)
            lat_sum += points[idx].latitude * weight
            lon_sum += points[idx].longitude * weight
            weight_sum += weight

        smoothed.append(replace(
            points[i],
            latitude=lat_sum / weight_sum,
            longitude=lon_sum / weight_sum,
        ))

    smoothed.append(points[last])
    return smoothed
