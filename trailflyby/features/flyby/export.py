"""
GPX export of playback points.

Renderers that load routes as GPX get the resampled path in the same
format the walker uploaded.
"""

from datetime import datetime, timezone
from typing import Optional, Sequence

import gpxpy.gpx

from trailflyby.features.gpx.models import TrackPoint


def playback_to_gpx(points: Sequence[TrackPoint], name: Optional[str] = None) -> str:
    """
    Serialize points as a single-track, single-segment GPX document.

    Args:
        points: Track or playback points
        name: Optional track name

    Returns:
        GPX XML text
    """
    gpx = gpxpy.gpx.GPX()
    track = gpxpy.gpx.GPXTrack(name=name)
    segment = gpxpy.gpx.GPXTrackSegment()
    track.segments.append(segment)
    gpx.tracks.append(track)

    for point in points:
        time = None
        if point.timestamp_ms is not None:
            time = datetime.fromtimestamp(point.timestamp_ms / 1000, tz=timezone.utc)
        segment.points.append(gpxpy.gpx.GPXTrackPoint(
            latitude=point.latitude,
            longitude=point.longitude,
            elevation=point.elevation_m,
            time=time,
        ))

    return gpx.to_xml()
