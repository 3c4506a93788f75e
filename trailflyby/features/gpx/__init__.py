"""
GPX file handling module.

Usage:
    from trailflyby.features.gpx import GPXParserService, summarize_track
    from trailflyby.features.gpx import analyze_gpx  # result object, no exceptions

Components:
- GPXParserService: Lenient point extraction from GPX text
- summarize_track: Distance, ascent, elevation range, elapsed time, pace
- analyze_gpx / analyze_gpx_base64: parse + summarize as AnalysisResult
- TrackPoint / PlaybackPoint: point dataclasses
- TrackSummary / AnalysisResult: Pydantic schemas
"""

from .exceptions import (
    GPXError,
    GPXFormatError,
    GPXDecodeError,
    InsufficientPointsError,
)
from .models import TrackPoint, PlaybackPoint
from .parser import GPXParserService
from .schemas import TrackSummary, AnalysisResult
from .summary import (
    summarize_track,
    calculate_distance_m,
    calculate_ascent_m,
    elevation_range_m,
    elapsed_seconds,
)
from .service import analyze_gpx, analyze_gpx_base64

__all__ = [
    # Errors
    "GPXError",
    "GPXFormatError",
    "GPXDecodeError",
    "InsufficientPointsError",
    # Models
    "TrackPoint",
    "PlaybackPoint",
    # Services
    "GPXParserService",
    "summarize_track",
    "calculate_distance_m",
    "calculate_ascent_m",
    "elevation_range_m",
    "elapsed_seconds",
    "analyze_gpx",
    "analyze_gpx_base64",
    # Schemas
    "TrackSummary",
    "AnalysisResult",
]
