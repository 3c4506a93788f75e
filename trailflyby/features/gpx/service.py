"""
GPX analysis entry points.

Wraps parse + summarize into a result object for callers that report
failures back to the user instead of handling exceptions.
"""

import logging
from typing import Union

from .exceptions import GPXError
from .parser import GPXParserService
from .schemas import AnalysisResult
from .summary import summarize_track

logger = logging.getLogger(__name__)


def analyze_gpx(content: Union[bytes, str], filename: str) -> AnalysisResult:
    """
    Parse and summarize a GPX document.

    Args:
        content: GPX document as bytes or text
        filename: Original filename

    Returns:
        AnalysisResult with summary on success, error message otherwise
    """
    try:
        points = GPXParserService.parse(content, filename)
    except GPXError as e:
        return AnalysisResult(ok=False, error=e.message)

    summary = summarize_track(points)
    logger.info(
        f"Analyzed {filename}: {summary.point_count} points, "
        f"{summary.distance_miles} mi, +{summary.elevation_gain_feet} ft"
    )
    return AnalysisResult(ok=True, summary=summary)


def analyze_gpx_base64(content_base64: Union[bytes, str], filename: str) -> AnalysisResult:
    """Same as analyze_gpx for a base64-encoded payload."""
    try:
        points = GPXParserService.parse_base64(content_base64, filename)
    except GPXError as e:
        return AnalysisResult(ok=False, error=e.message)

    return AnalysisResult(ok=True, summary=summarize_track(points))
