"""
Formatting utilities for display and rounding.

Used by the summarizer and the CLI.
"""
from decimal import Decimal, ROUND_HALF_UP

from .constants import FEET_PER_METER, METERS_PER_MILE


def round_half_up(value: float, digits: int = 0) -> float:
    """
    Round half away from zero to a fixed number of decimals.

    Built-in round() uses banker's rounding (2.5 -> 2), which disagrees
    with the values already published in post front matter.
    """
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def meters_to_miles(meters: float) -> float:
    """Convert meters to miles."""
    return meters / METERS_PER_MILE


def meters_to_feet(meters: float) -> float:
    """Convert meters to feet."""
    return meters * FEET_PER_METER


def format_duration(total_seconds: int | None) -> str | None:
    """
    Format seconds as 'Xh Ym Zs'.

    Args:
        total_seconds: Elapsed time in seconds

    Returns:
        Formatted string (e.g., '1h 5m 3s'), or None for missing,
        zero or negative durations
    """
    if total_seconds is None or total_seconds <= 0:
        return None

    seconds = int(total_seconds)
    hours = seconds // 3600
    minutes = (seconds % 3600) // 60
    secs = seconds % 60

    return f"{hours}h {minutes}m {secs}s"


def format_distance_miles(miles: float) -> str:
    """Format distance, e.g. '7.25 mi'."""
    return f"{miles:.2f} mi"


def format_elevation_feet(feet: int | None) -> str:
    """Format ascent with sign, e.g. '+1640 ft'."""
    if feet is None:
        return "—"
    return f"+{feet} ft"


def format_pace(pace_min_per_mile: float | None) -> str:
    """
    Format pace as 'M:SS min/mi'.

    Args:
        pace_min_per_mile: Pace in minutes per mile

    Returns:
        Formatted string (e.g., '18:30 min/mi')
    """
    if pace_min_per_mile is None:
        return "—"

    total_seconds = int(round_half_up(pace_min_per_mile * 60))
    minutes, seconds = divmod(total_seconds, 60)

    return f"{minutes}:{seconds:02d} min/mi"
