"""
Shared fixtures: small GPX documents built in memory.
"""

from typing import Optional, Sequence, Tuple

import pytest


# (lat, lon, ele, time)
PointSpec = Tuple[float, float, Optional[float], Optional[str]]

# The three-point walk used throughout: 50 m climb, 30 m drop, 20 minutes
SAMPLE_POINTS: list[PointSpec] = [
    (51.00, -1.00, 100, "2024-05-01T09:00:00Z"),
    (51.01, -1.00, 150, "2024-05-01T09:10:00Z"),
    (51.02, -1.00, 120, "2024-05-01T09:20:00Z"),
]


def build_gpx(points: Sequence[PointSpec], tag: str = "trkpt") -> str:
    """Render points as a minimal GPX 1.1 document."""
    body = []
    for lat, lon, ele, time in points:
        children = ""
        if ele is not None:
            children += f"<ele>{ele}</ele>"
        if time is not None:
            children += f"<time>{time}</time>"
        body.append(f'      <{tag} lat="{lat}" lon="{lon}">{children}</{tag}>')

    if tag == "trkpt":
        container_open, container_close = "  <trk>\n    <name>Test</name>\n    <trkseg>", "    </trkseg>\n  </trk>"
    else:
        container_open, container_close = "  <rte>\n    <name>Test</name>", "  </rte>"

    return "\n".join([
        '<?xml version="1.0" encoding="UTF-8"?>',
        '<gpx version="1.1" creator="tests" xmlns="http://www.topografix.com/GPX/1/1">',
        container_open,
        *body,
        container_close,
        "</gpx>",
    ])


def straight_line_points(n: int, step_deg: float = 0.001) -> list[PointSpec]:
    """n points heading due north from (51, -1), elevation = index."""
    return [(51.0 + i * step_deg, -1.0, float(i), None) for i in range(n)]


@pytest.fixture
def make_gpx():
    """Builder for GPX documents from (lat, lon, ele, time) tuples."""
    return build_gpx


@pytest.fixture
def sample_gpx() -> str:
    """Three-point walk document."""
    return build_gpx(SAMPLE_POINTS)


@pytest.fixture
def long_gpx() -> str:
    """Fifty-point straight walk (~5.5 km)."""
    return build_gpx(straight_line_points(50))
