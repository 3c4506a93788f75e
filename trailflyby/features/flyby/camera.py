"""
Camera presets and bearing track for flyby playback.

The preset table is part of the renderer contract: saved post configs
reference presets by id and the renderer reads these numbers as-is.
Changing a value changes every existing flyby.
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import List, Mapping, Optional, Sequence, Tuple, Union

from trailflyby.features.gpx.models import PlaybackPoint
from trailflyby.shared.constants import CameraPresetId, MIN_INTERPOLATION_SPAN_M
from trailflyby.shared.geo import (
    initial_bearing_degrees,
    normalize_bearing,
    shortest_angle_diff,
)
from .playback import interpolate_point_at_distance

logger = logging.getLogger(__name__)


class UnknownCameraPresetError(KeyError):
    """Requested camera preset id is not in the table."""
    pass


@dataclass(frozen=True)
class CameraPreset:
    """Camera behaviour parameters consumed by the renderer."""
    id: CameraPresetId
    label: str
    lookahead_meters: float      # how far ahead the camera aims
    chase_meters: float          # how far behind the marker it sits
    pitch_degrees: float
    zoom_base: float
    zoom_min: float
    zoom_max: float
    bearing_smoothing: float     # per-step blend towards target bearing, (0, 1]


CAMERA_PRESETS: Tuple[CameraPreset, ...] = (
    CameraPreset(
        id=CameraPresetId.CINEMATIC,
        label="Cinematic",
        lookahead_meters=320,
        chase_meters=135,
        pitch_degrees=72,
        zoom_base=13.6,
        zoom_min=11.5,
        zoom_max=14.2,
        bearing_smoothing=0.14,
    ),
    CameraPreset(
        id=CameraPresetId.BALANCED,
        label="Balanced",
        lookahead_meters=250,
        chase_meters=105,
        pitch_degrees=68,
        zoom_base=13.8,
        zoom_min=11.6,
        zoom_max=14.3,
        bearing_smoothing=0.16,
    ),
    CameraPreset(
        id=CameraPresetId.CHASE,
        label="Chase",
        lookahead_meters=180,
        chase_meters=80,
        pitch_degrees=62,
        zoom_base=14.1,
        zoom_min=11.8,
        zoom_max=14.5,
        bearing_smoothing=0.2,
    ),
)

_PRESETS_BY_ID: Mapping[CameraPresetId, CameraPreset] = MappingProxyType(
    {preset.id: preset for preset in CAMERA_PRESETS}
)


def list_camera_presets() -> Tuple[CameraPreset, ...]:
    """All presets in table order."""
    return CAMERA_PRESETS


def get_camera_preset(preset_id: Union[CameraPresetId, str]) -> CameraPreset:
    """
    Look up a preset by id.

    Args:
        preset_id: Enum member or its string value (e.g. 'chase')

    Raises:
        UnknownCameraPresetError: If no preset has that id
    """
    try:
        key = CameraPresetId(preset_id)
    except ValueError:
        raise UnknownCameraPresetError(preset_id) from None
    return _PRESETS_BY_ID[key]


def compute_bearings(
    points: Sequence[PlaybackPoint],
    preset: CameraPreset
) -> List[float]:
    """
    Smoothed camera bearing for each playback point.

    The target bearing at each point aims at the position lookahead_meters
    further along the path. The first bearing is taken as-is; each later
    one moves towards its target by bearing_smoothing of the shortest
    turn, so the camera eases through switchbacks instead of snapping.

    Args:
        points: Playback points (distance-annotated)
        preset: Camera preset supplying lookahead and smoothing

    Returns:
        Bearings in degrees [0, 360), one per point
    """
    bearings: List[float] = []
    if not points:
        return bearings

    total_m = points[-1].distance_from_start_m
    current: Optional[float] = None

    for point in points:
        ahead_m = min(point.distance_from_start_m + preset.lookahead_meters, total_m)

        # Nothing left to aim at (end of path): hold the last heading
        if ahead_m - point.distance_from_start_m > MIN_INTERPOLATION_SPAN_M:
            ahead = interpolate_point_at_distance(points, ahead_m)
            target = initial_bearing_degrees(
                point.latitude, point.longitude, ahead.lat, ahead.lon
            )
            if current is None:
                current = target
            else:
                current = normalize_bearing(
                    current + shortest_angle_diff(current, target) * preset.bearing_smoothing
                )

        bearings.append(current if current is not None else 0.0)

    logger.debug(f"Computed {len(bearings)} bearings with preset {preset.id.value}")
    return bearings
