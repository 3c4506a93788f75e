"""
Flyby playback module.

Usage:
    from trailflyby.features.flyby import FlybyService
    plan = FlybyService().build_plan(content, "walk.gpx", preset="chase")

Components:
- playback: cumulative distance, interpolation, resampling, smoothing
- camera: preset table and smoothed look-ahead bearings
- export: playback points as GPX
- FlybyService: parse -> summarize -> playback path -> bearings
"""

from .playback import (
    InterpolatedPosition,
    annotate_distances,
    find_distance_index,
    interpolate_point_at_distance,
    build_playback_points,
    smooth_playback_points,
)
from .camera import (
    CAMERA_PRESETS,
    CameraPreset,
    UnknownCameraPresetError,
    compute_bearings,
    get_camera_preset,
    list_camera_presets,
)
from .export import playback_to_gpx
from .service import FlybyPlan, FlybyService

__all__ = [
    # Playback
    "InterpolatedPosition",
    "annotate_distances",
    "find_distance_index",
    "interpolate_point_at_distance",
    "build_playback_points",
    "smooth_playback_points",
    # Camera
    "CAMERA_PRESETS",
    "CameraPreset",
    "UnknownCameraPresetError",
    "compute_bearings",
    "get_camera_preset",
    "list_camera_presets",
    # Export
    "playback_to_gpx",
    # Service
    "FlybyPlan",
    "FlybyService",
]
