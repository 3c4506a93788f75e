"""
Flyby Service

Main orchestrator: GPX upload -> summary + playback path + camera track.
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Union

from trailflyby.config import settings
from trailflyby.features.gpx import (
    GPXParserService,
    PlaybackPoint,
    TrackPoint,
    TrackSummary,
    summarize_track,
)
from trailflyby.shared.constants import CameraPresetId
from .camera import CameraPreset, compute_bearings, get_camera_preset
from .playback import annotate_distances, build_playback_points, smooth_playback_points

logger = logging.getLogger(__name__)


@dataclass
class FlybyPlan:
    """Everything the renderer needs for one flyby."""
    summary: TrackSummary
    preset: CameraPreset
    points: List[PlaybackPoint] = field(default_factory=list)
    bearings: List[float] = field(default_factory=list)

    @property
    def total_distance_m(self) -> float:
        """Path length covered by the playback points."""
        if not self.points:
            return 0.0
        return self.points[-1].distance_from_start_m


class FlybyService:
    """
    Builds flyby plans from GPX documents.

    Defaults for point budget, smoothing and preset come from settings;
    every call may override them.
    """

    def __init__(
        self,
        max_points: Optional[int] = None,
        smoothing_radius: Optional[int] = None,
        default_preset: Optional[Union[CameraPresetId, str]] = None,
    ):
        self.max_points = max_points if max_points is not None else settings.max_playback_points
        self.smoothing_radius = (
            smoothing_radius if smoothing_radius is not None else settings.smoothing_radius
        )
        self.default_preset = get_camera_preset(
            default_preset if default_preset is not None else settings.default_camera_preset
        )

    def playback_path(
        self,
        points: Sequence[TrackPoint],
        max_points: Optional[int] = None,
        smoothing_radius: Optional[int] = None,
    ) -> List[PlaybackPoint]:
        """Annotate, resample and smooth raw track points."""
        if max_points is None:
            max_points = self.max_points
        if smoothing_radius is None:
            smoothing_radius = self.smoothing_radius

        annotated = annotate_distances(points)
        resampled = build_playback_points(annotated, max_points)
        return smooth_playback_points(resampled, smoothing_radius)

    def plan_from_points(
        self,
        points: Sequence[TrackPoint],
        preset: Optional[Union[CameraPresetId, str]] = None,
        max_points: Optional[int] = None,
        smoothing_radius: Optional[int] = None,
    ) -> FlybyPlan:
        """
        Build a plan from already-parsed points.

        Raises:
            InsufficientPointsError: If fewer than 2 points given
            UnknownCameraPresetError: If preset id is unknown
        """
        camera = get_camera_preset(preset) if preset is not None else self.default_preset
        summary = summarize_track(points)
        playback = self.playback_path(points, max_points, smoothing_radius)
        bearings = compute_bearings(playback, camera)

        logger.info(
            f"Flyby plan: {len(points)} source points -> {len(playback)} playback points, "
            f"preset={camera.id.value}"
        )

        return FlybyPlan(
            summary=summary,
            preset=camera,
            points=playback,
            bearings=bearings,
        )

    def build_plan(
        self,
        content: Union[bytes, str],
        filename: str,
        preset: Optional[Union[CameraPresetId, str]] = None,
        max_points: Optional[int] = None,
        smoothing_radius: Optional[int] = None,
    ) -> FlybyPlan:
        """
        Parse a GPX document and build its flyby plan.

        Args:
            content: GPX document as bytes or text
            filename: Original filename (must end in .gpx)
            preset: Camera preset id; service default when omitted
            max_points: Playback point budget; service default when omitted
            smoothing_radius: Smoothing half-width; service default when omitted

        Returns:
            FlybyPlan

        Raises:
            GPXError: If the document cannot be parsed
            UnknownCameraPresetError: If preset id is unknown
            ValueError: If max_points is below 2
        """
        points = GPXParserService.parse(content, filename)
        return self.plan_from_points(points, preset, max_points, smoothing_radius)
