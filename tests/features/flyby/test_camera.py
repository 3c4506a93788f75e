"""
Tests for camera presets and the bearing track.
"""

import dataclasses
import math

import pytest

from trailflyby.features.gpx import TrackPoint
from trailflyby.features.flyby.camera import (
    CAMERA_PRESETS,
    UnknownCameraPresetError,
    compute_bearings,
    get_camera_preset,
    list_camera_presets,
)
from trailflyby.features.flyby.playback import annotate_distances
from trailflyby.shared.constants import CameraPresetId


def _leg(start_lat, start_lon, bearing_deg, n, step_deg=0.001):
    """n points from a start heading on a fixed bearing near the equator."""
    rad = math.radians(bearing_deg)
    return [
        TrackPoint(
            latitude=start_lat + math.cos(rad) * step_deg * i,
            longitude=start_lon + math.sin(rad) * step_deg * i,
        )
        for i in range(n)
    ]


# =============================================================================
# Preset table
# =============================================================================

class TestPresetTable:

    def test_three_presets_in_order(self):
        assert [p.id for p in list_camera_presets()] == [
            CameraPresetId.CINEMATIC,
            CameraPresetId.BALANCED,
            CameraPresetId.CHASE,
        ]

    def test_cinematic_values(self):
        p = get_camera_preset(CameraPresetId.CINEMATIC)
        assert p.label == "Cinematic"
        assert (p.lookahead_meters, p.chase_meters, p.pitch_degrees) == (320, 135, 72)
        assert (p.zoom_base, p.zoom_min, p.zoom_max) == (13.6, 11.5, 14.2)
        assert p.bearing_smoothing == 0.14

    def test_balanced_values(self):
        p = get_camera_preset("balanced")
        assert (p.lookahead_meters, p.chase_meters, p.pitch_degrees) == (250, 105, 68)
        assert (p.zoom_base, p.zoom_min, p.zoom_max) == (13.8, 11.6, 14.3)
        assert p.bearing_smoothing == 0.16

    def test_chase_values(self):
        p = get_camera_preset("chase")
        assert (p.lookahead_meters, p.chase_meters, p.pitch_degrees) == (180, 80, 62)
        assert (p.zoom_base, p.zoom_min, p.zoom_max) == (14.1, 11.8, 14.5)
        assert p.bearing_smoothing == 0.2

    def test_zoom_bounds_and_smoothing_ranges(self):
        for p in CAMERA_PRESETS:
            assert p.zoom_min <= p.zoom_base <= p.zoom_max
            assert 0 < p.bearing_smoothing <= 1

    def test_unknown_preset(self):
        with pytest.raises(UnknownCameraPresetError):
            get_camera_preset("drone")

    def test_unknown_preset_is_key_error(self):
        with pytest.raises(KeyError):
            get_camera_preset("")

    def test_presets_are_read_only(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            get_camera_preset("chase").pitch_degrees = 10


# =============================================================================
# Bearings
# =============================================================================

class TestComputeBearings:

    def test_one_per_point(self):
        points = annotate_distances(_leg(0.0, 0.0, 0, 15))
        assert len(compute_bearings(points, get_camera_preset("chase"))) == 15

    def test_empty(self):
        assert compute_bearings([], get_camera_preset("chase")) == []

    def test_due_north(self):
        points = annotate_distances(_leg(51.0, -1.0, 0, 20))
        bearings = compute_bearings(points, get_camera_preset("balanced"))
        assert all(b == pytest.approx(0.0, abs=1e-9) for b in bearings)

    def test_due_east_at_equator(self):
        points = annotate_distances(_leg(0.0, 0.0, 90, 20))
        bearings = compute_bearings(points, get_camera_preset("balanced"))
        assert all(b == pytest.approx(90.0) for b in bearings)

    def test_turn_is_eased(self):
        """A right-angle turn is spread over several steps."""
        north = _leg(0.0, 0.0, 0, 20)
        east = _leg(north[-1].latitude, north[-1].longitude, 90, 20)[1:]
        points = annotate_distances(north + east)
        preset = get_camera_preset("chase")

        bearings = compute_bearings(points, preset)

        assert bearings[0] == pytest.approx(0.0, abs=1e-6)
        assert all(0.0 <= b < 360.0 for b in bearings)
        for prev, curr in zip(bearings, bearings[1:]):
            assert abs(curr - prev) <= 180 * preset.bearing_smoothing + 1e-9
        assert 45 < bearings[-1] <= 90

    def test_wraps_through_north(self):
        """Turning from 350° to 10° passes through 0°, not 180°."""
        first = _leg(0.0, 0.0, 350, 15)
        second = _leg(first[-1].latitude, first[-1].longitude, 10, 15)[1:]
        points = annotate_distances(first + second)

        bearings = compute_bearings(points, get_camera_preset("cinematic"))

        assert all(b >= 340 or b <= 20 for b in bearings)
        assert 0 <= bearings[-1] <= 20
