"""
Tests for the click CLI.
"""

import json

import pytest
from click.testing import CliRunner

from trailflyby.cli import cli
from trailflyby.features.flyby import FlybyService, UnknownCameraPresetError


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def walk_file(tmp_path, sample_gpx):
    path = tmp_path / "walk.gpx"
    path.write_text(sample_gpx, encoding="utf-8")
    return path


@pytest.fixture
def long_walk_file(tmp_path, long_gpx):
    path = tmp_path / "long.gpx"
    path.write_text(long_gpx, encoding="utf-8")
    return path


class TestAnalyze:

    def test_text_output(self, runner, walk_file):
        result = runner.invoke(cli, ["analyze", str(walk_file)])
        assert result.exit_code == 0, result.output
        assert "1.38 mi" in result.output
        assert "+164 ft" in result.output
        assert "0h 20m 0s" in result.output

    def test_json_output(self, runner, walk_file):
        result = runner.invoke(cli, ["analyze", str(walk_file), "--json"])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["points"] == 3
        assert data["elapsedSeconds"] == 1200

    def test_wrong_extension(self, runner, tmp_path, sample_gpx):
        path = tmp_path / "walk.txt"
        path.write_text(sample_gpx, encoding="utf-8")
        result = runner.invoke(cli, ["analyze", str(path)])
        assert result.exit_code == 1
        assert "must be a .gpx" in result.output

    def test_empty_file(self, runner, tmp_path):
        path = tmp_path / "empty.gpx"
        path.write_bytes(b"")
        result = runner.invoke(cli, ["analyze", str(path)])
        assert result.exit_code == 1
        assert "File is empty" in result.output


class TestPlayback:

    def test_json(self, runner, long_walk_file):
        result = runner.invoke(cli, [
            "playback", str(long_walk_file), "--max-points", "10", "--preset", "chase",
        ])
        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["preset"]["id"] == "chase"
        assert len(data["points"]) == 10
        assert set(data["points"][0]) == {
            "lat", "lon", "ele", "timeMs", "distanceFromStartM", "bearing",
        }

    def test_gpx_to_file(self, runner, long_walk_file, tmp_path):
        out = tmp_path / "out.gpx"
        result = runner.invoke(cli, [
            "playback", str(long_walk_file), "--max-points", "10",
            "--format", "gpx", "-o", str(out),
        ])
        assert result.exit_code == 0, result.output
        assert "Saved 10 points" in result.output
        assert out.read_text(encoding="utf-8").count("<trkpt") == 10

    def test_invalid_preset(self, runner, walk_file):
        result = runner.invoke(cli, ["playback", str(walk_file), "--preset", "drone"])
        assert result.exit_code == 2

    def test_unknown_preset_message(self, runner, walk_file, monkeypatch):
        """Preset rejected by the service is reported without quotes."""
        def fail(self, *args, **kwargs):
            raise UnknownCameraPresetError("drone")

        monkeypatch.setattr(FlybyService, "build_plan", fail)
        result = runner.invoke(cli, ["playback", str(walk_file)])
        assert result.exit_code == 1
        assert "Unknown camera preset: drone" in result.output
        assert "'drone'" not in result.output


class TestPresets:

    def test_lists_all(self, runner):
        result = runner.invoke(cli, ["presets"])
        assert result.exit_code == 0
        for preset_id in ("cinematic", "balanced", "chase"):
            assert preset_id in result.output
