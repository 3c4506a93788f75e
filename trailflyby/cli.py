"""
CLI interface for track processing.

Usage:
    python -m trailflyby.cli analyze walks/kinder-scout.gpx
    python -m trailflyby.cli playback walks/kinder-scout.gpx --preset chase
    python -m trailflyby.cli playback walks/kinder-scout.gpx --format gpx -o out.gpx
    python -m trailflyby.cli presets
"""

import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path

import click

from trailflyby.config import settings
from trailflyby.features.gpx import GPXError, analyze_gpx
from trailflyby.features.flyby import (
    FlybyService,
    UnknownCameraPresetError,
    list_camera_presets,
    playback_to_gpx,
)
from trailflyby.shared.constants import CameraPresetId
from trailflyby.shared.formatters import (
    format_distance_miles,
    format_elevation_feet,
    format_pace,
)

logger = logging.getLogger(__name__)

PRESET_CHOICES = [p.value for p in CameraPresetId]


def _read_gpx(path: str) -> bytes:
    """Read a route file, enforcing the configured size limit."""
    file_path = Path(path)
    logger.debug(f"Reading {file_path}")
    size = file_path.stat().st_size
    if size == 0:
        raise click.ClickException("File is empty")
    if size > settings.max_gpx_size_bytes:
        raise click.ClickException(
            f"File too large (max {settings.max_gpx_size_bytes // (1024 * 1024)}MB)"
        )
    return file_path.read_bytes()


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def cli(verbose):
    """Trail statistics and flyby path tools."""
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level, logging.INFO)
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)],
    )


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--json", "as_json", is_flag=True, help="Print camelCase JSON summary")
def analyze(path, as_json):
    """Print trail statistics for a GPX file."""
    result = analyze_gpx(_read_gpx(path), Path(path).name)
    if not result.ok:
        raise click.ClickException(result.error)

    summary = result.summary
    if as_json:
        click.echo(json.dumps(summary.model_dump(by_alias=True), indent=2))
        return

    click.echo(f"Points:    {summary.point_count}")
    click.echo(f"Distance:  {format_distance_miles(summary.distance_miles)}")
    click.echo(f"Ascent:    {format_elevation_feet(summary.elevation_gain_feet)}")
    if summary.min_elevation_m is not None:
        click.echo(f"Elevation: {summary.min_elevation_m}-{summary.max_elevation_m} m")
    if summary.elapsed_formatted:
        click.echo(f"Elapsed:   {summary.elapsed_formatted}")
    if summary.avg_pace_min_per_mile is not None:
        click.echo(f"Pace:      {format_pace(summary.avg_pace_min_per_mile)} "
                   f"({summary.avg_speed_mph} mph)")
    click.echo(f"Centre:    {summary.center_lat}, {summary.center_lon}")


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--preset",
    default=None,
    type=click.Choice(PRESET_CHOICES),
    help="Camera preset (default from settings)"
)
@click.option("--max-points", default=None, type=click.IntRange(min=2), help="Playback point budget")
@click.option("--smoothing-radius", default=None, type=click.IntRange(min=0), help="Smoothing half-width")
@click.option(
    "--format", "output_format",
    default="json",
    type=click.Choice(["json", "gpx"]),
    help="Output format"
)
@click.option("-o", "--output", default=None, type=click.Path(dir_okay=False), help="Write to file")
def playback(path, preset, max_points, smoothing_radius, output_format, output):
    """Build the flyby playback path for a GPX file."""
    service = FlybyService(max_points=max_points, smoothing_radius=smoothing_radius)
    try:
        plan = service.build_plan(_read_gpx(path), Path(path).name, preset=preset)
    except GPXError as e:
        raise click.ClickException(e.message)
    except UnknownCameraPresetError as e:
        raise click.ClickException(f"Unknown camera preset: {e.args[0]}")

    if output_format == "gpx":
        text = playback_to_gpx(plan.points, name=Path(path).stem)
    else:
        preset_data = asdict(plan.preset)
        preset_data["id"] = plan.preset.id.value
        text = json.dumps({
            "summary": plan.summary.model_dump(by_alias=True),
            "preset": preset_data,
            "points": [
                {
                    "lat": p.latitude,
                    "lon": p.longitude,
                    "ele": p.elevation_m,
                    "timeMs": p.timestamp_ms,
                    "distanceFromStartM": p.distance_from_start_m,
                    "bearing": bearing,
                }
                for p, bearing in zip(plan.points, plan.bearings)
            ],
        }, indent=2)

    if output:
        Path(output).write_text(text, encoding="utf-8")
        click.echo(f"Saved {len(plan.points)} points: {output}")
    else:
        click.echo(text)


@cli.command()
def presets():
    """List camera presets."""
    click.echo(f"{'ID':10} | {'Ahead':>6} | {'Chase':>6} | {'Pitch':>5} | {'Zoom':>15} | Smooth")
    click.echo("-" * 64)
    for p in list_camera_presets():
        zoom = f"{p.zoom_min}/{p.zoom_base}/{p.zoom_max}"
        click.echo(
            f"{p.id.value:10} | {p.lookahead_meters:>5}m | {p.chase_meters:>5}m | "
            f"{p.pitch_degrees:>5} | {zoom:>15} | {p.bearing_smoothing}"
        )


if __name__ == "__main__":
    cli()
