"""
GPX Parser Service

Extracts track points from uploaded route documents.

The scan is deliberately lenient: it works on the raw text rather than a
full XML tree, so exports from watches and apps with broken namespaces or
truncated tails still yield whatever points they contain.
"""

import base64
import binascii
import logging
import math
import re
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import List, Optional, Tuple, Union

import gpxpy.gpx
from gpxpy.gpxfield import parse_time

from trailflyby.shared.constants import GPX_EXTENSION, POINT_TAG_FAMILIES
from .exceptions import GPXDecodeError, GPXFormatError, InsufficientPointsError
from .models import TrackPoint

logger = logging.getLogger(__name__)

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

_ELE_RE = re.compile(r"<ele>([^<]+)</ele>")
_TIME_RE = re.compile(r"<time>([^<]+)</time>")


@lru_cache(maxsize=None)
def _point_patterns(tag: str) -> Tuple[re.Pattern, re.Pattern]:
    """Compile (paired, self-closing) patterns for a point tag family."""
    attrs = r'[^>]*?\blat="([^"]+)"[^>]*?\blon="([^"]+)"'
    paired = re.compile(
        rf"<{tag}\b{attrs}[^>]*(?<!/)>(.*?)</{tag}>",
        re.DOTALL,
    )
    self_closing = re.compile(rf"<{tag}\b{attrs}[^>]*/>")
    return paired, self_closing


def _parse_float(raw: Optional[str]) -> Optional[float]:
    """Parse a finite float, None for anything else."""
    if raw is None:
        return None
    try:
        value = float(raw.strip())
    except ValueError:
        return None
    return value if math.isfinite(value) else None


def _parse_timestamp_ms(raw: Optional[str]) -> Optional[int]:
    """Parse a GPX <time> value to epoch milliseconds."""
    if raw is None:
        return None
    try:
        parsed = parse_time(raw.strip())
    except (gpxpy.gpx.GPXException, ValueError):
        return None
    if parsed is None:
        return None

    # GPX 1.1 mandates UTC; treat zone-less stamps as such
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)

    return (parsed - _EPOCH) // timedelta(milliseconds=1)


class GPXParserService:
    """Service for parsing GPX files."""

    @staticmethod
    def is_gpx_filename(filename: Optional[str]) -> bool:
        """Check the extension hint supplied with the upload."""
        return str(filename or "").lower().endswith(GPX_EXTENSION)

    @staticmethod
    def decode(content: Union[bytes, str]) -> str:
        """
        Decode raw payload to text.

        Raises:
            GPXDecodeError: If bytes are not valid UTF-8
        """
        if isinstance(content, str):
            return content
        try:
            return content.decode("utf-8")
        except UnicodeDecodeError as e:
            logger.warning(f"Failed to decode GPX payload: {e}")
            raise GPXDecodeError() from e

    @staticmethod
    def parse(content: Union[bytes, str], filename: str) -> List[TrackPoint]:
        """
        Parse GPX content and extract track points.

        Track points (trkpt) come first, then route points (rtept); within
        each family paired tags precede self-closing ones. Families are
        concatenated, not merged by recorded order.

        Args:
            content: GPX document as bytes or text
            filename: Original filename, used as the format hint

        Returns:
            List of TrackPoint in document order (per family)

        Raises:
            GPXFormatError: If filename is not a .gpx
            GPXDecodeError: If content cannot be decoded
            InsufficientPointsError: If fewer than 2 valid points found
        """
        if not GPXParserService.is_gpx_filename(filename):
            logger.warning(f"Rejected non-GPX upload: {filename!r}")
            raise GPXFormatError()

        xml = GPXParserService.decode(content)

        points: List[TrackPoint] = []
        for tag in POINT_TAG_FAMILIES:
            family = GPXParserService.extract_points(xml, tag)
            logger.debug(f"{filename}: {len(family)} <{tag}> points")
            points.extend(family)

        if len(points) < 2:
            logger.warning(f"{filename}: only {len(points)} usable points")
            raise InsufficientPointsError()

        return points

    @staticmethod
    def parse_base64(content_base64: Union[bytes, str], filename: str) -> List[TrackPoint]:
        """
        Parse a base64-encoded GPX payload (admin upload form).

        Raises:
            GPXFormatError: If filename is not a .gpx
            GPXDecodeError: If payload is not valid base64 or UTF-8
            InsufficientPointsError: If fewer than 2 valid points found
        """
        if not GPXParserService.is_gpx_filename(filename):
            logger.warning(f"Rejected non-GPX upload: {filename!r}")
            raise GPXFormatError()

        try:
            if isinstance(content_base64, bytes):
                content_base64 = content_base64.decode("ascii")
            # MIME-wrapped payloads carry line breaks; some clients drop padding
            compact = "".join(content_base64.split())
            compact += "=" * (-len(compact) % 4)
            raw = base64.b64decode(compact, validate=True)
        except (binascii.Error, ValueError) as e:
            logger.warning(f"Failed to decode base64 GPX payload: {e}")
            raise GPXDecodeError() from e

        return GPXParserService.parse(raw, filename)

    @staticmethod
    def extract_points(xml: str, tag: str) -> List[TrackPoint]:
        """
        Extract all points of one tag family.

        Paired tags are read first (with optional <ele>/<time> children),
        then self-closing tags (coordinates only). Points whose lat/lon do
        not parse as finite numbers are skipped.

        Args:
            xml: Document text
            tag: Point tag name, e.g. 'trkpt'

        Returns:
            List of TrackPoint
        """
        paired, self_closing = _point_patterns(tag)
        points: List[TrackPoint] = []
        skipped = 0

        for match in paired.finditer(xml):
            lat = _parse_float(match.group(1))
            lon = _parse_float(match.group(2))
            if lat is None or lon is None:
                skipped += 1
                continue

            body = match.group(3) or ""
            ele_match = _ELE_RE.search(body)
            time_match = _TIME_RE.search(body)

            points.append(TrackPoint(
                latitude=lat,
                longitude=lon,
                elevation_m=_parse_float(ele_match.group(1) if ele_match else None),
                timestamp_ms=_parse_timestamp_ms(time_match.group(1) if time_match else None),
            ))

        for match in self_closing.finditer(xml):
            lat = _parse_float(match.group(1))
            lon = _parse_float(match.group(2))
            if lat is None or lon is None:
                skipped += 1
                continue
            points.append(TrackPoint(latitude=lat, longitude=lon))

        if skipped:
            logger.debug(f"Skipped {skipped} <{tag}> points with invalid coordinates")

        return points
