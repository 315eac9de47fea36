"""
Compact UTM Vertex Notation.

Dominican environmental permits often print a footprint's vertices as one
run of text:

    19Q561063UTM2066147-19Q561047UTM2066132-19Q561019UTM2066142

Each segment is ``<zone><easting>UTM<northing>``, segments are separated
by hyphens. The extraction pipeline may hand this text over verbatim; this
module turns it into ``UTMCoordinate`` values and back.
"""

import re
from typing import List, Sequence

from common.logging_config import get_logger
from common.types import UTMCoordinate

logger = get_logger(__name__)

_SEGMENT_PATTERN = re.compile(
    r"^(?P<zone>\d{1,2}[A-Z])(?P<easting>\d{6})UTM(?P<northing>\d{7})$"
)


def parse_compact_utm(text: str) -> List[UTMCoordinate]:
    """Parse compact vertex notation.

    Whitespace (including line breaks from OCR) and letter case are
    ignored. Malformed segments are skipped with a warning.

    Examples
    --------
    >>> parse_compact_utm("19Q561063UTM2066147-19Q561047UTM2066132")
    [UTMCoordinate(easting=561063.0, northing=2066147.0, zone='19Q'), UTMCoordinate(easting=561047.0, northing=2066132.0, zone='19Q')]
    """
    points = []
    if not text:
        return points

    for raw in text.upper().split("-"):
        segment = "".join(raw.split())
        if not segment:
            continue
        match = _SEGMENT_PATTERN.match(segment)
        if match is None:
            logger.warning(f"Skipping malformed UTM segment {raw.strip()!r}")
            continue
        points.append(UTMCoordinate(
            easting=float(match.group("easting")),
            northing=float(match.group("northing")),
            zone=match.group("zone"),
        ))
    return points


def format_compact_utm(points: Sequence[UTMCoordinate]) -> str:
    """Render points in compact vertex notation.

    Easting and northing are written as whole meters.
    """
    return "-".join(
        f"{p.zone}{int(round(p.easting)):06d}UTM{int(round(p.northing)):07d}"
        for p in points
    )
