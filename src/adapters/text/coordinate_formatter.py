from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from src.app.ports.output import ICoordinateFormatter
from src.domain.algorithms.coordinate_text import (
    dec_degree,
    dec_minute,
    dec_second,
    lat_lon_dec_minute,
    signed_dec_degree,
)
from src.domain.models import CoordinateFormat, Geopoint

_RENDERERS: dict[CoordinateFormat, Callable[[Geopoint], str]] = {
    CoordinateFormat.LAT_LON_DECDEGREE: lambda p: (
        f"{dec_degree(p.lat, 2, 'N', 'S')} {dec_degree(p.lon, 3, 'E', 'W')}"
    ),
    CoordinateFormat.LAT_LON_DECMINUTE: lambda p: lat_lon_dec_minute(p.lat, p.lon),
    CoordinateFormat.LAT_LON_DECSECOND: lambda p: (
        f"{dec_second(p.lat, 2, 'N', 'S')} {dec_second(p.lon, 3, 'E', 'W')}"
    ),
    CoordinateFormat.LAT_LON_DECDEGREE_COMMA: lambda p: (
        f"{signed_dec_degree(p.lat)},{signed_dec_degree(p.lon)}"
    ),
    CoordinateFormat.LAT_DECDEGREE: lambda p: dec_degree(p.lat, 2, "N", "S"),
    CoordinateFormat.LAT_DECMINUTE: lambda p: dec_minute(p.lat, 2, "N", "S"),
    CoordinateFormat.LAT_DECMINUTE_RAW: lambda p: dec_minute(
        p.lat, 2, "N", "S", raw=True
    ),
    CoordinateFormat.LON_DECDEGREE: lambda p: dec_degree(p.lon, 3, "E", "W"),
    CoordinateFormat.LON_DECMINUTE: lambda p: dec_minute(p.lon, 3, "E", "W"),
    CoordinateFormat.LON_DECMINUTE_RAW: lambda p: dec_minute(
        p.lon, 3, "E", "W", raw=True
    ),
}


@dataclass(slots=True)
class TemplateCoordinateFormatter(ICoordinateFormatter):
    """Renders a Geopoint in one of the CoordinateFormat layouts.

    Example for (52.60205, 10.0576) with LAT_LON_DECMINUTE:
    'N 52° 36.123 E 010° 03.456'
    """

    def format(self, point: Geopoint, fmt: CoordinateFormat | str) -> str:
        return _RENDERERS[CoordinateFormat.parse(fmt)](point)
