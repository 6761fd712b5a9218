from __future__ import annotations

from dataclasses import dataclass

from src.app.ports.output import ICoordinateFormatter, ICoordinateParser
from src.domain.models import CoordinateFormat, Geopoint


@dataclass(slots=True)
class GeopointTextService:
    """Reads Geopoints from text and renders them through the text ports.

    A caller that needs its own rendering builds the service with a
    different formatter; the named formats stay a closed set.
    """

    parser: ICoordinateParser
    formatter: ICoordinateFormatter
    default_format: CoordinateFormat | str = CoordinateFormat.LAT_LON_DECMINUTE

    def parse(self, text: str) -> Geopoint:
        """Parse latitude and longitude out of free text.

        Raises CoordinateParseError if the parser finds no value and
        MalformedCoordinate if a parsed value is out of range.
        """

        return Geopoint(
            lat=self.parser.parse_latitude(text),
            lon=self.parser.parse_longitude(text),
        )

    def with_latitude_text(self, point: Geopoint, text: str) -> Geopoint:
        return point.with_latitude(self.parser.parse_latitude(text))

    def with_longitude_text(self, point: Geopoint, text: str) -> Geopoint:
        return point.with_longitude(self.parser.parse_longitude(text))

    def format(
        self, point: Geopoint, fmt: CoordinateFormat | str | None = None
    ) -> str:
        if fmt is None:
            fmt = self.default_format
        return self.formatter.format(point, fmt)
