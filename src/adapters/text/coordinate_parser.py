from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from src.app.ports.output import ICoordinateParser
from src.domain.exceptions import CoordinateParseError

logger = logging.getLogger(__name__)

_COMPONENT = r"\d+(?:[.,]\d+)?\s*[°'′\"″]*\s*"
_NUMBER = re.compile(r"\d+(?:[.,]\d+)?")

_LATITUDE = re.compile(
    rf"(?<![A-Za-z])(?P<hemi>[NS])\s*(?P<body>(?:{_COMPONENT}){{1,3}})",
    re.IGNORECASE,
)
_LONGITUDE = re.compile(
    rf"(?<![A-Za-z])(?P<hemi>[EW])\s*(?P<body>(?:{_COMPONENT}){{1,3}})",
    re.IGNORECASE,
)
_DECIMAL_PAIR = re.compile(
    r"^\s*(?P<lat>[-+]?\d+(?:\.\d+)?)\s*[,;\s]\s*(?P<lon>[-+]?\d+(?:\.\d+)?)\s*$"
)


def _to_float(raw: str) -> float:
    return float(raw.replace(",", "."))


def _sexagesimal(body: str) -> float:
    """Combine degree, minute and second components into decimal degrees."""

    parts = _NUMBER.findall(body)
    if not parts or len(parts) > 3:
        raise CoordinateParseError(f"Cannot read components from {body!r}")

    for raw in parts[:-1]:
        # Only the last component may carry a fraction.
        if "." in raw or "," in raw:
            raise CoordinateParseError(f"Unexpected fraction in {body!r}")

    values = [_to_float(p) for p in parts]
    for v in values[1:]:
        if v >= 60.0:
            raise CoordinateParseError(f"Minutes/seconds out of range in {body!r}")

    degrees = values[0]
    if len(values) > 1:
        degrees += values[1] / 60.0
    if len(values) > 2:
        degrees += values[2] / 3600.0
    return degrees


@dataclass(slots=True)
class TextCoordinateParser(ICoordinateParser):
    """Parses coordinates written with hemisphere letters or as a decimal pair.

    Accepted forms (latitude shown, longitude uses E/W):
      - N 52° 36.123          degrees and decimal minutes
      - N 52° 36' 07.38"      degrees, minutes and decimal seconds
      - N 52.60205°           decimal degrees
      - 52.60205, 10.0576     signed decimal pair (lat first)

    Values are not range checked here.
    """

    def parse_latitude(self, text: str) -> float:
        return self._parse(text, _LATITUDE, negative="S", group="lat")

    def parse_longitude(self, text: str) -> float:
        return self._parse(text, _LONGITUDE, negative="W", group="lon")

    def _parse(
        self, text: str, pattern: re.Pattern[str], *, negative: str, group: str
    ) -> float:
        if text is None:
            raise CoordinateParseError("Cannot parse coordinate from None")

        match = pattern.search(text)
        if match:
            value = _sexagesimal(match.group("body"))
            if match.group("hemi").upper() == negative:
                value = -value
            return value

        pair = _DECIMAL_PAIR.match(text)
        if pair:
            return float(pair.group(group))

        axis = "latitude" if group == "lat" else "longitude"
        logger.debug("No %s found in %r", axis, text)
        raise CoordinateParseError(f"Cannot parse {axis} from {text!r}")
