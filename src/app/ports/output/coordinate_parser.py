from __future__ import annotations

from abc import ABC, abstractmethod


class ICoordinateParser(ABC):
    """Port for extracting latitude/longitude degree values from free text."""

    @abstractmethod
    def parse_latitude(self, text: str) -> float:
        """Return the latitude found in text, raising CoordinateParseError if none."""

    @abstractmethod
    def parse_longitude(self, text: str) -> float:
        """Return the longitude found in text, raising CoordinateParseError if none."""
