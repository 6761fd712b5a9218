from __future__ import annotations

from dataclasses import dataclass, replace

from src.domain.algorithms.coordinate_text import lat_lon_dec_minute
from src.domain.algorithms.geo_utils import (
    destination,
    great_circle_distance_km,
    initial_bearing_deg,
)
from src.domain.exceptions import MalformedCoordinate


@dataclass(frozen=True, slots=True)
class Geopoint:
    """A point on a spherical Earth, latitude and longitude in degrees.

    Instances are always valid: latitude in [-90, 90], longitude in
    [-180, 180]. Operations that would change a coordinate return a new
    point instead.
    """

    lat: float = 0.0
    lon: float = 0.0

    def __post_init__(self) -> None:
        if not (-90.0 <= self.lat <= 90.0):
            raise MalformedCoordinate(f"malformed latitude: {self.lat}")
        if not (-180.0 <= self.lon <= 180.0):
            raise MalformedCoordinate(f"malformed longitude: {self.lon}")

    @classmethod
    def from_degrees(cls, lat: float, lon: float) -> Geopoint:
        return cls(lat=float(lat), lon=float(lon))

    @classmethod
    def from_microdegrees(cls, lat_e6: int, lon_e6: int) -> Geopoint:
        return cls(lat=lat_e6 * 1e-6, lon=lon_e6 * 1e-6)

    @classmethod
    def copy_of(cls, other: Geopoint) -> Geopoint:
        return cls(lat=other.lat, lon=other.lon)

    @property
    def latitude(self) -> float:
        return self.lat

    @property
    def longitude(self) -> float:
        return self.lon

    @property
    def latitude_e6(self) -> int:
        return int(self.lat * 1e6)

    @property
    def longitude_e6(self) -> int:
        return int(self.lon * 1e6)

    def with_latitude(self, lat: float) -> Geopoint:
        return replace(self, lat=float(lat))

    def with_longitude(self, lon: float) -> Geopoint:
        return replace(self, lon=float(lon))

    def with_latitude_e6(self, lat_e6: int) -> Geopoint:
        return replace(self, lat=lat_e6 * 1e-6)

    def with_longitude_e6(self, lon_e6: int) -> Geopoint:
        return replace(self, lon=lon_e6 * 1e-6)

    def distance_to(self, other: Geopoint) -> float:
        """Great-circle distance in km.

        Raises ComputationFailure when the result is NaN or not strictly
        positive, which includes two coincident points.
        """

        return great_circle_distance_km(self.lat, self.lon, other.lat, other.lon)

    def bearing_to(self, other: Geopoint) -> float:
        """Bearing in degrees to another point (0 = north, 90 = east)."""

        return initial_bearing_deg(self.lat, self.lon, other.lat, other.lon)

    def project(self, bearing: float, distance: float) -> Geopoint:
        """Point reached from here after `distance` km along `bearing` degrees.

        The resulting longitude is not wrapped; crossing the antimeridian
        raises MalformedCoordinate.
        """

        lat, lon = destination(
            self.lat, self.lon, bearing_deg=bearing, distance_km=distance
        )
        return Geopoint(lat=lat, lon=lon)

    def is_equal_to(
        self, other: Geopoint | None, tolerance: float | None = None
    ) -> bool:
        """Exact equality, or equality within `tolerance` km when given.

        The tolerant form goes through distance_to and raises the same
        ComputationFailure for coincident points.
        """

        if other is None:
            return False
        if tolerance is None:
            return other.lat == self.lat and other.lon == self.lon
        return self.distance_to(other) <= tolerance

    def __str__(self) -> str:
        return lat_lon_dec_minute(self.lat, self.lon)
