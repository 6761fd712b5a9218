from __future__ import annotations

from pydantic import BaseModel, Field

from src.domain.models import Geopoint


class GeopointSchema(BaseModel):
    lat: float = Field(..., ge=-90.0, le=90.0)
    lon: float = Field(..., ge=-180.0, le=180.0)

    @classmethod
    def from_domain(cls, point: Geopoint) -> GeopointSchema:
        return cls(lat=point.lat, lon=point.lon)

    def to_domain(self) -> Geopoint:
        return Geopoint.from_degrees(self.lat, self.lon)


class GeopointE6Schema(BaseModel):
    """Fixed-point form for consumers that store microdegree integers."""

    lat_e6: int = Field(..., ge=-90_000_000, le=90_000_000)
    lon_e6: int = Field(..., ge=-180_000_000, le=180_000_000)

    @classmethod
    def from_domain(cls, point: Geopoint) -> GeopointE6Schema:
        return cls(lat_e6=point.latitude_e6, lon_e6=point.longitude_e6)

    def to_domain(self) -> Geopoint:
        return Geopoint.from_microdegrees(self.lat_e6, self.lon_e6)
