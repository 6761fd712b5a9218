from __future__ import annotations

import pytest
from pydantic import ValidationError

from src.adapters.serialization import GeopointE6Schema, GeopointSchema
from src.domain.models import Geopoint

pytestmark = pytest.mark.unit


def test_geopoint_schema_round_trip() -> None:
    p = Geopoint(lat=28.1234, lon=-15.4321)
    schema = GeopointSchema.from_domain(p)
    assert schema.model_dump() == {"lat": 28.1234, "lon": -15.4321}
    assert schema.to_domain() == p


def test_geopoint_schema_from_json() -> None:
    schema = GeopointSchema.model_validate_json('{"lat": 1.5, "lon": 2.5}')
    assert schema.to_domain() == Geopoint(lat=1.5, lon=2.5)


@pytest.mark.parametrize(
    "payload",
    [
        {"lat": 90.5, "lon": 0.0},
        {"lat": 0.0, "lon": -180.5},
        {"lat": 0.0},
    ],
)
def test_geopoint_schema_rejects_invalid_payload(payload: dict) -> None:
    with pytest.raises(ValidationError):
        GeopointSchema.model_validate(payload)


def test_microdegree_schema_round_trip() -> None:
    p = Geopoint(lat=52.60205, lon=-10.0576)
    schema = GeopointE6Schema.from_domain(p)
    assert schema.lat_e6 == p.latitude_e6
    assert schema.lon_e6 == p.longitude_e6

    back = schema.to_domain()
    assert back.lat == pytest.approx(p.lat, abs=1e-6)
    assert back.lon == pytest.approx(p.lon, abs=1e-6)


def test_microdegree_schema_rejects_out_of_range() -> None:
    with pytest.raises(ValidationError):
        GeopointE6Schema(lat_e6=90_000_001, lon_e6=0)
