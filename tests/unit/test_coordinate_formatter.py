from __future__ import annotations

import pytest

from src.adapters.text import TemplateCoordinateFormatter
from src.domain.models import CoordinateFormat, Geopoint

pytestmark = pytest.mark.unit

_POINT = Geopoint(lat=52.60205, lon=10.0576)


@pytest.mark.parametrize(
    ("fmt", "expected"),
    [
        (CoordinateFormat.LAT_LON_DECDEGREE, "N 52.602050° E 010.057600°"),
        (CoordinateFormat.LAT_LON_DECMINUTE, "N 52° 36.123 E 010° 03.456"),
        (CoordinateFormat.LAT_LON_DECSECOND, "N 52° 36' 07.380\" E 010° 03' 27.360\""),
        (CoordinateFormat.LAT_LON_DECDEGREE_COMMA, "52.602050,10.057600"),
        (CoordinateFormat.LAT_DECDEGREE, "N 52.602050°"),
        (CoordinateFormat.LAT_DECMINUTE, "N 52° 36.123"),
        (CoordinateFormat.LAT_DECMINUTE_RAW, "N 52 36.123"),
        (CoordinateFormat.LON_DECDEGREE, "E 010.057600°"),
        (CoordinateFormat.LON_DECMINUTE, "E 010° 03.456"),
        (CoordinateFormat.LON_DECMINUTE_RAW, "E 010 03.456"),
    ],
)
def test_renders_every_format(fmt: CoordinateFormat, expected: str) -> None:
    assert TemplateCoordinateFormatter().format(_POINT, fmt) == expected


def test_accepts_string_keys_and_enum_names() -> None:
    formatter = TemplateCoordinateFormatter()
    assert formatter.format(_POINT, "lat_decminute") == "N 52° 36.123"
    assert formatter.format(_POINT, "LAT_DECMINUTE") == "N 52° 36.123"


def test_unknown_key_raises_value_error() -> None:
    with pytest.raises(ValueError, match="Unknown coordinate format"):
        TemplateCoordinateFormatter().format(_POINT, "utm")


def test_southern_and_western_hemispheres() -> None:
    p = Geopoint(lat=-33.5, lon=-70.25)
    formatter = TemplateCoordinateFormatter()
    assert formatter.format(p, CoordinateFormat.LAT_LON_DECMINUTE) == (
        "S 33° 30.000 W 070° 15.000"
    )
    assert formatter.format(p, CoordinateFormat.LAT_LON_DECDEGREE_COMMA) == (
        "-33.500000,-70.250000"
    )


def test_rounded_minutes_carry_into_degrees() -> None:
    p = Geopoint(lat=10.9999999, lon=-0.9999999)
    formatter = TemplateCoordinateFormatter()
    assert formatter.format(p, CoordinateFormat.LAT_DECMINUTE) == "N 11° 00.000"
    assert formatter.format(p, CoordinateFormat.LON_DECMINUTE) == "W 001° 00.000"


@pytest.mark.parametrize(
    ("fmt", "expected"),
    [
        (CoordinateFormat.LAT_LON_DECDEGREE, "N 00.000000° E 000.000000°"),
        (CoordinateFormat.LAT_LON_DECMINUTE, "N 00° 00.000 E 000° 00.000"),
        (
            CoordinateFormat.LAT_LON_DECSECOND,
            "N 00° 00' 00.000\" E 000° 00' 00.000\"",
        ),
        (CoordinateFormat.LAT_LON_DECDEGREE_COMMA, "0.000000,0.000000"),
    ],
)
def test_negative_value_rounding_to_zero_has_no_southern_or_western_sign(
    fmt: CoordinateFormat, expected: str
) -> None:
    p = Geopoint(lat=-1e-7, lon=-1e-7)
    assert TemplateCoordinateFormatter().format(p, fmt) == expected


def test_small_negative_value_keeps_hemisphere_when_it_survives_rounding() -> None:
    p = Geopoint(lat=-0.0001, lon=-0.0001)
    assert str(p) == "S 00° 00.006 W 000° 00.006"
