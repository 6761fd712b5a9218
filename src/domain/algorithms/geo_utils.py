from __future__ import annotations

import math

from src.domain.exceptions import ComputationFailure

EARTH_RADIUS_KM = 6371.0
KM_IN_MILES = 1 / 1.609344

# Bearing comparisons are made on a 1/360000 degree grid.
_BEARING_GRID = 360000


def _acos(x: float, what: str) -> float:
    try:
        return math.acos(x)
    except ValueError as e:
        raise ComputationFailure(f"Error in {what} calculation: acos({x!r})") from e


def _asin(x: float, what: str) -> float:
    try:
        return math.asin(x)
    except ValueError as e:
        raise ComputationFailure(f"Error in {what} calculation: asin({x!r})") from e


def _grid(value: float) -> int:
    # Half-up rounding of (0.5 + value * grid).
    return math.floor(0.5 + value * _BEARING_GRID + 0.5)


def great_circle_distance_km(
    lat1: float, lon1: float, lat2: float, lon2: float
) -> float:
    """Great-circle distance in km (spherical law of cosines).

    A result that is NaN or not strictly positive is reported as a failure,
    so two coincident points raise ComputationFailure rather than returning 0.
    The cosine term is not clamped to [-1, 1].
    """

    rlat1 = math.radians(lat1)
    rlon1 = math.radians(lon1)
    rlat2 = math.radians(lat2)
    rlon2 = math.radians(lon2)

    d = math.sin(rlat1) * math.sin(rlat2) + math.cos(rlat1) * math.cos(
        rlat2
    ) * math.cos(rlon1 - rlon2)
    distance = EARTH_RADIUS_KM * _acos(d, "distance")

    if math.isnan(distance) or not distance > 0:
        raise ComputationFailure("Error in distance calculation.")
    return distance


def initial_bearing_deg(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Bearing in degrees from point 1 to point 2, 0 = north.

    Coincident points, points on the same parallel and points on the same
    meridian are decided on the integer grid before any trigonometry.
    """

    ilat1 = _grid(lat1)
    ilon1 = _grid(lon1)
    ilat2 = _grid(lat2)
    ilon2 = _grid(lon2)

    if ilat1 == ilat2 and ilon1 == ilon2:
        return 0.0
    if ilat1 == ilat2:
        return 270.0 if ilon1 > ilon2 else 90.0
    if ilon1 == ilon2:
        return 180.0 if ilat1 > ilat2 else 0.0

    rlat1 = math.radians(lat1)
    rlon1 = math.radians(lon1)
    rlat2 = math.radians(lat2)
    rlon2 = math.radians(lon2)

    c = _acos(
        math.sin(rlat2) * math.sin(rlat1)
        + math.cos(rlat2) * math.cos(rlat1) * math.cos(rlon2 - rlon1),
        "bearing",
    )
    sin_c = math.sin(c)
    if sin_c == 0.0:
        raise ComputationFailure("Error in bearing calculation: sin(c) == 0")
    a = _asin(math.cos(rlat2) * math.sin(rlon2 - rlon1) / sin_c, "bearing")
    result = math.degrees(a)

    if ilat2 > ilat1 and ilon2 > ilon1:
        pass
    elif ilat2 < ilat1 and ilon2 < ilon1:
        result = 180.0 - result
    elif ilat2 < ilat1 and ilon2 > ilon1:
        result = 180.0 - result
    elif ilat2 > ilat1 and ilon2 < ilon1:
        result += 360.0

    return result


def destination(
    lat: float, lon: float, *, bearing_deg: float, distance_km: float
) -> tuple[float, float]:
    """Destination (lat, lon) in degrees after travelling along a bearing.

    The longitude is returned as computed and may lie outside [-180, 180].
    """

    rlat1 = math.radians(lat)
    rlon1 = math.radians(lon)
    rbearing = math.radians(bearing_deg)
    rdistance = distance_km / EARTH_RADIUS_KM

    rlat = _asin(
        math.sin(rlat1) * math.cos(rdistance)
        + math.cos(rlat1) * math.sin(rdistance) * math.cos(rbearing),
        "projection",
    )
    rlon = rlon1 + math.atan2(
        math.sin(rbearing) * math.sin(rdistance) * math.cos(rlat1),
        math.cos(rdistance) - math.sin(rlat1) * math.sin(rlat),
    )
    return math.degrees(rlat), math.degrees(rlon)
