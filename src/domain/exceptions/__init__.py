from .geopoint import (
    ComputationFailure,
    CoordinateParseError,
    GeopointError,
    MalformedCoordinate,
)

__all__ = [
    "ComputationFailure",
    "CoordinateParseError",
    "GeopointError",
    "MalformedCoordinate",
]
