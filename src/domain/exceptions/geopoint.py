class GeopointError(Exception):
    """Base exception for geopoint computation failures."""


class MalformedCoordinate(GeopointError, ValueError):
    """Raised when a latitude or longitude falls outside its valid range."""


class ComputationFailure(GeopointError):
    """Raised when a derived value (distance, bearing) is NaN or not usable."""


class CoordinateParseError(ValueError):
    """Raised by a coordinate parser when no value can be extracted from text."""
