from .coordinate_format import CoordinateFormat
from .geo import Geopoint

__all__ = [
    "CoordinateFormat",
    "Geopoint",
]
