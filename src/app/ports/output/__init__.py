from .coordinate_formatter import ICoordinateFormatter
from .coordinate_parser import ICoordinateParser

__all__ = [
    "ICoordinateFormatter",
    "ICoordinateParser",
]
