from .coordinate_formatter import TemplateCoordinateFormatter
from .coordinate_parser import TextCoordinateParser

__all__ = [
    "TemplateCoordinateFormatter",
    "TextCoordinateParser",
]
