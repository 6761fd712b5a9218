from .schemas import GeopointE6Schema, GeopointSchema

__all__ = [
    "GeopointE6Schema",
    "GeopointSchema",
]
