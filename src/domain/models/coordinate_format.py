from __future__ import annotations

from enum import Enum


class CoordinateFormat(str, Enum):
    LAT_LON_DECDEGREE = "lat_lon_decdegree"
    LAT_LON_DECMINUTE = "lat_lon_decminute"
    LAT_LON_DECSECOND = "lat_lon_decsecond"
    LAT_LON_DECDEGREE_COMMA = "lat_lon_decdegree_comma"
    LAT_DECDEGREE = "lat_decdegree"
    LAT_DECMINUTE = "lat_decminute"
    LAT_DECMINUTE_RAW = "lat_decminute_raw"
    LON_DECDEGREE = "lon_decdegree"
    LON_DECMINUTE = "lon_decminute"
    LON_DECMINUTE_RAW = "lon_decminute_raw"

    @classmethod
    def parse(cls, key: CoordinateFormat | str) -> CoordinateFormat:
        """Resolve a format from an enum member, its value or its name."""

        if isinstance(key, cls):
            return key
        normalized = str(key).strip().lower()
        try:
            return cls(normalized)
        except ValueError:
            raise ValueError(f"Unknown coordinate format: {key!r}") from None
