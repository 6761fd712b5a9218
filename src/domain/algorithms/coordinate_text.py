from __future__ import annotations

# Renderers work on integer grids (millionths of a degree, thousandths of a
# minute or second) so rounding carries into the next unit and a value that
# rounds to zero never gets a negative hemisphere or sign.


def _hemisphere(value: float, rounded: int, positive: str, negative: str) -> str:
    return negative if value < 0 and rounded else positive


def signed_dec_degree(value: float) -> str:
    micro = round(abs(value) * 1_000_000)
    sign = "-" if value < 0 and micro else ""
    return f"{sign}{micro // 1_000_000}.{micro % 1_000_000:06d}"


def dec_degree(value: float, width: int, positive: str, negative: str) -> str:
    micro = round(abs(value) * 1_000_000)
    hemi = _hemisphere(value, micro, positive, negative)
    return f"{hemi} {micro // 1_000_000:0{width}d}.{micro % 1_000_000:06d}°"


def dec_minute(
    value: float, width: int, positive: str, negative: str, *, raw: bool = False
) -> str:
    milli = round(abs(value) * 60000)
    hemi = _hemisphere(value, milli, positive, negative)
    degrees, minutes = divmod(milli, 60000)
    sep = " " if raw else "° "
    return f"{hemi} {degrees:0{width}d}{sep}{minutes // 1000:02d}.{minutes % 1000:03d}"


def dec_second(value: float, width: int, positive: str, negative: str) -> str:
    milli = round(abs(value) * 3600000)
    hemi = _hemisphere(value, milli, positive, negative)
    degrees, rest = divmod(milli, 3600000)
    minutes, seconds = divmod(rest, 60000)
    return (
        f"{hemi} {degrees:0{width}d}° {minutes:02d}' "
        f"{seconds // 1000:02d}.{seconds % 1000:03d}\""
    )


def lat_lon_dec_minute(lat: float, lon: float) -> str:
    """Degrees and decimal minutes, e.g. 'N 52° 36.123 E 010° 03.456'."""

    return f"{dec_minute(lat, 2, 'N', 'S')} {dec_minute(lon, 3, 'E', 'W')}"
