from __future__ import annotations

import logging
import os

from src.adapters.text import TemplateCoordinateFormatter, TextCoordinateParser
from src.app.ports.output import ICoordinateFormatter, ICoordinateParser
from src.app.services.geopoint_text_service import GeopointTextService
from src.domain.models import CoordinateFormat

logger = logging.getLogger(__name__)

DEFAULT_FORMAT = CoordinateFormat.LAT_LON_DECMINUTE


def get_coordinate_parser() -> ICoordinateParser:
    return TextCoordinateParser()


def get_coordinate_formatter() -> ICoordinateFormatter:
    return TemplateCoordinateFormatter()


def get_default_format() -> CoordinateFormat:
    """Format used by GeopointTextService.format() when the caller names none.

    Read from GEOPOINT_DEFAULT_FORMAT on every call; unknown keys fall back
    to LAT_LON_DECMINUTE.
    """

    raw = (os.getenv("GEOPOINT_DEFAULT_FORMAT") or "").strip()
    if not raw:
        return DEFAULT_FORMAT
    try:
        return CoordinateFormat.parse(raw)
    except ValueError:
        logger.warning(
            "Unknown GEOPOINT_DEFAULT_FORMAT %r, using %s", raw, DEFAULT_FORMAT.value
        )
        return DEFAULT_FORMAT


def get_geopoint_text_service() -> GeopointTextService:
    return GeopointTextService(
        parser=get_coordinate_parser(),
        formatter=get_coordinate_formatter(),
        default_format=get_default_format(),
    )
