from __future__ import annotations

from abc import ABC, abstractmethod

from src.domain.models import CoordinateFormat, Geopoint


class ICoordinateFormatter(ABC):
    """Port for rendering a Geopoint as text under a named format."""

    @abstractmethod
    def format(self, point: Geopoint, fmt: CoordinateFormat | str) -> str:
        """Render point; an unrecognized format key raises ValueError."""
