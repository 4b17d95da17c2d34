"""
Location extraction for records that carry a position.

All coordinates are in decimal degrees (positive for north and east) and
elevations in feet above mean sea level (negative below MSL). No unit
conversion or validation happens here: a Location is a narrowing projection
of the record it was extracted from.
"""

from dataclasses import dataclass, asdict
from typing import Optional


@dataclass(frozen=True)
class Location:
    """Latitude, longitude and elevation of a point; None when unknown."""

    latitude_deg: Optional[float]
    longitude_deg: Optional[float]
    elevation_ft: Optional[int] = None

    @property
    def is_known(self) -> bool:
        """True when both coordinates are available."""
        return self.latitude_deg is not None and self.longitude_deg is not None

    def to_dict(self) -> dict:
        return asdict(self)


def location_of(latitude_deg: Optional[float], longitude_deg: Optional[float],
                elevation_ft: Optional[int] = None) -> Location:
    """Build a Location from the three scalar fields."""
    return Location(latitude_deg, longitude_deg, elevation_ft)


class HasLocation:
    """
    Mixin for records exposing ``latitude_deg``, ``longitude_deg`` and
    ``elevation_ft`` attributes.
    """

    latitude_deg: Optional[float]
    longitude_deg: Optional[float]
    elevation_ft: Optional[int]

    def extract_location(self) -> Location:
        """Return the position of this record as a Location."""
        return location_of(self.latitude_deg, self.longitude_deg, self.elevation_ft)
