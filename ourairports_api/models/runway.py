from dataclasses import dataclass, asdict
from typing import Optional

from .base import Record
from .fields import id_column, text_column, int_column, float_column, bool_column
from .location import HasLocation


@dataclass(frozen=True)
class RunwayEnd(HasLocation):
    """One end of a runway, projected out of its Runway record."""

    runway_id: int
    ident: str
    airport_ref: int
    airport_ident: str
    latitude_deg: Optional[float] = None
    longitude_deg: Optional[float] = None
    elevation_ft: Optional[int] = None
    heading_degT: Optional[float] = None
    displaced_threshold_ft: Optional[int] = None

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True, eq=False)
class Runway(Record):
    """
    A landing surface (runway, helipad or waterway) from ``runways.csv``.

    The ``le_`` fields describe the low-numbered end and the ``he_`` fields
    the high-numbered end. ``surface`` is free text upstream.
    """

    id: int = id_column()
    airport_ref: int = id_column()
    airport_ident: str = text_column()
    length_ft: Optional[int] = int_column()
    width_ft: Optional[int] = int_column()
    surface: str = text_column()
    lighted: bool = bool_column()
    closed: bool = bool_column()

    # Low end (LE) information
    le_ident: str = text_column()
    le_latitude_deg: Optional[float] = float_column()
    le_longitude_deg: Optional[float] = float_column()
    le_elevation_ft: Optional[int] = int_column()
    le_heading_degT: Optional[float] = float_column()
    le_displaced_threshold_ft: Optional[int] = int_column()

    # High end (HE) information
    he_ident: str = text_column()
    he_latitude_deg: Optional[float] = float_column()
    he_longitude_deg: Optional[float] = float_column()
    he_elevation_ft: Optional[int] = int_column()
    he_heading_degT: Optional[float] = float_column()
    he_displaced_threshold_ft: Optional[int] = int_column()

    def le_end(self) -> RunwayEnd:
        """Project the low-numbered end into a standalone RunwayEnd."""
        return self._end('le')

    def he_end(self) -> RunwayEnd:
        """Project the high-numbered end into a standalone RunwayEnd."""
        return self._end('he')

    def _end(self, prefix: str) -> RunwayEnd:
        return RunwayEnd(
            runway_id=self.id,
            ident=getattr(self, f'{prefix}_ident'),
            airport_ref=self.airport_ref,
            airport_ident=self.airport_ident,
            latitude_deg=getattr(self, f'{prefix}_latitude_deg'),
            longitude_deg=getattr(self, f'{prefix}_longitude_deg'),
            elevation_ft=getattr(self, f'{prefix}_elevation_ft'),
            heading_degT=getattr(self, f'{prefix}_heading_degT'),
            displaced_threshold_ft=getattr(self, f'{prefix}_displaced_threshold_ft'),
        )

    def __repr__(self):
        return f"Runway(id={self.id}, airport_ident='{self.airport_ident}', le_ident='{self.le_ident}', he_ident='{self.he_ident}')"
