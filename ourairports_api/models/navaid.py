from dataclasses import dataclass
from typing import Optional

from .base import Record
from .fields import id_column, text_column, int_column, float_column, vocabulary_column
from .location import HasLocation, Location, location_of
from .vocabulary import NavaidPower, NavaidType, UsageType


@dataclass(frozen=True, eq=False)
class Navaid(HasLocation, Record):
    """
    A radio navigation aid from ``navaids.csv``.

    Frequencies are kept as text because their unit depends on the navaid
    type (kHz for NDBs, the same column scaled for VORs). The ``dme_``
    fields describe a co-located DME, when there is one.
    """

    id: int = id_column()
    filename: str = text_column()
    ident: str = text_column()
    name: str = text_column()
    navaid_type: NavaidType = vocabulary_column(NavaidType, 'type')
    frequency_khz: str = text_column()
    latitude_deg: Optional[float] = float_column()
    longitude_deg: Optional[float] = float_column()
    elevation_ft: Optional[int] = int_column()
    iso_country: str = text_column()
    dme_frequency_khz: str = text_column()
    dme_channel: str = text_column()
    dme_latitude_deg: Optional[float] = float_column()
    dme_longitude_deg: Optional[float] = float_column()
    dme_elevation_ft: Optional[int] = int_column()
    slaved_variation_deg: Optional[float] = float_column()
    magnetic_variation_deg: Optional[float] = float_column()
    usage_type: Optional[UsageType] = vocabulary_column(UsageType, 'usageType', optional=True)
    power: Optional[NavaidPower] = vocabulary_column(NavaidPower, optional=True)
    associated_airport: str = text_column()

    def extract_dme_location(self) -> Location:
        """
        Location of the DME antenna.

        Each DME position field left empty falls back to the primary
        navaid position.
        """
        return location_of(
            self.dme_latitude_deg if self.dme_latitude_deg is not None else self.latitude_deg,
            self.dme_longitude_deg if self.dme_longitude_deg is not None else self.longitude_deg,
            self.dme_elevation_ft if self.dme_elevation_ft is not None else self.elevation_ft,
        )

    def __repr__(self):
        return f"Navaid(id={self.id}, ident='{self.ident}', type='{self.navaid_type.code}')"
