from dataclasses import dataclass
from typing import Optional, Tuple

from .base import Record
from .fields import (
    id_column, text_column, int_column, float_column, bool_column,
    keywords_column, vocabulary_column,
)
from .location import HasLocation
from .vocabulary import AirportType, Continent


@dataclass(frozen=True, eq=False)
class Airport(HasLocation, Record):
    """
    An airport, heliport, seaplane base or balloonport from ``airports.csv``.

    ``ident`` is the ICAO code when one exists, otherwise a local code or an
    internally generated code made of the country code, a dash and a
    four-digit number. Unlike the other located records, an airport always
    has a latitude and a longitude.
    """

    id: int = id_column()
    ident: str = text_column()
    airport_type: AirportType = vocabulary_column(AirportType, 'type')
    name: str = text_column()
    latitude_deg: float = float_column(optional=False)
    longitude_deg: float = float_column(optional=False)
    elevation_ft: Optional[int] = int_column()
    continent: Continent = vocabulary_column(Continent)
    iso_country: str = text_column()
    iso_region: str = text_column()
    municipality: str = text_column()
    scheduled_service: bool = bool_column()
    gps_code: str = text_column()
    iata_code: str = text_column()
    local_code: str = text_column()
    home_link: str = text_column()
    wikipedia_link: str = text_column()
    keywords: Tuple[str, ...] = keywords_column()

    def __repr__(self):
        return f"Airport(id={self.id}, ident='{self.ident}', type='{self.airport_type.code}')"
