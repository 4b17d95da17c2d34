"""
OurAirports data access library.

This package fetches the public OurAirports CSV datasets (airports, runways,
navaids, airport frequencies, countries, regions), decodes them into typed,
immutable records indexed by id, and serves them over a read-only JSON API.

The main public API includes:
- OurAirportsSource: Fetch the datasets from the published mirror
- LocalFileSource: Read the datasets from a local directory
- Dataset: The six datasets and their record types
- Table: Id-indexed, id-ordered collection of records
- FetchError, DecodeError: Terminal errors of a load
"""

from .errors import DecodeError, FetchError, FieldDecodeError, OurAirportsError
from .models import (
    Airport, AirportFrequency, Country, Navaid, Region, Runway, RunwayEnd,
    Location, Table,
)
from .sources import Dataset, DatasetSource, LocalFileSource, OurAirportsSource

__version__ = '0.1.0'
__all__ = [
    'Airport',
    'AirportFrequency',
    'Country',
    'Navaid',
    'Region',
    'Runway',
    'RunwayEnd',
    'Location',
    'Table',
    'Dataset',
    'DatasetSource',
    'LocalFileSource',
    'OurAirportsSource',
    'OurAirportsError',
    'FetchError',
    'DecodeError',
    'FieldDecodeError',
]
