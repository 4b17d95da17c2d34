"""
Data models for the ourairports_api library.

One frozen record type per OurAirports dataset, the controlled vocabularies
their fields use, the Table that indexes a dataset by id, and the Location
value extracted from positioned records.
"""

from .airport import Airport
from .airport_frequency import AirportFrequency
from .base import Record, record_key
from .country import Country
from .location import HasLocation, Location, location_of
from .navaid import Navaid
from .region import Region
from .runway import Runway, RunwayEnd
from .serialization import to_json
from .table import Table
from .vocabulary import AirportType, Continent, NavaidPower, NavaidType, UsageType, Vocabulary

__all__ = [
    # Records
    'Record',
    'Airport',
    'AirportFrequency',
    'Country',
    'Navaid',
    'Region',
    'Runway',
    'RunwayEnd',
    'record_key',
    # Vocabularies
    'Vocabulary',
    'AirportType',
    'Continent',
    'NavaidPower',
    'NavaidType',
    'UsageType',
    # Location
    'HasLocation',
    'Location',
    'location_of',
    # Tables and serialization
    'Table',
    'to_json',
]
