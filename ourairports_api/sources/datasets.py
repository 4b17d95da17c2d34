from enum import Enum
from typing import Type

from ..models.airport import Airport
from ..models.airport_frequency import AirportFrequency
from ..models.base import Record
from ..models.country import Country
from ..models.navaid import Navaid
from ..models.region import Region
from ..models.runway import Runway


class Dataset(Enum):
    """The six OurAirports datasets; values are the CSV file stems."""

    AIRPORTS = "airports"
    RUNWAYS = "runways"
    NAVAIDS = "navaids"
    AIRPORT_FREQUENCIES = "airport-frequencies"
    COUNTRIES = "countries"
    REGIONS = "regions"

    @property
    def filename(self) -> str:
        return f"{self.value}.csv"

    @property
    def record_type(self) -> Type[Record]:
        return _RECORD_TYPES[self]

    @classmethod
    def from_name(cls, name: str) -> 'Dataset':
        """Look up a dataset by file stem ("airport-frequencies") or member name."""
        normalized = name.strip().lower().replace('_', '-')
        for dataset in cls:
            if dataset.value == normalized:
                return dataset
        raise ValueError(f"Unknown dataset: {name}")


_RECORD_TYPES = {
    Dataset.AIRPORTS: Airport,
    Dataset.RUNWAYS: Runway,
    Dataset.NAVAIDS: Navaid,
    Dataset.AIRPORT_FREQUENCIES: AirportFrequency,
    Dataset.COUNTRIES: Country,
    Dataset.REGIONS: Region,
}
