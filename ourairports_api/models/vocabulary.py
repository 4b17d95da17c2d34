"""Controlled vocabularies used by the OurAirports datasets."""

from enum import Enum
from typing import Dict

from ..errors import FieldDecodeError


class Vocabulary(Enum):
    """
    Base class for closed sets of textual codes.

    Member values are the exact codes found in the CSV files and are also
    what the members serialize to. Decoding is an exact match; aliases are
    resolved by ``_missing_`` in the subclasses that have them.
    """

    @classmethod
    def decode(cls, code: str) -> 'Vocabulary':
        """
        Decode a raw code into a member of this vocabulary.

        Raises:
            FieldDecodeError: If the code is not part of the vocabulary
        """
        try:
            return cls(code)
        except ValueError:
            raise FieldDecodeError(f"unknown {cls.__name__} code", code) from None

    @property
    def code(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class Continent(Vocabulary):
    AFRICA = "AF"
    ANTARCTICA = "AN"
    ASIA = "AS"
    EUROPE = "EU"
    NORTH_AMERICA = "NA"
    OCEANIA = "OC"
    SOUTH_AMERICA = "SA"


class AirportType(Vocabulary):
    """
    Type of an airport, see the OurAirports map legend.

    ``balloonport`` appears in the data but is not documented upstream;
    ``balloon_port`` is accepted as a spelling of it.
    """

    SMALL_AIRPORT = "small_airport"
    MEDIUM_AIRPORT = "medium_airport"
    LARGE_AIRPORT = "large_airport"
    HELIPORT = "heliport"
    SEAPLANE_BASE = "seaplane_base"
    CLOSED_AIRPORT = "closed_airport"
    BALLOONPORT = "balloonport"

    @classmethod
    def _missing_(cls, value):
        return _AIRPORT_TYPE_ALIASES.get(value)


class NavaidType(Vocabulary):
    DME = "DME"
    NDB = "NDB"
    NDB_DME = "NDB-DME"
    TACAN = "TACAN"
    VOR = "VOR"
    VOR_DME = "VOR-DME"
    VORTAC = "VORTAC"


class UsageType(Vocabulary):
    """Airspace structure a navaid serves (high/low airways, terminal, RNAV)."""

    HI = "HI"
    LO = "LO"
    BOTH = "BOTH"
    TERM = "TERM"
    RNAV = "RNAV"

    @classmethod
    def _missing_(cls, value):
        return _USAGE_TYPE_ALIASES.get(value)


class NavaidPower(Vocabulary):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    UNKNOWN = "UNKNOWN"


_AIRPORT_TYPE_ALIASES: Dict[str, AirportType] = {
    "closed": AirportType.CLOSED_AIRPORT,
    "balloon_port": AirportType.BALLOONPORT,
}

_USAGE_TYPE_ALIASES: Dict[str, UsageType] = {
    "TERMINAL": UsageType.TERM,
}
