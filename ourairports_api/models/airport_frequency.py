from dataclasses import dataclass

from .base import Record
from .fields import id_column, text_column


@dataclass(frozen=True, eq=False)
class AirportFrequency(Record):
    """
    A radio frequency used at an airport, from ``airport-frequencies.csv``.

    ``frequency_type`` is free text upstream (TWR, GND, ATIS, CTAF, ...) and
    ``frequency_mhz`` is kept as text. The same frequency may appear several
    times for one airport when it serves different functions.
    """

    id: int = id_column()
    airport_ref: int = id_column()
    airport_ident: str = text_column()
    frequency_type: str = text_column('type')
    description: str = text_column()
    frequency_mhz: str = text_column()
