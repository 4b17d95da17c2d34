from dataclasses import dataclass
from typing import Tuple

from .base import Record
from .fields import id_column, text_column, keywords_column, vocabulary_column
from .vocabulary import Continent


@dataclass(frozen=True, eq=False)
class Region(Record):
    """
    A high-level administrative subdivision of a country from ``regions.csv``.

    ``code`` is ``local_code`` prefixed with the country code and a hyphen
    (e.g. "GB-ENG"); airports refer to a region through ``iso_region``.
    """

    id: int = id_column()
    code: str = text_column()
    local_code: str = text_column()
    name: str = text_column()
    continent: Continent = vocabulary_column(Continent)
    iso_country: str = text_column()
    wikipedia_link: str = text_column()
    keywords: Tuple[str, ...] = keywords_column()

    def __repr__(self):
        return f"Region(id={self.id}, code='{self.code}', name='{self.name}')"
