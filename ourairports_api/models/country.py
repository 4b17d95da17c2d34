from dataclasses import dataclass
from typing import Tuple

from .base import Record
from .fields import id_column, text_column, keywords_column, vocabulary_column
from .vocabulary import Continent


@dataclass(frozen=True, eq=False)
class Country(Record):
    """
    A country or country-like entity from ``countries.csv``.

    ``code`` is the ISO 3166:1-alpha2 code, with a handful of unofficial
    codes such as "XK" for Kosovo. Airports and regions refer to a country
    by this code, not by its id.
    """

    id: int = id_column()
    code: str = text_column()
    name: str = text_column()
    continent: Continent = vocabulary_column(Continent)
    wikipedia_link: str = text_column()
    keywords: Tuple[str, ...] = keywords_column()

    def __repr__(self):
        return f"Country(id={self.id}, code='{self.code}', name='{self.name}')"
