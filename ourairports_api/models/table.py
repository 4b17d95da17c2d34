"""
Identity-indexed, immutable tables of records.

A Table holds one dataset's records for one load cycle, keyed by record id.
Iteration, ``keys()`` and ``values()`` are ascending by id so that listing
output is deterministic; point lookups go through the usual Mapping API.

Examples:
    # Point lookup
    heathrow = airports.get(2434)

    # Every runway of an airport, ascending by id
    runways.where(airport_ident='EGLL')

    # Records matching any of several criteria
    airports.where_any(iata_code='lhr', ident='lfpg', case_sensitive=False)
"""

from collections.abc import Iterable, Mapping
from types import MappingProxyType
import string
from typing import Any, Callable, Dict, Generic, Iterator, List, Optional, TypeVar

from .base import Record, record_key
from .serialization import to_json

R = TypeVar('R', bound=Record)

# Case folding is ASCII only: "É" and "é" stay distinct
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _ascii_lower(text: str) -> str:
    return text.translate(_ASCII_LOWER)


def _matches(actual: Any, expected: Any, case_sensitive: bool) -> bool:
    if not case_sensitive and isinstance(actual, str) and isinstance(expected, str):
        return _ascii_lower(actual) == _ascii_lower(expected)
    if hasattr(actual, 'code') and isinstance(expected, str):
        # vocabulary members compare against their textual code
        return _matches(actual.code, expected, case_sensitive)
    return actual == expected


class Table(Mapping, Generic[R]):
    """Read-only mapping of id to record, ordered ascending by id."""

    def __init__(self, records: Iterable = ()):
        """
        Build a table from records.

        Args:
            records: Records to index. When an id repeats, the record seen
                     last replaces the earlier one.
        """
        index: Dict[int, R] = {}
        for record in records:
            index[record_key(record)] = record
        self._index = MappingProxyType(dict(sorted(index.items())))

    def __getitem__(self, record_id: int) -> R:
        return self._index[record_id]

    def __iter__(self) -> Iterator[int]:
        return iter(self._index)

    def __len__(self) -> int:
        return len(self._index)

    def __repr__(self):
        return f"Table({len(self)} records)"

    def get(self, record_id: int, default: Optional[R] = None) -> Optional[R]:
        return self._index.get(record_id, default)

    def all(self) -> List[R]:
        """All records as a list, ascending by id."""
        return list(self._index.values())

    def filter(self, predicate: Callable[[R], bool]) -> List[R]:
        """
        Records for which predicate returns True, ascending by id.

        Examples:
            # Lighted runways
            runways.filter(lambda r: r.lighted)
        """
        return [record for record in self._index.values() if predicate(record)]

    def where(self, case_sensitive: bool = True, **criteria) -> List[R]:
        """
        Records whose attributes equal every given value (AND logic).

        Args:
            case_sensitive: Compare text attributes exactly when True,
                            ignoring ASCII case otherwise
            **criteria: Attribute name-value pairs to match
        """
        def matches(record: R) -> bool:
            return all(
                _matches(getattr(record, key, None), value, case_sensitive)
                for key, value in criteria.items()
            )
        return self.filter(matches)

    def where_any(self, case_sensitive: bool = True, **criteria) -> List[R]:
        """
        Records matching at least one of the given attribute values (OR logic).

        Criteria whose value is None are ignored; with no remaining criteria
        every record is returned. Each record appears once, ascending by id.
        """
        criteria = {key: value for key, value in criteria.items() if value is not None}
        if not criteria:
            return self.all()

        def matches(record: R) -> bool:
            return any(
                _matches(getattr(record, key, None), value, case_sensitive)
                for key, value in criteria.items()
            )
        return self.filter(matches)

    def to_list(self) -> List[dict]:
        return [record.to_dict() for record in self._index.values()]

    def to_json(self) -> str:
        return to_json(self)

    def to_json_pretty(self) -> str:
        return to_json(self, pretty=True)
