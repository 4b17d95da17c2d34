"""
Base class shared by all OurAirports record types.

A record is a frozen dataclass whose fields are declared with the column
helpers from ``fields``. Identity is the numeric ``id`` alone: two records
of the same type with the same id are the same entity whatever their other
field values, and ordering and hashing follow the id as well.
"""

import json
from dataclasses import fields
from functools import total_ordering
from typing import Any, Dict, List, Mapping, Type, TypeVar

from ..errors import FieldDecodeError
from .serialization import to_json

R = TypeVar('R', bound='Record')


def record_key(record: 'Record') -> int:
    """Identity key of a record, used for table indexing, ordering and dedup."""
    return record.id


@total_ordering
class Record:
    """Base class for one row of an OurAirports dataset."""

    id: int

    @classmethod
    def _specs(cls):
        for f in fields(cls):
            spec = f.metadata.get('column')
            if spec is not None:
                yield f.name, spec.name or f.name, spec

    @classmethod
    def columns(cls) -> List[str]:
        """CSV column names of this record type, in declaration order."""
        return [column for _, column, _ in cls._specs()]

    @classmethod
    def from_row(cls: Type[R], row: Mapping[str, str]) -> R:
        """
        Decode a CSV row into a record.

        Args:
            row: Mapping of column name to raw cell text. Columns the record
                 does not know about are ignored.

        Raises:
            FieldDecodeError: If a column is missing or a cell cannot be decoded
        """
        values = {}
        for attribute, column, spec in cls._specs():
            if column not in row:
                raise FieldDecodeError("missing column", None, column)
            raw = row[column]
            try:
                values[attribute] = spec.decode(raw)
            except FieldDecodeError as e:
                raise e.with_column(column) from None
        return cls(**values)

    @classmethod
    def from_dict(cls: Type[R], data: Mapping[str, Any]) -> R:
        """Rebuild a record from the output of ``to_dict``."""
        values = {}
        for attribute, column, spec in cls._specs():
            if column not in data:
                raise FieldDecodeError("missing column", None, column)
            try:
                values[attribute] = spec.load(data[column])
            except FieldDecodeError as e:
                raise e.with_column(column) from None
        return cls(**values)

    @classmethod
    def from_json(cls: Type[R], text: str) -> R:
        return cls.from_dict(json.loads(text))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a dictionary keyed by the CSV column names."""
        return {
            column: spec.dump(getattr(self, attribute))
            for attribute, column, spec in self._specs()
        }

    def to_json(self) -> str:
        return to_json(self)

    def to_json_pretty(self) -> str:
        return to_json(self, pretty=True)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Record):
            return NotImplemented
        return type(self) is type(other) and record_key(self) == record_key(other)

    def __lt__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return record_key(self) < record_key(other)

    def __hash__(self) -> int:
        return hash(record_key(self))
