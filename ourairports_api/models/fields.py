"""
Field decoders for OurAirports CSV cells.

The ``parse_*`` functions turn a raw CSV cell into a typed value and raise
FieldDecodeError on anything they cannot interpret. The ``*_column``
helpers declare dataclass fields carrying a ColumnSpec in their metadata,
which is what Record uses to decode rows, dump to JSON and load back.
"""

import math
import re
from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Type

from ..errors import FieldDecodeError
from .vocabulary import Vocabulary

UINT64_MAX = 2 ** 64 - 1
INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1

_UNSIGNED_RE = re.compile(r'[0-9]+')
_SIGNED_RE = re.compile(r'[+-]?[0-9]+')
_DECIMAL_RE = re.compile(r'[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?')

_TRUE_TOKENS = ('yes', '1')
_FALSE_TOKENS = ('no', '0')


def parse_bool(raw: str) -> bool:
    """Decode ``yes``/``1`` and ``no``/``0`` (case-insensitive)."""
    token = raw.lower() if isinstance(raw, str) else raw
    if token in _TRUE_TOKENS:
        return True
    if token in _FALSE_TOKENS:
        return False
    raise FieldDecodeError("value must be yes and no or 1 and 0", raw)


def parse_keywords(raw: str) -> List[str]:
    """
    Split a comma-separated keyword cell.

    Each piece is stripped of surrounding whitespace. Order, empty pieces
    and duplicates are preserved.
    """
    if not raw:
        return []
    return [keyword.strip() for keyword in raw.split(',')]


def parse_id(raw: str) -> int:
    """Decode an unsigned 64-bit identifier."""
    text = raw if isinstance(raw, str) else ''
    if not _UNSIGNED_RE.fullmatch(text):
        raise FieldDecodeError("invalid identifier", raw)
    value = int(text)
    if value > UINT64_MAX:
        raise FieldDecodeError("identifier out of range", raw)
    return value


def parse_int(raw: str) -> int:
    """Decode a signed 32-bit integer."""
    text = raw if isinstance(raw, str) else ''
    if not _SIGNED_RE.fullmatch(text):
        raise FieldDecodeError("invalid integer", raw)
    value = int(text)
    if not INT32_MIN <= value <= INT32_MAX:
        raise FieldDecodeError("integer out of range", raw)
    return value


def parse_optional_int(raw: str) -> Optional[int]:
    if raw is None or raw == '':
        return None
    return parse_int(raw)


def parse_float(raw: str) -> float:
    """
    Decode a finite float (coordinates, headings, variations).

    Only plain decimal notation with an optional exponent is accepted;
    surrounding whitespace, digit separators and ``nan``/``inf`` are not.
    """
    if not isinstance(raw, str) or not _DECIMAL_RE.fullmatch(raw):
        raise FieldDecodeError("invalid number", raw)
    value = float(raw)
    if not math.isfinite(value):
        raise FieldDecodeError("number must be finite", raw)
    return value


def parse_optional_float(raw: str) -> Optional[float]:
    if raw is None or raw == '':
        return None
    return parse_float(raw)


@dataclass(frozen=True)
class ColumnSpec:
    """How one dataclass field maps to a CSV column and to JSON."""

    name: Optional[str]
    decode: Callable[[str], Any]
    dump: Callable[[Any], Any]
    load: Callable[[Any], Any]


def _identity(value: Any) -> Any:
    return value


def _optional(loader: Callable[[Any], Any]) -> Callable[[Any], Any]:
    def load(value: Any) -> Any:
        if value is None:
            return None
        return loader(value)
    return load


def _load_text(value: Any) -> str:
    if not isinstance(value, str):
        raise FieldDecodeError("expected a string", value)
    return value


def _load_id(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return parse_id(value)
    if not 0 <= value <= UINT64_MAX:
        raise FieldDecodeError("identifier out of range", value)
    return value


def _load_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        return parse_int(value)
    if not INT32_MIN <= value <= INT32_MAX:
        raise FieldDecodeError("integer out of range", value)
    return value


def _load_float(value: Any) -> float:
    if isinstance(value, bool):
        raise FieldDecodeError("invalid number", value)
    if isinstance(value, (int, float)):
        if not math.isfinite(value):
            raise FieldDecodeError("number must be finite", value)
        return float(value)
    return parse_float(value)


def _load_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return parse_bool(value)


def _load_keywords(value: Any) -> tuple:
    if isinstance(value, str):
        return tuple(parse_keywords(value))
    if not isinstance(value, (list, tuple)) or not all(isinstance(k, str) for k in value):
        raise FieldDecodeError("expected a list of strings", value)
    return tuple(value)


def _column(spec: ColumnSpec, **kwargs) -> Any:
    return field(metadata={'column': spec}, **kwargs)


def text_column(name: Optional[str] = None) -> Any:
    """Free text, kept verbatim (empty cells stay empty strings)."""
    return _column(ColumnSpec(name, _identity, _identity, _load_text))


def id_column(name: Optional[str] = None) -> Any:
    return _column(ColumnSpec(name, parse_id, _identity, _load_id))


def int_column(name: Optional[str] = None, optional: bool = True) -> Any:
    if optional:
        return _column(ColumnSpec(name, parse_optional_int, _identity, _optional(_load_int)))
    return _column(ColumnSpec(name, parse_int, _identity, _load_int))


def float_column(name: Optional[str] = None, optional: bool = True) -> Any:
    if optional:
        return _column(ColumnSpec(name, parse_optional_float, _identity, _optional(_load_float)))
    return _column(ColumnSpec(name, parse_float, _identity, _load_float))


def bool_column(name: Optional[str] = None) -> Any:
    return _column(ColumnSpec(name, parse_bool, _identity, _load_bool))


def keywords_column(name: Optional[str] = None) -> Any:
    """Comma-separated keywords, held as a tuple and dumped as a list."""
    return _column(ColumnSpec(
        name,
        lambda raw: tuple(parse_keywords(raw)),
        list,
        _load_keywords,
    ))


def vocabulary_column(vocabulary: Type[Vocabulary], name: Optional[str] = None,
                      optional: bool = False) -> Any:
    """
    A controlled-vocabulary column.

    Args:
        vocabulary: The Vocabulary enum the codes belong to
        name: CSV column name when it differs from the attribute name
        optional: Whether an empty cell decodes to None
    """
    def decode(raw: str) -> Optional[Vocabulary]:
        if optional and raw == '':
            return None
        return vocabulary.decode(raw)

    def dump(value: Optional[Vocabulary]) -> Optional[str]:
        return value.code if value is not None else None

    load = _optional(vocabulary.decode) if optional else vocabulary.decode
    return _column(ColumnSpec(name, decode, dump, load))
