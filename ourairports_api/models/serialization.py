"""JSON rendering for records, tables and location values."""

import json
from collections.abc import Iterable
from typing import Any

COMPACT_SEPARATORS = (',', ':')
PRETTY_INDENT = 2


def to_jsonable(obj: Any) -> Any:
    """
    Convert a record, table, location or iterable of those into plain
    JSON-compatible Python values.
    """
    if hasattr(obj, 'to_dict'):
        return obj.to_dict()
    if hasattr(obj, 'to_list'):
        return obj.to_list()
    if isinstance(obj, Iterable) and not isinstance(obj, (str, bytes, dict)):
        return [to_jsonable(item) for item in obj]
    return obj


def to_json(obj: Any, pretty: bool = False) -> str:
    """
    Render obj as JSON text.

    Args:
        obj: Record, Table, Location, RunwayEnd or an iterable of them
        pretty: Indent the output instead of producing compact text
    """
    data = to_jsonable(obj)
    if pretty:
        return json.dumps(data, indent=PRETTY_INDENT, ensure_ascii=False)
    return json.dumps(data, separators=COMPACT_SEPARATORS, ensure_ascii=False)
