"""
Read-only access to the fields of a record.

A record may be a mapping, a pydantic model, a dataclass instance or a plain
object. Fields are reported in declaration order and never modified.
"""

import dataclasses
from collections.abc import Iterator, Mapping
from typing import Any

from pydantic import BaseModel

PATH_SEPARATOR = "."


def iter_fields(record: Any) -> Iterator[tuple[str, Any]]:
    """
    Yield (name, value) pairs of a record in declaration order.

    Args:
        record: Mapping, pydantic model, dataclass instance or object with __dict__

    Raises:
        TypeError: If the record has no recognisable fields
    """
    if isinstance(record, type):
        raise TypeError(f"Expected a record instance, got class {record.__name__}")
    if isinstance(record, Mapping):
        yield from record.items()
    elif isinstance(record, BaseModel):
        for name in type(record).model_fields:
            yield name, getattr(record, name)
        # extra="allow" models keep undeclared fields here, after the declared ones
        yield from (record.model_extra or {}).items()
    elif dataclasses.is_dataclass(record) and not isinstance(record, type):
        for field in dataclasses.fields(record):
            yield field.name, getattr(record, field.name)
    elif hasattr(record, "__dict__"):
        for name, value in vars(record).items():
            if not name.startswith("_"):
                yield name, value
    else:
        raise TypeError(f"Cannot read fields of {type(record).__name__}")


def field_names(record: Any) -> list[str]:
    return [name for name, _ in iter_fields(record)]


def _lookup(record: Any, name: str) -> Any:
    if record is None:
        return None
    if isinstance(record, Mapping):
        return record.get(name)
    if isinstance(record, BaseModel):
        if name in type(record).model_fields:
            return getattr(record, name)
        return (record.model_extra or {}).get(name)
    if isinstance(record, (str, bytes, int, float, bool)):
        return None
    return getattr(record, name, None)


def resolve_field(record: Any, path: str) -> Any:
    """
    Resolve a field name or dotted path (``Address.City``) against a record.

    Returns None when any segment is absent. A top-level field whose name
    itself contains a dot takes precedence over the nested path.
    """
    direct = _lookup(record, path)
    if direct is not None or PATH_SEPARATOR not in path:
        return direct

    value = record
    for segment in path.split(PATH_SEPARATOR):
        value = _lookup(value, segment)
        if value is None:
            return None
    return value
