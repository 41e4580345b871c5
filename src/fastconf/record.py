"""Bridge between caller records and the neutral structured representation.

Records are anything pydantic can build a ``TypeAdapter`` for: dataclasses,
``BaseModel`` subclasses, TypedDicts, plain containers. The neutral form is
the JSON-mode dump (dicts, lists, str, int, float, bool, None), which every
backend consumes without knowing the record type.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Any, Type, TypeVar

from pydantic import TypeAdapter

T = TypeVar("T")


@lru_cache(maxsize=None)
def _adapter(record_type: Any) -> TypeAdapter:
    return TypeAdapter(record_type)


def to_neutral(record: Any, record_type: Any = None) -> Any:
    """Dump ``record`` into JSON-compatible primitives."""
    adapter = _adapter(record_type if record_type is not None else type(record))
    return adapter.dump_python(record, mode="json")


def from_neutral(record_type: Type[T], data: Any) -> T:
    """Validate neutral ``data`` into an instance of ``record_type``.

    Raises pydantic.ValidationError on a shape mismatch.
    """
    return _adapter(record_type).validate_python(data)
