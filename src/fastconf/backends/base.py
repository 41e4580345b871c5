from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Any, Optional, Tuple, Type, TypeVar, Union

from pydantic import PydanticSchemaGenerationError, ValidationError
from pydantic_core import PydanticSerializationError

from ..errors import DeserializationError, SerializationError
from ..record import from_neutral, to_neutral
from ..style import DEFAULT_STYLE, Style


T = TypeVar("T")


class FormatBackend(ABC):
    """Serialize/deserialize strategy for one text format.

    Subclasses only implement ``encode`` and ``decode`` on the neutral
    representation. Record conversion, newline handling and error wrapping
    live here so every format behaves the same at the boundary.

    Instances carry no mutable state and may be shared freely.
    """

    #: Registry name, also used in error messages.
    name: str = ""
    #: Accepted file suffixes without the dot; the first is canonical.
    extensions: Tuple[str, ...] = ()
    #: Whether indentation/compaction options are honored.
    supports_style: bool = True

    @property
    def extension(self) -> str:
        return self.extensions[0]

    # Format hooks

    @abstractmethod
    def encode(self, data: Any, style: Style) -> str:
        """Render neutral ``data`` as text using ``\\n`` line breaks."""

    @abstractmethod
    def decode(self, text: str) -> Any:
        """Parse text into neutral data. Raises DeserializationError on bad input."""

    # Public contract

    def serialize(self, record: Any, style: Optional[Style] = None, record_type: Any = None) -> bytes:
        style = style or DEFAULT_STYLE
        try:
            neutral = to_neutral(record, record_type)
        except (PydanticSerializationError, PydanticSchemaGenerationError) as e:
            raise SerializationError(self.name, str(e)) from e
        try:
            text = self.encode(neutral, style)
        except (TypeError, ValueError) as e:
            raise SerializationError(self.name, str(e)) from e
        if style.newline != "\n":
            text = text.replace("\n", style.newline)
        return text.encode("utf-8")

    def deserialize(self, data: Union[bytes, str], record_type: Type[T]) -> T:
        if isinstance(data, bytes):
            try:
                text = data.decode("utf-8-sig")
            except UnicodeDecodeError as e:
                raise DeserializationError(self.name, f"File is not valid UTF-8: {e}") from e
        else:
            text = data
        neutral = self.decode(text)
        try:
            return from_neutral(record_type, neutral)
        except (ValidationError, PydanticSchemaGenerationError) as e:
            raise DeserializationError(self.name, str(e)) from e

    def __repr__(self) -> str:
        return f"<{type(self).__name__} .{self.extension}>"


_POSITION_RE = re.compile(r"line (\d+),? column (\d+)")


def position_from_message(message: str) -> Tuple[Optional[int], Optional[int]]:
    """Pull a 1-based (line, column) pair out of a parser message, if it has one."""
    m = _POSITION_RE.search(message)
    if not m:
        return None, None
    return int(m.group(1)), int(m.group(2))


def sort_mapping_keys(data: Any) -> Any:
    if isinstance(data, dict):
        return {k: sort_mapping_keys(data[k]) for k in sorted(data)}
    if isinstance(data, list):
        return [sort_mapping_keys(v) for v in data]
    return data
