from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Union


class ConfigError(Exception):
    """Base error for everything raised by fastconf."""


class UnknownFormatError(ConfigError):
    """Raised when a file extension matches none of the installed backends."""

    def __init__(self, extension: Optional[str], available: Iterable[str] = ()):
        self.extension = extension
        self.available = sorted(set(available))
        known = ", ".join(self.available) or "none"
        if extension:
            msg = f"No format backend registered for extension '{extension}' (known: {known})"
        else:
            msg = f"Path has no file extension to infer a format from (known: {known})"
        super().__init__(msg)


class InvalidPathError(ConfigError, ValueError):
    """Raised when a settings path is empty or otherwise unusable."""


class ConfigIOError(ConfigError):
    """Wraps a filesystem failure while reading, creating directories or writing."""

    def __init__(self, path: Union[str, Path], operation: str, error: OSError):
        self.path = Path(path)
        self.operation = operation
        self.error = error
        super().__init__(f"Failed to {operation} {self.path}: {error}")


class DeserializationError(ConfigError):
    """Raised when file text cannot be parsed or does not fit the record type.

    ``lineno``/``colno`` are 1-based and set when the parser reports a position.
    """

    def __init__(
        self,
        format: str,
        message: str,
        lineno: Optional[int] = None,
        colno: Optional[int] = None,
        path: Optional[Union[str, Path]] = None,
    ):
        self.format = format
        self.message = message
        self.lineno = lineno
        self.colno = colno
        self.path = Path(path) if path is not None else None
        super().__init__(self._render())

    def _render(self) -> str:
        where = f" {self.path}" if self.path is not None else ""
        location = ""
        if self.lineno is not None:
            location = f" (line {self.lineno}" + (f", column {self.colno})" if self.colno is not None else ")")
        return f"Failed to parse {self.format}{where}{location}: {self.message}"

    def with_path(self, path: Union[str, Path]) -> "DeserializationError":
        """Attach the file path once it is known and refresh the message."""
        self.path = Path(path)
        self.args = (self._render(),)
        return self


class SerializationError(ConfigError):
    """Raised when a record holds a value the target format cannot represent."""

    def __init__(self, format: str, message: str):
        self.format = format
        self.message = message
        super().__init__(f"Cannot encode record as {format}: {message}")


__all__ = [
    "ConfigError",
    "UnknownFormatError",
    "InvalidPathError",
    "ConfigIOError",
    "DeserializationError",
    "SerializationError",
]
