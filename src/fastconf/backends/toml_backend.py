from __future__ import annotations

import sys
from typing import Any

import tomli_w

if sys.version_info >= (3, 11):
    import tomllib
else:  # pragma: no cover - exercised on older interpreters only
    import tomli as tomllib

from ..errors import DeserializationError
from ..style import Style
from .base import FormatBackend, position_from_message, sort_mapping_keys


class TomlBackend(FormatBackend):
    """TOML via tomllib (read) and tomli-w (write).

    tomli-w has a fixed layout, so indentation and compaction are ignored.
    TOML has no null and needs a table at the root; both surface as
    SerializationError.
    """

    name = "toml"
    extensions = ("toml",)
    supports_style = False

    def encode(self, data: Any, style: Style) -> str:
        if not isinstance(data, dict):
            raise TypeError(f"TOML documents must be a table at the top level, got {type(data).__name__}")
        if style.sort_keys:
            data = sort_mapping_keys(data)
        return tomli_w.dumps(data)

    def decode(self, text: str) -> Any:
        try:
            return tomllib.loads(text)
        except tomllib.TOMLDecodeError as e:
            lineno = getattr(e, "lineno", None)
            colno = getattr(e, "colno", None)
            if lineno is None:
                lineno, colno = position_from_message(str(e))
            message = getattr(e, "msg", None) or str(e)
            raise DeserializationError(self.name, message, lineno, colno) from e
