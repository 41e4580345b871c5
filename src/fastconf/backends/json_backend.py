from __future__ import annotations

import json
from typing import Any

from ..errors import DeserializationError
from ..style import Style
from .base import FormatBackend


class JsonBackend(FormatBackend):
    name = "json"
    extensions = ("json",)

    def encode(self, data: Any, style: Style) -> str:
        if style.pretty:
            text = json.dumps(
                data,
                indent=style.indent_unit,
                separators=(",", ": "),
                sort_keys=style.sort_keys,
                ensure_ascii=False,
                allow_nan=False,
            )
            return text + "\n"
        return json.dumps(
            data,
            separators=(",", ":"),
            sort_keys=style.sort_keys,
            ensure_ascii=False,
            allow_nan=False,
        )

    def decode(self, text: str) -> Any:
        try:
            return json.loads(text)
        except json.JSONDecodeError as e:
            raise DeserializationError(self.name, e.msg, e.lineno, e.colno) from e
