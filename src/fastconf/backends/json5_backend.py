from __future__ import annotations

import re
from typing import Any

import json5

from ..errors import DeserializationError
from ..style import Style
from .base import FormatBackend

# json5 reports errors as "<string>:3 Unexpected "}" at column 5"
_JSON5_POSITION_RE = re.compile(r":(\d+) .* at column (\d+)")


class Json5Backend(FormatBackend):
    name = "json5"
    extensions = ("json5",)

    def encode(self, data: Any, style: Style) -> str:
        if style.pretty:
            text = json5.dumps(
                data,
                indent=style.indent_unit,
                separators=(",", ": "),
                sort_keys=style.sort_keys,
                ensure_ascii=False,
                trailing_commas=True,
            )
            return text + "\n"
        return json5.dumps(
            data,
            separators=(",", ":"),
            sort_keys=style.sort_keys,
            ensure_ascii=False,
            trailing_commas=False,
        )

    def decode(self, text: str) -> Any:
        try:
            return json5.loads(text)
        except ValueError as e:
            message = str(e)
            m = _JSON5_POSITION_RE.search(message)
            lineno, colno = (int(m.group(1)), int(m.group(2))) if m else (None, None)
            raise DeserializationError(self.name, message, lineno, colno) from e
