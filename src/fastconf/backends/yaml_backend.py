from __future__ import annotations

from typing import Any

import yaml

from ..errors import DeserializationError
from ..style import Style
from .base import FormatBackend


class YamlBackend(FormatBackend):
    name = "yaml"
    extensions = ("yaml", "yml")

    def encode(self, data: Any, style: Style) -> str:
        # PyYAML only indents with spaces and clamps the width to 2..9
        indent = min(max(style.indent, 2), 9)
        if style.pretty:
            return yaml.safe_dump(
                data,
                default_flow_style=False,
                indent=indent,
                sort_keys=style.sort_keys,
                allow_unicode=True,
            )
        return yaml.safe_dump(
            data,
            default_flow_style=True,
            sort_keys=style.sort_keys,
            allow_unicode=True,
            width=float("inf"),
        )

    def decode(self, text: str) -> Any:
        try:
            return yaml.safe_load(text)
        except yaml.YAMLError as e:
            mark = getattr(e, "problem_mark", None)
            lineno = mark.line + 1 if mark is not None else None
            colno = mark.column + 1 if mark is not None else None
            problem = getattr(e, "problem", None) or str(e)
            raise DeserializationError(self.name, problem, lineno, colno) from e
