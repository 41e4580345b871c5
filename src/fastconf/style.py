from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Style:
    """Cosmetic options handed to a backend's serialize call.

    - indent / indent_char: one indentation unit (``indent`` copies of ``indent_char``)
    - pretty: multi-line output when True, the most compact form the format allows otherwise
    - newline: line terminator written to disk
    - sort_keys: emit mapping keys in sorted order

    Backends ignore knobs they cannot honor. None of these affect the values read back.
    """

    indent: int = 2
    indent_char: str = " "
    pretty: bool = True
    newline: str = "\n"
    sort_keys: bool = False

    def __post_init__(self) -> None:
        if self.indent < 0:
            raise ValueError("indent must be >= 0")
        if self.newline not in ("\n", "\r\n"):
            raise ValueError(f"Unsupported newline style: {self.newline!r}")

    @property
    def indent_unit(self) -> str:
        return self.indent_char * self.indent

    @classmethod
    def compact(cls) -> "Style":
        return cls(pretty=False)

    def with_options(self, **changes) -> "Style":
        return replace(self, **changes)


DEFAULT_STYLE = Style()
