from __future__ import annotations

import itertools
from dataclasses import dataclass


DEFAULT_ESCAPE_CHAR = "\\"
DEFAULT_TAB_WIDTH = 1

OPEN_DELIMITER = "<%"
CLOSE_DELIMITER = "%>"

_RESERVED = frozenset("<%>")
_names = itertools.count(1)


def new_template_name() -> str:
    return f"template__{next(_names)}"


@dataclass(frozen=True, slots=True)
class ScanOptions:
    escape_char: str = DEFAULT_ESCAPE_CHAR
    tab_width: int = DEFAULT_TAB_WIDTH

    def __post_init__(self) -> None:
        if not isinstance(self.escape_char, str) or len(self.escape_char) != 1:
            raise ValueError(f"escape_char must be a single character, got {self.escape_char!r}")
        if self.escape_char in _RESERVED or self.escape_char.isspace():
            raise ValueError(f"escape_char cannot be a delimiter or whitespace: {self.escape_char!r}")
        if isinstance(self.tab_width, bool) or not isinstance(self.tab_width, int) or self.tab_width < 1:
            raise ValueError(f"tab_width must be a positive integer, got {self.tab_width!r}")
