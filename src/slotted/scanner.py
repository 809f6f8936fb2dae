from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum

from .config import CLOSE_DELIMITER, DEFAULT_ESCAPE_CHAR, DEFAULT_TAB_WIDTH, OPEN_DELIMITER, ScanOptions
from .segments import Segment
from .spans import START, Position, advance


log = logging.getLogger(__name__)


class Mode(Enum):
    STATIC = "static"
    SLOT = "slot"


# (withheld lead char, char that completes the delimiter) per mode
_DELIMITERS = {
    Mode.STATIC: (OPEN_DELIMITER[0], OPEN_DELIMITER[1]),
    Mode.SLOT: (CLOSE_DELIMITER[0], CLOSE_DELIMITER[1]),
}


@dataclass(slots=True)
class _Cursor:
    tab_width: int
    here: Position = START
    start: Position = START  # where the current accumulation run began
    text: list[str] = field(default_factory=list)
    buffer: str = ""

    def consume(self, ch: str) -> None:
        self.here = advance(self.here, ch, self.tab_width)

    def take(self) -> str:
        out = "".join(self.text)
        self.text.clear()
        self.buffer = ""
        self.start = self.here
        return out


def step(buffer: str, ch: str, esc: str, mode: Mode) -> tuple[str, str, bool]:
    """Feed one character to the lookahead buffer.

    Returns (text to append, new buffer, delimiter found). The escape rules
    are shared by both modes; only the withheld delimiter differs.
    """
    lead, follow = _DELIMITERS[mode]
    if buffer == "":
        if ch == esc or ch == lead:
            return "", ch, False
        return ch, "", False
    if buffer == esc:
        if ch == esc:
            return esc, "", False
        if ch == "<" or ch == "%":
            return "", buffer + ch, False
        return buffer + ch, "", False
    if buffer == esc + "<":
        if ch == "%":
            return OPEN_DELIMITER, "", False
        return buffer + ch, "", False
    if buffer == esc + "%":
        if ch == ">":
            return CLOSE_DELIMITER, "", False
        return buffer + ch, "", False
    # buffer == lead
    if ch == follow:
        return "", "", True
    return buffer + ch, "", False


def iter_segments(
    text: str,
    *,
    escape_char: str = DEFAULT_ESCAPE_CHAR,
    tab_width: int = DEFAULT_TAB_WIDTH,
) -> Iterator[Segment]:
    """Lazily split `text` into alternating static and slot segments.

    An unterminated slot yields one error segment followed by an empty static
    segment, after which the stream ends.
    """
    ScanOptions(escape_char=escape_char, tab_width=tab_width)  # validates
    cur = _Cursor(tab_width=tab_width)
    mode = Mode.STATIC

    for ch in text:
        cur.consume(ch)
        out, cur.buffer, found = step(cur.buffer, ch, escape_char, mode)
        if out:
            cur.text.append(out)
        if not found:
            continue
        if mode is Mode.STATIC:
            start = cur.start
            yield Segment.static(cur.take(), start)
            mode = Mode.SLOT
        else:
            start = cur.start
            yield Segment.slot(cur.take(), start)
            mode = Mode.STATIC

    if mode is Mode.STATIC:
        yield Segment.static("".join(cur.text) + cur.buffer, cur.start)
        return

    partial = "".join(cur.text) + cur.buffer
    log.debug("unterminated slot at %s", cur.start.format())
    yield Segment.error(f"Invalid/incomplete slot '{partial}'", cur.start)
    yield Segment.static("", cur.here)


def scan(
    text: str,
    *,
    escape_char: str = DEFAULT_ESCAPE_CHAR,
    tab_width: int = DEFAULT_TAB_WIDTH,
) -> tuple[Segment, ...]:
    return tuple(iter_segments(text, escape_char=escape_char, tab_width=tab_width))
