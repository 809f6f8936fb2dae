from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """A concrete template position.

    Row, column and position are all 1-based; a position names the next
    character to be consumed.
    """

    row: int = 1
    col: int = 1
    pos: int = 1

    def format(self, name: str = "") -> str:
        if name == "":
            return f"{self.row}:{self.col}"
        return f"{name}:{self.row}:{self.col}"


START = Position()


def advance(position: Position, ch: str | None, tab_width: int = 1) -> Position:
    """Return the position after consuming `ch`."""
    if not ch:
        return position
    if ch == "\n":
        return Position(row=position.row + 1, col=1, pos=position.pos + 1)
    if ch == "\r":
        return Position(row=position.row, col=1, pos=position.pos + 1)
    if ch == "\t":
        return Position(row=position.row, col=position.col + tab_width, pos=position.pos + 1)
    return Position(row=position.row, col=position.col + 1, pos=position.pos + 1)
