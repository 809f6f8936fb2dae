from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Callable

from .spans import Position

if TYPE_CHECKING:
    from .render import RenderContext


RenderUnit = Callable[["RenderContext"], str]


class SegmentKind(str, Enum):
    STATIC = "static"
    SLOT = "slot"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class Segment:
    kind: SegmentKind
    content: str  # trimmed for slots, diagnostic message for errors
    start: Position

    @classmethod
    def static(cls, content: str, start: Position) -> "Segment":
        return cls(SegmentKind.STATIC, content, start)

    @classmethod
    def slot(cls, content: str, start: Position) -> "Segment":
        return cls(SegmentKind.SLOT, content.strip(), start)

    @classmethod
    def error(cls, message: str, start: Position) -> "Segment":
        return cls(SegmentKind.ERROR, message, start)

    @property
    def is_static(self) -> bool:
        return self.kind is SegmentKind.STATIC

    @property
    def is_slot(self) -> bool:
        return self.kind is SegmentKind.SLOT

    @property
    def is_error(self) -> bool:
        return self.kind is SegmentKind.ERROR

    def __repr__(self) -> str:
        return f"Segment({self.kind.value}, {self.content!r}, {self.start.format()})"


@dataclass(frozen=True, slots=True)
class Template:
    """Raw template text, as handed to the scanner."""

    name: str
    content: str


@dataclass(frozen=True, slots=True)
class ParsedTemplate:
    name: str
    segments: tuple[Segment, ...]

    @property
    def error(self) -> Segment | None:
        return next((s for s in self.segments if s.is_error), None)


@dataclass(frozen=True, slots=True)
class CompiledTemplate:
    name: str
    units: tuple[RenderUnit, ...]

    def __call__(self, context: "RenderContext") -> str:
        from .render import render

        return render(self.units, context)
