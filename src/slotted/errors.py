from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from .spans import Position


ErrorHandler = Callable[[str], str]


class TemplateError(Exception):
    pass


class ScanError(TemplateError):
    """An unterminated slot, reported through the error handler."""


@dataclass(slots=True)
class SlotSyntaxError(TemplateError):
    position: Position
    message: str
    hint: str | None = None

    def __str__(self) -> str:
        base = f"{self.position.format()}: {self.message}"
        if self.hint:
            return f"{base}\nhint: {self.hint}"
        return base


class UnboundNameError(TemplateError, LookupError):
    def __init__(self, name: str, template: str = "") -> None:
        super().__init__(name, template)
        self.name = name
        self.template = template

    def __str__(self) -> str:
        where = f" in template {self.template!r}" if self.template else ""
        return f"no value bound to {self.name!r}{where}"


def raise_scan_error(message: str) -> str:
    raise ScanError(message)


def render_literally(message: str) -> str:
    return message


def format_diagnostic(template: str, position: Position, message: str) -> str:
    return f"{position.format(template)}: {message}"
