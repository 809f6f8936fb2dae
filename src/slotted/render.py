from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType

from .errors import UnboundNameError
from .segments import RenderUnit


log = logging.getLogger(__name__)


def _join(*parts: object, sep: str = "") -> str:
    return sep.join(str(p) for p in parts)


DEFAULT_MODEL: Mapping[str, object] = MappingProxyType({})

DEFAULT_HANDLERS: Mapping[str, object] = MappingProxyType(
    {
        "str": str,
        "upper": str.upper,
        "lower": str.lower,
        "strip": str.strip,
        "join": _join,
    }
)


def add_default_locals(providers: Iterable[Mapping[str, object]]) -> tuple[Mapping[str, object], ...]:
    """Append the library defaults after the caller's providers."""
    return (*providers, DEFAULT_MODEL, DEFAULT_HANDLERS)


@dataclass(frozen=True, slots=True)
class RenderContext:
    """Call-scoped state handed to every render unit."""

    template_name: str = ""
    providers: tuple[Mapping[str, object], ...] = ()

    @classmethod
    def build(
        cls,
        providers: Iterable[Mapping[str, object]] = (),
        *,
        template_name: str = "",
    ) -> "RenderContext":
        return cls(template_name=template_name, providers=add_default_locals(providers))

    def lookup(self, name: str) -> object:
        for p in self.providers:
            if name in p:
                return p[name]
        raise UnboundNameError(name, self.template_name)

    def __contains__(self, name: object) -> bool:
        return any(name in p for p in self.providers)


def render(units: Sequence[RenderUnit], context: RenderContext) -> str:
    log.debug("rendering %d units for %s", len(units), context.template_name or "<anonymous>")
    return "".join(unit(context) for unit in units)
