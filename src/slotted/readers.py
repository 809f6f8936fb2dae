from __future__ import annotations

import re
from collections.abc import Mapping

from .errors import SlotSyntaxError, UnboundNameError
from .render import RenderContext
from .segments import RenderUnit, Segment


_PATH_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*(?:\.[A-Za-z_][A-Za-z0-9_]*)*")


def _walk(value: object, part: str, path: str, template: str) -> object:
    if isinstance(value, Mapping):
        if part in value:
            return value[part]
    elif hasattr(value, part):
        return getattr(value, part)
    raise UnboundNameError(path, template)


def name_reader(segment: Segment) -> RenderUnit:
    """Slot reader resolving a dotted name against the render context.

    `user.name` looks up `user`, then its `name` key (or attribute).
    """
    path = segment.content
    if not _PATH_RE.fullmatch(path):
        raise SlotSyntaxError(
            position=segment.start,
            message=f"invalid slot name {path!r}",
            hint="slots hold a name or dotted path, e.g. <% user.name %>",
        )
    head, *rest = path.split(".")

    def unit(context: RenderContext) -> str:
        value = context.lookup(head)
        for part in rest:
            value = _walk(value, part, path, context.template_name)
        return "" if value is None else str(value)

    return unit
