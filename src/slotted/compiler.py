from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from .errors import ErrorHandler, format_diagnostic, raise_scan_error
from .segments import CompiledTemplate, ParsedTemplate, RenderUnit, Segment


log = logging.getLogger(__name__)

SlotReader = Callable[[Segment], RenderUnit]


def constant(text: str) -> RenderUnit:
    def unit(_context: object) -> str:
        return text

    return unit


def compile_segment(
    slot_reader: SlotReader,
    segment: Segment,
    *,
    template_name: str = "",
    err_handler: ErrorHandler = raise_scan_error,
) -> RenderUnit:
    if segment.is_slot:
        return slot_reader(segment)
    if segment.is_error:
        # The handler either raises or hands back the text to render in place.
        return constant(err_handler(format_diagnostic(template_name, segment.start, segment.content)))
    return constant(segment.content)


def compile_segments(
    slot_reader: SlotReader,
    segments: Iterable[Segment],
    *,
    template_name: str = "",
    err_handler: ErrorHandler = raise_scan_error,
) -> tuple[RenderUnit, ...]:
    """Compile every segment, realizing lazy segment streams completely."""
    units = tuple(
        compile_segment(slot_reader, s, template_name=template_name, err_handler=err_handler)
        for s in segments
    )
    log.debug("compiled %d units for %s", len(units), template_name or "<anonymous>")
    return units


def compile_template(
    slot_reader: SlotReader,
    parsed: ParsedTemplate,
    *,
    err_handler: ErrorHandler | None = None,
    template_name: str | None = None,
) -> CompiledTemplate:
    name = template_name or parsed.name
    units = compile_segments(
        slot_reader,
        parsed.segments,
        template_name=name,
        err_handler=err_handler or raise_scan_error,
    )
    return CompiledTemplate(name=parsed.name, units=units)
