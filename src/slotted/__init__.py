from __future__ import annotations

from .api import parse_compile, parse_compile_render, parse_template, render_template
from .compiler import compile_template
from .errors import ScanError, SlotSyntaxError, TemplateError, UnboundNameError, raise_scan_error, render_literally
from .readers import name_reader
from .render import RenderContext, render
from .scanner import iter_segments, scan
from .segments import CompiledTemplate, ParsedTemplate, Segment, SegmentKind
from .spans import Position

__all__ = [
    "CompiledTemplate",
    "ParsedTemplate",
    "Position",
    "RenderContext",
    "ScanError",
    "Segment",
    "SegmentKind",
    "SlotSyntaxError",
    "TemplateError",
    "UnboundNameError",
    "compile_template",
    "iter_segments",
    "name_reader",
    "parse_compile",
    "parse_compile_render",
    "parse_template",
    "raise_scan_error",
    "render",
    "render_literally",
    "render_template",
    "scan",
]
