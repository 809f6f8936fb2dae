from __future__ import annotations

from collections.abc import Iterable, Mapping

from .compiler import SlotReader, compile_template
from .config import DEFAULT_ESCAPE_CHAR, DEFAULT_TAB_WIDTH, ScanOptions, new_template_name
from .errors import ErrorHandler
from .render import RenderContext, render
from .scanner import scan
from .segments import CompiledTemplate, ParsedTemplate, Template


def parse_template(
    text: str,
    name: str | None = None,
    *,
    escape_char: str = DEFAULT_ESCAPE_CHAR,
    tab_width: int = DEFAULT_TAB_WIDTH,
) -> ParsedTemplate:
    """Split raw template text into static, slot and error segments.

    Malformed input never raises here: an unterminated slot becomes an error
    segment that the compiler reports through its error handler.
    """
    if not isinstance(text, str):
        raise TypeError(f"template text must be a str, got {type(text)!r}")
    opts = ScanOptions(escape_char=escape_char, tab_width=tab_width)
    template = Template(name=name or new_template_name(), content=text)
    segments = scan(template.content, escape_char=opts.escape_char, tab_width=opts.tab_width)
    return ParsedTemplate(name=template.name, segments=segments)


def parse_compile(
    slot_reader: SlotReader,
    text: str,
    name: str | None = None,
    *,
    escape_char: str = DEFAULT_ESCAPE_CHAR,
    tab_width: int = DEFAULT_TAB_WIDTH,
    err_handler: ErrorHandler | None = None,
) -> CompiledTemplate:
    parsed = parse_template(text, name, escape_char=escape_char, tab_width=tab_width)
    return compile_template(slot_reader, parsed, err_handler=err_handler)


def render_template(
    compiled: CompiledTemplate,
    providers: Iterable[Mapping[str, object]] = (),
    *,
    model: Mapping[str, object] | None = None,
    handlers: Mapping[str, object] | None = None,
) -> str:
    """Render `compiled` against the caller's providers.

    `model` and `handlers` take precedence over `providers`; library defaults
    are always consulted last.
    """
    overrides = [m for m in (model, handlers) if m is not None]
    ctx = RenderContext.build([*overrides, *providers], template_name=compiled.name)
    return render(compiled.units, ctx)


def parse_compile_render(
    slot_reader: SlotReader,
    text: str,
    name: str | None = None,
    providers: Iterable[Mapping[str, object]] = (),
    *,
    escape_char: str = DEFAULT_ESCAPE_CHAR,
    tab_width: int = DEFAULT_TAB_WIDTH,
    err_handler: ErrorHandler | None = None,
    model: Mapping[str, object] | None = None,
    handlers: Mapping[str, object] | None = None,
) -> str:
    compiled = parse_compile(
        slot_reader,
        text,
        name,
        escape_char=escape_char,
        tab_width=tab_width,
        err_handler=err_handler,
    )
    return render_template(compiled, providers, model=model, handlers=handlers)
