from __future__ import annotations

import inspect

import pytest

from slotted import Position, Segment, SegmentKind, iter_segments, scan


def _kinds(segs: tuple[Segment, ...]) -> list[SegmentKind]:
    return [s.kind for s in segs]


def test_plain_text_is_one_static_segment() -> None:
    assert scan("foo bar") == (Segment.static("foo bar", Position(1, 1, 1)),)


def test_empty_input_is_one_empty_static_segment() -> None:
    assert scan("") == (Segment.static("", Position(1, 1, 1)),)


def test_slot_is_split_out_and_trimmed() -> None:
    segs = scan("foo <% num %> bar")
    assert segs == (
        Segment.static("foo ", Position(1, 1, 1)),
        Segment.slot("num", Position(1, 7, 7)),
        Segment.static(" bar", Position(1, 14, 14)),
    )


def test_slot_positions_across_lines() -> None:
    segs = scan("a\n<% x %>\nb")
    assert segs[1] == Segment.slot("x", Position(2, 3, 5))
    assert segs[2] == Segment.static("\nb", Position(2, 8, 10))


def test_slot_content_trims_all_whitespace() -> None:
    segs = scan("<%\n  name\t%>")
    assert segs[1].content == "name"


def test_empty_and_adjacent_slots() -> None:
    assert _kinds(scan("<%%>")) == [SegmentKind.STATIC, SegmentKind.SLOT, SegmentKind.STATIC]
    segs = scan("<%a%><%b%>")
    assert [s.content for s in segs] == ["", "a", "", "b", ""]
    assert _kinds(segs) == [
        SegmentKind.STATIC,
        SegmentKind.SLOT,
        SegmentKind.STATIC,
        SegmentKind.SLOT,
        SegmentKind.STATIC,
    ]


@pytest.mark.parametrize(
    ("src", "expected"),
    [
        ("foo \\<% bar", "foo <% bar"),
        ("a \\%> b", "a %> b"),
        ("a \\\\ b", "a \\ b"),
        ("a \\x b", "a \\x b"),
        ("a \\<x", "a \\<x"),
        ("a \\%x", "a \\%x"),
        ("a <x", "a <x"),
        ("a %> b", "a %> b"),
        ("ends with <", "ends with <"),
        ("ends with \\", "ends with \\"),
        ("ends with \\<", "ends with \\<"),
    ],
)
def test_static_escapes(src: str, expected: str) -> None:
    assert scan(src) == (Segment.static(expected, Position(1, 1, 1)),)


def test_double_lt_does_not_open_a_slot() -> None:
    # "<" followed by anything but "%" is flushed together with that character.
    assert scan("<<% x %>") == (Segment.static("<<% x %>", Position(1, 1, 1)),)


def test_escaped_escape_before_opener_still_opens() -> None:
    segs = scan("a\\\\<% b %>")
    assert [s.content for s in segs] == ["a\\", "b", ""]


@pytest.mark.parametrize(
    ("src", "expected"),
    [
        ("<% a \\%> b %>", "a %> b"),
        ("<% a \\<% b %>", "a <% b"),
        ("<% 5 % 2 %>", "5 % 2"),
        ("<% a\\\\b %>", "a\\b"),
        ("<% a\\nb %>", "a\\nb"),
        ("<% a\\<b %>", "a\\<b"),
        ("<% a\\%b %>", "a\\%b"),
        ("<% a <b %>", "a <b"),
    ],
)
def test_slot_escapes(src: str, expected: str) -> None:
    segs = scan(src)
    assert _kinds(segs) == [SegmentKind.STATIC, SegmentKind.SLOT, SegmentKind.STATIC]
    assert segs[1].content == expected


def test_unterminated_slot_is_error_then_empty_static() -> None:
    segs = scan("foo <% unterminated")
    assert len(segs) == 3
    assert segs[0] == Segment.static("foo ", Position(1, 1, 1))
    assert segs[1].is_error
    assert "incomplete" in segs[1].content
    assert "' unterminated'" in segs[1].content
    assert segs[1].start == Position(1, 7, 7)
    assert segs[2] == Segment.static("", Position(1, 20, 20))


def test_unterminated_slot_reports_withheld_buffer() -> None:
    segs = scan("x <% a %")
    assert segs[1].content == "Invalid/incomplete slot ' a %'"


def test_error_after_complete_slots() -> None:
    segs = scan("<% a %> b <% c")
    assert _kinds(segs) == [
        SegmentKind.STATIC,
        SegmentKind.SLOT,
        SegmentKind.STATIC,
        SegmentKind.ERROR,
        SegmentKind.STATIC,
    ]
    assert sum(s.is_error for s in segs) == 1
    assert segs[-1].content == ""


def test_custom_escape_char() -> None:
    assert scan("a ~<% b", escape_char="~") == (Segment.static("a <% b", Position(1, 1, 1)),)
    segs = scan("a \\<% b %>", escape_char="~")
    assert [s.content for s in segs] == ["a \\", "b", ""]


def test_tab_width_applies_to_positions() -> None:
    segs = scan("\t<% x %>", tab_width=4)
    assert segs[1].start == Position(1, 7, 4)


@pytest.mark.parametrize("esc", ["", "ab", "<", "%", ">", " "])
def test_invalid_escape_char_rejected(esc: str) -> None:
    with pytest.raises(ValueError):
        scan("x", escape_char=esc)


def test_iter_segments_is_lazy() -> None:
    it = iter_segments("head <% a %>" + " tail" * 1000)
    assert inspect.isgenerator(it)
    assert next(it) == Segment.static("head ", Position(1, 1, 1))
    assert next(it).content == "a"
    rest = list(it)
    assert len(rest) == 1
