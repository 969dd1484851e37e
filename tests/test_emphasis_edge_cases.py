"""Edge case tests for span assembly.

These tests exercise the fixed alternative order and the literal-preserving
text fallback on whole lines of inline content.
"""

import pytest

from pluma import assemble_spans, parse_inline
from pluma.location import SourceLocation
from pluma.nodes import (
    Bold,
    BoldItalic,
    Italic,
    Link,
    Strikethrough,
    Text,
)


def _shape(spans: tuple) -> list[tuple[str, str]]:
    """Reduce spans to (type name, literal) pairs."""
    return [
        (type(s).__name__, s.label if isinstance(s, Link) else s.content)
        for s in spans
    ]


class TestScenarios:
    """Reference inputs and their span sequences."""

    def test_bold(self) -> None:
        spans = parse_inline("**hello**")
        assert len(spans) == 1
        assert isinstance(spans[0], Bold)
        assert spans[0].content == "hello"

    def test_triple_star_closed_by_single(self) -> None:
        """*** opener folds to a ** literal under italic strength."""
        spans = parse_inline("***hi*")
        assert _shape(spans) == [("Italic", "**hi")]

    def test_link_with_title(self) -> None:
        spans = parse_inline("[go](http://example.com go-title)")
        assert len(spans) == 1
        link = spans[0]
        assert isinstance(link, Link)
        assert link.label == "go"
        assert link.destination == "http://example.com"
        assert link.title == "go-title"

    def test_strikethrough(self) -> None:
        assert _shape(parse_inline("~strike~")) == [("Strikethrough", "strike")]

    def test_unterminated_is_literal(self) -> None:
        assert _shape(parse_inline("plain *unterminated")) == [
            ("Text", "plain *unterminated")
        ]

    def test_empty(self) -> None:
        assert parse_inline("") == ()


class TestAlternativeOrder:
    """Earlier alternatives win even when a later one would match more."""

    def test_bold_italic_before_bold(self) -> None:
        assert _shape(parse_inline("***11***")) == [("BoldItalic", "11")]

    def test_bold_before_italic(self) -> None:
        assert _shape(parse_inline("***11**")) == [("Bold", "*11")]

    def test_bold_closed_by_triple(self) -> None:
        assert _shape(parse_inline("**11***")) == [("Bold", "11*")]

    def test_italic_when_bold_unterminated(self) -> None:
        assert _shape(parse_inline("**11*")) == [("Italic", "*11")]

    def test_italic_closed_by_bold(self) -> None:
        assert _shape(parse_inline("*11**")) == [("Italic", "11*")]

    def test_strikethrough_before_emphasis(self) -> None:
        """A ~ span swallows star runs whole."""
        assert _shape(parse_inline("~**a**~")) == [("Strikethrough", "**a**")]

    def test_link_before_emphasis(self) -> None:
        spans = parse_inline("[*a*](u)")
        assert isinstance(spans[0], Link)
        assert spans[0].label == "*a*"

    def test_emphasis_around_link_text(self) -> None:
        """Link syntax inside emphasis stays literal content."""
        assert _shape(parse_inline("*see [a](b)*")) == [("Italic", "see [a](b)")]


class TestMixedLines:
    """Text runs stop where another span starts."""

    def test_text_then_italic(self) -> None:
        assert _shape(parse_inline("plain *it*")) == [("Text", "plain "), ("Italic", "it")]

    def test_spans_between_text(self) -> None:
        assert _shape(parse_inline("a **b** c ~d~ e")) == [
            ("Text", "a "),
            ("Bold", "b"),
            ("Text", " c "),
            ("Strikethrough", "d"),
            ("Text", " e"),
        ]

    def test_bracket_inside_text_run_is_literal(self) -> None:
        """Text runs are never split, so a link mid-run stays text."""
        assert _shape(parse_inline("see [docs](http://x.io) now")) == [
            ("Text", "see [docs](http://x.io) now"),
        ]

    def test_link_at_token_boundary(self) -> None:
        assert _shape(parse_inline("*[a](b) c")) == [
            ("Text", "*"),
            ("Link", "a"),
            ("Text", " c"),
        ]

    def test_link_after_span(self) -> None:
        assert _shape(parse_inline("**b**[c](d)")) == [("Bold", "b"), ("Link", "c")]

    def test_bracket_without_link_is_text(self) -> None:
        assert _shape(parse_inline("a [b] c")) == [("Text", "a [b] c")]

    def test_unmatched_delimiter_then_span(self) -> None:
        """A stray ~ is absorbed, then a later span still resolves."""
        assert _shape(parse_inline("x ~ y **z**")) == [
            ("Text", "x ~ y "),
            ("Bold", "z"),
        ]

    def test_adjacent_spans(self) -> None:
        assert _shape(parse_inline("*a***b**")) == [("Italic", "a**"), ("Text", "b**")]

    def test_double_tilde(self) -> None:
        assert _shape(parse_inline("~~a~~")) == [
            ("Strikethrough", ""),
            ("Text", "a"),
            ("Strikethrough", ""),
        ]

    def test_lone_delimiters(self) -> None:
        assert _shape(parse_inline("*")) == [("Text", "*")]
        assert _shape(parse_inline("~")) == [("Text", "~")]
        assert _shape(parse_inline("***")) == [("Text", "***")]

    def test_four_stars(self) -> None:
        assert _shape(parse_inline("****")) == [("Italic", "**")]


class TestLineBoundaries:
    """Inline scanning never crosses a line terminator."""

    def test_stops_at_newline(self) -> None:
        assert _shape(parse_inline("a\nb")) == [("Text", "a")]

    def test_emphasis_cannot_cross_newline(self) -> None:
        assert _shape(parse_inline("*a\nb*")) == [("Text", "*a")]

    def test_leading_newline(self) -> None:
        assert parse_inline("\nabc") == ()

    def test_slice_bounds(self) -> None:
        text = "xx**b**yy"
        assert _shape(assemble_spans(text, 2, 7)) == [("Bold", "b")]


class TestSpanLocations:
    """Spans carry their source slice."""

    def test_offsets_and_columns(self) -> None:
        spans = parse_inline("ab *cd*")
        text, italic = spans
        assert (text.location.offset, text.location.end_offset) == (0, 3)
        assert italic.location.offset == 3
        assert italic.location.end_offset == 7
        assert italic.location.col_offset == 4

    def test_base_location(self) -> None:
        base = SourceLocation(lineno=5, col_offset=3, offset=10)
        source = "x" * 10 + "**b**"
        (bold,) = assemble_spans(source, 10, location=base)
        assert bold.location.lineno == 5
        assert bold.location.col_offset == 3


@pytest.mark.parametrize(
    ("text", "expected_type"),
    [
        ("*a*", Italic),
        ("**a**", Bold),
        ("***a***", BoldItalic),
        ("~a~", Strikethrough),
        ("a", Text),
    ],
)
def test_single_span_types(text: str, expected_type: type) -> None:
    (span,) = parse_inline(text)
    assert isinstance(span, expected_type)
