"""Property-based tests for span assembly using Hypothesis.

These tests verify properties that hold for every input line: assembly
never fails, spans tile the line, and every character is accounted for
either as content or as a consumed delimiter.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from pluma import parse, parse_inline, render
from pluma.nodes import Bold, BoldItalic, Italic, Link, Strikethrough, Text

# Delimiter characters consumed as structure by each span type
_CONSUMED = {Text: 0, Italic: 2, Bold: 4, BoldItalic: 6, Strikethrough: 2}

markup_line = st.text(alphabet="ab *~[]()", max_size=40)
emphasis_line = st.text(alphabet="ab *~", max_size=40)


class TestAssemblyInvariants:
    """Invariants of one assembled line."""

    @given(markup_line)
    @settings(max_examples=300)
    def test_spans_tile_the_line(self, line: str) -> None:
        """Span locations are contiguous and cover the whole line."""
        spans = parse_inline(line)
        pos = 0
        for span in spans:
            assert span.location.offset == pos
            assert span.location.end_offset > pos
            pos = span.location.end_offset
        assert pos == len(line)

    @given(emphasis_line)
    @settings(max_examples=300)
    def test_characters_conserved(self, line: str) -> None:
        """Content plus consumed delimiters equals the input length."""
        spans = parse_inline(line)
        total = sum(len(s.content) + _CONSUMED[type(s)] for s in spans)
        assert total == len(line)

    @given(markup_line)
    @settings(max_examples=200)
    def test_non_empty_line_has_spans(self, line: str) -> None:
        assert (parse_inline(line) == ()) == (line == "")

    @given(markup_line)
    @settings(max_examples=200)
    def test_deterministic(self, line: str) -> None:
        assert parse_inline(line) == parse_inline(line)

    @given(markup_line)
    @settings(max_examples=200)
    def test_no_adjacent_text_spans_from_delimiters(self, line: str) -> None:
        """Text spans only begin where no other alternative matched."""
        spans = parse_inline(line)
        for before, after in zip(spans, spans[1:], strict=False):
            assert not (isinstance(before, Text) and isinstance(after, Text))

    @given(emphasis_line)
    @settings(max_examples=200)
    def test_no_links_without_brackets(self, line: str) -> None:
        assert not any(isinstance(s, Link) for s in parse_inline(line))


class TestDocumentInvariants:
    """Invariants of whole documents."""

    @given(st.text(max_size=200))
    @settings(max_examples=200)
    def test_parse_is_total(self, source: str) -> None:
        """Any text parses and renders without raising."""
        render(parse(source))

    @given(st.lists(st.text(alphabet="ab *~#>", min_size=1, max_size=12), max_size=8))
    @settings(max_examples=200)
    def test_blocks_in_line_order(self, lines: list[str]) -> None:
        doc = parse("\n".join(lines))
        linenos = [block.location.lineno for block in doc.children]
        assert linenos == sorted(linenos)

    @given(st.text(alphabet="ab *~[]()#>!\n", max_size=80))
    @settings(max_examples=300)
    def test_render_settles_after_one_cycle(self, source: str) -> None:
        """Rendering a re-parsed rendering gives the same text."""
        once = render(parse(source))
        assert render(parse(once)) == once
