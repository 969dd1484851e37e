"""Tests for the markup renderer."""

import pytest

from pluma import Markup, parse, render
from pluma.errors import RenderError
from pluma.location import SourceLocation
from pluma.nodes import Document, Header, Paragraph, Text
from pluma.renderers import MarkupRenderer

_LOC = SourceLocation(lineno=1, col_offset=1)


class TestBlocks:
    """One output line per block."""

    @pytest.mark.parametrize(
        "source",
        [
            "# Hello **World**",
            "### deep",
            "plain text",
            "![logo](img/logo.png)",
            "![logo](img/logo.png The logo)",
            "> *quoted*",
            "> > nested",
            "> # Title\n> \n> ![i](u)",
            "a\n\nb",
            "a\n\n",
            "\n",
            "> a\n> \n",
        ],
    )
    def test_source_reproduced(self, source: str) -> None:
        assert render(parse(source)) == source

    def test_empty_document(self) -> None:
        assert render(parse("")) == ""

    def test_trailing_newline_dropped(self) -> None:
        assert render(parse("a\n")) == "a"

    def test_final_rule_keeps_terminator(self) -> None:
        """A trailing rule survives a parse of its own output."""
        once = render(parse("a\n\n"))
        assert once == "a\n\n"
        assert [type(b).__name__ for b in parse(once).children] == [
            "Paragraph",
            "HorizontalRule",
        ]

    def test_markup_call_keeps_final_rule(self) -> None:
        assert Markup()("# t\n\n") == "# t\n\n"

    def test_crlf_rendered_as_lf(self) -> None:
        assert render(parse("a\r\nb")) == "a\nb"


class TestInlines:
    """Span delimiters are written back around content."""

    @pytest.mark.parametrize(
        "source",
        [
            "*it* **bo** ***bi*** ~st~",
            "see [docs](http://x.io) now",
            "[a](b c d)",
            "plain *unterminated",
            "~~a~~",
        ],
    )
    def test_line_reproduced(self, source: str) -> None:
        assert render(parse(source)) == source

    def test_folded_opener_keeps_stars(self) -> None:
        """Folded star literals live in content, so the line comes back whole."""
        assert render(parse("***hi*")) == "***hi*"

    def test_render_inlines(self) -> None:
        spans = parse("a **b**").children[0].children
        assert MarkupRenderer().render_inlines(spans) == "a **b**"


class TestStability:
    """Rendering then parsing again settles after one cycle."""

    @pytest.mark.parametrize(
        "source",
        [
            "a\n",
            "a\n\n",
            "a\n> ",
            "x\r\ny",
            "#no space",
            "> a\nb",
            "**11*",
            "[x] [y](z)",
        ],
    )
    def test_second_cycle_is_fixed_point(self, source: str) -> None:
        once = render(parse(source))
        assert render(parse(once)) == once


class TestRenderErrors:
    """Nodes in the wrong position cannot be rendered."""

    def test_inline_in_block_position(self) -> None:
        doc = Document(location=_LOC, children=(Text(location=_LOC, content="x"),))  # type: ignore[arg-type]
        with pytest.raises(RenderError, match="Text"):
            render(doc)

    def test_block_in_inline_position(self) -> None:
        header = Header(location=_LOC, level=1, children=(Text(location=_LOC, content="x"),))
        para = Paragraph(location=_LOC, children=(header,))  # type: ignore[arg-type]
        doc = Document(location=_LOC, children=(para,))
        with pytest.raises(RenderError, match="Header"):
            render(doc)
