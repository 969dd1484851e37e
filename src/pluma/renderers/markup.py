"""Markup renderer.

Renders a typed AST back to the minimal markup that re-parses to it:
one output line per block, quotes prefixed line by line with "> ", and
a horizontal rule as an empty line. Blocks are joined with "\\n". A rule
that ends the document also gets its terminator, since a final empty line
without one is not a block.

Spans render to the exact source slice they were parsed from, so a parsed
document renders back to its newline-normalized source, minus a redundant
trailing newline and minus quote lines that produced no block. Rendering
the re-parsed output gives the same text again.

Thread Safety:
Renderer instances hold no per-render state. Multiple threads can share
one instance.
"""

from pluma.errors import RenderError
from pluma.nodes import (
    Block,
    Bold,
    BoldItalic,
    Document,
    Header,
    HorizontalRule,
    Image,
    Inline,
    Italic,
    Link,
    Paragraph,
    Quote,
    Strikethrough,
    Text,
)
from pluma.parsing.blocks import QUOTE_PREFIX


def _destination(destination: str, title: str | None) -> str:
    if title is None:
        return f"({destination})"
    return f"({destination} {title})"


def _is_rule_line(line: str) -> bool:
    """Whether line is a rendered horizontal rule, possibly quoted."""
    return line == QUOTE_PREFIX * (len(line) // len(QUOTE_PREFIX))


class MarkupRenderer:
    """Render AST to markup text.

    Usage:
        >>> from pluma import parse
        >>> doc = parse("# Hello **World**")
        >>> MarkupRenderer().render(doc)
        '# Hello **World**'

    """

    __slots__ = ()

    def render(self, node: Document) -> str:
        """Render document AST to markup.

        Args:
            node: Document AST root

        Returns:
            Markup string, ending in a newline only after a final rule

        """
        lines: list[str] = []
        for child in node.children:
            self._render_block(child, lines)
        if lines and _is_rule_line(lines[-1]):
            lines.append("")
        return "\n".join(lines)

    def render_inlines(self, spans: tuple[Inline, ...]) -> str:
        """Render a span sequence to one line of markup."""
        return "".join(self._render_inline(span) for span in spans)

    # =========================================================================
    # Block rendering
    # =========================================================================

    def _render_block(self, block: Block, lines: list[str]) -> None:
        match block:
            case Header():
                lines.append("#" * block.level + " " + self.render_inlines(block.children))
            case Paragraph():
                lines.append(self.render_inlines(block.children))
            case HorizontalRule():
                lines.append("")
            case Image():
                lines.append(f"![{block.alt}]" + _destination(block.destination, block.title))
            case Quote():
                quoted: list[str] = []
                for child in block.children:
                    self._render_block(child, quoted)
                lines.extend(QUOTE_PREFIX + line for line in quoted)
            case Document():
                for child in block.children:
                    self._render_block(child, lines)
            case _:
                raise RenderError(f"Cannot render block node {type(block).__name__}")

    # =========================================================================
    # Inline rendering
    # =========================================================================

    def _render_inline(self, span: Inline) -> str:
        match span:
            case Text():
                return span.content
            case Italic():
                return f"*{span.content}*"
            case Bold():
                return f"**{span.content}**"
            case BoldItalic():
                return f"***{span.content}***"
            case Strikethrough():
                return f"~{span.content}~"
            case Link():
                return f"[{span.label}]" + _destination(span.destination, span.title)
            case _:
                raise RenderError(f"Cannot render inline node {type(span).__name__}")
