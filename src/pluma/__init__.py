"""
Pluma: line-oriented lightweight markup parser

Parses headers, paragraphs, horizontal rules, images and block quotes,
with inline italic, bold, bold-italic, strikethrough and links, into an
immutable typed AST. Emphasis is resolved first-match-wins, and every
delimiter character that does not resolve stays in the output as text.

Quick Start:
    >>> from pluma import parse, render
    >>> doc = parse("# Hello **World**")
    >>> doc.children[0].children[1]
    Bold(location=..., content='World')
    >>> render(doc)
    '# Hello **World**'

    >>> from pluma import parse_inline
    >>> parse_inline("***hi*")
    (Italic(location=..., content='**hi'),)

    >>> # Or use the high-level Markup class
    >>> from pluma import Markup, ParseConfig
    >>> md = Markup(ParseConfig(strikethrough_enabled=False))
    >>> doc = md.parse("~kept~")

Installation:
    pip install pluma              # Zero runtime dependencies
"""

from collections.abc import Iterable

from pluma.config import (
    ParseConfig,
    get_parse_config,
    parse_config_context,
    reset_parse_config,
    set_parse_config,
)
from pluma.errors import (
    EmptyMatch,
    MalformedLinkSyntax,
    NoMatch,
    ParseError,
    PlumaError,
    RenderError,
    Unterminated,
)
from pluma.lexer import next_token, tokenize
from pluma.location import SourceLocation
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
from pluma.parser import Parser
from pluma.parsing.inline import assemble_spans, resolve_emphasis
from pluma.renderers.markup import MarkupRenderer
from pluma.renderers.protocol import ASTRenderer
from pluma.serialization import from_dict, from_json, to_dict, to_json
from pluma.text import extract_text
from pluma.tokens import Delimiter, DelimiterToken, FinishToken, TextToken

__version__ = "0.1.0"


def _parse_document(source: str, source_file: str | None) -> Document:
    parser = Parser(source, source_file=source_file)
    blocks = parser.parse()
    loc = SourceLocation(
        lineno=1,
        col_offset=1,
        offset=0,
        end_offset=len(parser.source),
        source_file=source_file,
    )
    return Document(location=loc, children=tuple(blocks))


def parse(
    source: str,
    *,
    source_file: str | None = None,
    config: ParseConfig | None = None,
) -> Document:
    """Parse markup source into a typed AST.

    Args:
        source: Markup source text
        source_file: Optional source file path recorded in node locations
        config: Parse configuration for this call only. Defaults to the
            configuration active in the current context.

    Returns:
        Document AST root node

    Example:
        >>> doc = parse("# Hello **World**")
        >>> doc.children[0]
        Header(location=..., level=1, ...)
    """
    if config is None:
        return _parse_document(source, source_file)
    with parse_config_context(config):
        return _parse_document(source, source_file)


def parse_inline(text: str) -> tuple[Inline, ...]:
    """Parse one line of inline content into spans.

    Never fails. Scanning stops at the first newline; empty input yields ().

    Example:
        >>> parse_inline("plain *unterminated")
        (Text(location=..., content='plain *unterminated'),)
    """
    return assemble_spans(text)


def render(doc: Document) -> str:
    """Render an AST Document back to markup.

    Example:
        >>> render(parse("> *quoted*"))
        '> *quoted*'
    """
    return MarkupRenderer().render(doc)


class Markup:
    """High-level processor bundling a parse configuration and a renderer.

    Usage:
        >>> md = Markup()
        >>> md("**bold** and ~struck~")
        '**bold** and ~struck~'

        >>> doc = md.parse("## Section")
        >>> doc.children[0].level
        2

    Thread Safety:
        Uses ContextVar for thread-local configuration. Safe to use multiple
        Markup instances concurrently from different threads.

    """

    __slots__ = ("_config", "_renderer")

    def __init__(
        self,
        config: ParseConfig | None = None,
        *,
        renderer: ASTRenderer | None = None,
    ) -> None:
        """Initialize processor.

        Args:
            config: Parse configuration (defaults to ParseConfig())
            renderer: Renderer used by render() and __call__
                (defaults to MarkupRenderer)
        """
        self._config = config or ParseConfig()
        self._renderer = renderer or MarkupRenderer()

    @property
    def config(self) -> ParseConfig:
        return self._config

    def __call__(self, source: str) -> str:
        """Parse and render in one call."""
        return self.render(self.parse(source))

    def parse(self, source: str, *, source_file: str | None = None) -> Document:
        """Parse markup source with this processor's configuration.

        Args:
            source: Markup source text
            source_file: Optional source file path recorded in node locations

        Returns:
            Document AST root node

        """
        with parse_config_context(self._config):
            return _parse_document(source, source_file)

    def parse_many(
        self,
        sources: Iterable[str],
        *,
        source_file: str | None = None,
    ) -> list[Document]:
        """Parse multiple sources, setting the configuration once.

        Example:
            >>> md = Markup()
            >>> docs = md.parse_many(["# Doc 1", "# Doc 2"])
        """
        with parse_config_context(self._config):
            return [_parse_document(source, source_file) for source in sources]

    def parse_inline(self, text: str) -> tuple[Inline, ...]:
        """Parse one line of inline content with this configuration."""
        with parse_config_context(self._config):
            return assemble_spans(text)

    def render(self, doc: Document) -> str:
        """Render a Document with this processor's renderer."""
        return self._renderer.render(doc)


__all__ = [  # noqa: RUF022
    # Version
    "__version__",
    # Core API
    "parse",
    "parse_inline",
    "render",
    "extract_text",
    # Inline engine
    "assemble_spans",
    "resolve_emphasis",
    "next_token",
    "tokenize",
    # Tokens
    "Delimiter",
    "DelimiterToken",
    "TextToken",
    "FinishToken",
    # Block nodes
    "Block",
    "Document",
    "Header",
    "HorizontalRule",
    "Image",
    "Paragraph",
    "Quote",
    # Inline nodes
    "Inline",
    "Bold",
    "BoldItalic",
    "Italic",
    "Link",
    "Strikethrough",
    "Text",
    # Parser and renderer
    "Parser",
    "MarkupRenderer",
    "ASTRenderer",
    # Serialization
    "to_dict",
    "from_dict",
    "to_json",
    "from_json",
    # Configuration (ContextVar-based)
    "ParseConfig",
    "get_parse_config",
    "set_parse_config",
    "reset_parse_config",
    "parse_config_context",
    # Errors
    "PlumaError",
    "ParseError",
    "NoMatch",
    "Unterminated",
    "EmptyMatch",
    "MalformedLinkSyntax",
    "RenderError",
    # Location
    "SourceLocation",
    # High-level
    "Markup",
]
