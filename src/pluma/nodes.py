"""Typed AST nodes for Pluma.

All AST nodes are frozen dataclasses with slots for:
- Type safety: IDE autocomplete, catch errors at dev time
- Immutability: Safe sharing across threads
- Memory efficiency: __slots__ reduces memory footprint
- Pattern matching: match statements work naturally

Node Hierarchy:
Node (base)
├── Block (block-level elements)
│   ├── Document
│   ├── Header
│   ├── Paragraph
│   ├── HorizontalRule
│   ├── Image
│   └── Quote
└── Inline (inline spans)
    ├── Text
    ├── Italic
    ├── Bold
    ├── BoldItalic
    ├── Strikethrough
    └── Link

Inline spans hold fully-resolved literal text: delimiter characters consumed
as structure are absent, leftover delimiter characters are part of content.

Thread Safety:
All nodes are frozen (immutable) and safe to share across threads.

"""

from __future__ import annotations

from dataclasses import dataclass

from pluma.location import SourceLocation

# =============================================================================
# Base Node
# =============================================================================


@dataclass(frozen=True, slots=True)
class Node:
    """Base class for all AST nodes.

    All nodes track their source location for error messages and debugging.

    """

    location: SourceLocation


# =============================================================================
# Inline Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Text(Node):
    """Plain text content.

    Also receives every delimiter character that did not resolve to a span.

    """

    content: str


@dataclass(frozen=True, slots=True)
class Italic(Node):
    """Italic text.

    Markup: *text*

    """

    content: str


@dataclass(frozen=True, slots=True)
class Bold(Node):
    """Bold text.

    Markup: **text**

    """

    content: str


@dataclass(frozen=True, slots=True)
class BoldItalic(Node):
    """Bold and italic text.

    Markup: ***text***

    """

    content: str


@dataclass(frozen=True, slots=True)
class Strikethrough(Node):
    """Strikethrough (deleted) text.

    Markup: ~deleted~

    """

    content: str


@dataclass(frozen=True, slots=True)
class Link(Node):
    """Hyperlink.

    Markup: [label](destination) or [label](destination title)

    """

    label: str
    destination: str
    title: str | None = None


# PEP 695 type alias for inline elements
type Inline = Text | Italic | Bold | BoldItalic | Strikethrough | Link


# =============================================================================
# Block Nodes
# =============================================================================


@dataclass(frozen=True, slots=True)
class Header(Node):
    """Header line.

    Markup: ## Title

    """

    level: int
    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class Paragraph(Node):
    """Paragraph: one line of inline content."""

    children: tuple[Inline, ...]


@dataclass(frozen=True, slots=True)
class HorizontalRule(Node):
    """Horizontal rule, produced by a line holding only the line terminator."""


@dataclass(frozen=True, slots=True)
class Image(Node):
    """Image line.

    Markup: ![alt](destination) or ![alt](destination title)

    """

    alt: str
    destination: str
    title: str | None = None


@dataclass(frozen=True, slots=True)
class Quote(Node):
    """Block quote holding the blocks parsed from its "> " prefixed lines."""

    children: tuple[Block, ...]


@dataclass(frozen=True, slots=True)
class Document(Node):
    """Root node holding the top-level blocks of a document."""

    children: tuple[Block, ...]


# PEP 695 type alias for block elements
type Block = Document | Header | Paragraph | HorizontalRule | Image | Quote
