"""Parsing subsystem for Pluma.

Provides:
- `BlockParsingMixin`: Block recognition and the per-line block driver
- `assemble_spans`: Inline span assembly for one line of content
- `resolve_emphasis`: Emphasis and strikethrough resolution

Architecture:
Data flows strictly downward: block driver -> span assembler ->
emphasis resolver -> primitive lexer. Nothing calls back upward.

"""

from pluma.parsing.blocks import BlockParsingMixin
from pluma.parsing.inline import assemble_spans, resolve_emphasis

__all__ = [
    "BlockParsingMixin",
    "assemble_spans",
    "resolve_emphasis",
]
