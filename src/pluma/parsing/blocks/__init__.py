"""Block parsing subsystem for Pluma parser.

Provides the block driver mixin that delimits headers, images, horizontal
rules, quotes and paragraphs, and the Line record it works on.

"""

from __future__ import annotations

from pluma.parsing.blocks.core import QUOTE_PREFIX, BlockParsingMixin, Line

__all__ = [
    "BlockParsingMixin",
    "Line",
    "QUOTE_PREFIX",
]
