"""Inline parsing subsystem for Pluma parser.

Provides the pieces that turn one line of content into spans:
- Emphasis resolution (*, **, ***) and strikethrough (~)
- Links ([label](destination title))
- Span assembly with priority-ordered backtracking

Architecture:
Each alternative is a pure function of (text, pos, end) that returns
(result, next_pos) or raises NoMatch. There is no shared cursor.

"""

from __future__ import annotations

from pluma.parsing.inline.core import assemble_spans, parse_text
from pluma.parsing.inline.emphasis import can_open, fold, resolve_emphasis
from pluma.parsing.inline.links import parse_destination, parse_label, parse_link

__all__ = [
    "assemble_spans",
    "parse_text",
    "resolve_emphasis",
    "can_open",
    "fold",
    "parse_link",
    "parse_label",
    "parse_destination",
]
