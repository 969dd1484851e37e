"""Primitive token definitions for the Pluma lexer.

The lexer turns one line of inline content into a stream of primitive
tokens that the emphasis resolver and span assembler consume. Tokens are
ephemeral: they live only inside a single resolution attempt.

Uses NamedTuples for token representation, providing:
- Immutability by default
- Tuple unpacking support
- Pattern matching on fields

Thread Safety:
All tokens are immutable and safe to share across threads.
Delimiter is an enum (inherently immutable).

Usage:
    match token:
        case DelimiterToken(kind=Delimiter.BOLD):
            ...
        case TextToken(content=content):
            ...
        case FinishToken():
            ...

"""

from __future__ import annotations

from enum import Enum
from typing import NamedTuple


class Delimiter(Enum):
    """Delimiter run kinds, valued by their marker characters.

    The same members name the declared strength an emphasis resolution
    attempt is trying to close.

    """

    ITALIC = "*"
    BOLD = "**"
    BOLD_ITALIC = "***"
    STRIKETHROUGH = "~"

    @property
    def marker(self) -> str:
        """The characters of this delimiter run."""
        return self.value


class DelimiterToken(NamedTuple):
    """A delimiter run: *, **, *** or ~.

    Attributes:
        kind: Which delimiter run was lexed.

    """

    kind: Delimiter

    @property
    def literal(self) -> str:
        """Full original characters of the run."""
        return self.kind.value


class TextToken(NamedTuple):
    """A maximal run of characters other than newline, * and ~.

    Attributes:
        content: The text content.

    """

    content: str

    @property
    def literal(self) -> str:
        """Full original characters of the run."""
        return self.content


class FinishToken(NamedTuple):
    """End of line reached.

    Zero-width lookahead: the line terminator is not consumed.

    """

    @property
    def literal(self) -> str:
        """Finish never contributes characters."""
        return ""


# PEP 695 type alias for all primitive tokens
type PrimitiveToken = DelimiterToken | TextToken | FinishToken


__all__ = [
    "Delimiter",
    "DelimiterToken",
    "TextToken",
    "FinishToken",
    "PrimitiveToken",
]
