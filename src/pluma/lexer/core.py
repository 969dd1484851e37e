"""Primitive lexer for inline content.

Turns a slice of one line into primitive tokens: text runs, delimiter runs
and the end-of-line sentinel. Single pass, no backtracking, no regex.

Priority at each position:
1. ``\\n`` ahead: FinishToken, zero-width (nothing consumed)
2. ``~``: one STRIKETHROUGH delimiter
3. ``*`` run, longest first: ``***``, ``**``, ``*``
4. Maximal run of characters other than ``\\n``, ``*`` and ``~``

Longest-first matching means ``***`` is never split into ``*`` + ``**``.

Thread Safety:
All functions are pure. Safe to call from any thread.

"""

from __future__ import annotations

from collections.abc import Iterator

from pluma.errors import EmptyMatch
from pluma.tokens import (
    Delimiter,
    DelimiterToken,
    FinishToken,
    PrimitiveToken,
    TextToken,
)

# Characters that end a text run
TEXT_STOP_CHARS = frozenset("\n*~")

_FINISH = FinishToken()

# Longest run first
_STAR_RUNS = (Delimiter.BOLD_ITALIC, Delimiter.BOLD, Delimiter.ITALIC)


def next_token(text: str, pos: int, end: int | None = None) -> tuple[PrimitiveToken, int]:
    """Lex exactly one token from text[pos:end].

    Args:
        text: Source text
        pos: Start position
        end: End of the slice (defaults to len(text))

    Returns:
        (token, next_pos). For FinishToken, next_pos == pos.

    Raises:
        EmptyMatch: If the slice is empty.

    """
    if end is None:
        end = len(text)
    if pos >= end:
        raise EmptyMatch("no input left to lex", pos)

    char = text[pos]

    if char == "\n":
        return _FINISH, pos

    if char == "~":
        return DelimiterToken(Delimiter.STRIKETHROUGH), pos + 1

    if char == "*":
        for kind in _STAR_RUNS:
            stop = pos + len(kind.marker)
            if stop <= end and text.startswith(kind.marker, pos, stop):
                return DelimiterToken(kind), stop

    stop = pos + 1
    while stop < end and text[stop] not in TEXT_STOP_CHARS:
        stop += 1
    return TextToken(text[pos:stop]), stop


def tokenize(
    text: str, pos: int = 0, end: int | None = None
) -> Iterator[tuple[PrimitiveToken, int, int]]:
    """Lazily lex text[pos:end].

    Yields (token, start, stop) triples. Stops after the first FinishToken
    or when the slice is exhausted; the line terminator itself is never
    consumed.

    Example:
        >>> [t for t, _, _ in tokenize("a**b")]
        [TextToken(content='a'), DelimiterToken(kind=<Delimiter.BOLD: '**'>), TextToken(content='b')]

    """
    if end is None:
        end = len(text)
    while pos < end:
        token, stop = next_token(text, pos, end)
        yield token, pos, stop
        if isinstance(token, FinishToken):
            return
        pos = stop
